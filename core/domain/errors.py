class DomainError(Exception):
    """Error base del dominio de tareas."""


class ValidationError(DomainError, ValueError):
    """Un dato de entrada no cumple el contrato de construcción."""


class StateError(DomainError):
    """La transición de estado no está permitida desde el estado actual."""


class TaskNotFoundError(DomainError, LookupError):
    def __init__(self, task_id: object) -> None:
        super().__init__(f"Tarea con id {task_id} no encontrada")
        self.task_id = task_id
