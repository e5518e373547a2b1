import logging
from dataclasses import dataclass

from core.domain.errors import StateError, TaskNotFoundError
from core.domain.models.task import Task
from core.domain.models.task_id import TaskId
from core.domain.models.task_status import TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ChangeTaskStatusCommand:
    status: str


class ChangeTaskStatusUseCase:
    """Mueve una tarea por su ciclo de vida usando las transiciones de la entidad."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str, cmd: ChangeTaskStatusCommand) -> Task:
        target = TaskStatus.from_raw(cmd.status)
        task = self._repository.find_by_id(TaskId.from_string(task_id))
        if task is None:
            raise TaskNotFoundError(task_id)

        if target is TaskStatus.IN_PROGRESS:
            task.mark_as_in_progress()
        elif target is TaskStatus.COMPLETED:
            task.mark_as_completed()
        else:
            raise StateError("cannot return to pending")

        self._repository.save(task)
        logger.info(f"Tarea {task.id} → {task.status.value}")
        return task
