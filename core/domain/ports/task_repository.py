from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from core.domain.errors import ValidationError
from core.domain.models.task import Task
from core.domain.models.task_description import TaskDescription
from core.domain.models.task_id import TaskId
from core.domain.models.task_status import TaskStatus
from core.domain.models.task_title import TaskTitle

UPDATABLE_FIELDS = ("title", "description", "status")


class TaskRepository(ABC):
    @abstractmethod
    def save(self, task: Task) -> None:
        """Inserta o reemplaza la tarea (clave: su id)."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: TaskId) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: TaskId) -> None:
        """Elimina la tarea; si no existe no hace nada."""
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: TaskId, fields: Mapping[str, Any]) -> Task | None:
        """
        Aplica un conjunto parcial de campos a la tarea almacenada.

        Retorna:
            Task | None: La tarea actualizada o None si el id no existe.
        """
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> bool:
        raise NotImplementedError


def normalize_update_fields(fields: Mapping[str, Any]) -> dict[str, str]:
    """
    Valida un conjunto parcial de campos y lo reduce a escalares.

    Lanza:
        ValidationError: Si hay un campo desconocido o un valor inválido.
    """
    for name in fields:
        if name not in UPDATABLE_FIELDS:
            raise ValidationError(f"unknown field: {name}")

    normalized: dict[str, str] = {}
    if "title" in fields:
        normalized["title"] = TaskTitle.create(fields["title"]).value
    if "description" in fields:
        normalized["description"] = TaskDescription.create(fields["description"]).value
    if "status" in fields:
        normalized["status"] = TaskStatus.from_raw(fields["status"]).value
    return normalized
