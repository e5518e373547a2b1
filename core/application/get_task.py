import logging

from core.domain.models.task import Task
from core.domain.models.task_id import TaskId
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str) -> Task | None:
        task = self._repository.find_by_id(TaskId.from_string(task_id))
        if task is None:
            logger.debug(f"Tarea {task_id} no encontrada")
        return task
