import logging

from core.domain.errors import TaskNotFoundError
from core.domain.models.task_id import TaskId
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str) -> None:
        parsed_id = TaskId.from_string(task_id)
        if self._repository.find_by_id(parsed_id) is None:
            raise TaskNotFoundError(task_id)
        self._repository.delete(parsed_id)
        logger.info(f"Tarea {parsed_id} eliminada")
