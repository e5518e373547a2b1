import logging
from dataclasses import dataclass

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.models.task_description import TaskDescription
from core.domain.models.task_id import TaskId
from core.domain.models.task_title import TaskTitle
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None = None
    description: str | None = None


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str, cmd: UpdateTaskCommand) -> Task:
        parsed_id = TaskId.from_string(task_id)
        task = self._repository.find_by_id(parsed_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        # Valida ambos campos antes de tocar la tarea.
        if cmd.title is not None:
            TaskTitle.create(cmd.title)
        if cmd.description is not None:
            TaskDescription.create(cmd.description)

        if cmd.title is not None:
            task.update_title(cmd.title)
        if cmd.description is not None:
            task.update_description(cmd.description)

        self._repository.save(task)
        logger.info(f"Tarea {task.id} actualizada")
        return task
