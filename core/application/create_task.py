import logging
from dataclasses import dataclass

from core.domain.clock import Clock
from core.domain.models.task import Task
from core.domain.models.task_description import TaskDescription
from core.domain.models.task_id import TaskId
from core.domain.models.task_title import TaskTitle
from core.domain.ports.id_generator import IdGenerator
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str
    description: str
    id: str | None = None


class CreateTaskUseCase:
    def __init__(
        self,
        repository: TaskRepository,
        id_generator: IdGenerator,
        clock: Clock | None = None,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock

    def execute(self, cmd: CreateTaskCommand) -> Task:
        raw_id = cmd.id if cmd.id is not None else self._id_generator.generate()
        task = Task.create(
            title=TaskTitle.create(cmd.title),
            description=TaskDescription.create(cmd.description),
            task_id=TaskId.from_string(raw_id),
            clock=self._clock,
        )
        self._repository.save(task)
        logger.info(f"Tarea {task.id} creada")
        return task
