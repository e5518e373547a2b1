import logging
import os
from functools import lru_cache

from core.application.change_task_status import ChangeTaskStatusUseCase
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.id_generator import IdGenerator
from core.domain.ports.task_repository import TaskRepository
from infrastructure.id_generators import create_id_generator

logger = logging.getLogger(__name__)


def get_orm() -> str:
    return os.getenv("ORM", "peewee").strip().lower()


def create_task_repository(orm: str) -> TaskRepository:
    # Los adaptadores SQL se importan al elegirlos: abren la BDD al importarse.
    if orm == "memory":
        from infrastructure.memory.repository.task_repository import (
            InMemoryTaskRepository,
        )

        return InMemoryTaskRepository()
    if orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    if orm == "peewee":
        from infrastructure.peewee.repository.task_repository import (
            PeeweeTaskRepository,
        )

        return PeeweeTaskRepository()
    raise ValueError(f"Unknown repository type: {orm}")


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    orm = get_orm()
    logger.info(f"Repositorio de tareas: {orm}")
    return create_task_repository(orm)


@lru_cache(maxsize=1)
def get_id_generator() -> IdGenerator:
    return create_id_generator(os.getenv("ID_GENERATOR", "uuid"))


def get_create_task_use_case(
    repository: TaskRepository | None = None,
) -> CreateTaskUseCase:
    return CreateTaskUseCase(
        repository=repository or get_task_repository(),
        id_generator=get_id_generator(),
    )


def get_get_task_use_case(repository: TaskRepository | None = None) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository or get_task_repository())


def get_list_tasks_use_case(
    repository: TaskRepository | None = None,
) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository or get_task_repository())


def get_update_task_use_case(
    repository: TaskRepository | None = None,
) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository or get_task_repository())


def get_change_task_status_use_case(
    repository: TaskRepository | None = None,
) -> ChangeTaskStatusUseCase:
    return ChangeTaskStatusUseCase(repository=repository or get_task_repository())


def get_delete_task_use_case(
    repository: TaskRepository | None = None,
) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository or get_task_repository())
