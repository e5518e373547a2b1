from fastapi import Depends

from core.application.change_task_status import ChangeTaskStatusUseCase
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import (
    get_change_task_status_use_case,
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_task_repository,
    get_update_task_use_case,
)


def task_repository() -> TaskRepository:
    return get_task_repository()


def create_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> CreateTaskUseCase:
    return get_create_task_use_case(repository)


def get_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> GetTaskUseCase:
    return get_get_task_use_case(repository)


def list_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListTasksUseCase:
    return get_list_tasks_use_case(repository)


def update_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> UpdateTaskUseCase:
    return get_update_task_use_case(repository)


def change_task_status_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ChangeTaskStatusUseCase:
    return get_change_task_status_use_case(repository)


def delete_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> DeleteTaskUseCase:
    return get_delete_task_use_case(repository)
