from fastapi import APIRouter, Depends, HTTPException, Response, status

from backend_fastapi.api.deps import (
    change_task_status_use_case,
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    ChangeTaskStatusRequest,
    CreateTaskRequest,
    TaskResponse,
    UpdateTaskRequest,
)
from core.application.change_task_status import (
    ChangeTaskStatusCommand,
    ChangeTaskStatusUseCase,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import StateError, TaskNotFoundError, ValidationError

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _http_error(error: Exception) -> HTTPException:
    if isinstance(error, TaskNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, StateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status_code=422, detail=str(error))


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    body: CreateTaskRequest,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskResponse:
    """
    Crea una nueva tarea en estado `pending`.

    - **title**: Título de la tarea.
    - **description**: Descripción de la tarea.
    - **id**: UUID v4 opcional; si no se envía se genera uno.
    """
    try:
        task = use_case.execute(
            CreateTaskCommand(title=body.title, description=body.description, id=body.id)
        )
    except ValidationError as e:
        raise _http_error(e)
    return TaskResponse.from_domain(task)


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskResponse]:
    return [TaskResponse.from_domain(task) for task in use_case.execute()]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Obtener una tarea",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    try:
        task = use_case.execute(task_id)
    except ValidationError as e:
        raise _http_error(e)
    if task is None:
        raise _http_error(TaskNotFoundError(task_id))
    return TaskResponse.from_domain(task)


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Editar título o descripción",
)
def update_task(
    task_id: str,
    body: UpdateTaskRequest,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskResponse:
    """
    Modifica los datos de una tarea existente.

    - **title**: Nuevo título (opcional).
    - **description**: Nueva descripción (opcional).
    """
    try:
        task = use_case.execute(
            task_id, UpdateTaskCommand(title=body.title, description=body.description)
        )
    except (ValidationError, TaskNotFoundError) as e:
        raise _http_error(e)
    return TaskResponse.from_domain(task)


@router.post(
    "/{task_id}/status",
    response_model=TaskResponse,
    summary="Cambiar el estado de una tarea",
)
def change_task_status(
    task_id: str,
    body: ChangeTaskStatusRequest,
    use_case: ChangeTaskStatusUseCase = Depends(change_task_status_use_case),
) -> TaskResponse:
    """
    Avanza la tarea en su ciclo de vida.

    - **status**: `in_progress` o `completed`.
    """
    try:
        task = use_case.execute(task_id, ChangeTaskStatusCommand(status=body.status))
    except (ValidationError, StateError, TaskNotFoundError) as e:
        raise _http_error(e)
    return TaskResponse.from_domain(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> Response:
    try:
        use_case.execute(task_id)
    except (ValidationError, TaskNotFoundError) as e:
        raise _http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
