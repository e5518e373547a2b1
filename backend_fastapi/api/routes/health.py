import os
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from backend_fastapi.api.deps import task_repository
from backend_fastapi.api.schemas import HealthResponse
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import get_orm

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthResponse, summary="Estado del servicio")
def health(repository: TaskRepository = Depends(task_repository)) -> HealthResponse:
    return HealthResponse(
        status="OK" if repository.ping() else "DEGRADED",
        timestamp=datetime.now(timezone.utc),
        uptime=time.monotonic() - _STARTED_AT,
        environment=os.getenv("APP_ENV", "development"),
        repository=get_orm(),
    )
