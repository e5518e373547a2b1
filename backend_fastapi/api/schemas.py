from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.task import Task


class CreateTaskRequest(BaseModel):
    title: str
    description: str
    id: str | None = None


class UpdateTaskRequest(BaseModel):
    title: str | None = None
    description: str | None = None


class ChangeTaskStatusRequest(BaseModel):
    status: str


class TaskResponse(BaseModel):
    """Vista pública de una tarea (wire view)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    status: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls.model_validate(task.to_wire_view())


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    uptime: float
    environment: str
    repository: str
