import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from peewee import PeeweeException

from core.domain.models.task import Task
from core.domain.models.task_id import TaskId
from core.domain.ports.task_repository import TaskRepository, normalize_update_fields
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db, init_db
from infrastructure.timestamps import from_storage, to_storage

logger = logging.getLogger(__name__)


def _to_domain(task_model: TaskModel) -> Task:
    return Task.from_persistence(
        {
            "id": task_model.id,
            "title": task_model.title,
            "description": task_model.description,
            "status": task_model.status,
            "created_at": from_storage(task_model.created_at),
            "updated_at": from_storage(task_model.updated_at),
        }
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, task: Task) -> None:
        data = task.to_storage_view()
        with db.atomic():
            try:
                existing = TaskModel.get(TaskModel.id == data["id"])
                existing.title = data["title"]
                existing.description = data["description"]
                existing.status = data["status"]
                existing.updated_at = to_storage(task.updated_at)
                existing.save()
            except TaskModel.DoesNotExist:
                TaskModel.create(
                    **data,
                    created_at=to_storage(task.created_at),
                    updated_at=to_storage(task.updated_at),
                )

    def find_by_id(self, task_id: TaskId) -> Task | None:
        try:
            return _to_domain(TaskModel.get(TaskModel.id == task_id.value))
        except TaskModel.DoesNotExist:
            return None

    def find_all(self) -> list[Task]:
        return [
            _to_domain(t) for t in TaskModel.select().order_by(TaskModel.created_at)
        ]

    def delete(self, task_id: TaskId) -> None:
        query = TaskModel.delete().where(TaskModel.id == task_id.value)
        query.execute()

    def update(self, task_id: TaskId, fields: Mapping[str, Any]) -> Task | None:
        changes = normalize_update_fields(fields)
        with db.atomic():
            try:
                task_model = TaskModel.get(TaskModel.id == task_id.value)
            except TaskModel.DoesNotExist:
                return None
            for name, value in changes.items():
                setattr(task_model, name, value)
            task_model.updated_at = max(
                to_storage(datetime.now(timezone.utc)), task_model.updated_at
            )
            task_model.save()
        return _to_domain(task_model)

    def ping(self) -> bool:
        try:
            db.execute_sql("SELECT 1")
            return True
        except PeeweeException as e:
            logger.error(f"🔴 Peewee no disponible: {e}")
            return False
