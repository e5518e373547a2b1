import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError

from core.domain.models.task import Task
from core.domain.models.task_id import TaskId
from core.domain.ports.task_repository import TaskRepository, normalize_update_fields
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import get_session, init_db
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


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, task: Task) -> None:
        session = get_session()
        try:
            task_model = TaskModel(
                **task.to_storage_view(),
                created_at=to_storage(task.created_at),
                updated_at=to_storage(task.updated_at),
            )
            session.merge(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def find_by_id(self, task_id: TaskId) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id.value)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def find_all(self) -> list[Task]:
        session = get_session()
        try:
            task_models = session.scalars(
                select(TaskModel).order_by(TaskModel.created_at)
            ).all()
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()

    def delete(self, task_id: TaskId) -> None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id.value)
            if task_model is None:
                return
            session.delete(task_model)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def update(self, task_id: TaskId, fields: Mapping[str, Any]) -> Task | None:
        changes = normalize_update_fields(fields)
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id.value)
            if task_model is None:
                return None
            for name, value in changes.items():
                setattr(task_model, name, value)
            task_model.updated_at = max(
                to_storage(datetime.now(timezone.utc)), task_model.updated_at
            )
            session.commit()
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        session = get_session()
        try:
            session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"🔴 SQLAlchemy no disponible: {e}")
            return False
        finally:
            session.close()
