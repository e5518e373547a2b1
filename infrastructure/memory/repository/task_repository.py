import threading
from collections.abc import Mapping
from typing import Any

from core.domain.clock import Clock, SystemClock
from core.domain.models.task import Task
from core.domain.models.task_id import TaskId
from core.domain.ports.task_repository import TaskRepository, normalize_update_fields


class InMemoryTaskRepository(TaskRepository):
    """
    Repositorio en memoria (un dict protegido por un lock).

    Guarda instantáneas de la tarea, no la instancia: cada lectura devuelve
    una Task nueva y una mutación sin save no queda persistida.
    No garantiza orden en find_all.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()
        self._clock = clock or SystemClock()

    def _snapshot(self, task: Task) -> dict[str, Any]:
        return {
            **task.to_storage_view(),
            "created_at": task.created_at,
            "updated_at": task.updated_at,
        }

    def _to_domain(self, record: Mapping[str, Any]) -> Task:
        return Task.from_persistence(record, clock=self._clock)

    def save(self, task: Task) -> None:
        record = self._snapshot(task)
        with self._lock:
            self._records[record["id"]] = record

    def find_by_id(self, task_id: TaskId) -> Task | None:
        with self._lock:
            record = self._records.get(task_id.value)
        if record is None:
            return None
        return self._to_domain(record)

    def find_all(self) -> list[Task]:
        with self._lock:
            records = list(self._records.values())
        return [self._to_domain(record) for record in records]

    def delete(self, task_id: TaskId) -> None:
        with self._lock:
            self._records.pop(task_id.value, None)

    def update(self, task_id: TaskId, fields: Mapping[str, Any]) -> Task | None:
        changes = normalize_update_fields(fields)
        with self._lock:
            existing = self._records.get(task_id.value)
            if existing is None:
                return None

            record = {
                **existing,
                **changes,
                "updated_at": max(self._clock.now(), existing["updated_at"]),
            }
            self._records[task_id.value] = record
        return self._to_domain(record)

    def ping(self) -> bool:
        return True

    def size(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
