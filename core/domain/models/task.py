from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from core.domain.clock import Clock, SystemClock
from core.domain.errors import StateError, ValidationError
from core.domain.models.task_description import TaskDescription
from core.domain.models.task_id import TaskId
from core.domain.models.task_status import TaskStatus
from core.domain.models.task_title import TaskTitle

# Solo las factorías de este módulo pueden construir una Task.
_FACTORY_TOKEN = object()
_TICK = timedelta(microseconds=1)


def _as_utc(value: datetime) -> datetime:
    # Sin zona se asume UTC, igual que al leer de la base de datos.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Task:
    """
    Entidad raíz del dominio de tareas.

    Estados: PENDING → IN_PROGRESS → COMPLETED, y PENDING → COMPLETED.
    No hay transiciones que salgan de COMPLETED.

    Se construye con `Task.create` (tarea nueva) o `Task.from_persistence`
    (tarea ya validada que viene del almacenamiento).
    """

    __slots__ = (
        "_id",
        "_title",
        "_description",
        "_status",
        "_created_at",
        "_updated_at",
        "_clock",
    )

    def __init__(
        self,
        token: object,
        task_id: TaskId,
        title: TaskTitle,
        description: TaskDescription,
        status: TaskStatus,
        created_at: datetime,
        updated_at: datetime,
        clock: Clock,
    ) -> None:
        if token is not _FACTORY_TOKEN:
            raise TypeError("Usa Task.create o Task.from_persistence")
        self._id = task_id
        self._title = title
        self._description = description
        self._status = status
        self._created_at = created_at
        self._updated_at = updated_at
        self._clock = clock

    # ── Factorías ─────────────────────────────────────────────────────────────

    @classmethod
    def create(
        cls,
        title: TaskTitle | None,
        description: TaskDescription | None,
        task_id: TaskId | None,
        clock: Clock | None = None,
    ) -> "Task":
        """
        Crea una tarea nueva en estado PENDING.

        Argumentos:
            title (TaskTitle): Título validado.
            description (TaskDescription): Descripción validada.
            task_id (TaskId): Identificador de la tarea.
            clock (Clock): Fuente de tiempo; por defecto el reloj del sistema.

        Retorna:
            Task: La tarea creada, con created_at == updated_at.

        Lanza:
            ValidationError: Si falta alguno de los tres argumentos.
        """
        if title is None:
            raise ValidationError("title required")
        if description is None:
            raise ValidationError("description required")
        if task_id is None:
            raise ValidationError("identifier required")

        clock = clock or SystemClock()
        now = clock.now()
        return cls(
            _FACTORY_TOKEN,
            task_id,
            title,
            description,
            TaskStatus.PENDING,
            now,
            now,
            clock,
        )

    @classmethod
    def from_persistence(
        cls, record: Mapping[str, Any], clock: Clock | None = None
    ) -> "Task":
        """
        Reconstruye una tarea a partir de datos almacenados.

        Solo se revalidan el identificador y el título; los timestamps se
        conservan, y los que llegan sin zona horaria se interpretan en UTC.

        Argumentos:
            record (Mapping): Claves id, title, description, status,
                created_at y updated_at.
        """
        return cls(
            _FACTORY_TOKEN,
            TaskId.from_string(str(record["id"])),
            TaskTitle.create(record["title"]),
            TaskDescription(record["description"]),
            TaskStatus.from_raw(record["status"]),
            _as_utc(record["created_at"]),
            _as_utc(record["updated_at"]),
            clock or SystemClock(),
        )

    # ── Lectura ───────────────────────────────────────────────────────────────

    @property
    def id(self) -> TaskId:
        return self._id

    @property
    def title(self) -> TaskTitle:
        return self._title

    @property
    def description(self) -> TaskDescription:
        return self._description

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # ── Mutaciones ────────────────────────────────────────────────────────────

    def update_title(self, raw: str) -> None:
        self._title = TaskTitle.create(raw)
        self._touch()

    def update_description(self, raw: str) -> None:
        self._description = TaskDescription.create(raw)
        self._touch()

    def mark_as_in_progress(self) -> None:
        if self._status is not TaskStatus.PENDING:
            raise StateError("not pending")
        self._status = TaskStatus.IN_PROGRESS
        self._touch()

    def mark_as_completed(self) -> None:
        if self._status is TaskStatus.COMPLETED:
            raise StateError("already completed")
        self._status = TaskStatus.COMPLETED
        self._touch()

    def _touch(self) -> None:
        now = self._clock.now()
        # updated_at avanza siempre, aunque el reloj no lo haga.
        if now <= self._updated_at:
            now = self._updated_at + _TICK
        self._updated_at = now

    # ── Serialización ─────────────────────────────────────────────────────────

    def to_wire_view(self) -> dict[str, Any]:
        """Vista para respuestas de la API."""
        return {
            "id": self._id.value,
            "title": self._title.value,
            "description": self._description.value,
            "status": self._status.value,
            "createdAt": self._created_at,
            "updatedAt": self._updated_at,
        }

    def to_storage_view(self) -> dict[str, str]:
        """Vista para escrituras en los repositorios (sin timestamps)."""
        return {
            "id": self._id.value,
            "title": self._title.value,
            "description": self._description.value,
            "status": self._status.value,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Task(id={self._id.value!r}, title={self._title.value!r}, "
            f"status={self._status.value!r})"
        )
