from enum import Enum

from core.domain.errors import ValidationError


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def from_raw(cls, raw: "str | TaskStatus | None") -> "TaskStatus":
        """
        Convierte un literal ("pending", "in_progress", "completed") en TaskStatus.

        Lanza:
            ValidationError: Si el literal está vacío o no es un estado conocido.
        """
        if isinstance(raw, cls):
            return raw
        if raw is None or not raw.strip():
            raise ValidationError("status required")
        try:
            return cls(raw.strip())
        except ValueError:
            raise ValidationError("status invalid") from None
