from dataclasses import dataclass

from core.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class TaskDescription:
    value: str

    @classmethod
    def create(cls, raw: str | None) -> "TaskDescription":
        if raw is None or not raw.strip():
            raise ValidationError("description required")
        return cls(raw.strip())

    def __str__(self) -> str:
        return self.value
