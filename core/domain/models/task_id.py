import re
from dataclasses import dataclass

from core.domain.errors import ValidationError

_UUID_V4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class TaskId:
    """
    Identificador de una tarea (UUID v4 en forma textual).

    Se construye con `TaskId.from_string`, que valida el formato.
    """

    value: str

    @classmethod
    def from_string(cls, raw: str | None) -> "TaskId":
        """
        Valida y envuelve un identificador.

        Argumentos:
            raw (str): Texto con el UUID.

        Retorna:
            TaskId: El identificador validado.

        Lanza:
            ValidationError: Si está vacío o no es un UUID v4.
        """
        if raw is None or not raw.strip():
            raise ValidationError("identifier required")
        if len(raw) != 36 or not _UUID_V4.match(raw):
            raise ValidationError("identifier malformed")
        return cls(raw)

    def equals(self, other: object) -> bool:
        return isinstance(other, TaskId) and self.value == other.value

    def __str__(self) -> str:
        return self.value
