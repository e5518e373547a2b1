from datetime import datetime, timezone


def to_storage(value: datetime) -> datetime:
    """Convierte a UTC naive, el formato que guardan las columnas DateTime."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def from_storage(value: datetime) -> datetime:
    """Reasocia UTC a un datetime leído de la base de datos."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
