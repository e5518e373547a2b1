import secrets
import uuid

from core.domain.ports.id_generator import IdGenerator


class UuidV4Generator(IdGenerator):
    def generate(self) -> str:
        return str(uuid.uuid4())


class RandomBytesIdGenerator(IdGenerator):
    """UUID v4 construido a partir de `secrets.token_bytes`."""

    def generate(self) -> str:
        return str(uuid.UUID(bytes=secrets.token_bytes(16), version=4))


def create_id_generator(kind: str) -> IdGenerator:
    kind = kind.strip().lower()
    if kind == "uuid":
        return UuidV4Generator()
    if kind == "random":
        return RandomBytesIdGenerator()
    raise ValueError(f"Unknown id generator type: {kind}")
