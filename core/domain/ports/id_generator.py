from abc import ABC, abstractmethod


class IdGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        """Retorna un UUID v4 en forma textual (36 caracteres)."""
        raise NotImplementedError
