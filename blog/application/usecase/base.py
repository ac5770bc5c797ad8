"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case.

    A use case converts a plain request into value objects, drives one
    entity operation through the repositories and returns plain data.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
