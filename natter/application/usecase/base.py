"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One request/response flow over the domain services.

    Use cases hold no state between calls; a fresh instance is built per
    request.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
