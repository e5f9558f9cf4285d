"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One user-facing action: a pydantic request in, a pydantic response out.

    Use cases orchestrate domain services and let domain errors propagate to
    the interface layer.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the action."""
