"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from venue.domain.error import DomainError
from venue.domain.value import ErrorCode


class UseCaseResponse(BaseModel):
    """Common fields of every use case response.

    A use case that fails on a domain rule returns its response with
    ``error`` set instead of raising.
    """

    error: ErrorCode | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass

    @staticmethod
    def failure(error: DomainError) -> dict[str, Any]:
        """Response fields describing a domain failure."""
        return {"error": error.code, "message": str(error)}
