"""
Base Use Case

Provides the foundation for all use cases in the application layer.
Implements the common execution template: logging around the business
logic, with domain errors passed up unchanged for the API boundary to map.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

from tzledger.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

# Type variables for request and response
TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")


@dataclass
class UseCaseRequest:
    """Base class for use case requests."""

    request_id: UUID | None = None
    metadata: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        """Initialize request with defaults."""
        if self.request_id is None:
            self.request_id = uuid4()
        if self.metadata is None:
            self.metadata = {}


@dataclass
class UseCaseResponse:
    """Base class for use case responses."""

    success: bool = True
    request_id: UUID | None = None


class UseCase(ABC, Generic[TRequest, TResponse]):
    """
    Abstract base class for all use cases.

    Provides a consistent interface and common logging for business logic
    orchestration.
    """

    def __init__(self, name: str | None = None) -> None:
        """
        Initialize use case.

        Args:
            name: Optional name for the use case (defaults to class name)
        """
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    async def execute(self, request: TRequest) -> TResponse:
        """
        Execute the use case.

        Args:
            request: The use case request

        Returns:
            The use case response

        Raises:
            DomainException: When the request is rejected by the domain
        """
        request_id = getattr(request, "request_id", None) or uuid4()

        self.logger.debug(
            f"Executing {self.name}",
            extra={"request_id": str(request_id), "use_case": self.name},
        )

        try:
            response = await self.process(request)
        except DomainException as e:
            self.logger.warning(
                f"{self.name} rejected request: {e}",
                extra={"request_id": str(request_id), "error_type": type(e).__name__},
            )
            raise
        except Exception as e:
            self.logger.error(
                f"Error executing {self.name}: {e}",
                extra={"request_id": str(request_id)},
                exc_info=True,
            )
            raise

        self.logger.info(
            f"Successfully executed {self.name}",
            extra={"request_id": str(request_id), "use_case": self.name},
        )

        return response

    @abstractmethod
    async def process(self, request: TRequest) -> TResponse:
        """
        Process the request and execute business logic.

        Args:
            request: The request

        Returns:
            The response
        """
        pass
