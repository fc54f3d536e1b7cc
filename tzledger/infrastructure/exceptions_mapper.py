"""
Exception mapper for converting domain errors into HTTP responses.

This is the single place where error types meet status codes; route
handlers and use cases never build failure bodies themselves.
"""

from dataclasses import dataclass
from typing import Any

from ..domain.exceptions import (
    DomainException,
    SerializationError,
    TimestampParseError,
    TimezoneResolutionError,
)


@dataclass(frozen=True)
class HTTPErrorMapping:
    """Status code and message prefix for one error type."""

    status_code: int
    message_prefix: str


class ExceptionMapper:
    """Maps domain exceptions to HTTP status codes and JSON failure bodies."""

    DEFAULT_MAPPING = HTTPErrorMapping(500, "Internal server error")

    def __init__(self) -> None:
        self._http_mappings: dict[type[Exception], HTTPErrorMapping] = {
            TimestampParseError: HTTPErrorMapping(400, "Could not parse datetime"),
            TimezoneResolutionError: HTTPErrorMapping(400, "Could not parse timezone"),
            SerializationError: HTTPErrorMapping(500, "Could not serialize json"),
        }

    def get_mapping(self, error: Exception) -> HTTPErrorMapping:
        """Find the mapping for an error, walking its class hierarchy."""
        for error_type in type(error).__mro__:
            mapping = self._http_mappings.get(error_type)
            if mapping is not None:
                return mapping
        return self.DEFAULT_MAPPING

    def to_status_code(self, error: Exception) -> int:
        return self.get_mapping(error).status_code

    def to_response_body(self, error: Exception) -> dict[str, Any]:
        """
        Build the JSON failure body for an error.

        Args:
            error: The exception raised while serving the request

        Returns:
            ``{"status": "fail", "message": "<prefix>: <details>"}``
        """
        mapping = self.get_mapping(error)
        if isinstance(error, DomainException):
            details = error.message
        elif mapping is self.DEFAULT_MAPPING:
            # Unexpected errors never leak internals to clients
            return {"status": "fail", "message": mapping.message_prefix}
        else:
            details = str(error)

        return {"status": "fail", "message": f"{mapping.message_prefix}: {details}"}
