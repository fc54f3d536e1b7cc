"""
Domain-level exceptions for the timestamp ledger.

Each operation that can fail owns exactly one exception type. The API
boundary maps these to HTTP responses; nothing below it builds responses.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TimestampParseError(DomainException):
    """Raised when a submitted civil time string is not a valid RFC 3339 timestamp."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(reason, details={"value": value, "reason": reason})
        self.value = value
        self.reason = reason


class TimezoneResolutionError(DomainException):
    """Raised when a time zone identifier is not known to the zone database."""

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        message = f"'{identifier}' is not a valid timezone"
        if reason:
            message += f" ({reason})"

        super().__init__(message, details={"identifier": identifier})
        self.identifier = identifier


class SerializationError(DomainException):
    """Raised when rendered timestamps cannot be encoded for the response."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason, details={"reason": reason})
        self.reason = reason
