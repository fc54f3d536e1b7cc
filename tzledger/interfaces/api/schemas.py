"""Pydantic models for request/response."""

from pydantic import BaseModel, Field


class DateTimeRequest(BaseModel):
    """Timestamp submission request."""

    date_time: str = Field(..., description="RFC 3339 timestamp with explicit UTC offset")


class MessageResponse(BaseModel):
    """Status plus human-readable message."""

    status: str
    message: str


class TimestampListResponse(BaseModel):
    """Stored timestamps rendered in the requested zone."""

    status: str
    data: list[str]
