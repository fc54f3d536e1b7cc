"""
Timestamp API endpoints.

Routes are thin: they translate HTTP into use case requests and use case
responses into JSON. Failures propagate as domain exceptions and are turned
into responses by the handlers registered in ``app.py``.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from tzledger.application.use_cases import CreateTimestampRequest, FetchTimestampsRequest
from tzledger.infrastructure.container import Container

from .schemas import DateTimeRequest, MessageResponse, TimestampListResponse

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Building a simple API in Python using FastAPI to handle time zones via zoneinfo"

router = APIRouter(tags=["Timestamps"])


def get_container(request: Request) -> Container:
    """Get the container attached to the running application."""
    return request.app.state.container  # type: ignore[no-any-return]


@router.get("/healthchecker", response_model=MessageResponse)
async def health_checker() -> MessageResponse:
    """Static liveness message; independent of store state."""
    return MessageResponse(status="success", message=HEALTH_MESSAGE)


@router.post("/create", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def create_datetime(
    body: DateTimeRequest, request: Request, container: Container = Depends(get_container)
) -> MessageResponse:
    """Store a timestamp as a UTC instant."""
    result = await container.create_timestamp.execute(
        CreateTimestampRequest(
            date_time=body.date_time,
            metadata={"http_request_id": getattr(request.state, "request_id", None)},
        )
    )
    return MessageResponse(status="success", message=result.message)


# The path converter lets decoded separators (Europe%2FMadrid -> Europe/Madrid) match
@router.get("/fetch/{zone:path}", response_model=TimestampListResponse)
async def fetch_datetimes(
    zone: str, request: Request, container: Container = Depends(get_container)
) -> TimestampListResponse:
    """Return every stored instant rendered in ``zone``, in insertion order."""
    result = await container.fetch_timestamps.execute(
        FetchTimestampsRequest(
            zone=zone,
            metadata={"http_request_id": getattr(request.state, "request_id", None)},
        )
    )
    return TimestampListResponse(status="success", data=result.timestamps)
