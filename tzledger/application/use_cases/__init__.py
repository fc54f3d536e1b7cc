"""Application use cases."""

from .base import UseCase, UseCaseRequest, UseCaseResponse
from .timestamps import (
    CreateTimestampRequest,
    CreateTimestampResponse,
    CreateTimestampUseCase,
    FetchTimestampsRequest,
    FetchTimestampsResponse,
    FetchTimestampsUseCase,
)

__all__ = [
    "CreateTimestampRequest",
    "CreateTimestampResponse",
    "CreateTimestampUseCase",
    "FetchTimestampsRequest",
    "FetchTimestampsResponse",
    "FetchTimestampsUseCase",
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
]
