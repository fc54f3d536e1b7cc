"""
Timestamp Use Cases

Ingestion of client timestamps into the store and replay of the store in a
requested time zone.
"""

import json
from dataclasses import dataclass, field

from tzledger.application.interfaces.repositories import ITimestampRepository
from tzledger.domain.exceptions import SerializationError
from tzledger.domain.services.zone_conversion import ZoneConversionService
from tzledger.domain.value_objects.instant import Instant

from .base import UseCase, UseCaseRequest, UseCaseResponse


@dataclass
class CreateTimestampRequest(UseCaseRequest):
    """Request to store a timestamp."""

    date_time: str = ""


@dataclass
class CreateTimestampResponse(UseCaseResponse):
    """Response after storing a timestamp."""

    instant: Instant | None = None
    submitted_offset: str = "+00:00"

    @property
    def message(self) -> str:
        return f"Added date with timezone: {self.submitted_offset} as UTC"


@dataclass
class FetchTimestampsRequest(UseCaseRequest):
    """Request to replay the store in a time zone."""

    zone: str = ""


@dataclass
class FetchTimestampsResponse(UseCaseResponse):
    """Stored timestamps rendered in the requested zone."""

    zone: str = ""
    timestamps: list[str] = field(default_factory=list)


class CreateTimestampUseCase(UseCase[CreateTimestampRequest, CreateTimestampResponse]):
    """
    Parse a submitted timestamp and append it to the store.

    The store is only touched once parsing has succeeded.
    """

    def __init__(
        self, repository: ITimestampRepository, conversion_service: ZoneConversionService
    ) -> None:
        super().__init__("CreateTimestampUseCase")
        self.repository = repository
        self.conversion_service = conversion_service

    async def process(self, request: CreateTimestampRequest) -> CreateTimestampResponse:
        parsed = self.conversion_service.parse_with_offset(request.date_time)
        self.repository.append(parsed.instant)

        return CreateTimestampResponse(
            request_id=request.request_id,
            instant=parsed.instant,
            submitted_offset=parsed.offset_label,
        )


class FetchTimestampsUseCase(UseCase[FetchTimestampsRequest, FetchTimestampsResponse]):
    """
    Render every stored instant in the requested zone.

    The zone is resolved before the store is read, so an unknown zone costs
    no store access. The rendered list is checked for JSON encodability
    before it is handed back.
    """

    def __init__(
        self, repository: ITimestampRepository, conversion_service: ZoneConversionService
    ) -> None:
        super().__init__("FetchTimestampsUseCase")
        self.repository = repository
        self.conversion_service = conversion_service

    async def process(self, request: FetchTimestampsRequest) -> FetchTimestampsResponse:
        zone = self.conversion_service.validate_zone(request.zone)
        rendered = self.conversion_service.render_all(self.repository.snapshot(), zone)

        try:
            json.dumps(rendered, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e

        return FetchTimestampsResponse(
            request_id=request.request_id,
            zone=zone.name,
            timestamps=rendered,
        )
