"""
Unit tests for the timestamp use cases.
"""

from unittest.mock import Mock, patch

import pytest

from tzledger.application.use_cases import (
    CreateTimestampRequest,
    CreateTimestampUseCase,
    FetchTimestampsRequest,
    FetchTimestampsUseCase,
)
from tzledger.domain.exceptions import (
    SerializationError,
    TimestampParseError,
    TimezoneResolutionError,
)


class TestCreateTimestampUseCase:
    """Test timestamp ingestion."""

    @pytest.fixture
    def use_case(self, repository, conversion_service):
        return CreateTimestampUseCase(repository, conversion_service)

    @pytest.mark.asyncio
    async def test_stores_utc_instant(self, use_case, repository, conversion_service):
        response = await use_case.execute(
            CreateTimestampRequest(date_time="2023-05-17T17:50:34+02:00")
        )

        assert response.success is True
        assert response.message == "Added date with timezone: +02:00 as UTC"
        assert repository.snapshot() == (conversion_service.parse("2023-05-17T15:50:34Z"),)
        assert response.instant == repository.snapshot()[0]

    @pytest.mark.asyncio
    async def test_request_id_is_propagated(self, use_case):
        request = CreateTimestampRequest(date_time="2023-05-17T17:50:34Z")

        response = await use_case.execute(request)

        assert request.request_id is not None
        assert response.request_id == request.request_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "value", ["2023-05-17T17:50:34", "2023-13-17T17:50:34+02:00", "yesterday"]
    )
    async def test_parse_failure_leaves_store_untouched(self, use_case, repository, value):
        with pytest.raises(TimestampParseError):
            await use_case.execute(CreateTimestampRequest(date_time=value))

        assert repository.count() == 0

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self, conversion_service):
        repository = Mock()
        repository.append.side_effect = RuntimeError("store unavailable")
        use_case = CreateTimestampUseCase(repository, conversion_service)

        with pytest.raises(RuntimeError, match="store unavailable"):
            await use_case.execute(CreateTimestampRequest(date_time="2023-05-17T17:50:34Z"))


class TestFetchTimestampsUseCase:
    """Test replay of the store in a zone."""

    @pytest.fixture
    def use_case(self, repository, conversion_service):
        return FetchTimestampsUseCase(repository, conversion_service)

    @pytest.mark.asyncio
    async def test_empty_store(self, use_case):
        response = await use_case.execute(FetchTimestampsRequest(zone="UTC"))

        assert response.timestamps == []
        assert response.zone == "UTC"

    @pytest.mark.asyncio
    async def test_renders_in_insertion_order(self, use_case, repository, conversion_service):
        for value in ["2023-05-17T17:50:34+02:00", "2020-01-01T00:00:00Z"]:
            repository.append(conversion_service.parse(value))

        response = await use_case.execute(FetchTimestampsRequest(zone="Europe%2FMadrid"))

        assert response.zone == "Europe/Madrid"
        assert response.timestamps == [
            "2023-05-17T17:50:34+02:00",
            "2020-01-01T01:00:00+01:00",
        ]

    @pytest.mark.asyncio
    async def test_invalid_zone_does_not_read_store(self, conversion_service):
        repository = Mock()
        use_case = FetchTimestampsUseCase(repository, conversion_service)

        with pytest.raises(TimezoneResolutionError):
            await use_case.execute(FetchTimestampsRequest(zone="Not/AZone"))

        repository.snapshot.assert_not_called()

    @pytest.mark.asyncio
    async def test_serialization_failure(self, use_case, repository, conversion_service):
        repository.append(conversion_service.parse("2023-05-17T17:50:34Z"))

        with patch.object(conversion_service, "render_all", return_value=[{1, 2}]):
            with pytest.raises(SerializationError, match="not JSON serializable"):
                await use_case.execute(FetchTimestampsRequest(zone="UTC"))
