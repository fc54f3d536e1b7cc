"""
Integration tests for the timestamp HTTP API.

Exercise the full stack through FastAPI's TestClient: routing, middleware,
use cases, the store and the error handlers.
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from tzledger.infrastructure.container import Container
from tzledger.interfaces.api import create_app
from tzledger.interfaces.api.routes import HEALTH_MESSAGE

pytestmark = pytest.mark.integration


@pytest.fixture
def container():
    return Container()


@pytest.fixture
def client(container):
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


def create(client, value):
    return client.post("/create", json={"date_time": value})


class TestHealthChecker:
    """Test the health endpoint."""

    def test_health_checker(self, client):
        response = client.get("/healthchecker")

        assert response.status_code == 200
        assert response.json() == {"status": "success", "message": HEALTH_MESSAGE}

    def test_health_checker_ignores_store_state(self, client):
        create(client, "2023-05-17T17:50:34+02:00")

        response = client.get("/healthchecker")

        assert response.status_code == 200
        assert response.json() == {"status": "success", "message": HEALTH_MESSAGE}


class TestCreate:
    """Test timestamp submission."""

    def test_create_success(self, client, container):
        response = create(client, "2023-05-17T17:50:34+02:00")

        assert response.status_code == 201
        assert response.json() == {
            "status": "success",
            "message": "Added date with timezone: +02:00 as UTC",
        }
        assert container.repository.count() == 1

    def test_create_zulu(self, client):
        response = create(client, "2023-05-17T15:50:34Z")

        assert response.status_code == 201
        assert response.json()["message"] == "Added date with timezone: +00:00 as UTC"

    @pytest.mark.parametrize(
        "value",
        ["2023-05-17T17:50:34", "2023-13-17T17:50:34+02:00", "not a date", ""],
    )
    def test_create_parse_failure(self, client, container, value):
        response = create(client, value)

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == "fail"
        assert body["message"].startswith("Could not parse datetime: ")
        assert container.repository.count() == 0

    def test_create_missing_field(self, client, container):
        response = client.post("/create", json={"when": "2023-05-17T17:50:34Z"})

        assert response.status_code == 422
        assert response.json()["status"] == "fail"
        assert "date_time" in response.json()["message"]
        assert container.repository.count() == 0

    def test_create_invalid_json(self, client, container):
        response = client.post(
            "/create", content=b"{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 422
        assert response.json()["message"].startswith("Invalid request body: ")
        assert container.repository.count() == 0


class TestFetch:
    """Test replay in a requested zone."""

    def test_fetch_empty(self, client):
        response = client.get("/fetch/UTC")

        assert response.status_code == 200
        assert response.json() == {"status": "success", "data": []}

    def test_end_to_end(self, client):
        """Test create then fetch in UTC and in Madrid."""
        assert create(client, "2023-05-17T17:50:34+02:00").status_code == 201

        utc = client.get("/fetch/UTC")
        madrid = client.get("/fetch/Europe%2FMadrid")

        assert utc.status_code == 200
        assert "2023-05-17T15:50:34+00:00" in utc.json()["data"]
        assert madrid.status_code == 200
        assert madrid.json()["data"] == ["2023-05-17T17:50:34+02:00"]

    def test_fetch_plain_separator(self, client):
        create(client, "2023-05-17T17:50:34+02:00")

        response = client.get("/fetch/Africa/Algiers")

        assert response.status_code == 200
        assert response.json()["data"] == ["2023-05-17T16:50:34+01:00"]

    def test_fetch_double_encoded_separator(self, client):
        create(client, "2023-05-17T17:50:34+02:00")

        response = client.get("/fetch/Africa%252FAlgiers")

        assert response.status_code == 200
        assert response.json()["data"] == ["2023-05-17T16:50:34+01:00"]

    def test_fetch_preserves_insertion_order(self, client):
        values = [
            "2023-05-17T17:50:34+02:00",
            "2001-01-01T00:00:00Z",
            "2023-05-17T17:50:34+02:00",
        ]
        for value in values:
            create(client, value)

        response = client.get("/fetch/UTC")

        assert response.json()["data"] == [
            "2023-05-17T15:50:34+00:00",
            "2001-01-01T00:00:00+00:00",
            "2023-05-17T15:50:34+00:00",
        ]

    def test_fetch_keeps_nanoseconds_and_leap_seconds(self, client):
        create(client, "2023-05-17T17:50:34.123456789+02:00")
        create(client, "2016-12-31T23:59:60Z")

        response = client.get("/fetch/UTC")

        assert response.json()["data"] == [
            "2023-05-17T15:50:34.123456789+00:00",
            "2016-12-31T23:59:60+00:00",
        ]

    @pytest.mark.parametrize(
        "value,zone",
        [
            ("0001-01-01T00:00:00Z", "America%2FNew_York"),
            ("9999-12-31T23:59:59Z", "Asia%2FTokyo"),
        ],
    )
    def test_instants_at_range_limits_cannot_break_fetch(self, client, container, value, zone):
        """Test an instant no zone could display is refused instead of stored."""
        response = create(client, value)

        assert response.status_code == 400
        assert response.json()["message"].startswith("Could not parse datetime: ")
        assert container.repository.count() == 0

        fetched = client.get(f"/fetch/{zone}")

        assert fetched.status_code == 200
        assert fetched.json()["data"] == []

    def test_earliest_and_latest_instants_fetch_in_far_zones(self, client):
        assert create(client, "0001-01-02T00:00:00Z").status_code == 201
        assert create(client, "9999-12-30T23:59:59Z").status_code == 201

        for zone in ("America%2FNew_York", "Asia%2FTokyo", "Pacific%2FKiritimati"):
            response = client.get(f"/fetch/{zone}")

            assert response.status_code == 200
            assert len(response.json()["data"]) == 2

    def test_fetch_unknown_zone(self, client, container):
        create(client, "2023-05-17T17:50:34+02:00")

        with patch.object(container.repository, "snapshot") as snapshot:
            response = client.get("/fetch/Not%2FAZone")

        assert response.status_code == 400
        assert response.json() == {
            "status": "fail",
            "message": "Could not parse timezone: 'Not/AZone' is not a valid timezone",
        }
        snapshot.assert_not_called()

    def test_fetch_empty_zone(self, client):
        response = client.get("/fetch/")

        assert response.status_code == 400
        assert response.json()["message"].startswith("Could not parse timezone: ")

    def test_fetch_serialization_failure(self, client, container):
        create(client, "2023-05-17T17:50:34+02:00")

        with patch.object(
            container.conversion_service, "render_all", return_value=[float("nan")]
        ):
            response = client.get("/fetch/UTC")

        assert response.status_code == 500
        body = response.json()
        assert body["status"] == "fail"
        assert body["message"].startswith("Could not serialize json: ")


class TestMiddleware:
    """Test request ID propagation."""

    def test_request_id_generated(self, client):
        response = client.get("/healthchecker")

        assert response.headers["X-Request-ID"].startswith("req_")

    def test_request_id_echoed(self, client):
        response = client.get("/fetch/UTC", headers={"X-Request-ID": "trace-42"})

        assert response.headers["X-Request-ID"] == "trace-42"

    def test_request_id_on_failures(self, client):
        response = client.get("/fetch/Not%2FAZone", headers={"X-Request-ID": "trace-43"})

        assert response.status_code == 400
        assert response.headers["X-Request-ID"] == "trace-43"


class TestUnexpectedErrors:
    """Test errors outside the domain taxonomy."""

    def test_unexpected_error_returns_500(self, container):
        app = create_app(container=container)

        with TestClient(app, raise_server_exceptions=False) as client:
            with patch.object(container.repository, "append", side_effect=RuntimeError("boom")):
                response = client.post("/create", json={"date_time": "2023-05-17T17:50:34Z"})

        assert response.status_code == 500
        assert response.json() == {"status": "fail", "message": "Internal server error"}

    def test_service_keeps_serving_after_failure(self, client):
        assert create(client, "garbage").status_code == 400
        assert create(client, "2023-05-17T17:50:34Z").status_code == 201
        assert client.get("/fetch/UTC").json()["data"] == ["2023-05-17T17:50:34+00:00"]


class TestConcurrentRequests:
    """Test concurrent writers through the HTTP layer."""

    @pytest.mark.asyncio
    async def test_concurrent_creates(self, container):
        app = create_app(container=container)
        num_requests = 60
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            responses = await asyncio.gather(
                *(
                    client.post(
                        "/create",
                        json={"date_time": f"2023-05-17T10:{i // 60:02d}:{i % 60:02d}Z"},
                    )
                    for i in range(num_requests)
                )
            )
            fetched = await client.get("/fetch/UTC")

        assert [response.status_code for response in responses] == [201] * num_requests
        assert container.repository.count() == num_requests
        assert sorted(fetched.json()["data"]) == sorted(
            f"2023-05-17T10:{i // 60:02d}:{i % 60:02d}+00:00" for i in range(num_requests)
        )
