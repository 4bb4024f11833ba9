"""
Tests for the application factory's operational surface and wiring.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.config import AppSettings
from app.errors import MalformedBodyError
from app.observability.logging import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from app.server import RouteDefinition, create_app, describe_routes
from app.server.api.clock import SystemClock, isoformat
from app.server.main import bootstrap


def test_healthz(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["app"] == "app1"
    assert body["uptime_seconds"] >= 0


def test_root_lists_endpoints(client: TestClient) -> None:
    body = client.get("/").json()

    assert body["service"] == "app1"
    assert "GET /api/data" in body["endpoints"]
    assert "POST /api/data" in body["endpoints"]
    assert "GET /metrics" not in body["endpoints"]


def test_describe_routes(app) -> None:
    routes = describe_routes(app)

    assert routes["GET /api/data"] == RouteDefinition(
        path="/api/data", method="GET", name="list_data", description="List sample data"
    )
    assert routes["POST /api/data"].name == "receive_data"
    assert routes["GET /healthz"].description == "Health check"


def test_describe_routes_follows_prefix() -> None:
    routes = describe_routes(create_app(AppSettings(api_prefix="/v2")))

    assert sorted(routes) == ["GET /", "GET /healthz", "GET /v2/data", "POST /v2/data"]


def test_metrics_count_requests_by_route(client: TestClient) -> None:
    client.get("/api/data")
    client.post("/api/data", json={"foo": "bar"})

    response = client.get("/metrics")

    assert response.status_code == 200
    text = response.text
    assert "app1_http_requests_total" in text
    assert 'endpoint="/api/data"' in text
    assert 'status="201"' in text
    assert "app1_http_request_duration_seconds_bucket" in text


def test_metrics_can_be_disabled() -> None:
    application = create_app(AppSettings(metrics_enabled=False))

    with TestClient(application) as client:
        assert client.get("/metrics").status_code == 404
        assert client.get("/api/data").status_code == 200


def test_correlation_id_generated_and_cleared() -> None:
    generated = set_correlation_id(None)

    assert generated.startswith("req-")
    assert get_correlation_id() == generated

    clear_correlation_id()
    assert get_correlation_id() is None


def test_malformed_body_error_defaults() -> None:
    error = MalformedBodyError("bad body")

    assert error.status_code == 400
    assert error.error == "malformed_body"
    assert error.message == "bad body"


def test_bootstrap_uses_given_settings() -> None:
    application = bootstrap(AppSettings(app_name="booted", log_format="console"))

    with TestClient(application) as client:
        assert client.get("/api/data").json()["app"] == "booted"


def test_system_clock_utc() -> None:
    before = datetime.now(timezone.utc)
    moment = SystemClock("utc")()

    assert moment.utcoffset() == timedelta(0)
    assert moment >= before


def test_system_clock_local_is_timezone_aware() -> None:
    assert SystemClock("local")().tzinfo is not None


def test_isoformat_naive_datetime_gets_offset() -> None:
    rendered = isoformat(datetime(2024, 1, 2, 3, 4, 5, 678901))

    assert rendered.startswith("2024-01-02T03:04:05")
    assert datetime.fromisoformat(rendered).tzinfo is not None


def test_metrics_fold_unknown_paths(client: TestClient) -> None:
    client.get("/no/such/route")

    text = client.get("/metrics").text

    assert 'endpoint="unmatched"' in text
    assert 'endpoint="/no/such/route"' not in text
