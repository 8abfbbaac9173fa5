"""Health endpoint tests."""

from unittest.mock import AsyncMock

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from rolestore.domain.exceptions import StoreError
from rolestore.interfaces.api.resources.health import HealthResource


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client(HealthResource())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 without a readiness check."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_runs_check() -> None:
    check = AsyncMock(return_value=True)
    result = _client(HealthResource(check)).simulate_get("/v1/health/ready")
    assert result.status_code == 200
    check.assert_awaited_once()


def test_health_ready_unavailable_on_store_error() -> None:
    check = AsyncMock(side_effect=StoreError("connection refused"))
    result = _client(HealthResource(check)).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"


def test_health_ready_unavailable_when_check_fails() -> None:
    check = AsyncMock(return_value=False)
    result = _client(HealthResource(check)).simulate_get("/v1/health/ready")
    assert result.status_code == 503
