"""Health endpoint tests."""

from contextlib import asynccontextmanager

import psycopg
import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from semrag.interfaces.api.resources.health import HealthResource


class _UnreachablePool:
    @asynccontextmanager
    async def connection(self):
        raise psycopg.OperationalError("connection refused")
        yield


class _HealthyPool:
    class _Conn:
        async def execute(self, sql, params=None):
            return None

    @asynccontextmanager
    async def connection(self):
        yield self._Conn()


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
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_with_database() -> None:
    result = _client(HealthResource(_HealthyPool())).simulate_get("/v1/health/ready")
    assert result.status_code == 200


def test_health_not_ready_without_database() -> None:
    """Readiness is 503 while liveness stays 200."""
    client = _client(HealthResource(_UnreachablePool()))
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
    assert client.simulate_get("/v1/health").status_code == 200
