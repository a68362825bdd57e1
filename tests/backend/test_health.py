"""
Tests for health check and root endpoints.

These tests verify:
- Basic health endpoint returns 200
- Readiness check reports store connection status
- Health degrades gracefully when the store is down
"""

import pytest
from unittest.mock import AsyncMock


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    def test_health_endpoint_returns_200_when_api_running(self, client):
        """Basic health check should return 200 if API is up."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    def test_health_endpoint_ignores_store_failures(self, failing_client):
        """Liveness does not touch the store."""
        response = failing_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestReadinessEndpoint:
    """Tests for GET /health/ready endpoint."""

    def test_readiness_returns_healthy_with_memory_store(self, client):
        """Readiness check should report healthy when the store answers."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["store"] == "healthy"

    def test_readiness_reports_store_unhealthy_when_connection_fails(self, failing_client):
        """Readiness should report the store unhealthy when ping fails."""
        response = failing_client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert "unhealthy" in data["checks"]["store"]
        assert "Connection refused" in data["checks"]["store"]

    def test_readiness_reports_unhealthy_when_ping_returns_false(
        self, failing_client, failing_redis_client
    ):
        """A falsy ping reply counts as unhealthy."""
        failing_redis_client.ping = AsyncMock(return_value=False)

        response = failing_client.get("/health/ready")

        data = response.json()
        assert data["status"] == "degraded"
        assert data["checks"]["store"].startswith("unhealthy")

    def test_readiness_response_includes_all_check_keys(self, failing_client):
        """Readiness response should include all dependency checks."""
        response = failing_client.get("/health/ready")

        data = response.json()
        assert "checks" in data
        assert "api" in data["checks"]
        assert "store" in data["checks"]
        assert data["checks"]["api"] == "healthy"


class TestRootEndpoint:
    """Tests for GET / endpoint."""

    def test_root_returns_api_information(self, client):
        """Root should describe the API and link docs and health."""
        from kvgate import __version__

        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "kvgate API"
        assert data["version"] == __version__
        assert data["docs"] == "/docs"
        assert data["health"] == "/health"
