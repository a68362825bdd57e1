"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for injecting
failing stores into the app and asserting error responses.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError


# =============================================================================
# Failing Store Fixtures
# =============================================================================

@pytest.fixture
def failing_redis_client():
    """
    Async Redis client whose every call fails.

    Individual tests can swap single methods back to working mocks.
    """
    client = AsyncMock()
    error = RedisConnectionError("Connection refused")
    client.get = AsyncMock(side_effect=error)
    client.set = AsyncMock(side_effect=error)
    client.delete = AsyncMock(side_effect=error)
    client.ping = AsyncMock(side_effect=error)
    return client


@pytest.fixture
def failing_store(failing_redis_client):
    """RedisStore wrapping a client that always fails."""
    from kvgate.database.store import RedisStore
    return RedisStore(failing_redis_client)


@pytest.fixture
def failing_client(failing_store):
    """TestClient for an app whose store always fails."""
    from kvgate.main import create_app

    with TestClient(create_app(store=failing_store)) as c:
        yield c


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
