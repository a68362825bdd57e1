"""
Global test fixtures for kvgate.

This module provides shared fixtures for all tests including:
- In-memory store with a controllable clock
- Mock Redis (fakeredis)
- Login and item payloads
- FastAPI test clients bound to an injected store
"""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Cheap bcrypt and no Redis server for the test run
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("STORE_BACKEND", "memory")


# =============================================================================
# Clock Fixtures
# =============================================================================

class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """A manually advanced clock for expiration tests."""
    return FakeClock()


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def memory_store(clock):
    """In-memory store driven by the fake clock."""
    from kvgate.database.store import MemoryStore
    return MemoryStore(clock=clock)


@pytest_asyncio.fixture
async def mock_async_redis():
    """
    Create an async mock Redis client using fakeredis.
    """
    try:
        import fakeredis.aioredis
        redis_client = fakeredis.aioredis.FakeRedis(decode_responses=True)
        yield redis_client
        await redis_client.flushall()
        await redis_client.aclose()
    except ImportError:
        pytest.skip("fakeredis with aioredis not installed")


@pytest_asyncio.fixture
async def redis_store(mock_async_redis):
    """RedisStore over fakeredis."""
    from kvgate.database.store import RedisStore
    return RedisStore(mock_async_redis)


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with a low bcrypt cost and the default credential TTL."""
    from kvgate.config import Settings
    return Settings(store_backend="memory", bcrypt_rounds=4)


@pytest.fixture
def atomic_settings():
    """Settings with hardened (set-if-absent) registration."""
    from kvgate.config import Settings
    return Settings(store_backend="memory", bcrypt_rounds=4, atomic_registration=True)


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def login_payload() -> dict:
    """Login body for a fresh identifier."""
    return {
        "loginID": "u1",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def item_payload() -> dict:
    """Item body."""
    return {
        "id": "x",
        "value": "v",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(memory_store):
    """
    Create FastAPI app for testing, serving from the in-memory store.
    """
    from kvgate.main import create_app
    return create_app(store=memory_store)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for testing async endpoints.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
