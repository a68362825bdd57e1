"""
Key-value store adapters.

Every backend exposes the same small async contract used by the services:
``get`` returns ``None`` for a missing key, ``set`` takes a TTL in seconds
(0 = no expiration), ``delete`` of a missing key is not an error. Backend
failures are raised as ``StoreError``.
"""
import time
from typing import Callable, Optional, Protocol

from redis.asyncio import Redis
from redis.exceptions import RedisError

from kvgate.core.exceptions import StoreError


class KeyValueStore(Protocol):
    """Async key-value store contract shared by all backends."""

    async def get(self, key: str) -> Optional[str]:
        ...

    async def set(self, key: str, value: str, ttl_seconds: int = 0) -> None:
        ...

    async def set_if_absent(self, key: str, value: str, ttl_seconds: int = 0) -> bool:
        ...

    async def delete(self, key: str) -> None:
        ...

    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        ...


class RedisStore:
    """
    Store backed by a Redis server.

    The client must be created with ``decode_responses=True`` so values
    come back as ``str``.
    """

    def __init__(self, client: Redis):
        """Initialize with an async Redis client."""
        self.client = client

    async def get(self, key: str) -> Optional[str]:
        """
        Get the value stored at a key.

        Args:
            key: Store key

        Returns:
            Stored value, or None if the key does not exist (or expired)

        Raises:
            StoreError: If Redis fails
        """
        try:
            return await self.client.get(key)
        except RedisError as e:
            raise StoreError(str(e), operation="get") from e

    async def set(self, key: str, value: str, ttl_seconds: int = 0) -> None:
        """
        Store a value, overwriting any previous one.

        Args:
            key: Store key
            value: Value to store
            ttl_seconds: Expiration in seconds, 0 for no expiration

        Raises:
            StoreError: If Redis fails
        """
        try:
            await self.client.set(key, value, ex=ttl_seconds or None)
        except RedisError as e:
            raise StoreError(str(e), operation="set") from e

    async def set_if_absent(self, key: str, value: str, ttl_seconds: int = 0) -> bool:
        """
        Store a value only if the key does not exist yet (``SET NX``).

        Returns:
            True if the value was written, False if the key already existed

        Raises:
            StoreError: If Redis fails
        """
        try:
            result = await self.client.set(key, value, ex=ttl_seconds or None, nx=True)
        except RedisError as e:
            raise StoreError(str(e), operation="set") from e
        return bool(result)

    async def delete(self, key: str) -> None:
        """
        Delete a key. Deleting a missing key is a no-op.

        Raises:
            StoreError: If Redis fails
        """
        try:
            await self.client.delete(key)
        except RedisError as e:
            raise StoreError(str(e), operation="delete") from e

    async def ping(self) -> bool:
        """Check that Redis answers. Raises StoreError if it does not."""
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            raise StoreError(str(e), operation="ping") from e

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self.client.aclose()


class MemoryStore:
    """
    In-process store for local development and tests.

    Expiration is checked lazily on read against ``clock`` (seconds,
    monotonic by default), so tests can move time forward without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        # key -> (value, deadline or None)
        self._data: dict[str, tuple[str, Optional[float]]] = {}

    def _live(self, key: str) -> Optional[str]:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, deadline = entry
        if deadline is not None and self._clock() >= deadline:
            del self._data[key]
            return None
        return value

    def _deadline(self, ttl_seconds: int) -> Optional[float]:
        if ttl_seconds <= 0:
            return None
        return self._clock() + ttl_seconds

    async def get(self, key: str) -> Optional[str]:
        return self._live(key)

    async def set(self, key: str, value: str, ttl_seconds: int = 0) -> None:
        self._data[key] = (value, self._deadline(ttl_seconds))

    async def set_if_absent(self, key: str, value: str, ttl_seconds: int = 0) -> bool:
        if self._live(key) is not None:
            return False
        self._data[key] = (value, self._deadline(ttl_seconds))
        return True

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return sum(1 for key in list(self._data) if self._live(key) is not None)
