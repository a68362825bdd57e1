"""
Store connection management.

Builds the configured key-value store once per application. The store
instance is owned by the application lifespan, not by this module.
"""
import logging

from redis.asyncio import Redis

from kvgate.config import Settings, get_settings
from kvgate.database.store import KeyValueStore, MemoryStore, RedisStore

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> Redis:
    """Create an async Redis client from settings."""
    return Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=settings.redis_password,
        decode_responses=True,
    )


def create_store(settings: Settings | None = None) -> KeyValueStore:
    """
    Create the key-value store selected by ``STORE_BACKEND``.

    Args:
        settings: Application settings (defaults to the cached settings)

    Returns:
        A RedisStore or MemoryStore
    """
    if settings is None:
        settings = get_settings()

    if settings.store_backend == "memory":
        logger.info("Using in-memory store")
        return MemoryStore()

    logger.info(
        "Using Redis store at %s:%s/%s",
        settings.redis_host,
        settings.redis_port,
        settings.redis_db,
    )
    return RedisStore(create_redis_client(settings))
