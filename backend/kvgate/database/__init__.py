"""
Database module - key-value store adapters and connection setup.
"""
from kvgate.database.connections import create_redis_client, create_store
from kvgate.database.store import KeyValueStore, MemoryStore, RedisStore

__all__ = [
    "create_redis_client",
    "create_store",
    "KeyValueStore",
    "MemoryStore",
    "RedisStore",
]
