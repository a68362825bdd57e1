"""
Store and service dependencies.

The store handle lives on ``app.state.store`` for the lifetime of the
application; every request gets services bound to that same handle.
"""
from typing import Annotated

from fastapi import Depends, Request

from kvgate.database.store import KeyValueStore
from kvgate.services.auth_service import AuthService
from kvgate.services.item_service import ItemService


def get_store(request: Request) -> KeyValueStore:
    """Dependency to get the application's key-value store."""
    return request.app.state.store


def get_auth_service(
    store: Annotated[KeyValueStore, Depends(get_store)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(store)


def get_item_service(
    store: Annotated[KeyValueStore, Depends(get_store)],
) -> ItemService:
    """Dependency to get ItemService instance."""
    return ItemService(store)
