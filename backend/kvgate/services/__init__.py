"""
Service layer for business logic.
"""
from kvgate.services.auth_service import AuthService
from kvgate.services.item_service import ItemService

__all__ = [
    "AuthService",
    "ItemService",
]
