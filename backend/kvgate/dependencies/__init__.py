"""
Dependencies for dependency injection in routes.
"""
from kvgate.dependencies.services import get_auth_service, get_item_service, get_store

__all__ = [
    "get_store",
    "get_auth_service",
    "get_item_service",
]
