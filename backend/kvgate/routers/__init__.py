"""
API routers.
"""
from kvgate.routers import auth, health, items

__all__ = [
    "auth",
    "health",
    "items",
]
