"""
Request and response schemas for API endpoints.
"""
from kvgate.schemas.auth import LoginRequest, LoginResponse
from kvgate.schemas.item import ItemBody

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    # Item
    "ItemBody",
]
