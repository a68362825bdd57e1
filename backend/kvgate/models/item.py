"""
Item model for the key-value store.
"""
from pydantic import BaseModel, Field


class Item(BaseModel):
    """An opaque string value stored under its id, with no expiration."""
    id: str = Field(..., description="Item identifier, used as the store key")
    value: str = Field(..., description="Item value")
