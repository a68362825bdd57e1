"""
Item request schemas.
"""
from pydantic import BaseModel, Field


class ItemBody(BaseModel):
    """Item body for create and update requests, echoed back on success."""
    id: str = Field(..., description="Item identifier")
    value: str = Field(..., description="Item value")
