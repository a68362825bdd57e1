"""
Pydantic models for stored records.
"""
from kvgate.models.credential import CredentialRecord, LoginOutcome
from kvgate.models.item import Item

__all__ = [
    "CredentialRecord",
    "LoginOutcome",
    "Item",
]
