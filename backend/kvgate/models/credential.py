"""
Credential model stored in the key-value store.
"""
from enum import Enum

from pydantic import BaseModel, Field


class LoginOutcome(str, Enum):
    """Result of a login attempt."""
    CREATED = "created"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


class CredentialRecord(BaseModel):
    """
    A login identifier and its bcrypt hash.

    Stored as ``<login_id> -> <password_hash>`` with a fixed TTL.
    """
    login_id: str = Field(..., description="Login identifier, used as the store key")
    password_hash: str = Field(..., description="Bcrypt hashed password")
