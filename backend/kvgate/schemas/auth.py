"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """Login request body."""

    model_config = ConfigDict(populate_by_name=True)

    login_id: str = Field(..., alias="loginID", description="Login identifier")
    password: str = Field(..., description="User password")

    @field_validator("password")
    @classmethod
    def reject_nul(cls, v: str) -> str:
        # bcrypt cannot hash NUL bytes
        if "\x00" in v:
            raise ValueError("password must not contain NUL characters")
        return v


class LoginResponse(BaseModel):
    """Login response message."""
    message: str = Field(..., description="Outcome message")
