"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Store
    store_backend: Literal["redis", "memory"] = Field(default="redis")

    # Redis
    redis_host: str = "redis"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: Optional[str] = None

    # Credentials
    credential_ttl_seconds: int = Field(default=600, gt=0)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    atomic_registration: bool = False

    # Logging
    log_level: str = "INFO"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
