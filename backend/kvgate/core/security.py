"""
Security utilities for password hashing.
"""
from functools import lru_cache

from passlib.context import CryptContext

from kvgate.config import get_settings


@lru_cache
def get_pwd_context(rounds: int | None = None) -> CryptContext:
    """
    Build the bcrypt hashing context.

    Args:
        rounds: bcrypt cost factor (defaults to the configured value)

    Returns:
        CryptContext using bcrypt
    """
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return get_pwd_context().hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    A stored value that is not a bcrypt hash never verifies.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return get_pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        return False
