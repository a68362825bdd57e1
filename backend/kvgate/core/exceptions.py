"""
Domain exceptions raised by the store adapters and services.
"""
from typing import Literal

StoreOperation = Literal["get", "set", "delete", "ping"]


class StoreError(Exception):
    """A key-value backend operation failed.

    The backend's own message is kept verbatim; the original exception
    is chained as ``__cause__``.
    """

    def __init__(self, message: str, operation: StoreOperation):
        super().__init__(message)
        self.operation: StoreOperation = operation


class PasswordHashError(Exception):
    """Hashing a new password failed."""
