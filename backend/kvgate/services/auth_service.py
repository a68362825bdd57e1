"""
Authentication service: login with registration on first use.
"""
import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from kvgate.config import Settings, get_settings
from kvgate.core.exceptions import PasswordHashError
from kvgate.core.security import hash_password, verify_password
from kvgate.database.store import KeyValueStore
from kvgate.models.credential import CredentialRecord, LoginOutcome
from kvgate.schemas.auth import LoginRequest

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, store: KeyValueStore, settings: Optional[Settings] = None):
        """Initialize with the key-value store."""
        self.store = store
        self.settings = settings or get_settings()

    async def get_credential(self, login_id: str) -> Optional[CredentialRecord]:
        """
        Look up the stored credential for a login identifier.

        Args:
            login_id: Login identifier

        Returns:
            CredentialRecord, or None if the identifier is unknown or expired

        Raises:
            StoreError: If the store fails
        """
        password_hash = await self.store.get(login_id)
        if password_hash is None:
            return None
        return CredentialRecord(login_id=login_id, password_hash=password_hash)

    async def login(self, request: LoginRequest) -> LoginOutcome:
        """
        Log in, creating the user if the identifier has never been seen.

        Lookup and creation are two separate store calls. Unless
        ``atomic_registration`` is enabled, two concurrent first logins for
        the same identifier both register and the last write wins.

        Args:
            request: Login request with identifier and password

        Returns:
            CREATED for a new identifier, AUTHENTICATED on a password
            match, REJECTED on a mismatch

        Raises:
            StoreError: If the store fails
            PasswordHashError: If hashing the new password fails
        """
        credential = await self.get_credential(request.login_id)

        if credential is None:
            registered = await self._register(request.login_id, request.password)
            if registered:
                logger.info("Created user %s", request.login_id)
                return LoginOutcome.CREATED
            # Lost the registration race; verify against the winner's hash
            credential = await self.get_credential(request.login_id)
            if credential is None:
                return LoginOutcome.REJECTED

        if not await run_in_threadpool(verify_password, request.password, credential.password_hash):
            logger.info("Login rejected for %s", request.login_id)
            return LoginOutcome.REJECTED

        return LoginOutcome.AUTHENTICATED

    async def _register(self, login_id: str, password: str) -> bool:
        """Store a new credential with the configured TTL."""
        try:
            password_hash = await run_in_threadpool(hash_password, password)
        except (ValueError, TypeError) as e:
            raise PasswordHashError(str(e)) from e

        ttl = self.settings.credential_ttl_seconds
        if self.settings.atomic_registration:
            return await self.store.set_if_absent(login_id, password_hash, ttl)

        await self.store.set(login_id, password_hash, ttl)
        return True

    async def authenticate_user(self, login_id: str, password: str) -> bool:
        """
        Verify credentials for an existing identifier without registering.

        Not exposed over HTTP.

        Args:
            login_id: Login identifier
            password: Plain text password

        Returns:
            True if the identifier exists and the password matches

        Raises:
            StoreError: If the store fails
        """
        credential = await self.get_credential(login_id)
        if credential is None:
            return False
        return await run_in_threadpool(verify_password, password, credential.password_hash)
