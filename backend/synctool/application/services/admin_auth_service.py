"""Admin sessions — login, logout and the session verifier.

A session token is only honoured while it equals the token stored on the
admin row. Logging in again or logging out replaces that value, which
revokes any outstanding token before it expires.
"""

import logging

from synctool.application.interfaces import (
    PasswordHasher,
    SessionTokenCodec,
    UnitOfWorkFactory,
)
from synctool.domain.entities import AdminAccount
from synctool.domain.exceptions import (
    EntityNotFoundError,
    SessionInvalidatedError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Issues, verifies and revokes admin session tokens."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        token_codec: SessionTokenCodec,
        password_hasher: PasswordHasher,
    ):
        self._uow_factory = uow_factory
        self._codec = token_codec
        self._hasher = password_hasher

    async def login(self, username: str, password: str) -> tuple[AdminAccount, str]:
        """Check credentials and open a new session.

        Returns:
            The admin and the freshly issued session token.

        Raises:
            UnauthenticatedError: unknown username or wrong password.
        """
        async with self._uow_factory() as uow:
            admin = await uow.admins.get_by_username(username)
            if admin is None or not self._hasher.verify(password, admin.password_hash):
                logger.warning("Failed admin login for username '%s'", username)
                raise UnauthenticatedError("Invalid username or password")

            token = self._codec.encode(admin.id)
            await uow.admins.set_access_token(admin.id, token)
            admin.access_token = token

        logger.info("Admin %s logged in", admin.id)
        return admin, token

    async def logout(self, admin_id: int) -> None:
        async with self._uow_factory() as uow:
            await uow.admins.set_access_token(admin_id, None)
        logger.info("Admin %s logged out", admin_id)

    async def verify_session(self, token: str | None) -> int:
        """Return the admin id behind a session token.

        Raises:
            UnauthenticatedError: no token, or it fails signature/expiry checks.
            SessionInvalidatedError: the token is not the admin's current one.
        """
        if not token:
            raise UnauthenticatedError("Not authenticated")

        admin_id = self._codec.decode(token)

        async with self._uow_factory() as uow:
            admin = await uow.admins.get_by_id(admin_id)

        if admin is None or not admin.access_token or admin.access_token != token:
            logger.info("Rejected revoked session for admin %s", admin_id)
            raise SessionInvalidatedError()
        return admin_id

    async def get_admin(self, admin_id: int) -> AdminAccount:
        async with self._uow_factory() as uow:
            admin = await uow.admins.get_by_id(admin_id)
        if admin is None:
            raise EntityNotFoundError("AdminAccount", admin_id)
        return admin

    async def ensure_bootstrap_admin(self, username: str, password: str) -> bool:
        """Create the configured admin when it does not exist yet.

        Returns True if an account was created. Safe to call on every startup.
        """
        if not username or not password:
            return False

        async with self._uow_factory() as uow:
            if await uow.admins.get_by_username(username) is not None:
                logger.debug("Bootstrap admin '%s' already exists", username)
                return False
            await uow.admins.create(
                AdminAccount(username=username, password_hash=self._hasher.hash(password))
            )

        logger.info("Seeded bootstrap admin '%s'", username)
        return True
