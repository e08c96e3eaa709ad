"""Application service (use case) for the sync client registry."""

import logging
import secrets
from collections.abc import Callable

from synctool.application.interfaces import UnitOfWorkFactory
from synctool.application.schemas.sync_client import SyncClientFields
from synctool.domain.entities import ClientConfig, SyncClient, SyncLogEntry
from synctool.domain.exceptions import (
    EntityNotFoundError,
    IdentifierCollisionError,
    MissingFieldsError,
)

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = (
    "db_name",
    "db_user",
    "db_password",
    "client_name",
    "address",
    "phone_number",
    "username",
    "password",
)


def generate_client_id() -> str:
    """Random 10-digit decimal identifier (1000000000–9999999999)."""
    return str(1_000_000_000 + secrets.randbelow(9_000_000_000))


def generate_access_token() -> str:
    """256-bit random token, hex encoded (64 characters)."""
    return secrets.token_hex(32)


class SyncClientService:
    """Orchestrates client registration, rotation and removal."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        *,
        api_url: str,
        id_factory: Callable[[], str] = generate_client_id,
        token_factory: Callable[[], str] = generate_access_token,
    ):
        self._uow_factory = uow_factory
        self._api_url = api_url
        self._id_factory = id_factory
        self._token_factory = token_factory

    async def list_clients(self) -> list[SyncClient]:
        async with self._uow_factory() as uow:
            return await uow.clients.get_all()

    async def create_client(self, data: SyncClientFields) -> SyncClient:
        """Register a new client with a fresh identifier and access token.

        Raises:
            MissingFieldsError: a required field is absent or blank.
            IdentifierCollisionError: the generated id is already taken.
        """
        fields = self._require_all(data, action="create")
        client_id = self._id_factory()

        async with self._uow_factory() as uow:
            if await uow.clients.exists(client_id):
                logger.warning("Client ID collision detected: %s", client_id)
                raise IdentifierCollisionError(client_id)

            client = await uow.clients.create(
                SyncClient(client_id=client_id, access_token=self._token_factory(), **fields)
            )

        logger.info("Created sync client %s", client_id)
        return client

    async def update_client(self, client_id: str, data: SyncClientFields) -> SyncClient:
        """Replace every field of a client and rotate its access token."""
        fields = self._require_all(data, action="update", client_id=client_id)

        async with self._uow_factory() as uow:
            client = await uow.clients.get_by_client_id(client_id)
            if client is None:
                logger.warning("No client found with client ID: %s", client_id)
                raise EntityNotFoundError("SyncClient", client_id)
            client.update(access_token=self._token_factory(), **fields)
            client = await uow.clients.update(client)

        logger.info("Updated sync client %s (access token rotated)", client_id)
        return client

    async def delete_client(self, client_id: str) -> None:
        """Remove a client with its destination rows and logs, atomically."""
        logger.info("Attempting to delete sync client %s", client_id)
        async with self._uow_factory() as uow:
            removed_rows = await uow.sync_data.delete_for_client(client_id)
            removed_logs = await uow.sync_logs.delete_for_client(client_id)
            if not await uow.clients.delete(client_id):
                raise EntityNotFoundError("SyncClient", client_id)

        logger.info(
            "Deleted sync client %s (%d data rows, %d log entries)",
            client_id,
            removed_rows,
            removed_logs,
        )

    async def get_client_config(self, client_id: str) -> ClientConfig:
        async with self._uow_factory() as uow:
            client = await uow.clients.get_by_client_id(client_id)
        if client is None:
            logger.warning("No client found with client ID: %s", client_id)
            raise EntityNotFoundError("SyncClient", client_id)

        logger.info("Generated config for sync client %s", client_id)
        return ClientConfig(
            client_id=client.client_id,
            db_name=client.db_name,
            access_token=client.access_token,
            api_url=self._api_url,
        )

    async def list_logs(self, *, limit: int = 100) -> list[SyncLogEntry]:
        async with self._uow_factory() as uow:
            return await uow.sync_logs.get_recent(limit=limit)

    @staticmethod
    def _require_all(
        data: SyncClientFields, *, action: str, client_id: str | None = None
    ) -> dict[str, str]:
        """Return the required fields as given, or raise listing every gap."""
        values = {name: getattr(data, name) for name in _REQUIRED_FIELDS}
        present = {name: bool(value and value.strip()) for name, value in values.items()}
        missing = [
            SyncClientFields.model_fields[name].alias or name
            for name, ok in present.items()
            if not ok
        ]
        if missing:
            logger.warning(
                "Attempt to %s client with missing required fields (client %s): %s",
                action,
                client_id or "-",
                present,
            )
            raise MissingFieldsError(missing)
        return values
