"""Abstract repository interface (port) for SyncClient persistence."""

from abc import ABC, abstractmethod

from synctool.domain.entities import SyncClient


class SyncClientRepository(ABC):
    """Port for the credential store — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_client_id(self, client_id: str) -> SyncClient | None:
        """Retrieve a client by its externally shared identifier."""
        ...

    @abstractmethod
    async def get_by_credentials(
        self, client_id: str, access_token: str, *, for_update: bool = False
    ) -> SyncClient | None:
        """Retrieve a client only if both identifier and token match.

        With ``for_update`` the client row stays locked until the unit of work
        ends, so concurrent syncs for one client run one after the other.
        """
        ...

    @abstractmethod
    async def exists(self, client_id: str) -> bool:
        ...

    @abstractmethod
    async def get_all(self) -> list[SyncClient]:
        """Retrieve all clients, newest first."""
        ...

    @abstractmethod
    async def create(self, client: SyncClient) -> SyncClient:
        """Persist a new client and return it."""
        ...

    @abstractmethod
    async def update(self, client: SyncClient) -> SyncClient:
        """Update an existing client."""
        ...

    @abstractmethod
    async def delete(self, client_id: str) -> bool:
        """Delete a client row. Returns True if deleted, False if not found."""
        ...
