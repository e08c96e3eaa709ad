"""Abstract repository interface for the sync audit log."""

from abc import ABC, abstractmethod

from synctool.domain.entities import SyncLogEntry


class SyncLogRepository(ABC):
    """Port — defines persistence operations for sync log entries."""

    @abstractmethod
    async def create(self, entry: SyncLogEntry) -> SyncLogEntry:
        """Persist a new log entry.

        Returns:
            The created entry with its assigned ID.
        """
        ...

    @abstractmethod
    async def get_recent(self, *, limit: int = 100) -> list[SyncLogEntry]:
        """Retrieve log entries with their client's db name, most recent first."""
        ...

    @abstractmethod
    async def get_for_client(self, client_id: str) -> list[SyncLogEntry]:
        ...

    @abstractmethod
    async def delete_for_client(self, client_id: str) -> int:
        ...
