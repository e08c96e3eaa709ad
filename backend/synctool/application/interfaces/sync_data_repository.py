"""Abstract repository interface for a client's destination tables."""

from abc import ABC, abstractmethod

from synctool.domain.entities import CredentialRow, MasterRow


class SyncDataRepository(ABC):
    """Port — the two destination tables (``acc_users`` and ``acc_master``).

    ``add_*`` methods isolate each row: a storage failure raises
    ``RowWriteError`` and leaves the surrounding transaction usable.
    """

    @abstractmethod
    async def delete_for_client(self, client_id: str) -> int:
        """Remove every destination row owned by the client.

        Returns:
            Number of rows removed across both tables.
        """
        ...

    @abstractmethod
    async def add_credential_row(self, client_id: str, row: CredentialRow) -> None:
        ...

    @abstractmethod
    async def add_master_row(self, client_id: str, row: MasterRow) -> None:
        ...

    @abstractmethod
    async def list_credential_rows(self, client_id: str) -> list[CredentialRow]:
        ...

    @abstractmethod
    async def list_master_rows(self, client_id: str) -> list[MasterRow]:
        ...
