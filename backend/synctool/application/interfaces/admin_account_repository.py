"""Abstract repository interface for administrator accounts."""

from abc import ABC, abstractmethod

from synctool.domain.entities import AdminAccount


class AdminAccountRepository(ABC):
    """Port for admin persistence."""

    @abstractmethod
    async def get_by_id(self, admin_id: int) -> AdminAccount | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> AdminAccount | None:
        ...

    @abstractmethod
    async def create(self, admin: AdminAccount) -> AdminAccount:
        ...

    @abstractmethod
    async def set_access_token(self, admin_id: int, access_token: str | None) -> bool:
        """Store (or clear) the admin's current session token.

        Returns False when the admin does not exist.
        """
        ...
