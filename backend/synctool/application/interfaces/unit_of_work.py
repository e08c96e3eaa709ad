"""Abstract unit of work — one storage session and one transaction."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType

from .admin_account_repository import AdminAccountRepository
from .sync_client_repository import SyncClientRepository
from .sync_data_repository import SyncDataRepository
from .sync_log_repository import SyncLogRepository


class UnitOfWork(ABC):
    """Groups repository calls into a single atomic transaction.

    Usage:
        async with uow_factory() as uow:
            client = await uow.clients.get_by_client_id("1234567890")
            ...
        # committed here; rolled back if the block raised or was cancelled
    """

    clients: SyncClientRepository
    sync_data: SyncDataRepository
    sync_logs: SyncLogRepository
    admins: AdminAccountRepository

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...


UnitOfWorkFactory = Callable[[], UnitOfWork]
