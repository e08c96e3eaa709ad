"""SQLAlchemy-backed unit of work: one AsyncSession, one transaction."""

from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from synctool.application.interfaces import UnitOfWork
from synctool.infrastructure.database.repositories import (
    SQLAlchemyAdminAccountRepository,
    SQLAlchemySyncClientRepository,
    SQLAlchemySyncDataRepository,
    SQLAlchemySyncLogRepository,
)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Opens a session on enter; commits or rolls back and closes on exit.

    Cancellation of the surrounding task counts as a failure, so an
    abandoned request never leaves its transaction open.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self._session = self._session_factory()
        self.clients = SQLAlchemySyncClientRepository(self._session)
        self.sync_data = SQLAlchemySyncDataRepository(self._session)
        self.sync_logs = SQLAlchemySyncLogRepository(self._session)
        self.admins = SQLAlchemyAdminAccountRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
