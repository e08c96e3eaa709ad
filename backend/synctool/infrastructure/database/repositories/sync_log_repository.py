"""Concrete repository for sync log entries backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from synctool.application.interfaces import SyncLogRepository
from synctool.domain.entities import SyncLogEntry
from synctool.infrastructure.database.models import SyncClientModel, SyncLogModel


class SQLAlchemySyncLogRepository(SyncLogRepository):
    """Implements the SyncLogRepository port using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SyncLogModel, db_name: str | None = None) -> SyncLogEntry:
        """Map ORM model → domain entity."""
        return SyncLogEntry(
            id=model.id,
            client_id=model.client_id,
            status=model.status,
            records_synced=model.records_synced,
            message=model.message or "",
            sync_date=model.sync_date,
            db_name=db_name,
        )

    async def create(self, entry: SyncLogEntry) -> SyncLogEntry:
        model = SyncLogModel(
            client_id=entry.client_id,
            status=entry.status,
            records_synced=entry.records_synced,
            message=entry.message,
            sync_date=entry.sync_date,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get_recent(self, *, limit: int = 100) -> list[SyncLogEntry]:
        stmt = (
            select(SyncLogModel, SyncClientModel.db_name)
            .join(SyncClientModel, SyncLogModel.client_id == SyncClientModel.client_id)
            .order_by(SyncLogModel.sync_date.desc(), SyncLogModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model, db_name) for model, db_name in result.all()]

    async def get_for_client(self, client_id: str) -> list[SyncLogEntry]:
        stmt = (
            select(SyncLogModel)
            .where(SyncLogModel.client_id == client_id)
            .order_by(SyncLogModel.sync_date.desc(), SyncLogModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def delete_for_client(self, client_id: str) -> int:
        result = await self._session.execute(
            delete(SyncLogModel).where(SyncLogModel.client_id == client_id)
        )
        return result.rowcount or 0
