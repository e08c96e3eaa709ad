"""Concrete repository for the destination tables backed by SQLAlchemy."""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from synctool.application.interfaces import SyncDataRepository
from synctool.domain.entities import CredentialRow, MasterRow
from synctool.domain.exceptions import RowWriteError
from synctool.infrastructure.database.base import Base
from synctool.infrastructure.database.models import CredentialRowModel, MasterRowModel

logger = logging.getLogger(__name__)


class SQLAlchemySyncDataRepository(SyncDataRepository):
    """Implements the SyncDataRepository port.

    Each row is flushed inside its own SAVEPOINT. Constraint and value errors
    roll back that savepoint only and surface as RowWriteError; any other
    database error propagates and fails the whole transaction.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def delete_for_client(self, client_id: str) -> int:
        removed = 0
        for model in (CredentialRowModel, MasterRowModel):
            result = await self._session.execute(
                delete(model).where(model.client_id == client_id)
            )
            removed += result.rowcount or 0
        return removed

    async def add_credential_row(self, client_id: str, row: CredentialRow) -> None:
        await self._insert(
            CredentialRowModel,
            {
                CredentialRowModel.client_id: client_id,
                CredentialRowModel.id: row.user_id,
                CredentialRowModel.password: row.password,
            },
        )

    async def add_master_row(self, client_id: str, row: MasterRow) -> None:
        await self._insert(
            MasterRowModel,
            {
                MasterRowModel.client_id: client_id,
                MasterRowModel.code: row.code,
                MasterRowModel.name: row.name,
                MasterRowModel.address: row.address,
                MasterRowModel.place: row.place,
                MasterRowModel.super_code: row.super_code,
            },
        )

    async def _insert(self, model: type[Base], values: dict) -> None:
        # Core INSERT: duplicates must fail in the database, not in the identity map.
        try:
            async with self._session.begin_nested():
                await self._session.execute(insert(model).values(values))
        except IntegrityError as exc:
            logger.debug("Insert into %s violated a constraint: %s", model.__tablename__, exc.orig)
            raise RowWriteError("Row could not be stored: constraint violation") from exc
        except DataError as exc:
            logger.debug("Insert into %s rejected a value: %s", model.__tablename__, exc.orig)
            raise RowWriteError("Row could not be stored: value rejected by the database") from exc

    async def list_credential_rows(self, client_id: str) -> list[CredentialRow]:
        stmt = (
            select(CredentialRowModel)
            .where(CredentialRowModel.client_id == client_id)
            .order_by(CredentialRowModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            CredentialRow(user_id=model.id, password=model.password)
            for model in result.scalars().all()
        ]

    async def list_master_rows(self, client_id: str) -> list[MasterRow]:
        stmt = (
            select(MasterRowModel)
            .where(MasterRowModel.client_id == client_id)
            .order_by(MasterRowModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            MasterRow(
                code=model.code,
                name=model.name,
                address=model.address,
                place=model.place,
                super_code=model.super_code,
            )
            for model in result.scalars().all()
        ]
