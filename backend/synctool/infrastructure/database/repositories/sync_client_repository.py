"""Concrete repository implementation for SyncClient backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from synctool.application.interfaces import SyncClientRepository
from synctool.domain.entities import SyncClient
from synctool.infrastructure.database.models import SyncClientModel


class SQLAlchemySyncClientRepository(SyncClientRepository):
    """Implements the SyncClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SyncClientModel) -> SyncClient:
        """Map ORM model → domain entity."""
        return SyncClient(
            id=model.id,
            client_id=model.client_id,
            db_name=model.db_name,
            db_user=model.db_user,
            db_password=model.db_password,
            access_token=model.access_token,
            client_name=model.client_name or "",
            address=model.address or "",
            phone_number=model.phone_number or "",
            username=model.username or "",
            password=model.password or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: SyncClient) -> SyncClientModel:
        """Map domain entity → ORM model (for creation)."""
        return SyncClientModel(
            client_id=entity.client_id,
            db_name=entity.db_name,
            db_user=entity.db_user,
            db_password=entity.db_password,
            access_token=entity.access_token,
            client_name=entity.client_name,
            address=entity.address,
            phone_number=entity.phone_number,
            username=entity.username,
            password=entity.password,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _get_model(self, client_id: str) -> SyncClientModel | None:
        stmt = select(SyncClientModel).where(SyncClientModel.client_id == client_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_client_id(self, client_id: str) -> SyncClient | None:
        model = await self._get_model(client_id)
        return self._to_entity(model) if model else None

    async def get_by_credentials(
        self, client_id: str, access_token: str, *, for_update: bool = False
    ) -> SyncClient | None:
        stmt = select(SyncClientModel).where(
            SyncClientModel.client_id == client_id,
            SyncClientModel.access_token == access_token,
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def exists(self, client_id: str) -> bool:
        stmt = select(SyncClientModel.id).where(SyncClientModel.client_id == client_id)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def get_all(self) -> list[SyncClient]:
        stmt = select(SyncClientModel).order_by(
            SyncClientModel.created_at.desc(), SyncClientModel.id.desc()
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, client: SyncClient) -> SyncClient:
        model = self._to_model(client)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, client: SyncClient) -> SyncClient:
        model = await self._get_model(client.client_id)
        if model is None:
            raise ValueError(f"SyncClient {client.client_id} not found in database")
        model.db_name = client.db_name
        model.db_user = client.db_user
        model.db_password = client.db_password
        model.access_token = client.access_token
        model.client_name = client.client_name
        model.address = client.address
        model.phone_number = client.phone_number
        model.username = client.username
        model.password = client.password
        model.updated_at = client.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, client_id: str) -> bool:
        stmt = delete(SyncClientModel).where(SyncClientModel.client_id == client_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0
