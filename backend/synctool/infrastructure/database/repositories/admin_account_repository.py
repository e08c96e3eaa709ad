"""Concrete repository for admin accounts backed by SQLAlchemy."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from synctool.application.interfaces import AdminAccountRepository
from synctool.domain.entities import AdminAccount
from synctool.infrastructure.database.models import AdminAccountModel


class SQLAlchemyAdminAccountRepository(AdminAccountRepository):
    """Implements the AdminAccountRepository port using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AdminAccountModel) -> AdminAccount:
        return AdminAccount(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            access_token=model.access_token,
            created_at=model.created_at,
        )

    async def get_by_id(self, admin_id: int) -> AdminAccount | None:
        model = await self._session.get(AdminAccountModel, admin_id)
        return self._to_entity(model) if model else None

    async def get_by_username(self, username: str) -> AdminAccount | None:
        stmt = select(AdminAccountModel).where(AdminAccountModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, admin: AdminAccount) -> AdminAccount:
        model = AdminAccountModel(
            username=admin.username,
            password_hash=admin.password_hash,
            access_token=admin.access_token,
            created_at=admin.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def set_access_token(self, admin_id: int, access_token: str | None) -> bool:
        result = await self._session.execute(
            update(AdminAccountModel)
            .where(AdminAccountModel.id == admin_id)
            .values(access_token=access_token)
        )
        return result.rowcount > 0
