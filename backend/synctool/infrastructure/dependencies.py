"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends

from synctool.application.interfaces import UnitOfWorkFactory
from synctool.application.services import AdminAuthService, SyncClientService, SyncService
from synctool.config import get_settings
from synctool.infrastructure.database.session import async_session_factory
from synctool.infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork
from synctool.infrastructure.security.passwords import BcryptPasswordHasher
from synctool.infrastructure.security.session_tokens import JoseSessionTokenCodec


def get_uow_factory() -> UnitOfWorkFactory:
    """Storage capability handed to every service; overridden in tests."""
    return lambda: SQLAlchemyUnitOfWork(async_session_factory)


def build_admin_auth_service(uow_factory: UnitOfWorkFactory) -> AdminAuthService:
    settings = get_settings()
    codec = JoseSessionTokenCodec(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.session_expire_minutes,
    )
    return AdminAuthService(uow_factory, codec, BcryptPasswordHasher())


async def get_sync_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> AsyncGenerator[SyncService, None]:
    """Provides the sync transaction engine."""
    yield SyncService(uow_factory)


async def get_sync_client_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> AsyncGenerator[SyncClientService, None]:
    """Provides a SyncClientService configured with the public API URL."""
    yield SyncClientService(uow_factory, api_url=get_settings().api_url)


async def get_admin_auth_service(
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
) -> AsyncGenerator[AdminAuthService, None]:
    """Provides admin login/logout and the session verifier."""
    yield build_admin_auth_service(uow_factory)
