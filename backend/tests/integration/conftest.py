"""Integration fixtures — real SQLAlchemy stack on in-memory SQLite.

One shared connection (StaticPool) keeps the in-memory database alive for
the whole test; savepoints are enabled the same way as in production.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from synctool.config import get_settings
from synctool.domain.entities import AdminAccount
from synctool.infrastructure.database import Base
from synctool.infrastructure.database.session import enable_sqlite_savepoints
from synctool.infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork
from synctool.infrastructure.dependencies import get_uow_factory
from synctool.infrastructure.security.passwords import BcryptPasswordHasher
from synctool.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-pass"

CLIENT_FIELDS = {
    "dbName": "ACC_2024",
    "dbUser": "acc",
    "dbPassword": "secret",
    "clientName": "Acme Traders",
    "address": "1 Main St",
    "phoneNumber": "555-0100",
    "username": "acme",
    "password": "acme-pass",
}


@pytest.fixture
def admin_credentials() -> dict:
    return {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}


@pytest.fixture
def client_fields() -> dict:
    return dict(CLIENT_FIELDS)


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_savepoints(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SQLAlchemyUnitOfWork(session_factory)


@pytest_asyncio.fixture
async def http(uow_factory):
    """Unauthenticated client against the app, with one admin account seeded."""
    async with uow_factory() as uow:
        await uow.admins.create(
            AdminAccount(
                username=ADMIN_USERNAME,
                password_hash=BcryptPasswordHasher(rounds=4).hash(ADMIN_PASSWORD),
            )
        )

    app.dependency_overrides[get_uow_factory] = lambda: uow_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_http(http, admin_credentials):
    """Client carrying a valid admin session token."""
    response = await http.post("/api/admin/login", json=admin_credentials)
    assert response.status_code == 200
    token = response.cookies[get_settings().session_cookie_name]
    http.headers["Authorization"] = f"Bearer {token}"
    return http


@pytest_asyncio.fixture
async def registered_client(admin_http, client_fields) -> dict:
    """A registered sync client: its id and access token."""
    response = await admin_http.post("/api/admin/add-users", json=client_fields)
    assert response.status_code == 201
    body = response.json()
    return {"clientId": body["clientId"], "accessToken": body["accessToken"]}
