"""Unit tests for admin sessions — login, logout and the session verifier."""

import pytest

from synctool.application.services import AdminAuthService
from synctool.domain.entities import AdminAccount
from synctool.domain.exceptions import (
    EntityNotFoundError,
    SessionInvalidatedError,
    UnauthenticatedError,
)
from synctool.infrastructure.security.passwords import BcryptPasswordHasher
from synctool.infrastructure.security.session_tokens import JoseSessionTokenCodec

SECRET = "unit-test-secret"


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def codec():
    return JoseSessionTokenCodec(SECRET, expire_minutes=5)


@pytest.fixture
def service(uow_factory, codec, hasher):
    return AdminAuthService(uow_factory, codec, hasher)


@pytest.fixture
def admin(store, hasher):
    account = AdminAccount(username="root", password_hash=hasher.hash("s3cret"), id=store.next_id())
    store.admins[account.id] = account
    return account


# ── Codec and hasher ─────────────────────────────────────────────────


def test_token_round_trip_carries_admin_id(codec):
    assert codec.decode(codec.encode(7)) == 7


def test_expired_token_is_rejected():
    expired = JoseSessionTokenCodec(SECRET, expire_minutes=-1)

    with pytest.raises(UnauthenticatedError, match="Invalid or expired token"):
        expired.decode(expired.encode(7))


def test_token_signed_with_another_secret_is_rejected(codec):
    foreign = JoseSessionTokenCodec("someone-else").encode(7)

    with pytest.raises(UnauthenticatedError):
        codec.decode(foreign)


def test_garbage_token_is_rejected(codec):
    with pytest.raises(UnauthenticatedError):
        codec.decode("not-a-jwt")


def test_password_hash_verifies(hasher):
    hashed = hasher.hash("s3cret")

    assert hashed != "s3cret"
    assert hasher.verify("s3cret", hashed)
    assert not hasher.verify("wrong", hashed)
    assert not hasher.verify("s3cret", "not-a-bcrypt-hash")


# ── Login / logout ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_login_issues_and_stores_token(service, store, admin, codec):
    account, token = await service.login("root", "s3cret")

    assert account.id == admin.id
    assert codec.decode(token) == admin.id
    assert store.admins[admin.id].access_token == token


@pytest.mark.asyncio
@pytest.mark.parametrize("username, password", [("root", "wrong"), ("nobody", "s3cret")])
async def test_login_rejects_bad_credentials(service, store, admin, username, password):
    with pytest.raises(UnauthenticatedError, match="Invalid username or password"):
        await service.login(username, password)

    assert store.admins[admin.id].access_token is None


@pytest.mark.asyncio
async def test_verify_session_accepts_current_token(service, admin):
    _, token = await service.login("root", "s3cret")

    assert await service.verify_session(token) == admin.id


@pytest.mark.asyncio
async def test_logout_revokes_the_token(service, admin):
    _, token = await service.login("root", "s3cret")

    await service.logout(admin.id)

    with pytest.raises(SessionInvalidatedError):
        await service.verify_session(token)


@pytest.mark.asyncio
async def test_token_that_is_not_the_stored_one_is_invalidated(service, store, admin, codec):
    await service.login("root", "s3cret")
    store.admins[admin.id].access_token = "some-other-token"

    with pytest.raises(SessionInvalidatedError):
        await service.verify_session(codec.encode(admin.id))


@pytest.mark.asyncio
async def test_token_for_missing_admin_is_invalidated(service, codec):
    with pytest.raises(SessionInvalidatedError):
        await service.verify_session(codec.encode(999))


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, ""])
async def test_missing_token_is_unauthenticated(service, token):
    with pytest.raises(UnauthenticatedError, match="Not authenticated"):
        await service.verify_session(token)


# ── Admin accounts ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_admin(service, admin):
    assert (await service.get_admin(admin.id)).username == "root"

    with pytest.raises(EntityNotFoundError):
        await service.get_admin(999)


@pytest.mark.asyncio
async def test_bootstrap_admin_is_created_once(service, store, hasher):
    assert await service.ensure_bootstrap_admin("boss", "pw") is True
    assert await service.ensure_bootstrap_admin("boss", "pw") is False

    admins = list(store.admins.values())
    assert [a.username for a in admins] == ["boss"]
    assert hasher.verify("pw", admins[0].password_hash)


@pytest.mark.asyncio
async def test_bootstrap_admin_needs_credentials(service, store):
    assert await service.ensure_bootstrap_admin("", "") is False
    assert store.admins == {}
