"""In-memory unit of work for service tests.

``InMemoryStore`` plays the database: it enforces the same uniqueness rules
as the real tables and is restored from a snapshot when a unit of work rolls
back, so tests can observe atomicity without SQLAlchemy.
"""

import copy
from dataclasses import replace

import pytest

from synctool.application.interfaces import (
    AdminAccountRepository,
    SyncClientRepository,
    SyncDataRepository,
    SyncLogRepository,
    UnitOfWork,
)
from synctool.domain.entities import (
    AdminAccount,
    CredentialRow,
    MasterRow,
    SyncClient,
    SyncLogEntry,
)
from synctool.domain.exceptions import RowWriteError


class InMemoryStore:
    def __init__(self):
        self.clients: dict[str, SyncClient] = {}
        self.credential_rows: dict[str, list[CredentialRow]] = {}
        self.master_rows: dict[str, list[MasterRow]] = {}
        self.logs: list[SyncLogEntry] = []
        self.admins: dict[int, AdminAccount] = {}
        self._next_id = 1

        # Fault injection
        self.reject_codes: set[str] = set()
        self.explode_on_code: str | None = None
        self.fail_log_writes = False
        self.locked_lookups: list[str] = []
        self.commits = 0
        self.rollbacks = 0

    def next_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def snapshot(self) -> dict:
        return copy.deepcopy(
            {
                "clients": self.clients,
                "credential_rows": self.credential_rows,
                "master_rows": self.master_rows,
                "logs": self.logs,
                "admins": self.admins,
            }
        )

    def restore(self, snapshot: dict) -> None:
        for name, value in snapshot.items():
            setattr(self, name, value)

    def add_client(self, client_id: str = "1234567890", access_token: str = "tok") -> SyncClient:
        client = SyncClient(
            client_id=client_id,
            db_name="ACC_DB",
            db_user="acc",
            db_password="secret",
            access_token=access_token,
            client_name="Acme Traders",
            address="1 Main St",
            phone_number="555-0100",
            username="acme",
            password="acme-pass",
            id=self.next_id(),
        )
        self.clients[client_id] = client
        return client


class FakeSyncClientRepository(SyncClientRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_client_id(self, client_id):
        client = self._store.clients.get(client_id)
        return replace(client) if client else None

    async def get_by_credentials(self, client_id, access_token, *, for_update=False):
        if for_update:
            self._store.locked_lookups.append(client_id)
        client = self._store.clients.get(client_id)
        if client is None or client.access_token != access_token:
            return None
        return replace(client)

    async def exists(self, client_id):
        return client_id in self._store.clients

    async def get_all(self):
        return sorted(
            (replace(c) for c in self._store.clients.values()),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )

    async def create(self, client):
        client.id = self._store.next_id()
        self._store.clients[client.client_id] = replace(client)
        return client

    async def update(self, client):
        self._store.clients[client.client_id] = replace(client)
        return client

    async def delete(self, client_id):
        return self._store.clients.pop(client_id, None) is not None


class FakeSyncDataRepository(SyncDataRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def delete_for_client(self, client_id):
        removed = len(self._store.credential_rows.pop(client_id, []))
        removed += len(self._store.master_rows.pop(client_id, []))
        return removed

    async def add_credential_row(self, client_id, row):
        rows = self._store.credential_rows.setdefault(client_id, [])
        if any(r.user_id == row.user_id for r in rows):
            raise RowWriteError("Row could not be stored: constraint violation")
        rows.append(row)

    async def add_master_row(self, client_id, row):
        if row.code == self._store.explode_on_code:
            raise RuntimeError("storage went away")
        if row.code in self._store.reject_codes:
            raise RowWriteError("Row could not be stored: value rejected by the database")
        rows = self._store.master_rows.setdefault(client_id, [])
        if any(r.code == row.code for r in rows):
            raise RowWriteError("Row could not be stored: constraint violation")
        rows.append(row)

    async def list_credential_rows(self, client_id):
        return list(self._store.credential_rows.get(client_id, []))

    async def list_master_rows(self, client_id):
        return list(self._store.master_rows.get(client_id, []))


class FakeSyncLogRepository(SyncLogRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def create(self, entry):
        if self._store.fail_log_writes:
            raise RuntimeError("log table unavailable")
        entry.id = self._store.next_id()
        self._store.logs.append(replace(entry))
        return entry

    async def get_recent(self, *, limit=100):
        entries = []
        for entry in reversed(self._store.logs):
            client = self._store.clients.get(entry.client_id)
            entries.append(replace(entry, db_name=client.db_name if client else None))
        return entries[:limit]

    async def get_for_client(self, client_id):
        return [replace(e) for e in self._store.logs if e.client_id == client_id]

    async def delete_for_client(self, client_id):
        before = len(self._store.logs)
        self._store.logs = [e for e in self._store.logs if e.client_id != client_id]
        return before - len(self._store.logs)


class FakeAdminAccountRepository(AdminAccountRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, admin_id):
        admin = self._store.admins.get(admin_id)
        return replace(admin) if admin else None

    async def get_by_username(self, username):
        for admin in self._store.admins.values():
            if admin.username == username:
                return replace(admin)
        return None

    async def create(self, admin):
        admin.id = self._store.next_id()
        self._store.admins[admin.id] = replace(admin)
        return admin

    async def set_access_token(self, admin_id, access_token):
        admin = self._store.admins.get(admin_id)
        if admin is None:
            return False
        admin.access_token = access_token
        return True


class FakeUnitOfWork(UnitOfWork):
    def __init__(self, store: InMemoryStore):
        self._store = store
        self.clients = FakeSyncClientRepository(store)
        self.sync_data = FakeSyncDataRepository(store)
        self.sync_logs = FakeSyncLogRepository(store)
        self.admins = FakeAdminAccountRepository(store)
        self._snapshot: dict | None = None

    async def __aenter__(self):
        self._snapshot = self._store.snapshot()
        return self

    async def commit(self):
        self._store.commits += 1

    async def rollback(self):
        self._store.rollbacks += 1
        self._store.restore(self._snapshot)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def uow_factory(store):
    return lambda: FakeUnitOfWork(store)
