"""Domain entity — a registered sync client and its destination database credentials."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class SyncClient:
    """A remote installation allowed to push snapshots into its own tables.

    ``client_id`` is the externally shared identifier; ``access_token`` is the
    opaque credential the installation presents on every sync call and is
    rotated on every update.
    """

    client_id: str
    db_name: str
    db_user: str
    db_password: str
    access_token: str
    client_name: str
    address: str
    phone_number: str
    username: str
    password: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def update(
        self,
        *,
        db_name: str,
        db_user: str,
        db_password: str,
        client_name: str,
        address: str,
        phone_number: str,
        username: str,
        password: str,
        access_token: str,
    ) -> None:
        """Replace every mutable field and refresh the updated_at timestamp."""
        self.db_name = db_name
        self.db_user = db_user
        self.db_password = db_password
        self.client_name = client_name
        self.address = address
        self.phone_number = phone_number
        self.username = username
        self.password = password
        self.access_token = access_token
        self.updated_at = datetime.now(timezone.utc)


@dataclass(frozen=True)
class ClientConfig:
    """Minimal bundle a client installation needs to configure itself."""

    client_id: str
    db_name: str
    access_token: str
    api_url: str
