"""Domain entity for administrator accounts."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class AdminAccount:
    """An administrator who manages sync clients.

    ``access_token`` holds the one session token currently honoured for this
    admin; clearing it revokes the session before the token expires.
    """

    username: str
    password_hash: str
    access_token: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
