"""Domain entity for the sync audit log."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class SyncLogEntry:
    """One synchronization attempt reported by or performed for a client.

    Entries are append-only; they disappear only when their client is deleted.
    """

    client_id: str
    status: str  # "SUCCESS" | "PARTIAL" | "FAILED" | client-reported value
    records_synced: int = 0
    message: str = ""
    id: int | None = None
    sync_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    db_name: str | None = None  # Joined from the owning client when listing
