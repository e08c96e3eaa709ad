"""Destination rows a sync batch can produce, plus the per-call outcome."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SyncStatus(str, Enum):
    SUCCESS = "SUCCESS"
    PARTIAL = "PARTIAL"
    FAILED = "FAILED"


@dataclass(frozen=True)
class CredentialRow:
    """A row of the client's ``acc_users`` table."""

    user_id: str
    password: str


@dataclass(frozen=True)
class MasterRow:
    """A row of the client's ``acc_master`` table; ``code`` is never empty."""

    code: str
    name: str | None = None
    address: str | None = None
    place: str | None = None
    super_code: str | None = None


@dataclass(frozen=True)
class SkippedRow:
    """An input row that matched neither kind (no credential pair, no code)."""

    reason: str


ClassifiedRow = CredentialRow | MasterRow | SkippedRow


@dataclass
class RowFailure:
    """An input row that was classified but could not be stored."""

    row: dict[str, Any]
    error: str


@dataclass
class SyncOutcome:
    """Result of one sync call, built after the transaction has committed."""

    client_id: str
    record_count: int = 0
    skipped_count: int = 0
    errors: list[RowFailure] = field(default_factory=list)

    @property
    def status(self) -> SyncStatus:
        return SyncStatus.PARTIAL if self.errors else SyncStatus.SUCCESS

    @property
    def log_message(self) -> str:
        """Message written to the audit log."""
        if self.errors:
            return f"Sync completed with {len(self.errors)} error(s)"
        return "Sync completed successfully"

    @property
    def message(self) -> str:
        """Message returned to the client."""
        if self.errors:
            return (
                f"Synced {self.record_count} records with "
                f"{len(self.errors)} error(s)"
            )
        return f"Successfully synced {self.record_count} records"
