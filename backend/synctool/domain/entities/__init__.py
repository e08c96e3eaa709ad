from .admin_account import AdminAccount
from .sync_client import ClientConfig, SyncClient
from .sync_log import SyncLogEntry
from .sync_rows import (
    ClassifiedRow,
    CredentialRow,
    MasterRow,
    RowFailure,
    SkippedRow,
    SyncOutcome,
    SyncStatus,
)

__all__ = [
    "AdminAccount",
    "ClientConfig",
    "SyncClient",
    "SyncLogEntry",
    "ClassifiedRow",
    "CredentialRow",
    "MasterRow",
    "RowFailure",
    "SkippedRow",
    "SyncOutcome",
    "SyncStatus",
]
