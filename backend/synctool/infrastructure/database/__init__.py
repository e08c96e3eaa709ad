from .base import Base
from .session import engine, async_session_factory
from .models import (
    AdminAccountModel,
    CredentialRowModel,
    MasterRowModel,
    SyncClientModel,
    SyncLogModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "AdminAccountModel",
    "CredentialRowModel",
    "MasterRowModel",
    "SyncClientModel",
    "SyncLogModel",
]
