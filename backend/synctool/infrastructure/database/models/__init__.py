from .admin_account import AdminAccountModel
from .sync_client import SyncClientModel
from .sync_data import CredentialRowModel, MasterRowModel
from .sync_log import SyncLogModel

__all__ = [
    "AdminAccountModel",
    "SyncClientModel",
    "CredentialRowModel",
    "MasterRowModel",
    "SyncLogModel",
]
