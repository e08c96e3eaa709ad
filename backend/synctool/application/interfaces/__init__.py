from .admin_account_repository import AdminAccountRepository
from .security import PasswordHasher, SessionTokenCodec
from .sync_client_repository import SyncClientRepository
from .sync_data_repository import SyncDataRepository
from .sync_log_repository import SyncLogRepository
from .unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AdminAccountRepository",
    "PasswordHasher",
    "SessionTokenCodec",
    "SyncClientRepository",
    "SyncDataRepository",
    "SyncLogRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
