from .admin_account_repository import SQLAlchemyAdminAccountRepository
from .sync_client_repository import SQLAlchemySyncClientRepository
from .sync_data_repository import SQLAlchemySyncDataRepository
from .sync_log_repository import SQLAlchemySyncLogRepository

__all__ = [
    "SQLAlchemyAdminAccountRepository",
    "SQLAlchemySyncClientRepository",
    "SQLAlchemySyncDataRepository",
    "SQLAlchemySyncLogRepository",
]
