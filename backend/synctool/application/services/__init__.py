from .admin_auth_service import AdminAuthService
from .row_classifier import classify_row
from .sync_client_service import SyncClientService
from .sync_service import SyncService

__all__ = [
    "AdminAuthService",
    "classify_row",
    "SyncClientService",
    "SyncService",
]
