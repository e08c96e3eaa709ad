from .admin import AdminSchema, AdminSessionResponse, LoginRequest, LogoutResponse
from .sync import (
    RowErrorSchema,
    SyncDataRequest,
    SyncDataResponse,
    SyncLogRequest,
    SyncLogResponse,
)
from .sync_client import (
    ClientConfigResponse,
    ClientConfigSchema,
    MessageResponse,
    SyncClientCreatedResponse,
    SyncClientFields,
    SyncClientListResponse,
    SyncClientSummary,
    SyncClientUpdatedResponse,
    SyncLogListResponse,
    SyncLogSchema,
)

__all__ = [
    "AdminSchema",
    "AdminSessionResponse",
    "LoginRequest",
    "LogoutResponse",
    "RowErrorSchema",
    "SyncDataRequest",
    "SyncDataResponse",
    "SyncLogRequest",
    "SyncLogResponse",
    "ClientConfigResponse",
    "ClientConfigSchema",
    "MessageResponse",
    "SyncClientCreatedResponse",
    "SyncClientFields",
    "SyncClientListResponse",
    "SyncClientSummary",
    "SyncClientUpdatedResponse",
    "SyncLogListResponse",
    "SyncLogSchema",
]
