"""Client registry endpoints — all behind the admin session verifier."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from synctool.application.schemas.sync_client import (
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
from synctool.application.services import SyncClientService
from synctool.domain.entities import SyncClient, SyncLogEntry
from synctool.domain.exceptions import (
    EntityNotFoundError,
    IdentifierCollisionError,
    MissingFieldsError,
)
from synctool.infrastructure.dependencies import get_sync_client_service
from synctool.presentation.api.dependencies import get_current_admin

router = APIRouter(
    prefix="/admin",
    tags=["Sync Clients"],
    dependencies=[Depends(get_current_admin)],
)


# ── Helpers ──────────────────────────────────────────────────────────


def _client_to_summary(client: SyncClient) -> SyncClientSummary:
    """Map a SyncClient to its admin listing (no secrets)."""
    return SyncClientSummary(
        client_id=client.client_id,
        db_name=client.db_name,
        db_user=client.db_user,
        client_name=client.client_name,
        address=client.address,
        phone_number=client.phone_number,
        username=client.username,
        password=client.password,
        created_at=client.created_at,
    )


def _log_to_schema(entry: SyncLogEntry) -> SyncLogSchema:
    return SyncLogSchema(
        id=entry.id,
        client_id=entry.client_id,
        sync_date=entry.sync_date,
        records_synced=entry.records_synced,
        status=entry.status,
        message=entry.message,
        db_name=entry.db_name,
    )


def _not_found(client_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No user found with client ID: {client_id}",
    )


# ── Registry ─────────────────────────────────────────────────────────


@router.get("/list-users", response_model=SyncClientListResponse)
async def list_users(
    service: SyncClientService = Depends(get_sync_client_service),
) -> SyncClientListResponse:
    """List every registered client, newest first."""
    clients = await service.list_clients()
    return SyncClientListResponse(users=[_client_to_summary(c) for c in clients])


@router.post(
    "/add-users",
    response_model=SyncClientCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_user(
    data: SyncClientFields,
    service: SyncClientService = Depends(get_sync_client_service),
) -> SyncClientCreatedResponse:
    """Register a client; the access token is only shown here and in its config."""
    try:
        client = await service.create_client(data)
    except MissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except IdentifierCollisionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return SyncClientCreatedResponse(
        message="User created successfully",
        client_id=client.client_id,
        access_token=client.access_token,
    )


@router.put("/update-users/{client_id}", response_model=SyncClientUpdatedResponse)
async def update_user(
    client_id: str,
    data: SyncClientFields,
    service: SyncClientService = Depends(get_sync_client_service),
) -> SyncClientUpdatedResponse:
    """Replace a client's fields; always rotates its access token."""
    try:
        client = await service.update_client(client_id, data)
    except MissingFieldsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError:
        raise _not_found(client_id)
    return SyncClientUpdatedResponse(
        message=f"User with client ID {client_id} updated successfully",
        access_token=client.access_token,
    )


@router.delete("/delete-users/{client_id}", response_model=MessageResponse)
async def delete_user(
    client_id: str,
    service: SyncClientService = Depends(get_sync_client_service),
) -> MessageResponse:
    """Delete a client together with its synced rows and logs."""
    try:
        await service.delete_client(client_id)
    except EntityNotFoundError:
        raise _not_found(client_id)
    return MessageResponse(message=f"User with client ID {client_id} deleted successfully")


@router.get("/users/{client_id}/config", response_model=ClientConfigResponse)
async def get_user_config(
    client_id: str,
    service: SyncClientService = Depends(get_sync_client_service),
) -> ClientConfigResponse:
    """Return the self-configuration bundle for a client installation."""
    try:
        config = await service.get_client_config(client_id)
    except EntityNotFoundError:
        raise _not_found(client_id)
    return ClientConfigResponse(
        config=ClientConfigSchema(
            client_id=config.client_id,
            db_name=config.db_name,
            access_token=config.access_token,
            api_url=config.api_url,
        )
    )


# ── Audit log ────────────────────────────────────────────────────────


@router.get("/logs", response_model=SyncLogListResponse)
async def list_logs(
    limit: int = Query(100, ge=1, le=500),
    service: SyncClientService = Depends(get_sync_client_service),
) -> SyncLogListResponse:
    """Most recent sync log entries across all clients."""
    entries = await service.list_logs(limit=limit)
    return SyncLogListResponse(logs=[_log_to_schema(e) for e in entries])
