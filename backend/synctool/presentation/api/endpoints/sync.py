"""Client-facing sync endpoints, authenticated by client id + access token."""

from fastapi import APIRouter, Depends, HTTPException, status

from synctool.application.schemas.sync import (
    RowErrorSchema,
    SyncDataRequest,
    SyncDataResponse,
    SyncLogRequest,
    SyncLogResponse,
)
from synctool.application.services import SyncService
from synctool.domain.exceptions import BadRequestError, UnauthorizedError
from synctool.infrastructure.dependencies import get_sync_service

router = APIRouter(prefix="/sync", tags=["Sync"])


@router.post(
    "/data",
    response_model=SyncDataResponse,
    response_model_exclude_none=True,
)
async def sync_data(
    request: SyncDataRequest,
    service: SyncService = Depends(get_sync_service),
) -> SyncDataResponse:
    """Replace the caller's destination tables with the submitted snapshot."""
    try:
        outcome = await service.sync_data(request.client_id, request.access_token, request.data)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except Exception as e:
        # Already logged with traceback by the service.
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        ) from e

    return SyncDataResponse(
        success=True,
        message=outcome.message,
        record_count=outcome.record_count,
        skipped_count=outcome.skipped_count,
        errors=[RowErrorSchema(row=f.row, error=f.error) for f in outcome.errors] or None,
    )


@router.post("/log", response_model=SyncLogResponse)
async def sync_log(
    request: SyncLogRequest,
    service: SyncService = Depends(get_sync_service),
) -> SyncLogResponse:
    """Record a sync the client performed on its own."""
    try:
        await service.record_client_log(
            request.client_id,
            request.access_token,
            request.status,
            request.record_count,
            request.message,
        )
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return SyncLogResponse()
