"""Admin session endpoints — login, logout and introspection."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from synctool.application.schemas.admin import (
    AdminSchema,
    AdminSessionResponse,
    LoginRequest,
    LogoutResponse,
)
from synctool.application.services import AdminAuthService
from synctool.config import get_settings
from synctool.domain.entities import AdminAccount
from synctool.domain.exceptions import EntityNotFoundError, UnauthenticatedError
from synctool.infrastructure.dependencies import get_admin_auth_service
from synctool.presentation.api.dependencies import CurrentAdminDep

router = APIRouter(prefix="/admin", tags=["Admin Session"])


def _admin_to_schema(admin: AdminAccount) -> AdminSchema:
    return AdminSchema(id=admin.id, username=admin.username, created_at=admin.created_at)


@router.post("/login", response_model=AdminSessionResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: AdminAuthService = Depends(get_admin_auth_service),
) -> AdminSessionResponse:
    """Check admin credentials and set the HTTP-only session cookie."""
    try:
        admin, token = await service.login(request.username, request.password)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return AdminSessionResponse(admin=_admin_to_schema(admin))


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    admin_id: CurrentAdminDep,
    response: Response,
    service: AdminAuthService = Depends(get_admin_auth_service),
) -> LogoutResponse:
    """Revoke the stored session token and clear the cookie."""
    await service.logout(admin_id)
    response.delete_cookie(get_settings().session_cookie_name)
    return LogoutResponse()


@router.get("/me", response_model=AdminSessionResponse)
async def me(
    admin_id: CurrentAdminDep,
    service: AdminAuthService = Depends(get_admin_auth_service),
) -> AdminSessionResponse:
    """Return the admin behind the current session."""
    try:
        admin = await service.get_admin(admin_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AdminSessionResponse(admin=_admin_to_schema(admin))
