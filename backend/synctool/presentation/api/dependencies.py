"""Shared API dependencies — admin session verification."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from synctool.application.services import AdminAuthService
from synctool.config import get_settings
from synctool.domain.exceptions import SessionInvalidatedError, UnauthenticatedError
from synctool.infrastructure.dependencies import get_admin_auth_service


def _extract_session_token(request: Request) -> str | None:
    """Session cookie first, then an ``Authorization: Bearer`` header."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if token:
        return token
    scheme, _, value = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return None


async def get_current_admin(
    request: Request,
    service: AdminAuthService = Depends(get_admin_auth_service),
) -> int:
    """Resolve the admin id behind the request's session token.

    Raises:
        HTTPException: 401 when the token is missing, invalid or revoked.
    """
    try:
        admin_id = await service.verify_session(_extract_session_token(request))
    except (UnauthenticatedError, SessionInvalidatedError) as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    request.state.admin_id = admin_id
    return admin_id


# Type alias for the authenticated admin id
CurrentAdminDep = Annotated[int, Depends(get_current_admin)]
