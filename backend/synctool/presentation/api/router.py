"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from synctool.presentation.api.endpoints.admin_auth import router as admin_auth_router
from synctool.presentation.api.endpoints.health import router as health_router
from synctool.presentation.api.endpoints.sync import router as sync_router
from synctool.presentation.api.endpoints.sync_clients import router as sync_clients_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(admin_auth_router)
router.include_router(sync_clients_router)
router.include_router(sync_router)
