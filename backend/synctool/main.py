"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from synctool.config import get_settings
from synctool.infrastructure.database import Base, engine
from synctool.infrastructure.dependencies import build_admin_auth_service, get_uow_factory
from synctool.infrastructure.logging.log_config import setup_logging
from synctool.presentation.api.router import router as api_router
from synctool.presentation.middleware import (
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    RequestTimeoutMiddleware,
    SecurityHeadersMiddleware,
)

logger = logging.getLogger(__name__)


async def _seed_bootstrap_admin() -> None:
    """Ensure the configured admin account exists (idempotent)."""
    settings = get_settings()
    if not settings.admin_username or not settings.admin_password:
        logger.warning("ADMIN_USERNAME/ADMIN_PASSWORD not set; no bootstrap admin seeded")
        return
    try:
        service = build_admin_auth_service(get_uow_factory())
        await service.ensure_bootstrap_admin(settings.admin_username, settings.admin_password)
    except Exception:
        logger.exception("Could not seed bootstrap admin")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed the admin."""
    settings = get_settings()
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized successfully")

    await _seed_bootstrap_admin()

    logger.info(
        "%s %s running in %s mode", settings.app_title, settings.app_version, settings.app_env
    )
    yield

    await engine.dispose()


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred"})


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Innermost first: the last middleware added wraps all the others.
    app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_middleware(GZipMiddleware)
    if settings.is_production:
        app.add_middleware(SecurityHeadersMiddleware)
        app.add_middleware(
            RateLimitMiddleware,
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(Exception, _unhandled_error)
    app.include_router(api_router)

    @app.get("/")
    async def root() -> dict:
        return {"message": "API is running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "synctool.main:app",
        host="0.0.0.0",
        port=5005,
        reload=not get_settings().is_production,
    )
