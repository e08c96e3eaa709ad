"""HTTP middleware — request logging, timeouts, rate limiting, security headers.

Rate limiting and security headers are installed only in production
(see ``create_app``); logging and timeouts are always active.
"""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

# Paths never throttled
EXCLUDED_PATHS = frozenset(["/", "/api/health", "/docs", "/openapi.json", "/redoc"])


def client_ip(request: Request) -> str:
    """Client address, honouring the first X-Forwarded-For hop."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path and client IP of every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s from %s -> %d (%.0f ms)",
            request.method,
            request.url.path,
            client_ip(request),
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response


class RequestTimeoutMiddleware:
    """Answers 503 when a request runs too long.

    Plain ASGI so the handler task itself is cancelled, which rolls back any
    open unit of work. A response that already started is left alone.
    """

    def __init__(self, app: ASGIApp, timeout_seconds: float = 30.0):
        self.app = app
        self._timeout = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = False

        async def send_tracking(message: Message) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_tracking), timeout=self._timeout)
        except asyncio.TimeoutError:
            if started:
                raise
            logger.warning(
                "Request timed out after %.0fs: %s %s",
                self._timeout,
                scope.get("method", "-"),
                scope.get("path", "-"),
            )
            response = JSONResponse(status_code=503, content={"detail": "Request timed out"})
            await response(scope, receive, send)


@dataclass
class RateLimitWindow:
    """Fixed-window request counter for one client IP."""

    limit: int
    window_seconds: int
    started: float = field(default_factory=time.monotonic)
    count: int = 0

    def hit(self) -> bool:
        """Count one request. Returns True if it is within the limit."""
        now = time.monotonic()
        if now - self.started >= self.window_seconds:
            self.started = now
            self.count = 0
        self.count += 1
        return self.count <= self.limit

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.count)

    @property
    def reset_in(self) -> int:
        return max(0, int(self.window_seconds - (time.monotonic() - self.started)))

    @property
    def is_expired(self) -> bool:
        return time.monotonic() - self.started >= self.window_seconds


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-IP request limit, in memory (one process)."""

    def __init__(self, app: ASGIApp, limit: int = 100, window_seconds: int = 15 * 60):
        super().__init__(app)
        self._limit = limit
        self._window = window_seconds
        self._windows: dict[str, RateLimitWindow] = {}
        self._lock = asyncio.Lock()

    async def _hit(self, key: str) -> tuple[bool, RateLimitWindow]:
        async with self._lock:
            if len(self._windows) > 10_000:
                self._windows = {k: w for k, w in self._windows.items() if not w.is_expired}
            window = self._windows.get(key)
            if window is None:
                window = self._windows[key] = RateLimitWindow(self._limit, self._window)
            return window.hit(), window

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        ip = client_ip(request)
        allowed, window = await self._hit(ip)
        if not allowed:
            logger.warning("Rate limit exceeded for %s: %d requests", ip, window.count)
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests, please try again later"},
                headers={
                    "Retry-After": str(window.reset_in),
                    "X-RateLimit-Limit": str(self._limit),
                    "X-RateLimit-Remaining": "0",
                },
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self._limit)
        response.headers["X-RateLimit-Remaining"] = str(window.remaining)
        return response


_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Resource-Policy": "same-origin",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in _SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
