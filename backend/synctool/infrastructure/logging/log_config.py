"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(e.g. SQLAlchemy SQL statements) can be silenced without affecting the
sync engine, and optionally mirrors everything to files under LOG_DIR.

Usage:
    from synctool.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in the FastAPI lifespan)
"""

import logging
import sys
from pathlib import Path

from synctool.config import get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────
#
# Each entry maps one or more Python logger names to a Settings field.
# When setup_logging() runs, it sets the level of each listed logger
# to the value of the corresponding setting.

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
        "asyncpg",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_sync": [
        "synctool.application.services.sync_service",
        "synctool.infrastructure.database.repositories.sync_data_repository",
    ],
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"
_FILE_HANDLER_MARK = "_synctool_file_handler"


def setup_logging() -> None:
    """Configure Python logging levels and handlers from application settings.

    Call this once during startup (e.g. in the FastAPI lifespan).
    """
    settings = get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # Ensure at least one handler exists (uvicorn usually adds one,
    # but when running tests or scripts it may not).
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    if settings.log_dir:
        _add_file_handlers(root, Path(settings.log_dir))

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, sql=%s, uvicorn=%s, sync=%s, dir=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_sync,
        settings.log_dir or "-",
    )


def _add_file_handlers(root: logging.Logger, log_dir: Path) -> None:
    """Attach combined.log (all levels) and error.log (ERROR+) once."""
    if any(getattr(h, _FILE_HANDLER_MARK, False) for h in root.handlers):
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(_FORMAT)

    for filename, level in (("combined.log", logging.NOTSET), ("error.log", logging.ERROR)):
        handler = logging.FileHandler(log_dir / filename, encoding="utf-8")
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _FILE_HANDLER_MARK, True)
        root.addHandler(handler)


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
