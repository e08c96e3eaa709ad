"""Unit tests for logging setup."""

import logging
from pathlib import Path

import pytest

from synctool.config import Settings
from synctool.infrastructure.logging import log_config


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _use_settings(monkeypatch, **values):
    settings = Settings(_env_file=None, **values)
    monkeypatch.setattr(log_config, "get_settings", lambda: settings)


def test_category_levels_are_applied(monkeypatch, restore_root_logger):
    _use_settings(monkeypatch, log_level="WARNING", log_level_sync="DEBUG", log_level_sql="ERROR")

    log_config.setup_logging()

    assert restore_root_logger.level == logging.WARNING
    assert logging.getLogger("synctool.application.services.sync_service").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR


def test_unknown_level_falls_back_to_info(monkeypatch, restore_root_logger):
    _use_settings(monkeypatch, log_level="chatty")

    log_config.setup_logging()

    assert restore_root_logger.level == logging.INFO


def test_log_dir_gets_combined_and_error_files_once(monkeypatch, tmp_path, restore_root_logger):
    _use_settings(monkeypatch, log_dir=str(tmp_path / "logs"))

    log_config.setup_logging()
    log_config.setup_logging()

    file_handlers = [
        h for h in restore_root_logger.handlers if getattr(h, log_config._FILE_HANDLER_MARK, False)
    ]
    assert sorted(Path(h.baseFilename).name for h in file_handlers) == [
        "combined.log",
        "error.log",
    ]

    logging.getLogger("synctool.test").error("disk full")
    for handler in file_handlers:
        handler.flush()
    assert "disk full" in (tmp_path / "logs" / "error.log").read_text(encoding="utf-8")
    assert "disk full" in (tmp_path / "logs" / "combined.log").read_text(encoding="utf-8")
