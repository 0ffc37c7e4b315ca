"""Logger factory for the tasks data layer."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from core.settings import LOGGING
from storage.config import load_config

ROOT_LOGGER = "tasks"


def _root_logger(level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        LOGGING.path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            LOGGING.path,
            maxBytes=LOGGING.max_bytes,
            backupCount=LOGGING.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOGGING.fmt))
        logger.addHandler(handler)
        configured = level or load_config().log_level
        logger.setLevel(getattr(logging, configured.upper(), logging.INFO))
    return logger


def get_logger(name: str, *, level: Optional[str] = None) -> logging.Logger:
    """Return ``tasks.<name>``; the shared file handler is attached once."""

    _root_logger(level)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


__all__ = ["get_logger"]
