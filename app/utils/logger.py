# app/utils/logger.py
"""
Logging setup shared by every module.
Records go to the console and to a rotating file under settings.LOG_DIR.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))

FORMATTER = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_configured = False


def resolve_log_dir(log_dir: str) -> str:
    """Relative LOG_DIR values are taken from the project root, not the working directory."""
    if os.path.isabs(log_dir):
        return log_dir
    return os.path.join(PROJECT_ROOT, log_dir)


def build_file_handler(log_dir: str, filename: str, max_mb: int, backup_count: int) -> RotatingFileHandler:
    path = resolve_log_dir(log_dir)
    os.makedirs(path, exist_ok=True)
    handler = RotatingFileHandler(
        filename=os.path.join(path, filename),
        maxBytes=max_mb * 1024 * 1024,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(LOG_LEVEL)
    handler.setFormatter(FORMATTER)
    return handler


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    console = logging.StreamHandler()
    console.setLevel(LOG_LEVEL)
    console.setFormatter(FORMATTER)

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    root.addHandler(console)
    if settings.LOG_TO_FILE:
        root.addHandler(build_file_handler(
            settings.LOG_DIR, settings.LOG_FILE, settings.LOG_MAX_MB, settings.LOG_BACKUP_COUNT,
        ))


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
