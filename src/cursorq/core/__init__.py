# src/cursorq/core/__init__.py
"""Core infrastructure: IndexedQueue, Configuration, Logging."""

from cursorq.core.config import (
    CursorqSettings,
    HistorySettings,
    LoggingSettings,
    load_settings,
)
from cursorq.core.logging import configure_logging, get_logger
from cursorq.core.queue import IndexedQueue

__all__ = [
    "CursorqSettings",
    "HistorySettings",
    "IndexedQueue",
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "load_settings",
]
