"""Module: logger_factory.py

Date: 2026-10-19

Logger factory with caching.
Keeps one logger instance per module name behind a lock.
"""

from __future__ import annotations

import logging
import threading

from crossorder.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name and lets the whole
    package be re-levelled at once.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically ``__name__`` of the calling module

        Returns:
            Cached logger instance

        """
        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set the logging level for every cached logger."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """List the names of all cached loggers."""
        with cls._lock:
            return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all cached loggers (their level overrides stay applied)."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str) -> logging.Logger:
    """Convenience wrapper around ``LoggerFactory.get_logger``."""
    return LoggerFactory.get_logger(name)
