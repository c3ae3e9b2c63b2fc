"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from crossorder.utils.logging.init_logging import init_logging
from crossorder.utils.logging.logger_factory import get_cached_logger

__all__ = [
    "get_cached_logger",
    "init_logging",
]
