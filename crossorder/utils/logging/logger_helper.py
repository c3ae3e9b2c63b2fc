"""Module: logger_helper.py

Date: 2026-10-19

Helpers for named loggers used across crossorder.

Functions:
    get_logger(name): Returns a package logger (no handlers attached here;
        see init_logging for console/file output).
    safe_text(text): Replaces console-hostile Unicode with ASCII equivalents.

DevOnlyFilter:
    Hides dev-only debug records (``extra={"dev_only": True}``) from the
    console while still letting them reach file logs.
"""

from __future__ import annotations

import logging
import re

from crossorder import config

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text: The original text.

    Returns:
        The text with problematic characters replaced.

    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger for ``name`` (defaults to the package root logger)."""
    return logging.getLogger(name or config.APP_NAME)


class DevOnlyFilter(logging.Filter):
    """Drop records flagged ``dev_only`` unless the config asks to show them."""

    def filter(self, record: logging.LogRecord) -> bool:
        if config.SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


class SafeTextFormatter(logging.Formatter):
    """Formatter that degrades to ASCII-safe text for legacy consoles."""

    def format(self, record: logging.LogRecord) -> str:
        return safe_text(super().format(record))
