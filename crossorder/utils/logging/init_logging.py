"""Module: init_logging.py

Date: 2026-10-19

Single entry point to configure output for the crossorder loggers.

Functions:
    init_logging(): Attaches a console handler (dev-only records filtered)
        and, when enabled, a rotating file handler to the package logger.
    add_file_handler(): Attaches a rotating file handler to any logger.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from crossorder import config
from crossorder.utils.logging.logger_helper import DevOnlyFilter, SafeTextFormatter, get_logger


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = config.LOG_FILE_MAX_BYTES,
    backup_count: int = config.LOG_FILE_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Attach a rotating file handler to a logger.

    Args:
        logger: The logger to attach the handler to.
        log_path: Path to the log file (parent directories are created).
        level: Logging level for this handler.
        max_bytes: Maximum file size before rotating.
        backup_count: Number of rotated files to keep.

    Returns:
        The attached handler.

    """
    directory = os.path.dirname(log_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


def init_logging(
    console_level: str = config.LOG_CONSOLE_LEVEL,
    *,
    to_console: bool = config.LOG_TO_CONSOLE,
    to_file: bool = config.LOG_TO_FILE,
    log_dir: str = config.LOG_FILE_DIR,
) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once: handlers installed by a previous call are
    replaced rather than duplicated.

    Returns:
        The package root logger.

    """
    logger = get_logger(config.APP_NAME)
    logger.setLevel(logging.DEBUG)  # handlers filter levels

    for handler in list(logger.handlers):
        if getattr(handler, "_crossorder_handler", False):
            logger.removeHandler(handler)
            handler.close()

    if to_console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(getattr(logging, console_level, logging.INFO))
        console.addFilter(DevOnlyFilter())
        console.setFormatter(SafeTextFormatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT))
        console._crossorder_handler = True  # type: ignore[attr-defined]
        logger.addHandler(console)

    if to_file:
        file_handler = add_file_handler(
            logger,
            os.path.join(log_dir, f"{config.APP_NAME}.log"),
            level=getattr(logging, config.LOG_FILE_LEVEL, logging.DEBUG),
        )
        file_handler._crossorder_handler = True  # type: ignore[attr-defined]

    return logger
