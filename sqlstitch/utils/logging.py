"""Centralized logging configuration for sqlstitch.

All loggers live under the ``sqlstitch`` namespace so a host application can
tune or silence the library with a single logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = (
    "configure_logging",
    "get_logger",
    "log_with_context",
)

ROOT_LOGGER_NAME = "sqlstitch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance under the sqlstitch namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlstitch logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    format_string: str = DEFAULT_FORMAT,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Configure logging for the whole sqlstitch library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Format used by the console handler
        extra_handlers: Additional handlers to add
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(console_handler)

    if extra_handlers:
        for handler in extra_handlers:
            root_logger.addHandler(handler)

    root_logger.propagate = False
    root_logger.debug("sqlstitch logging configured", extra={"extra_fields": {"level": level}})


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log a message with structured extra fields.

    The fields are attached as ``record.extra_fields`` so handlers can pick them up.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Additional fields attached to the record
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields})
