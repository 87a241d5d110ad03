"""Centralized logging configuration for spengine.

All package modules obtain loggers through :func:`get_logger`, which attaches
them under the ``spengine`` root logger. The root logger owns the only
handler; child loggers inherit its level.

The initial level can be overridden with the ``SPENGINE_LOG_LEVEL``
environment variable (level name such as ``DEBUG`` or a number).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "spengine"
LOG_LEVEL_ENV = "SPENGINE_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def parse_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Translate a level name or number into a logging level.

    Args:
        level: Level as int, numeric string, or name (case-insensitive).
        default: Returned when ``level`` is empty.

    Returns:
        Numeric logging level.

    Raises:
        ValueError: If ``level`` is a name unknown to :mod:`logging`.
    """
    if level is None or level == "":
        return default
    if isinstance(level, int):
        return level
    text = level.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root spengine logger with a single handler.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level. Defaults to ``SPENGINE_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if level is None:
        level = parse_level(os.environ.get(LOG_LEVEL_ENV))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees package records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that inherits the root spengine configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger with level NOTSET so the root level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all spengine loggers and their handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler and configuration flag (mainly for tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
