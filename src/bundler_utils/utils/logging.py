"""
Structured logging for bundler-utils.

Thin layer over the standard library ``logging`` module. Every module
logs through ``get_logger(__name__)`` and passes context via ``extra``;
the package never touches the root logger unless asked to.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

ROOT_LOGGER_NAME = "bundler_utils"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger nested under the package root logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    fmt: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this again replaces the previous handler instead of adding
    another one.

    Args:
        level: Log level for the package logger
        fmt: Log format (defaults to DEFAULT_FORMAT)
        stream: Output stream (defaults to stderr)

    Returns:
        The package root logger
    """
    global _handler

    if _handler is not None:
        _root_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    _root_logger.addHandler(_handler)
    _root_logger.setLevel(level)
    return _root_logger


def set_level(level: Union[int, str]) -> None:
    """Set the package log level."""
    _root_logger.setLevel(level)


def enable_debug() -> None:
    """Shortcut for ``set_level(logging.DEBUG)``."""
    set_level(logging.DEBUG)


def disable_logging() -> None:
    """Silence every logger in the package until the level is set again."""
    _root_logger.setLevel(logging.CRITICAL + 1)
