"""Centralised logging helpers for the hover server.

Standard output carries the protocol stream, so every handler installed
here writes to standard error or to a log file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, TextIO, Union

ROOT_LOGGER_NAME = "alloy_hover"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def resolve_level(level: Optional[str]) -> int:
    """Map a level name such as ``"warn"`` to its numeric value, defaulting to INFO."""

    return _LEVEL_MAP.get((level or "info").lower(), logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    *,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Install the single handler used by every ``alloy_hover`` logger.

    Calling this again replaces the previous handler, so the CLI and tests can
    reconfigure freely.
    """

    logger = get_logger(ROOT_LOGGER_NAME)

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
    else:
        handler = logging.StreamHandler(stream or sys.stderr)

    logger.setLevel(resolve_level(level))
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False
    return logger


__all__ = [
    "ROOT_LOGGER_NAME",
    "LOG_FORMAT",
    "get_logger",
    "resolve_level",
    "configure_logging",
]
