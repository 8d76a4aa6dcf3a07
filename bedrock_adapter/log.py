"""Logging capability passed into the provider functions."""

import logging
from typing import Any, Protocol

logger = logging.getLogger("bedrock_adapter")

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "success": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class LogFn(Protocol):
    def __call__(self, level: str, message: str, *details: Any) -> None: ...


def log(level: str, message: str, *details: Any) -> None:
    """Log ``message`` at ``level``, appending any details on separate lines.

    Raises:
        ValueError: If the level is unknown
    """
    if level not in LEVELS:
        raise ValueError(f"Unknown log level {level!r}. Expected one of: {', '.join(LEVELS)}")
    if details:
        message = "\n".join([message, *(str(d) for d in details)])
    logger.log(LEVELS[level], message)
