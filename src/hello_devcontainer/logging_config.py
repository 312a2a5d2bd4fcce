"""Diagnostic logging routed to stderr through Rich.

Standard output is reserved for the greeting report, so the handler installed
here always writes to stderr.
"""

from __future__ import annotations

import logging
import threading

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "hello_devcontainer"

_LOCK = threading.Lock()
_HANDLER: RichHandler | None = None


def coerce_level(level: str | int) -> int:
    """Translate a level name or number into a :mod:`logging` level.

    Examples
    --------
    >>> coerce_level("debug") == logging.DEBUG
    True
    >>> coerce_level(30)
    30
    >>> coerce_level("verbose")
    Traceback (most recent call last):
    ...
    ValueError: Unknown log level: 'verbose'
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Attach a single Rich handler to the package logger and set its level.

    Calling again only updates the level; the handler is installed once.
    """
    global _HANDLER
    resolved = coerce_level(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    with _LOCK:
        if _HANDLER is None:
            _HANDLER = RichHandler(
                console=console if console is not None else Console(stderr=True),
                show_path=False,
                rich_tracebacks=False,
            )
            package_logger.addHandler(_HANDLER)
        package_logger.setLevel(resolved)
    return package_logger


def _reset_logging_for_testing() -> None:
    global _HANDLER
    with _LOCK:
        if _HANDLER is not None:
            logging.getLogger(PACKAGE_LOGGER).removeHandler(_HANDLER)
        _HANDLER = None
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)


__all__ = ["PACKAGE_LOGGER", "coerce_level", "configure_logging"]
