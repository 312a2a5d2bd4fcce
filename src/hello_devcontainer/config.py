"""Environment configuration helpers, including optional ``.env`` loading.

Purpose
-------
Centralise the environment variable the CLI honours for diagnostics and the
rules for loading a nearby ``.env`` file with python-dotenv.

Contents
--------
* :data:`LOG_LEVEL_ENV_VAR` - default diagnostic log level.
* :func:`enable_dotenv` - load the nearest ``.env`` at most once.
* :func:`env_log_level` - log level requested through the environment.

System Role
-----------
Outer layer only. The greeting itself reads no configuration. A ``.env`` file
is consumed only when ``--use-dotenv`` is passed, and a malformed environment
value never stops the greeting from printing.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

LOG_LEVEL_ENV_VAR = "HELLO_DEVCONTAINER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)

_DOTENV_LOCK = threading.Lock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def enable_dotenv(search_from: Optional[Path] = None) -> Path | None:
    """Load the nearest ``.env`` walking upwards from ``search_from``.

    Parameters
    ----------
    search_from:
        Directory to start the search in; defaults to the working directory.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when no file exists.
        Subsequent calls return the first result without reloading.

    Variables already present in the environment are never overridden.
    """
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        path = _locate_dotenv(search_from)
        if path is not None:
            load_dotenv(path, override=False)
            logger.debug("loaded environment from %s", path)
        _DOTENV_PATH = path
        _DOTENV_LOADED = True
        return path


def _locate_dotenv(search_from: Optional[Path]) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found).resolve() if found else None
    for directory in (search_from.resolve(), *search_from.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def env_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the log level name from :data:`LOG_LEVEL_ENV_VAR` or the default.

    Unknown names fall back to :data:`DEFAULT_LOG_LEVEL` with a warning; only
    an explicit ``--log-level`` flag is validated strictly.

    Examples
    --------
    >>> env_log_level({})
    'WARNING'
    >>> env_log_level({LOG_LEVEL_ENV_VAR: " debug "})
    'DEBUG'
    """
    source = os.environ if environ is None else environ
    value = source.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(value), int):
        logger.warning("ignoring %s=%r: unknown log level", LOG_LEVEL_ENV_VAR, value)
        return DEFAULT_LOG_LEVEL
    return value


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV_VAR",
    "enable_dotenv",
    "env_log_level",
]
