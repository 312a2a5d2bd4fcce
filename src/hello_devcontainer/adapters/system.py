"""Adapters reading the host clock and the interpreter version.

Purpose
-------
Provide the concrete :class:`ClockPort` and :class:`RuntimeVersionPort`
implementations used when the greeter runs outside of tests.

Contents
--------
* :class:`SystemClock` - local wall-clock time with its numeric UTC offset.
* :func:`python_runtime_version` / :class:`PythonRuntimeVersion` - narrow
  accessor for the executing interpreter's version.
* :func:`stdout_writer` - writes a chunk to the current ``sys.stdout``.
"""

from __future__ import annotations

import platform
import sys
from datetime import datetime

from hello_devcontainer.application.ports import ClockPort, RuntimeVersionPort


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware local timestamps."""

    def now(self) -> datetime:
        """Return the current local time carrying the host's UTC offset."""
        return datetime.now().astimezone()


def python_runtime_version() -> str:
    """Return the executing interpreter's version, e.g. ``"3.12.4"``.

    Examples
    --------
    >>> python_runtime_version() == platform.python_version()
    True
    """
    return platform.python_version()


class PythonRuntimeVersion(RuntimeVersionPort):
    """Runtime identity port backed by :func:`python_runtime_version`."""

    def __call__(self) -> str:
        return python_runtime_version()


def stdout_writer(text: str) -> None:
    """Write ``text`` to standard output in one call and flush it.

    ``sys.stdout`` is looked up on every call so captured or redirected
    streams are honoured.
    """
    stream = sys.stdout
    stream.write(text)
    stream.flush()


__all__ = ["PythonRuntimeVersion", "SystemClock", "python_runtime_version", "stdout_writer"]
