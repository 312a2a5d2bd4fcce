"""Ports for the wall clock and the runtime identity."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timezone-aware timestamp."""

    def now(self) -> datetime: ...


@runtime_checkable
class RuntimeVersionPort(Protocol):
    """Return the version string of the executing interpreter."""

    def __call__(self) -> str: ...


__all__ = ["ClockPort", "RuntimeVersionPort"]
