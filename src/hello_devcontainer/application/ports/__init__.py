"""Protocols the greeting use case depends on."""

from __future__ import annotations

from .time import ClockPort, RuntimeVersionPort

__all__ = ["ClockPort", "RuntimeVersionPort"]
