"""Use cases orchestrating domain objects through ports."""

from __future__ import annotations

from .greet import build_report, create_greet

__all__ = ["build_report", "create_greet"]
