"""Domain value objects for the greeting report."""

from __future__ import annotations

from .greeting import (
    GREETING_LINE,
    TIME_LABEL,
    VERSION_LABEL,
    GreetingReport,
    RuntimeIdentityError,
    format_timestamp,
)

__all__ = [
    "GREETING_LINE",
    "GreetingReport",
    "RuntimeIdentityError",
    "TIME_LABEL",
    "VERSION_LABEL",
    "format_timestamp",
]
