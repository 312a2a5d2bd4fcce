"""Greeting report value object and its line formatting rules.

Purpose
-------
Describe the three-line report printed by the greeter as pure data, so the
output format can be verified without touching the clock, the interpreter, or
standard output.

Contents
--------
* Label constants shared with parsers of the output.
* :class:`GreetingReport` dataclass with :meth:`GreetingReport.lines` and
  :meth:`GreetingReport.render`.
* :func:`format_timestamp` - ISO 8601 rendering with numeric UTC offset.
* :class:`RuntimeIdentityError` - raised for an empty runtime version.

System Role
-----------
Innermost layer. Has no I/O; the application use case feeds it a timestamp and
a version string obtained through ports.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

GREETING_LINE = "Hello, world."
TIME_LABEL = "Current Time: "
#: Kept verbatim so scripts parsing the tutorial's expected output keep working.
VERSION_LABEL = "Ruby Version "


class RuntimeIdentityError(RuntimeError):
    """Raised when the executing runtime reports an empty version string."""


def _ensure_aware(moment: datetime) -> datetime:
    """Reject naive datetimes; the report always carries a numeric offset."""
    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        raise ValueError("timestamp must be timezone-aware")
    return moment


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO 8601 date-time with offset, second precision.

    Examples
    --------
    >>> from datetime import timezone
    >>> format_timestamp(datetime(2022, 9, 10, 23, 48, 26, 999, tzinfo=timezone.utc))
    '2022-09-10T23:48:26+00:00'
    """
    return _ensure_aware(moment).isoformat(timespec="seconds")


@dataclass(slots=True, frozen=True)
class GreetingReport:
    """Immutable snapshot of one greeting.

    Attributes
    ----------
    timestamp:
        Timezone-aware wall-clock time captured at invocation.
    runtime_version:
        Non-empty version identifier of the executing interpreter.
    """

    timestamp: datetime
    runtime_version: str

    def __post_init__(self) -> None:
        _ensure_aware(self.timestamp)
        if not self.runtime_version.strip():
            raise RuntimeIdentityError("runtime version must not be empty")

    def lines(self) -> tuple[str, str, str]:
        """Return the greeting, timestamp, and version lines in output order.

        Examples
        --------
        >>> from datetime import timezone
        >>> report = GreetingReport(datetime(2022, 9, 10, 23, 48, 26, tzinfo=timezone.utc), "3.2.0")
        >>> report.lines()[2]
        'Ruby Version 3.2.0'
        """
        return (
            GREETING_LINE,
            f"{TIME_LABEL}{format_timestamp(self.timestamp)}",
            f"{VERSION_LABEL}{self.runtime_version}",
        )

    def render(self) -> str:
        """Return all lines joined by newlines, with a trailing newline."""
        return "\n".join(self.lines()) + "\n"


__all__ = [
    "GREETING_LINE",
    "GreetingReport",
    "RuntimeIdentityError",
    "TIME_LABEL",
    "VERSION_LABEL",
    "format_timestamp",
]
