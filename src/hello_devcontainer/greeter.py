"""Greeter façade wiring the system adapters into the greeting use case.

Purpose
-------
Expose the public :func:`greet` operation that prints the greeting report the
container tutorial shows as its expected output, plus the small helpers the
CLI and smoke tests rely on.

Contents
--------
* :func:`greet` - write the three-line report to standard output.
* :func:`summary_info` - metadata banner as a string.

System Role
-----------
Composition point: picks default adapters for any collaborator the caller does
not inject, so tests can substitute a fixed clock, version, or writer.
"""

from __future__ import annotations

from typing import Callable, Optional

from .adapters import PythonRuntimeVersion, SystemClock, stdout_writer
from .application.ports import ClockPort, RuntimeVersionPort
from .application.use_cases import create_greet


def greet(
    *,
    clock: Optional[ClockPort] = None,
    runtime_version: Optional[RuntimeVersionPort] = None,
    writer: Optional[Callable[[str], None]] = None,
) -> None:
    """Print the greeting, the current time, and the runtime version.

    Why
    ---
    Lets a developer confirm at a glance which interpreter executed the script
    inside the container.

    What
    ----
    Writes exactly three lines::

        Hello, world.
        Current Time: <ISO 8601 timestamp with offset>
        Ruby Version <runtime version>

    Parameters
    ----------
    clock:
        Source of the timestamp; defaults to :class:`SystemClock`.
    runtime_version:
        Source of the version string; defaults to
        :class:`PythonRuntimeVersion`.
    writer:
        Receives the rendered report in a single call; defaults to
        :func:`stdout_writer`.

    Raises
    ------
    RuntimeIdentityError
        If the runtime reports an empty version. Nothing is written.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class FixedClock:
    ...     def now(self):
    ...         return datetime(2022, 9, 10, 23, 48, 26, tzinfo=timezone.utc)
    >>> greet(clock=FixedClock(), runtime_version=lambda: "3.2.0")
    Hello, world.
    Current Time: 2022-09-10T23:48:26+00:00
    Ruby Version 3.2.0
    """
    run = create_greet(
        clock=clock if clock is not None else SystemClock(),
        runtime_version=runtime_version if runtime_version is not None else PythonRuntimeVersion(),
        writer=writer if writer is not None else stdout_writer,
    )
    run()


def summary_info() -> str:
    """Return the metadata banner used by the ``info`` command.

    Captures the output of :func:`hello_devcontainer.__init__conf__.print_info`
    and returns it as a single string.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["greet", "summary_info"]
