"""Greeting use case: capture the report and hand it to a writer.

Purpose
-------
Tie the clock and runtime-identity ports to the :class:`GreetingReport` value
object and emit the rendered text through an injected writer.

Contents
--------
* :func:`build_report` - query both ports once and build the report.
* :func:`create_greet` - factory returning the greeting callable.
"""

from __future__ import annotations

import logging
from typing import Callable

from hello_devcontainer.application.ports import ClockPort, RuntimeVersionPort
from hello_devcontainer.domain import GreetingReport

logger = logging.getLogger(__name__)


def build_report(*, clock: ClockPort, runtime_version: RuntimeVersionPort) -> GreetingReport:
    """Return a report for the current moment and runtime.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class FixedClock:
    ...     def now(self):
    ...         return datetime(2022, 9, 10, 23, 48, 26, tzinfo=timezone.utc)
    >>> build_report(clock=FixedClock(), runtime_version=lambda: "3.2.0").lines()[1]
    'Current Time: 2022-09-10T23:48:26+00:00'
    """
    report = GreetingReport(timestamp=clock.now(), runtime_version=runtime_version())
    logger.debug("greeting report built", extra={"runtime_version": report.runtime_version})
    return report


def create_greet(
    *,
    clock: ClockPort,
    runtime_version: RuntimeVersionPort,
    writer: Callable[[str], None],
) -> Callable[[], None]:
    """Return a callable that writes one greeting report per invocation.

    The report is built completely before ``writer`` is called, so a failing
    port leaves the output untouched. Errors are not caught.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class FixedClock:
    ...     def now(self):
    ...         return datetime(2022, 9, 10, 23, 48, 26, tzinfo=timezone.utc)
    >>> chunks = []
    >>> greet = create_greet(clock=FixedClock(), runtime_version=lambda: "3.2.0", writer=chunks.append)
    >>> greet()
    >>> print(chunks[0], end="")
    Hello, world.
    Current Time: 2022-09-10T23:48:26+00:00
    Ruby Version 3.2.0
    """

    def greet() -> None:
        report = build_report(clock=clock, runtime_version=runtime_version)
        writer(report.render())

    return greet


__all__ = ["build_report", "create_greet"]
