"""Public package surface exposing the greeting report.

Importing the package prints nothing; call :func:`greet` explicitly, or run
``python -m hello_devcontainer`` / ``hello-devcontainer`` to greet once.
"""

from __future__ import annotations

from .application.use_cases import build_report
from .domain import GreetingReport, RuntimeIdentityError
from .greeter import greet, summary_info

__all__ = [
    "GreetingReport",
    "RuntimeIdentityError",
    "build_report",
    "greet",
    "summary_info",
]
