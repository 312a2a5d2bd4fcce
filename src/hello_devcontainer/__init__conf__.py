"""Static package metadata surfaced by the CLI ``info`` command.

Keep ``version`` in sync with ``pyproject.toml``.
"""

from __future__ import annotations

import platform
from typing import Callable, Optional

name = "hello_devcontainer"
title = "Greeting report for developing inside a container"
version = "0.1.0"
shell_command = "hello-devcontainer"


def print_info(writer: Optional[Callable[[str], None]] = None) -> None:
    """Write the metadata banner, one ``key = value`` line per field.

    Parameters
    ----------
    writer:
        Receives each line including its trailing newline. Defaults to
        ``print`` without an extra line ending.

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for hello_devcontainer:
    <BLANKLINE>
        Greeting report for developing inside a container
    <BLANKLINE>
        name           = hello_devcontainer
        version        = 0.1.0
        shell_command  = hello-devcontainer
        python         = ...
    """
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = [
        ("name", name),
        ("version", version),
        ("shell_command", shell_command),
        ("python", platform.python_version()),
    ]
    pad = max(len(key) for key, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    emit(f"    {title}\n")
    emit("\n")
    for key, value in fields:
        emit(f"    {key.ljust(pad)}  = {value}\n")
