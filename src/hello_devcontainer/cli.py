"""Command-line adapter built with rich-click and lib_cli_exit_tools.

Purpose
-------
Expose the greeter as the ``hello-devcontainer`` console script and as
``python -m hello_devcontainer``. Running without a subcommand prints the
greeting report once, matching the tutorial's documented output.

Contents
--------
* :func:`cli` - root command group with global options.
* :func:`cli_greet`, :func:`cli_info` - subcommands.
* :func:`main` - test-friendly runner returning the process exit code.

System Role
-----------
Presentation layer. Configuration and logging are set up here; the greeting
itself stays in :mod:`hello_devcontainer.greeter`. Exceptions are mapped to
exit codes by ``lib_cli_exit_tools``.
"""

from __future__ import annotations

from typing import Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from . import __init__conf__
from . import config as app_config
from .greeter import greet, summary_info
from .logging_config import configure_logging

CLICK_CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running.",
)
@click.option(
    "--log-level",
    default=None,
    metavar="LEVEL",
    help=f"Diagnostic log level written to stderr (default: ${app_config.LOG_LEVEL_ENV_VAR} or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, log_level: Optional[str]) -> None:
    """Print the greeting report unless a subcommand is given."""

    if use_dotenv:
        app_config.enable_dotenv()

    if log_level is None:
        configure_logging(app_config.env_log_level())
    else:
        try:
            configure_logging(log_level)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--log-level") from exc

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    if ctx.invoked_subcommand is None:
        greet()


@cli.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_greet() -> None:
    """Print the greeting, current time, and runtime version."""
    greet()


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""
    click.echo(summary_info(), nl=False)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Parameters
    ----------
    argv:
        Arguments without the program name; ``None`` consumes ``sys.argv[1:]``.
    restore_traceback:
        Restore the previous ``lib_cli_exit_tools`` traceback settings after
        the run so embedding callers keep their preferences.
    """
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
