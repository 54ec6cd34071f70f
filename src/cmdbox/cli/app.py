"""CLI application entry point and command routing for cmdbox.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cmdbox.exceptions.CmdboxError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing, validation and dispatch are
  delegated to the core layer, the commands themselves to
  :mod:`cmdbox.cli.handlers`.
* ``print()`` is forbidden; Rich consoles are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

from rich.markup import escape

from cmdbox.cli import exit_codes
from cmdbox.cli.console import console
from cmdbox.cli.logs import configure_logging
from cmdbox.core.dispatcher import dispatch
from cmdbox.core.parser import parse
from cmdbox.core.validator import validate
from cmdbox.exceptions import (
    CmdboxError,
    UsageError,
    VarDirNotDirectoryError,
    VarDirUndefinedError,
)
from cmdbox.infra.config import load_settings


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the cmdbox CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment to read configuration from.  When ``None``,
        ``os.environ`` is used.  Accepting both enables deterministic
        testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from cmdbox.cli.handlers import build_handlers

    args = sys.argv[1:] if argv is None else argv
    env = os.environ if environ is None else environ

    # The environment is checked before anything else, help included.
    settings = load_settings(env)
    configure_logging(settings.log_level)

    state = parse(args)
    validate(state)
    return dispatch(state, build_handlers(settings, env))


def exit_code_for(exc: CmdboxError) -> int:
    """Map a domain error to its process exit code."""
    if isinstance(exc, UsageError):
        return exit_codes.USAGE_ERROR
    if isinstance(exc, VarDirUndefinedError):
        return exit_codes.VARDIR_UNDEFINED
    if isinstance(exc, VarDirNotDirectoryError):
        return exit_codes.VARDIR_NOT_A_DIRECTORY
    return exit_codes.GENERAL_ERROR


def render_error(exc: CmdboxError) -> None:
    """Print *exc* on stderr.

    Usage errors fit on a single line with the help suggestion appended;
    other errors show their hint on a second line.
    """
    message = f"[bold red]Error:[/bold red] {escape(str(exc))}"
    if isinstance(exc, UsageError):
        if exc.hint:
            message += f" {escape(exc.hint)}"
        console.print(message, soft_wrap=True)
        return

    console.print(message)
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CmdboxError as exc:
        render_error(exc)
        sys.exit(exit_code_for(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
