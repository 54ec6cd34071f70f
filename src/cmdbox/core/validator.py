"""Command validator — arity and exclusivity rules.

Rules are applied in a fixed order and the first violation is raised.
Semantic checks on the arguments themselves (alias names, ``var=value``
pairs, directories) belong to the command handlers, not here.
"""

from __future__ import annotations

from cmdbox.core.models import Command, ParseState
from cmdbox.exceptions import (
    HelpExclusivityError,
    NoCommandError,
    TooManyArgumentsError,
    UnexpectedGlobalArgsError,
    WrongArgumentCountError,
)

ZERO_ARGUMENT_COMMANDS: frozenset[Command] = frozenset(
    {Command.LIST, Command.HELP, Command.PATHS},
)
SINGLE_ARGUMENT_COMMANDS: frozenset[Command] = frozenset(
    {Command.ADD, Command.REMOVE, Command.SHOW},
)


def validate(state: ParseState) -> None:
    """Raise a :class:`~cmdbox.exceptions.UsageError` if *state* is unusable.

    Raises
    ------
    NoCommandError
        No selector and no help request.
    HelpExclusivityError
        Help requested alongside another command.
    UnexpectedGlobalArgsError
        Tokens left over before the selector.
    TooManyArgumentsError
        A zero-argument command received arguments.
    WrongArgumentCountError
        A single-argument command did not receive exactly one.
    """
    command = state.command

    if command is Command.NONE and not state.help_requested:
        expected = ", ".join(c.value for c in Command if c is not Command.NONE)
        raise NoCommandError(f"No command specified (expected one of: {expected}).")

    if state.help_requested and command not in (Command.HELP, Command.NONE):
        raise HelpExclusivityError(
            f"Help cannot be combined with '{command.value}'.",
        )

    if state.global_args:
        raise UnexpectedGlobalArgsError(
            f"Unexpected argument(s): {' '.join(state.global_args)}",
        )

    count = len(state.command_args)

    if command in ZERO_ARGUMENT_COMMANDS and count:
        raise TooManyArgumentsError(
            f"'{command.value}' takes no arguments (got {count}).",
        )

    if command in SINGLE_ARGUMENT_COMMANDS and count != 1:
        raise WrongArgumentCountError(
            f"'{command.value}' takes exactly one alias (got {count}).",
        )
