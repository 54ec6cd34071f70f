"""Command-line argument parser.

Turns the raw argument list into a :class:`~cmdbox.core.models.ParseState`.
The first selector token wins and everything after it is opaque payload
for the selected command, including tokens that look like options or
other selectors.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cmdbox.core.models import Command, ParseState
from cmdbox.exceptions import InvalidOptionError

logger = logging.getLogger(__name__)


SELECTORS: dict[str, Command] = {
    "add": Command.ADD,
    "a": Command.ADD,
    "remove": Command.REMOVE,
    "r": Command.REMOVE,
    "execute": Command.EXECUTE,
    "e": Command.EXECUTE,
    "list": Command.LIST,
    "l": Command.LIST,
    "include": Command.INCLUDE,
    "inc": Command.INCLUDE,
    "exclude": Command.EXCLUDE,
    "exc": Command.EXCLUDE,
    "paths": Command.PATHS,
    "p": Command.PATHS,
    "show": Command.SHOW,
    "s": Command.SHOW,
    "help": Command.HELP,
    "h": Command.HELP,
    "-h": Command.HELP,
    "--help": Command.HELP,
}
"""Every accepted spelling mapped to its canonical command."""

END_OF_OPTIONS: str = "--"


def parse(args: Sequence[str]) -> ParseState:
    """Parse *args* (``argv`` without the program name).

    Raises
    ------
    InvalidOptionError
        When a dash-prefixed token other than ``-h``/``--help`` or
        ``--`` appears before the selector.
    """
    if not args:
        return ParseState()

    # Every possible leading token is decisive, so scanning never
    # proceeds past the first one.
    head, rest = args[0], tuple(args[1:])

    command = SELECTORS.get(head)
    if command is not None:
        logger.debug("Selected %s with args %r", command.value, rest)
        return ParseState(
            command=command,
            command_args=rest,
            help_requested=command is Command.HELP,
        )

    if head == END_OF_OPTIONS:
        return ParseState(global_args=rest)

    if head.startswith("-"):
        raise InvalidOptionError(head)

    return ParseState(global_args=(head, *rest))
