"""Command dispatcher — binds a validated parse state to one handler."""

from __future__ import annotations

import logging

from cmdbox.core.models import Command, ParseState
from cmdbox.core.protocols import Collaborators

logger = logging.getLogger(__name__)


def dispatch(state: ParseState, collaborators: Collaborators) -> int:
    """Invoke the collaborator bound to ``state.command``.

    Help is checked first and short-circuits everything else.  Arguments
    are passed through untouched; the return value is the collaborator's
    exit code.
    """
    if state.help_requested:
        return collaborators.usage()

    command = state.command
    args = state.command_args
    logger.debug("Dispatching %s", command.value)

    if command is Command.ADD:
        return collaborators.add(args[0])
    if command is Command.REMOVE:
        return collaborators.remove(args[0])
    if command is Command.EXECUTE:
        return collaborators.execute(*args)
    if command is Command.LIST:
        return collaborators.list()
    if command is Command.INCLUDE:
        return collaborators.include(*args)
    if command is Command.EXCLUDE:
        return collaborators.exclude(*args)
    if command is Command.SHOW:
        return collaborators.show(args[0])
    if command is Command.PATHS:
        return collaborators.paths()

    # HELP without the flag, or NONE from a hand-built state.
    return collaborators.usage()
