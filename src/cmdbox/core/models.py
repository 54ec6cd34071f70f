"""Domain models for cmdbox.

All models are **frozen** dataclasses or enums — immutable value
objects with no behaviour beyond data access.  They carry zero I/O and
zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Command selector
# ---------------------------------------------------------------------------

class Command(enum.Enum):
    """Closed set of operations selectable from the command line."""

    ADD = "add"
    REMOVE = "remove"
    EXECUTE = "execute"
    LIST = "list"
    INCLUDE = "include"
    EXCLUDE = "exclude"
    PATHS = "paths"
    SHOW = "show"
    HELP = "help"
    NONE = "none"


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseState:
    """Result of parsing one invocation.

    Built fresh per invocation, read by the validator and the
    dispatcher, then discarded.
    """

    command: Command = Command.NONE
    """The single selected command."""

    command_args: tuple[str, ...] = ()
    """Every token after the selector, verbatim."""

    global_args: tuple[str, ...] = ()
    """Non-option tokens that appeared before any selector."""

    help_requested: bool = False
    """Whether help was asked for.

    The parser only sets this together with :attr:`Command.HELP`;
    states built by hand may combine it with another command, which
    the validator rejects.
    """


# ---------------------------------------------------------------------------
# Catalog entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AliasEntry:
    """A script visible in the catalog."""

    name: str
    """Alias in posix form, e.g. ``deploy`` or ``git/undo``."""

    path: Path
    """File holding the script."""

    origin: Path | None = None
    """Included directory the script comes from, ``None`` when local."""

    @property
    def read_only(self) -> bool:
        return self.origin is not None
