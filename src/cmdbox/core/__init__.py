"""Core layer — parsing, validation, dispatch and catalog rules.

Rules
-----
* No ``print()`` calls.
* No filesystem or process I/O.
* No imports from ``cli`` or ``infra``.
"""

from cmdbox.core.aliases import AliasCatalog, validate_alias
from cmdbox.core.dispatcher import dispatch
from cmdbox.core.models import AliasEntry, Command, ParseState
from cmdbox.core.parser import SELECTORS, parse
from cmdbox.core.protocols import (
    AliasStore,
    Collaborators,
    DirectoryRegistry,
    Editor,
    ScriptRunner,
)
from cmdbox.core.validator import validate

__all__: list[str] = [
    "SELECTORS",
    "AliasCatalog",
    "AliasEntry",
    "AliasStore",
    "Collaborators",
    "Command",
    "DirectoryRegistry",
    "Editor",
    "ParseState",
    "ScriptRunner",
    "dispatch",
    "parse",
    "validate",
    "validate_alias",
]
