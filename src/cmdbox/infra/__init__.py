"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, the editor and
the shell.  Every raw ``OSError`` must be caught here and re-raised as
a :class:`~cmdbox.exceptions.CmdboxError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cmdbox.infra.config import Settings, load_settings
from cmdbox.infra.editor import SubprocessEditor
from cmdbox.infra.registry import FileDirectoryRegistry
from cmdbox.infra.runner import ShellScriptRunner
from cmdbox.infra.store import FileAliasStore

__all__: list[str] = [
    "FileAliasStore",
    "FileDirectoryRegistry",
    "Settings",
    "ShellScriptRunner",
    "SubprocessEditor",
    "load_settings",
]
