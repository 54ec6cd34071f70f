"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
handlers must satisfy.  Core code depends ONLY on these protocols —
never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Protocol


class Collaborators(Protocol):
    """Operations the dispatcher binds commands to.

    Every method receives only strings and returns a process exit code.
    """

    def add(self, alias: str) -> int: ...  # pragma: no cover

    def remove(self, alias: str) -> int: ...  # pragma: no cover

    def execute(self, *args: str) -> int: ...  # pragma: no cover

    def list(self) -> int: ...  # pragma: no cover

    def include(self, *dirs: str) -> int: ...  # pragma: no cover

    def exclude(self, *dirs: str) -> int: ...  # pragma: no cover

    def show(self, alias: str) -> int: ...  # pragma: no cover

    def paths(self) -> int: ...  # pragma: no cover

    def usage(self) -> int: ...  # pragma: no cover


class AliasStore(Protocol):
    """A directory of script files addressed by alias."""

    @property
    def root(self) -> Path: ...  # pragma: no cover

    def path_for(self, alias: str) -> Path:
        """Return the file that does or would hold *alias*."""
        ...  # pragma: no cover

    def exists(self, alias: str) -> bool: ...  # pragma: no cover

    def create(self, alias: str) -> Path:
        """Create an empty file for *alias* and return its path.

        Raises
        ------
        StorageError
            When the file cannot be created.
        """
        ...  # pragma: no cover

    def delete(self, alias: str) -> None:
        """Delete *alias*, pruning its namespace directory when empty.

        Raises
        ------
        StorageError
            When the file cannot be removed.
        """
        ...  # pragma: no cover

    def iter_aliases(self) -> Iterator[str]:
        """Yield every alias in the store, in no particular order."""
        ...  # pragma: no cover


class DirectoryRegistry(Protocol):
    """Persistent, ordered list of included directories."""

    def paths(self) -> list[Path]: ...  # pragma: no cover

    def add(self, directory: Path) -> bool:
        """Register *directory*; return ``False`` if already present."""
        ...  # pragma: no cover

    def remove(self, directory: Path) -> bool:
        """Unregister *directory*; return ``False`` if it was absent."""
        ...  # pragma: no cover


class Editor(Protocol):
    """Opens a file for interactive editing."""

    def open(self, path: Path) -> None:
        """Block until the user closes the editor.

        Raises
        ------
        EditorError
            When the editor cannot be started or fails.
        """
        ...  # pragma: no cover


class ScriptRunner(Protocol):
    """Runs rendered script text."""

    def run(self, script: str, variables: Mapping[str, str]) -> int:
        """Run *script* with *variables* exported and return its status.

        Raises
        ------
        ScriptExecutionError
            When the script cannot be started.
        """
        ...  # pragma: no cover
