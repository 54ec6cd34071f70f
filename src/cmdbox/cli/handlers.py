"""Command handlers — the collaborators the dispatcher calls.

Each public method implements one command on top of the core catalog
and the infrastructure adapters, renders its output via Rich and
returns an exit code.  Domain failures are raised as
:class:`~cmdbox.exceptions.CmdboxError` subclasses and rendered by the
error boundary in :mod:`cmdbox.cli.app`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from pathlib import Path

from rich.markup import escape

from cmdbox.cli import exit_codes
from cmdbox.cli.console import console, stdout_console
from cmdbox.cli.usage import USAGE
from cmdbox.core.aliases import AliasCatalog
from cmdbox.core.protocols import DirectoryRegistry, Editor, ScriptRunner
from cmdbox.core.variables import parse_assignments, placeholders, render
from cmdbox.exceptions import (
    DirectoryNotFoundError,
    DirectoryNotIncludedError,
    EmptyScriptError,
    StorageError,
    WrongArgumentCountError,
)
from cmdbox.infra.config import Settings

logger = logging.getLogger(__name__)


def _confirm(message: str) -> bool | None:
    """Ask a yes/no question; ``None`` when the prompt was cancelled."""
    import questionary

    return questionary.confirm(message, default=False).ask()


class CommandHandlers:
    """Concrete :class:`~cmdbox.core.protocols.Collaborators`.

    Parameters
    ----------
    catalog:
        Alias lookup and local-store mutations.
    registry:
        Included-directory registry.
    editor:
        Used by ``add`` and ``show``.
    runner:
        Used by ``execute``.
    confirm:
        Yes/no prompt used by ``remove``; only called on a terminal.
    interactive:
        Whether stdin is a terminal.  Defaults to ``sys.stdin.isatty()``.
    """

    def __init__(
        self,
        catalog: AliasCatalog,
        registry: DirectoryRegistry,
        editor: Editor,
        runner: ScriptRunner,
        *,
        confirm: Callable[[str], bool | None] = _confirm,
        interactive: bool | None = None,
    ) -> None:
        self._catalog = catalog
        self._registry = registry
        self._editor = editor
        self._runner = runner
        self._confirm = confirm
        self._interactive = sys.stdin.isatty() if interactive is None else interactive

    # ------------------------------------------------------------------
    # Alias commands
    # ------------------------------------------------------------------

    def add(self, alias: str) -> int:
        path = self._catalog.create(alias)
        try:
            self._editor.open(path)
        except BaseException:
            # An aborted edit must not leave an empty alias behind.
            self._catalog.discard(alias)
            raise

        if not _read_text(path).strip():
            self._catalog.discard(alias)
            raise EmptyScriptError(
                f"Nothing saved for {alias}; the alias was not created.",
            )

        console.print(f"[green]Added[/green] {escape(alias)}")
        return exit_codes.SUCCESS

    def show(self, alias: str) -> int:
        entry = self._catalog.resolve(alias)
        logger.debug("Opening %s from %s", alias, entry.path)
        self._editor.open(entry.path)
        return exit_codes.SUCCESS

    def remove(self, alias: str) -> int:
        self._catalog.removable(alias)

        if self._interactive:
            answer = self._confirm(f"Remove alias {alias}?")
            if not answer:
                console.print("[yellow]Nothing removed.[/yellow]")
                return exit_codes.GENERAL_ERROR

        self._catalog.discard(alias)
        console.print(f"[green]Removed[/green] {escape(alias)}")
        return exit_codes.SUCCESS

    def execute(self, *args: str) -> int:
        if not args:
            raise WrongArgumentCountError("'execute' requires an alias.")

        alias, *assignments = args
        values = parse_assignments(assignments)
        entry = self._catalog.resolve(alias)
        template = _read_text(entry.path)

        unused = sorted(values.keys() - placeholders(template))
        if unused:
            logger.info("No placeholder for %s; exported only", ", ".join(unused))

        script = render(template, values)
        return self._runner.run(script, values)

    def list(self) -> int:
        for entry in self._catalog.entries():
            if entry.origin is None:
                stdout_console.print(escape(entry.name))
            else:
                stdout_console.print(
                    f"{escape(entry.name)}  [dim]({escape(str(entry.origin))})[/dim]",
                )
        return exit_codes.SUCCESS

    # ------------------------------------------------------------------
    # Included directories
    # ------------------------------------------------------------------

    def include(self, *dirs: str) -> int:
        if not dirs:
            raise WrongArgumentCountError("'include' requires at least one directory.")

        resolved: list[Path] = []
        for raw in dirs:
            directory = Path(raw).expanduser()
            if not directory.is_dir():
                raise DirectoryNotFoundError(f"Not a directory: {raw}")
            resolved.append(directory.resolve())

        for directory in resolved:
            if self._registry.add(directory):
                console.print(f"[green]Included[/green] {escape(str(directory))}")
            else:
                console.print(f"[yellow]Already included:[/yellow] {escape(str(directory))}")
        return exit_codes.SUCCESS

    def exclude(self, *dirs: str) -> int:
        if not dirs:
            raise WrongArgumentCountError("'exclude' requires at least one directory.")

        included = set(self._registry.paths())
        resolved = [Path(raw).expanduser().resolve() for raw in dirs]
        for raw, directory in zip(dirs, resolved):
            if directory not in included:
                raise DirectoryNotIncludedError(
                    f"Not an included directory: {raw}",
                    hint="Run 'cmd paths' to see included directories.",
                )

        # Repeated arguments are excluded and reported once.
        for directory in dict.fromkeys(resolved):
            if self._registry.remove(directory):
                console.print(f"[green]Excluded[/green] {escape(str(directory))}")
        return exit_codes.SUCCESS

    def paths(self) -> int:
        for directory in self._registry.paths():
            if directory.is_dir():
                stdout_console.print(escape(str(directory)))
            else:
                stdout_console.print(
                    f"{escape(str(directory))}  [yellow](missing)[/yellow]",
                )
        return exit_codes.SUCCESS

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def usage(self) -> int:
        stdout_console.print(USAGE, markup=False, emoji=False)
        return exit_codes.SUCCESS


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot read {path}: {exc}") from exc


def build_handlers(settings: Settings, environ: Mapping[str, str]) -> CommandHandlers:
    """Wire the concrete infrastructure for *settings*."""
    from cmdbox.infra.editor import SubprocessEditor
    from cmdbox.infra.registry import FileDirectoryRegistry
    from cmdbox.infra.runner import ShellScriptRunner
    from cmdbox.infra.store import FileAliasStore

    registry = FileDirectoryRegistry(settings.registry_file)
    catalog = AliasCatalog(
        FileAliasStore(settings.aliases_dir),
        lambda: [FileAliasStore(path) for path in registry.paths()],
    )
    return CommandHandlers(
        catalog,
        registry,
        SubprocessEditor(settings.editor),
        ShellScriptRunner(settings.shell, environ),
    )
