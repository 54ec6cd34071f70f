"""Shared pytest fixtures and configuration for the cmdbox test suite.

Guidelines
----------
* No test reads the caller's environment — ``main()`` receives an
  explicit ``environ`` mapping.
* The editor is always faked; no terminal interaction.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cmdbox.cli.handlers import CommandHandlers
from cmdbox.core.aliases import AliasCatalog
from cmdbox.infra.registry import FileDirectoryRegistry
from cmdbox.infra.store import FileAliasStore


class FakeEditor:
    """Records opened paths and optionally writes *content* into them."""

    def __init__(self, content: str | None = None) -> None:
        self.content = content
        self.opened: list[Path] = []

    def open(self, path: Path) -> None:
        self.opened.append(path)
        if self.content is not None:
            path.write_text(self.content, encoding="utf-8")


class FakeRunner:
    """Records scripts instead of running them."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[str, dict[str, str]]] = []

    def run(self, script: str, variables: dict[str, str]) -> int:
        self.calls.append((script, dict(variables)))
        return self.returncode


@pytest.fixture()
def var_dir(tmp_path: Path) -> Path:
    path = tmp_path / "var"
    path.mkdir()
    return path


@pytest.fixture()
def environ(var_dir: Path) -> dict[str, str]:
    return {"CMD_VARDIR": str(var_dir), "SHELL": "/bin/sh", "EDITOR": "true"}


@pytest.fixture()
def registry(var_dir: Path) -> FileDirectoryRegistry:
    return FileDirectoryRegistry(var_dir / "include_dirs")


@pytest.fixture()
def local_store(var_dir: Path) -> FileAliasStore:
    return FileAliasStore(var_dir / "aliases")


@pytest.fixture()
def catalog(
    local_store: FileAliasStore,
    registry: FileDirectoryRegistry,
) -> AliasCatalog:
    return AliasCatalog(
        local_store,
        lambda: [FileAliasStore(path) for path in registry.paths()],
    )


def _write_script(root: Path, alias: str, text: str) -> Path:
    path = root.joinpath(*alias.split("/"))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture()
def write_script() -> Callable[[Path, str, str], Path]:
    """Return a helper creating *alias* below *root* with *text* as its body."""
    return _write_script


@pytest.fixture()
def fake_editor() -> FakeEditor:
    return FakeEditor(content="echo hello\n")


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def handlers(
    catalog: AliasCatalog,
    registry: FileDirectoryRegistry,
    fake_editor: FakeEditor,
    fake_runner: FakeRunner,
) -> CommandHandlers:
    return CommandHandlers(
        catalog,
        registry,
        fake_editor,
        fake_runner,
        interactive=False,
    )
