"""Tests for alias validation and the catalog (core/aliases.py).

The catalog runs on real :class:`FileAliasStore` instances inside
``tmp_path`` — no files outside the test directory are touched.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cmdbox.core.aliases import AliasCatalog, validate_alias
from cmdbox.exceptions import (
    AliasExistsError,
    AliasNotFoundError,
    AliasReadOnlyError,
    InvalidAliasError,
)
from cmdbox.infra.registry import FileDirectoryRegistry
from cmdbox.infra.store import FileAliasStore

WriteScript = Callable[[Path, str, str], Path]


class TestValidateAlias:
    @pytest.mark.parametrize("alias", ["deploy", "git/undo", "a.b-c_d", "_x", "v2/1.0"])
    def test_accepts(self, alias: str) -> None:
        assert validate_alias(alias) == alias

    @pytest.mark.parametrize(
        "alias",
        ["", "a/b/c", "../etc", "/abs", ".hidden", "ns/.hidden", "with space", "a/", "-x"],
    )
    def test_rejects(self, alias: str) -> None:
        with pytest.raises(InvalidAliasError):
            validate_alias(alias)


class TestResolve:
    def test_local_alias(
        self, catalog: AliasCatalog, local_store: FileAliasStore, write_script: WriteScript,
    ) -> None:
        path = write_script(local_store.root, "ns/job", "echo job")
        entry = catalog.resolve("ns/job")
        assert entry.path == path
        assert entry.origin is None
        assert not entry.read_only

    def test_included_alias(
        self,
        catalog: AliasCatalog,
        registry: FileDirectoryRegistry,
        tmp_path: Path,
        write_script: WriteScript,
    ) -> None:
        shared = tmp_path / "shared"
        path = write_script(shared, "tool", "echo tool")
        registry.add(shared)

        entry = catalog.resolve("tool")
        assert entry.path == path
        assert entry.origin == shared
        assert entry.read_only

    def test_local_shadows_included(
        self,
        catalog: AliasCatalog,
        local_store: FileAliasStore,
        registry: FileDirectoryRegistry,
        tmp_path: Path,
        write_script: WriteScript,
    ) -> None:
        shared = tmp_path / "shared"
        write_script(shared, "tool", "included")
        local = write_script(local_store.root, "tool", "local")
        registry.add(shared)

        assert catalog.resolve("tool").path == local

    def test_first_included_directory_wins(
        self,
        catalog: AliasCatalog,
        registry: FileDirectoryRegistry,
        tmp_path: Path,
        write_script: WriteScript,
    ) -> None:
        first = write_script(tmp_path / "one", "tool", "1")
        write_script(tmp_path / "two", "tool", "2")
        registry.add(tmp_path / "one")
        registry.add(tmp_path / "two")

        assert catalog.resolve("tool").path == first

    def test_unknown_alias(self, catalog: AliasCatalog) -> None:
        with pytest.raises(AliasNotFoundError, match="nope"):
            catalog.resolve("nope")

    def test_invalid_alias(self, catalog: AliasCatalog) -> None:
        with pytest.raises(InvalidAliasError):
            catalog.resolve("../escape")


class TestEntries:
    def test_empty_catalog(self, catalog: AliasCatalog) -> None:
        assert catalog.entries() == []

    def test_sorted_and_deduplicated(
        self,
        catalog: AliasCatalog,
        local_store: FileAliasStore,
        registry: FileDirectoryRegistry,
        tmp_path: Path,
        write_script: WriteScript,
    ) -> None:
        shared = tmp_path / "shared"
        write_script(local_store.root, "zed", "z")
        write_script(local_store.root, "git/undo", "u")
        write_script(shared, "zed", "shadowed")
        write_script(shared, "backup", "b")
        registry.add(shared)

        entries = catalog.entries()
        assert [entry.name for entry in entries] == ["backup", "git/undo", "zed"]
        assert [entry.origin for entry in entries] == [shared, None, None]


class TestMutations:
    def test_create_makes_empty_file(
        self, catalog: AliasCatalog, local_store: FileAliasStore,
    ) -> None:
        path = catalog.create("ns/new")
        assert path == local_store.root / "ns" / "new"
        assert path.read_text() == ""

    def test_create_existing_fails(
        self, catalog: AliasCatalog, local_store: FileAliasStore, write_script: WriteScript,
    ) -> None:
        write_script(local_store.root, "dup", "x")
        with pytest.raises(AliasExistsError) as exc_info:
            catalog.create("dup")
        assert exc_info.value.hint == "Run 'cmd show dup' to edit it."

    def test_create_may_shadow_included(
        self,
        catalog: AliasCatalog,
        registry: FileDirectoryRegistry,
        tmp_path: Path,
        write_script: WriteScript,
    ) -> None:
        write_script(tmp_path / "shared", "tool", "x")
        registry.add(tmp_path / "shared")
        assert catalog.create("tool").is_file()

    def test_removable_rejects_included(
        self,
        catalog: AliasCatalog,
        registry: FileDirectoryRegistry,
        tmp_path: Path,
        write_script: WriteScript,
    ) -> None:
        write_script(tmp_path / "shared", "tool", "x")
        registry.add(tmp_path / "shared")
        with pytest.raises(AliasReadOnlyError):
            catalog.removable("tool")

    def test_removable_unknown(self, catalog: AliasCatalog) -> None:
        with pytest.raises(AliasNotFoundError):
            catalog.removable("ghost")
