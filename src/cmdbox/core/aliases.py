"""Alias catalog — the local store merged with included directories.

The catalog owns the lookup rules: the local store is consulted first,
then each included directory in registry order, and the first match
wins.  It performs no I/O of its own; all file access goes through the
:class:`~cmdbox.core.protocols.AliasStore` instances it is given.

Guarantees
----------
* Only :class:`~cmdbox.exceptions.CmdboxError` subclasses escape.
* Aliases from included directories are never modified.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path

from cmdbox.core.models import AliasEntry
from cmdbox.core.protocols import AliasStore
from cmdbox.exceptions import (
    AliasExistsError,
    AliasNotFoundError,
    AliasReadOnlyError,
    InvalidAliasError,
)

_SEGMENT = r"[A-Za-z0-9_][A-Za-z0-9_.-]*"
ALIAS_RE = re.compile(rf"^{_SEGMENT}(?:/{_SEGMENT})?$")
"""``name`` or ``namespace/name``."""


def validate_alias(alias: str) -> str:
    """Return *alias* unchanged or raise :class:`InvalidAliasError`."""
    if not ALIAS_RE.match(alias):
        raise InvalidAliasError(
            f"Invalid alias: {alias!r}",
            hint="Use letters, digits, '_', '.', '-' as name or namespace/name.",
        )
    return alias


class AliasCatalog:
    """Resolve, enumerate and mutate aliases.

    Parameters
    ----------
    local:
        Writable store for aliases created by the user.
    included:
        Callable returning the read-only stores of the currently
        included directories, in lookup order.  A callable keeps the
        catalog in step with the registry between operations.
    """

    def __init__(
        self,
        local: AliasStore,
        included: Callable[[], Sequence[AliasStore]],
    ) -> None:
        self._local: AliasStore = local
        self._included: Callable[[], Sequence[AliasStore]] = included

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def resolve(self, alias: str) -> AliasEntry:
        """Find the entry visible under *alias*.

        Raises
        ------
        InvalidAliasError
            If *alias* is malformed.
        AliasNotFoundError
            If no store holds *alias*.
        """
        validate_alias(alias)
        if self._local.exists(alias):
            return AliasEntry(name=alias, path=self._local.path_for(alias))
        for store in self._included():
            if store.exists(alias):
                return AliasEntry(
                    name=alias,
                    path=store.path_for(alias),
                    origin=store.root,
                )
        raise AliasNotFoundError(
            f"Alias not found: {alias}",
            hint="Run 'cmd list' to see available aliases.",
        )

    def entries(self) -> list[AliasEntry]:
        """Return every visible entry sorted by name.

        Shadowed entries (same name in an earlier store) are omitted.
        """
        seen: dict[str, AliasEntry] = {}
        for name in self._local.iter_aliases():
            seen[name] = AliasEntry(name=name, path=self._local.path_for(name))
        for store in self._included():
            for name in store.iter_aliases():
                if name not in seen:
                    seen[name] = AliasEntry(
                        name=name,
                        path=store.path_for(name),
                        origin=store.root,
                    )
        return [seen[name] for name in sorted(seen)]

    # ------------------------------------------------------------------
    # Mutations (local store only)
    # ------------------------------------------------------------------

    def create(self, alias: str) -> Path:
        """Create an empty local script for *alias*.

        Raises
        ------
        InvalidAliasError
            If *alias* is malformed.
        AliasExistsError
            If the local store already holds *alias*.
        """
        validate_alias(alias)
        if self._local.exists(alias):
            raise AliasExistsError(
                f"Alias already exists: {alias}",
                hint=f"Run 'cmd show {alias}' to edit it.",
            )
        return self._local.create(alias)

    def discard(self, alias: str) -> None:
        """Delete a local alias without lookup checks."""
        self._local.delete(alias)

    def removable(self, alias: str) -> AliasEntry:
        """Resolve *alias* and make sure it can be removed.

        Raises
        ------
        AliasReadOnlyError
            If *alias* only exists in an included directory.
        """
        entry = self.resolve(alias)
        if entry.read_only:
            raise AliasReadOnlyError(
                f"Alias {alias} belongs to included directory {entry.origin}",
                hint="Delete the file there or run 'cmd exclude' on the directory.",
            )
        return entry
