"""Flat-file implementation of :class:`~cmdbox.core.protocols.AliasStore`.

One script per file; ``namespace/name`` maps to a subdirectory.  The
same class backs the user's own store and, read-only, every included
directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from cmdbox.core.aliases import ALIAS_RE
from cmdbox.exceptions import StorageError

logger = logging.getLogger(__name__)


class FileAliasStore:
    """Aliases stored as files below *root*.

    The root directory is created lazily on the first write, so a fresh
    ``CMD_VARDIR`` works without setup.
    """

    def __init__(self, root: Path) -> None:
        self._root: Path = root

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, alias: str) -> Path:
        return self._root.joinpath(*alias.split("/"))

    def exists(self, alias: str) -> bool:
        return self.path_for(alias).is_file()

    def create(self, alias: str) -> Path:
        path = self.path_for(alias)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=False)
        except OSError as exc:
            raise StorageError(f"Cannot create {path}: {exc}") from exc
        logger.debug("Created %s", path)
        return path

    def delete(self, alias: str) -> None:
        path = self.path_for(alias)
        try:
            path.unlink()
            parent = path.parent
            if parent != self._root and not any(parent.iterdir()):
                parent.rmdir()
        except OSError as exc:
            raise StorageError(f"Cannot remove {path}: {exc}") from exc
        logger.debug("Deleted %s", path)

    def iter_aliases(self) -> Iterator[str]:
        if not self._root.is_dir():
            return
        try:
            candidates = sorted(self._root.rglob("*"))
        except OSError as exc:
            raise StorageError(f"Cannot read {self._root}: {exc}") from exc

        for path in candidates:
            relative = path.relative_to(self._root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if not path.is_file():
                continue
            name = relative.as_posix()
            if not ALIAS_RE.match(name):
                logger.debug("Skipping %s: not addressable as an alias", path)
                continue
            yield name
