"""Included-directory registry backed by a plain text file.

Format: UTF-8, one absolute path per line, insertion order.  Blank
lines and lines starting with ``#`` are ignored.  A missing file is an
empty registry.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cmdbox.exceptions import StorageError

logger = logging.getLogger(__name__)


class FileDirectoryRegistry:
    """Concrete :class:`~cmdbox.core.protocols.DirectoryRegistry`."""

    def __init__(self, registry_file: Path) -> None:
        self._file: Path = registry_file

    def paths(self) -> list[Path]:
        if not self._file.exists():
            return []
        try:
            text = self._file.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file}: {exc}") from exc
        return [
            Path(line.strip())
            for line in text.splitlines()
            if line.strip() and not line.lstrip().startswith("#")
        ]

    def add(self, directory: Path) -> bool:
        current = self.paths()
        if directory in current:
            return False
        self._write([*current, directory])
        logger.info("Included %s", directory)
        return True

    def remove(self, directory: Path) -> bool:
        current = self.paths()
        if directory not in current:
            return False
        self._write([path for path in current if path != directory])
        logger.info("Excluded %s", directory)
        return True

    def _write(self, paths: list[Path]) -> None:
        content = "".join(f"{path}\n" for path in paths)
        try:
            self._file.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file}: {exc}") from exc
