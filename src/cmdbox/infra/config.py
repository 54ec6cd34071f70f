"""Infrastructure: runtime environment check and settings.

All configuration comes from environment variables and is read once,
before the command line is parsed.  ``CMD_VARDIR`` is mandatory and
must name an existing directory; everything else has a default.

Rules
-----
* The environment is passed in explicitly — no hidden ``os.environ``
  reads, so tests never depend on the caller's shell.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from cmdbox.exceptions import VarDirNotDirectoryError, VarDirUndefinedError

VARDIR_VAR: str = "CMD_VARDIR"
LOG_LEVEL_VAR: str = "CMD_LOG_LEVEL"

DEFAULT_EDITOR: str = "vi"
DEFAULT_SHELL: str = "/bin/sh"
DEFAULT_LOG_LEVEL: int = logging.WARNING

ALIASES_DIRNAME: str = "aliases"
REGISTRY_FILENAME: str = "include_dirs"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved runtime configuration.

    Attributes
    ----------
    var_dir : Path
        Data directory from ``CMD_VARDIR``.
    editor : str
        Editor command line, split with :mod:`shlex` when launched.
    shell : str
        Interpreter for scripts without a shebang line.
    log_level : int
        Threshold for diagnostic logging.
    """

    var_dir: Path
    editor: str = DEFAULT_EDITOR
    shell: str = DEFAULT_SHELL
    log_level: int = DEFAULT_LOG_LEVEL

    @property
    def aliases_dir(self) -> Path:
        return self.var_dir / ALIASES_DIRNAME

    @property
    def registry_file(self) -> Path:
        return self.var_dir / REGISTRY_FILENAME


def load_settings(environ: Mapping[str, str]) -> Settings:
    """Build :class:`Settings` from *environ*.

    Raises
    ------
    VarDirUndefinedError
        If ``CMD_VARDIR`` is unset or empty.
    VarDirNotDirectoryError
        If ``CMD_VARDIR`` is not an existing directory.
    """
    raw_var_dir = environ.get(VARDIR_VAR, "")
    if not raw_var_dir:
        raise VarDirUndefinedError(
            f"{VARDIR_VAR} is not defined.",
            hint=f"export {VARDIR_VAR}=<directory where aliases are stored>",
        )

    var_dir = Path(raw_var_dir).expanduser()
    if not var_dir.is_dir():
        raise VarDirNotDirectoryError(
            f"{VARDIR_VAR} is not a directory: {raw_var_dir}",
            hint=f"mkdir -p {raw_var_dir}",
        )

    return Settings(
        var_dir=var_dir,
        editor=environ.get("EDITOR") or DEFAULT_EDITOR,
        shell=environ.get("SHELL") or DEFAULT_SHELL,
        log_level=_parse_log_level(environ.get(LOG_LEVEL_VAR, "")),
    )


def _parse_log_level(raw: str) -> int:
    """Map a level name such as ``debug`` to its number, else the default."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL
