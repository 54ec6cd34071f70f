"""Infrastructure: launching the user's editor.

This module is the **only** place that spawns the editor.  Launch
failures and non-zero editor exits are re-raised as
:class:`~cmdbox.exceptions.EditorError`.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from cmdbox.exceptions import EditorError

logger = logging.getLogger(__name__)


class SubprocessEditor:
    """Concrete :class:`~cmdbox.core.protocols.Editor`.

    Parameters
    ----------
    command:
        Editor command line, e.g. ``"code --wait"``.  The file path is
        appended as the last argument.
    """

    def __init__(self, command: str) -> None:
        self._argv: list[str] = shlex.split(command)
        if not self._argv:
            raise EditorError("Editor command is empty.", hint="Set $EDITOR.")

    def open(self, path: Path) -> None:
        argv = [*self._argv, str(path)]
        logger.debug("Running editor: %s", shlex.join(argv))
        try:
            completed = subprocess.run(argv, check=False)
        except OSError as exc:
            raise EditorError(
                f"Cannot start editor {self._argv[0]}: {exc}",
                hint="Set $EDITOR to an installed editor.",
            ) from exc
        if completed.returncode != 0:
            raise EditorError(
                f"Editor exited with status {completed.returncode}.",
            )
