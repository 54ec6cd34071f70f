"""Infrastructure: running rendered scripts.

The rendered script is written to a private temporary file and run
either directly (when it starts with a ``#!`` line) or through the
configured shell.  Execution is not sandboxed.
"""

from __future__ import annotations

import logging
import os
import stat
import subprocess
import tempfile
from collections.abc import Mapping
from pathlib import Path

from cmdbox.exceptions import ScriptExecutionError

logger = logging.getLogger(__name__)

SHEBANG: str = "#!"


class ShellScriptRunner:
    """Concrete :class:`~cmdbox.core.protocols.ScriptRunner`.

    Parameters
    ----------
    shell:
        Interpreter used for scripts without a shebang line.
    base_env:
        Environment the child inherits before *variables* are applied.
    """

    def __init__(self, shell: str, base_env: Mapping[str, str]) -> None:
        self._shell: str = shell
        self._base_env: dict[str, str] = dict(base_env)

    def run(self, script: str, variables: Mapping[str, str]) -> int:
        try:
            fd, name = tempfile.mkstemp(prefix="cmdbox-", suffix=".sh")
        except OSError as exc:
            raise ScriptExecutionError(f"Cannot create temporary script: {exc}") from exc

        path = Path(name)
        argv = [str(path)] if script.startswith(SHEBANG) else [self._shell, str(path)]
        env = {**self._base_env, **variables}
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(script)
            path.chmod(stat.S_IRWXU)
            logger.debug("Running %s", argv)
            completed = subprocess.run(argv, env=env, check=False)
        except OSError as exc:
            raise ScriptExecutionError(
                f"Cannot run script: {exc}",
                hint="Check the shebang line or $SHELL.",
            ) from exc
        finally:
            path.unlink(missing_ok=True)

        logger.debug("Script exited with %d", completed.returncode)
        return completed.returncode
