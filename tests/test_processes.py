"""Tests for the editor and script runner adapters (infra/).

The editor is exercised with ``subprocess.run`` mocked.  The runner
executes real ``/bin/sh`` one-liners and is skipped where no POSIX
shell is available.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cmdbox.exceptions import EditorError, ScriptExecutionError
from cmdbox.infra.editor import SubprocessEditor
from cmdbox.infra.runner import ShellScriptRunner

posix_shell = pytest.mark.skipif(
    os.name != "posix" or shutil.which("sh") is None,
    reason="requires a POSIX shell",
)


# ---------------------------------------------------------------------------
# SubprocessEditor
# ---------------------------------------------------------------------------

class TestSubprocessEditor:
    @patch("cmdbox.infra.editor.subprocess.run")
    def test_appends_path_to_split_command(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        target = tmp_path / "alias"

        SubprocessEditor("code --wait").open(target)

        mock_run.assert_called_once_with(["code", "--wait", str(target)], check=False)

    @patch("cmdbox.infra.editor.subprocess.run")
    def test_non_zero_exit(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=3)
        with pytest.raises(EditorError, match="status 3"):
            SubprocessEditor("vi").open(tmp_path / "x")

    @patch("cmdbox.infra.editor.subprocess.run", side_effect=FileNotFoundError("no vi"))
    def test_missing_editor(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        with pytest.raises(EditorError) as exc_info:
            SubprocessEditor("vi").open(tmp_path / "x")
        assert exc_info.value.hint == "Set $EDITOR to an installed editor."

    def test_empty_command(self) -> None:
        with pytest.raises(EditorError):
            SubprocessEditor("   ")


# ---------------------------------------------------------------------------
# ShellScriptRunner
# ---------------------------------------------------------------------------

@posix_shell
class TestShellScriptRunner:
    def _runner(self) -> ShellScriptRunner:
        return ShellScriptRunner("/bin/sh", {"PATH": os.environ.get("PATH", "/usr/bin:/bin")})

    def test_returns_exit_status(self) -> None:
        assert self._runner().run("exit 3\n", {}) == 3

    def test_variables_are_exported(self, tmp_path: Path) -> None:
        out = tmp_path / "out"
        code = self._runner().run(f'printf "%s" "$greeting" > "{out}"\n', {"greeting": "hi"})
        assert code == 0
        assert out.read_text() == "hi"

    def test_shebang_scripts_run_directly(self, tmp_path: Path) -> None:
        out = tmp_path / "out"
        script = f'#!/bin/sh\necho direct > "{out}"\n'
        assert self._runner().run(script, {}) == 0
        assert out.read_text() == "direct\n"

    def test_temporary_file_is_removed(self, tmp_path: Path) -> None:
        out = tmp_path / "out"
        self._runner().run(f'printf "%s" "$0" > "{out}"\n', {})
        assert not Path(out.read_text()).exists()

    def test_missing_shell(self) -> None:
        runner = ShellScriptRunner("/nonexistent/shell", {})
        with pytest.raises(ScriptExecutionError):
            runner.run("true\n", {})
