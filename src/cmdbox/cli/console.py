"""Shared Rich consoles for the CLI layer.

Data meant for pipes (alias lists, paths, usage) goes to
:data:`stdout_console`; diagnostics, errors and log records go to
:data:`console` on stderr.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True)
"""Diagnostics console (stderr)."""

stdout_console = Console(soft_wrap=True, highlight=False)
"""Data console (stdout).  Soft wrap keeps one record per line."""
