"""Allow ``python -m cmdbox`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cmdbox`` behaves identically to the ``cmd`` console
script.
"""

from __future__ import annotations

from cmdbox.cli.app import cli

if __name__ == "__main__":
    cli()
