"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""A known CmdboxError was caught. User-facing message was displayed."""

VARDIR_UNDEFINED: int = 1
"""``CMD_VARDIR`` is not set."""

VARDIR_NOT_A_DIRECTORY: int = 2
"""``CMD_VARDIR`` does not point at an existing directory."""

USAGE_ERROR: int = 64
"""The command line was rejected.  Matches BSD ``EX_USAGE``."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries (``EX_SOFTWARE``)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
