"""Usage text for ``cmd --help``."""

from __future__ import annotations

from cmdbox.version import __version__

USAGE: str = f"""\
cmd {__version__} — save, list and run your own commands

Usage: cmd <command> [args...]

Commands:
  a, add <alias>                 Create a new alias and open it in $EDITOR
  r, remove <alias>              Remove an alias
  e, execute <alias> [var=value...]
                                 Run an alias, substituting {{{{var}}}} placeholders
  l, list                        List all aliases, local and included
  s, show <alias>                Open an alias in $EDITOR to inspect or edit it
  inc, include <dir...>          Add directories whose scripts become aliases
  exc, exclude <dir...>          Stop including directories
  p, paths                       Show the included directories
  h, help, -h, --help            Show this help message

An alias is either 'name' or 'namespace/name'.

Environment:
  CMD_VARDIR                     Directory where aliases are stored (required)
  EDITOR                         Editor for add and show (default: vi)
  SHELL                          Shell for scripts without '#!' (default: /bin/sh)
  CMD_LOG_LEVEL                  Diagnostic log level (default: WARNING)
"""
