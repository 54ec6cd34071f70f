"""Custom exception hierarchy for cmdbox.

All exceptions that cross layer boundaries must inherit from
:class:`CmdboxError`.  Raw ``OSError`` and ``subprocess`` failures
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CmdboxError
├── UsageError
│   ├── InvalidOptionError
│   ├── NoCommandError
│   ├── HelpExclusivityError
│   ├── UnexpectedGlobalArgsError
│   ├── WrongArgumentCountError
│   └── TooManyArgumentsError
├── InvalidAliasError
├── AliasNotFoundError
├── AliasExistsError
├── AliasReadOnlyError
├── EmptyScriptError
├── InvalidVariableError
├── MissingVariableError
├── DirectoryNotFoundError
├── DirectoryNotIncludedError
├── StorageError
├── EditorError
├── ScriptExecutionError
└── EnvironmentCheckError
    ├── VarDirUndefinedError
    └── VarDirNotDirectoryError
"""

from __future__ import annotations

HELP_HINT: str = "Run 'cmd --help' for usage."


class CmdboxError(Exception):
    """Base exception for all cmdbox errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(CmdboxError):
    """Raised when the command line itself is malformed."""

    def __init__(self, message: str, *, hint: str | None = HELP_HINT) -> None:
        super().__init__(message, hint=hint)


class InvalidOptionError(UsageError):
    """Raised for a dash-prefixed token that is not a known option."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Invalid option: {option}")
        self.option: str = option


class NoCommandError(UsageError):
    """Raised when no command selector was given."""


class HelpExclusivityError(UsageError):
    """Raised when help is combined with another command."""


class UnexpectedGlobalArgsError(UsageError):
    """Raised when stray tokens precede the command selector."""


class WrongArgumentCountError(UsageError):
    """Raised when a command receives the wrong number of arguments."""


class TooManyArgumentsError(UsageError):
    """Raised when a zero-argument command receives arguments."""


# --- Aliases ---------------------------------------------------------------

class InvalidAliasError(CmdboxError):
    """Raised when an alias name is not ``name`` or ``namespace/name``."""


class AliasNotFoundError(CmdboxError):
    """Raised when an alias is neither stored nor included."""


class AliasExistsError(CmdboxError):
    """Raised when adding an alias that is already stored."""


class AliasReadOnlyError(CmdboxError):
    """Raised when modifying an alias that lives in an included directory."""


class EmptyScriptError(CmdboxError):
    """Raised when a newly added alias was saved without content."""


# --- Execution variables ---------------------------------------------------

class InvalidVariableError(CmdboxError):
    """Raised when an execute argument is not a ``name=value`` pair."""


class MissingVariableError(CmdboxError):
    """Raised when a script placeholder has no value."""


# --- Included directories --------------------------------------------------

class DirectoryNotFoundError(CmdboxError):
    """Raised when including a path that is not an existing directory."""


class DirectoryNotIncludedError(CmdboxError):
    """Raised when excluding a directory that was never included."""


# --- External systems ------------------------------------------------------

class StorageError(CmdboxError):
    """Raised when the alias store or registry cannot be read or written."""


class EditorError(CmdboxError):
    """Raised when the editor cannot be launched or exits abnormally."""


class ScriptExecutionError(CmdboxError):
    """Raised when a script cannot be started."""


# --- Environment -----------------------------------------------------------

class EnvironmentCheckError(CmdboxError):
    """Raised when a required environment precondition is not met."""


class VarDirUndefinedError(EnvironmentCheckError):
    """Raised when ``CMD_VARDIR`` is unset or empty."""


class VarDirNotDirectoryError(EnvironmentCheckError):
    """Raised when ``CMD_VARDIR`` does not name an existing directory."""
