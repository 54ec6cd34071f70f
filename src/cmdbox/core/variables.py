"""Execution variables — ``name=value`` parsing and ``{{name}}`` rendering.

Pure functions only.  The runner exports the parsed variables into the
child environment as well, so scripts can use either ``{{name}}`` or
``$name``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from cmdbox.exceptions import InvalidVariableError, MissingVariableError

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"
_NAME_RE = re.compile(rf"^{_NAME}$")
PLACEHOLDER_RE = re.compile(rf"\{{\{{\s*({_NAME})\s*\}}\}}")
"""Matches ``{{name}}`` with optional whitespace inside the braces."""


def parse_assignments(tokens: Iterable[str]) -> dict[str, str]:
    """Parse ``name=value`` tokens into a dict.

    The value is everything after the first ``=`` and may be empty.
    A later assignment to the same name overrides an earlier one.

    Raises
    ------
    InvalidVariableError
        If a token has no ``=`` or the name is not an identifier.
    """
    values: dict[str, str] = {}
    for token in tokens:
        name, sep, value = token.partition("=")
        if not sep or not _NAME_RE.match(name):
            raise InvalidVariableError(
                f"Invalid variable assignment: {token}",
                hint="Pass variables as name=value, e.g. host=example.org",
            )
        values[name] = value
    return values


def placeholders(template: str) -> set[str]:
    """Return the names of all placeholders in *template*."""
    return set(PLACEHOLDER_RE.findall(template))


def render(template: str, values: Mapping[str, str]) -> str:
    """Substitute every placeholder in *template* from *values*.

    Raises
    ------
    MissingVariableError
        If any placeholder has no value.
    """
    missing = sorted(placeholders(template) - values.keys())
    if missing:
        raise MissingVariableError(
            f"Missing value for: {', '.join(missing)}",
            hint="Pass " + " ".join(f"{name}=..." for name in missing),
        )
    return PLACEHOLDER_RE.sub(lambda match: values[match.group(1)], template)
