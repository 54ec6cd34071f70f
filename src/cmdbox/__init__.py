"""cmdbox — personal command and script manager.

Save one-liners under an alias, list them, edit them and run them with
variable substitution, from a single ``cmd`` executable.
"""

from cmdbox.version import __version__

__all__: list[str] = ["__version__"]
