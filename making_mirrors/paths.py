"""Expansion of environment variables and ``~`` in file paths."""

from __future__ import annotations

import os
import re
from pathlib import Path

# $NAME, ${NAME}, one-character special names such as $1 or $$, and the
# malformed forms "${" and "${}", which expand to nothing.
_VARIABLE = re.compile(
    r"\$(?:\{(?P<braced>[^}]*)\}"
    r"|(?P<open>\{)"
    r"|(?P<special>[*#$@!?\-0-9])"
    r"|(?P<name>[A-Za-z0-9_]+))"
)


def _substitute(match: re.Match) -> str:
    if match.group("open") is not None:
        return ""
    name = match.group("braced")
    if name is None:
        name = match.group("special") or match.group("name")
    return os.environ.get(name, "")


def expand_path(path: str) -> str:
    """Expand environment variables, then a leading ``~/``, in ``path``.

    Undefined variables expand to the empty string.
    """
    path = _VARIABLE.sub(_substitute, path)
    if path.startswith("~/"):
        path = os.path.normpath(os.path.join(Path.home(), path[2:]))
    return path