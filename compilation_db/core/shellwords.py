"""Shellword codec: argument list <-> one POSIX-shell-quoted string.

WHY: The "string" form of a compilation database stores the whole build
command as a single shell-escaped string. Writing it needs a join that
quotes every argument; reading it back needs a split that undoes exactly
that quoting.

HOW: ``join`` runs each argument through ``shlex.quote`` and glues them
with single spaces. ``split`` is ``shlex.split`` in POSIX mode with
comment handling off, so a ``#`` inside a flag stays literal.

RULES:
- split(join(argv)) == argv for every argv without embedded NUL bytes
- Safe tokens stay bare: join(["cc", "-c", "a.c"]) == "cc -c a.c"
- The empty argument becomes '' and survives the round trip
- An empty list joins to "" and "" splits to []
- Malformed input (unbalanced quote, trailing escape) raises ShellwordsError
"""

from __future__ import annotations

import shlex
from typing import Iterable, List


class ShellwordsError(ValueError):
    """Raised when a string cannot be split under POSIX shell rules."""


def join(argv: Iterable[str]) -> str:
    """Quote each argument for a POSIX shell and join them with spaces."""
    return " ".join(shlex.quote(arg) for arg in argv)


def split(text: str) -> List[str]:
    """Split a shell-quoted string back into its argument list.

    Raises:
        ShellwordsError: If the text is not well-formed shell input.
        TypeError: If text is not a string. ``shlex.split(None)`` would
            otherwise block reading stdin.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    try:
        return shlex.split(text, comments=False, posix=True)
    except ValueError as exc:
        raise ShellwordsError(str(exc)) from exc
