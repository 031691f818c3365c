"""Configuration defaults and .env loading.

WHY: The file name of the database, the default record shape and the
JSON indentation are the only knobs this package has. Keeping them as
plain module-level data makes them easy to find and to override from
the environment without touching code.

HOW: python-dotenv loads a .env file on import. Each default is read
with os.getenv and parsed by a small helper that fails loudly on
malformed values.

RULES:
- COMPILATION_DB_FILENAME overrides the database file name
- COMPILATION_DB_COMMAND_AS_ARRAY selects the default record shape for
  DatabaseFormat.from_config() (plain DatabaseFormat() is always array form)
- COMPILATION_DB_JSON_INDENT sets the pretty-print indent (>= 0)
- Malformed values raise ValueError instead of silently falling back
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the working directory, if there is one
load_dotenv()

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(value: str) -> bool:
    """Parse an environment flag.

    Accepts 1/true/yes/on and 0/false/no/off, case-insensitive, ignoring
    surrounding whitespace.

    Raises:
        ValueError: For anything else.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean value: {value!r}")


def parse_indent(value: str) -> int:
    """Parse a JSON indent width; must be a non-negative integer."""
    try:
        indent = int(value.strip())
    except ValueError:
        raise ValueError(f"JSON indent must be an integer, got {value!r}") from None
    if indent < 0:
        raise ValueError(f"JSON indent must not be negative, got {indent}")
    return indent


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_DATABASE_FILENAME = os.getenv("COMPILATION_DB_FILENAME", "compile_commands.json")
DEFAULT_COMMAND_AS_ARRAY = parse_bool(os.getenv("COMPILATION_DB_COMMAND_AS_ARRAY", "true"))
JSON_INDENT = parse_indent(os.getenv("COMPILATION_DB_JSON_INDENT", "4"))


def default_database_path(directory: str | os.PathLike[str] | None = None) -> Path:
    """Return the default database path inside ``directory``.

    Uses the current working directory when no directory is given.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    return base / DEFAULT_DATABASE_FILENAME
