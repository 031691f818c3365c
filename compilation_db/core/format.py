"""Output format options for writing a compilation database.

WHY: Consumers of compile_commands.json disagree on the shape they want.
Some read the ``arguments`` array, older ones only understand the single
``command`` string. The writer needs one place to hold that choice and
any future ones (omitting ``output``, relative paths, ...).

HOW: DatabaseFormat is a small mutable object with fluent setters.
Loading never consults it: record shape is detected per record.

RULES:
- command_as_array defaults to True on plain construction
- Setters return the same object so calls can be chained
- from_config() is the only path that reads the environment
"""

from __future__ import annotations

from compilation_db import config


class DatabaseFormat:
    """Selects how entries are encoded on save."""

    def __init__(self) -> None:
        self._command_as_array = True

    @classmethod
    def from_config(cls) -> DatabaseFormat:
        """Build a format from the environment-driven defaults in config."""
        return cls().set_command_as_array(config.DEFAULT_COMMAND_AS_ARRAY)

    def set_command_as_array(self, value: bool) -> DatabaseFormat:
        self._command_as_array = bool(value)
        return self

    def is_command_as_array(self) -> bool:
        return self._command_as_array

    def __repr__(self) -> str:
        return f"DatabaseFormat(command_as_array={self._command_as_array})"
