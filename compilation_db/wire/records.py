"""On-disk record shapes of a JSON compilation database.

WHY: compile_commands.json exists in two dialects. Newer producers write
the argument vector as an ``arguments`` array; older ones write a single
shell-escaped ``command`` string. Readers must accept both, even mixed
in one file, and the file carries no field saying which is which.

HOW: Two dataclasses, ArrayEntry and StringEntry, share the WireRecord
base and form a closed variant. ``record_from_dict`` picks the shape by
looking at the keys present. ``validate_document`` checks a whole parsed
document against the bundled JSON Schema before any record is built.

RULES:
- An ``arguments`` list of strings means ArrayEntry
- A ``command`` string means StringEntry
- When both are present, ``command`` wins and ``arguments`` is ignored
- ``output`` is omitted from to_dict() when None, never written as null
- An explicit ``"output": null`` on input is treated as absent
- Unknown keys are ignored on input
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from compilation_db.core.errors import DeserializationError

_SCHEMA_PATH = Path(__file__).resolve().parent / "compilation_database.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def validate_document(document: Any) -> None:
    """Check a parsed JSON document against the compilation database schema.

    Raises:
        DeserializationError: If the document is not an array of objects
            in one of the two record shapes. The message names the
            failing location, e.g. ``$[3].command``.
    """
    try:
        jsonschema.validate(instance=document, schema=_get_schema())
    except jsonschema.ValidationError as exc:
        location = "$" + "".join(
            f"[{part}]" if isinstance(part, int) else f".{part}"
            for part in exc.absolute_path
        )
        raise DeserializationError(
            f"Invalid compilation database at {location}: {exc.message}"
        ) from exc


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise DeserializationError(f"Field {key!r} must be a string, got {value!r}")
    return value


def _optional_text(data: Dict[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _text(data, key)


@dataclass
class WireRecord(ABC):
    """Fields shared by both record shapes.

    Subclasses add the command field and implement ``to_dict``.
    """

    directory: str
    file: str

    def _head(self) -> Dict[str, Any]:
        return {"directory": self.directory, "file": self.file}

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready object for this record."""


@dataclass
class ArrayEntry(WireRecord):
    """Record with the command as an explicit argument list."""

    arguments: List[str]
    output: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ArrayEntry:
        arguments = data.get("arguments")
        if not isinstance(arguments, list) or not all(isinstance(a, str) for a in arguments):
            raise DeserializationError(
                f"Field 'arguments' must be a list of strings, got {arguments!r}"
            )
        return cls(
            directory=_text(data, "directory"),
            file=_text(data, "file"),
            arguments=list(arguments),
            output=_optional_text(data, "output"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = self._head()
        result["arguments"] = list(self.arguments)
        if self.output is not None:
            result["output"] = self.output
        return result


@dataclass
class StringEntry(WireRecord):
    """Record with the command as one shell-escaped string."""

    command: str
    output: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StringEntry:
        return cls(
            directory=_text(data, "directory"),
            file=_text(data, "file"),
            command=_text(data, "command"),
            output=_optional_text(data, "output"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = self._head()
        result["command"] = self.command
        if self.output is not None:
            result["output"] = self.output
        return result


AnyWireRecord = Union[ArrayEntry, StringEntry]


def record_from_dict(data: Any) -> AnyWireRecord:
    """Build the matching record shape from one decoded JSON object.

    Raises:
        DeserializationError: If the object matches neither shape.
    """
    if not isinstance(data, dict):
        raise DeserializationError(f"Expected a JSON object, got {type(data).__name__}")
    if isinstance(data.get("command"), str):
        return StringEntry.from_dict(data)
    if isinstance(data.get("arguments"), list):
        return ArrayEntry.from_dict(data)
    raise DeserializationError(
        "Entry has neither an 'arguments' list nor a 'command' string: "
        f"{json.dumps(data, ensure_ascii=False)}"
    )
