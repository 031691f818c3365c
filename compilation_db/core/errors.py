"""Error hierarchy for the compilation database core.

WHY: Callers need to tell a broken file apart from a bad record apart
from an unencodable path, and they need one base class to catch all of
them at once.

HOW: Every logical failure derives from CompilationDatabaseError. Each
concrete error also derives from ValueError, since all of them describe
bad data rather than a bad environment. I/O failures are not wrapped:
the built-in OSError family propagates unchanged.

RULES:
- Always chain the underlying cause (``raise ... from exc``)
- OSError is never caught and re-raised as a package error
- ConversionError.errors holds one message per failing record
"""

from __future__ import annotations

from typing import List, Optional


class CompilationDatabaseError(Exception):
    """Base class for every error raised by this package."""


class PathEncodingError(CompilationDatabaseError, ValueError):
    """A path or text field cannot be represented as UTF-8.

    Raised while converting an Entry into its wire form, before any file
    is opened, so a failing save never truncates the destination.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Failed to convert to string: {value!r}")


class ConversionError(CompilationDatabaseError, ValueError):
    """A wire record cannot be turned into an Entry.

    When raised by ``Database.load`` it aggregates every failing record:
    ``errors`` lists the individual messages and the exception message is
    those messages joined with ``", "``.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        self.errors = list(errors) if errors is not None else [message]
        super().__init__(message)

    @classmethod
    def aggregate(cls, errors: List[str]) -> ConversionError:
        return cls(", ".join(errors), errors)


class DeserializationError(CompilationDatabaseError, ValueError):
    """File content is not valid JSON or matches neither record shape."""


class SerializationError(CompilationDatabaseError, ValueError):
    """Wire records could not be encoded as JSON."""
