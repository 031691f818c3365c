"""Compilation database persistence: compile_commands.json in and out.

WHY: Static-analysis tools need to know exactly how each source file was
compiled. A compilation database records that once, at build time, as a
JSON file. This package owns the in-memory model of such a database and
its two on-disk encodings.

HOW: Three layers, each independently testable:
  core/      the Entry model, DatabaseFormat and the shellword codec
  wire/      the two JSON record shapes and Entry <-> record conversion
  database   file I/O and load/save orchestration

RULES:
- Entry identity is (directory, file, command); output is not part of it
- Records are detected by shape on load; DatabaseFormat only affects save
- A failed save never truncates the destination file
- A failed load never returns partial results
"""

from compilation_db.core.entry import Entries, Entry, collect_entries
from compilation_db.core.errors import (
    CompilationDatabaseError,
    ConversionError,
    DeserializationError,
    PathEncodingError,
    SerializationError,
)
from compilation_db.core.format import DatabaseFormat
from compilation_db.database import Database

__version__ = "0.1.0"

__all__ = [
    "CompilationDatabaseError",
    "ConversionError",
    "Database",
    "DatabaseFormat",
    "DeserializationError",
    "Entries",
    "Entry",
    "PathEncodingError",
    "SerializationError",
    "collect_entries",
]
