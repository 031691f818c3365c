"""Reading and writing a JSON compilation database file.

WHY: Producers hand over a set of entries and a format and expect a
complete file; consumers point at a file and expect the full set back.
Neither side wants to deal with record shapes, shell quoting or
half-written files.

HOW: Database is a stateless handle bound to one path. ``save``
converts every entry first, encodes the whole document in memory and
only then opens the destination, so any conversion or encoding failure
leaves the old file untouched. ``load`` parses and schema-checks the
document, converts every record, and fails as a whole if any record
fails, reporting all of them at once.

RULES:
- File handles never outlive a single load/save call
- OSError from open/read/write propagates unchanged
- save sorts records by (file, directory, command) for stable output
- load reports every failing record in one ConversionError and returns
  nothing if any record fails
- Duplicate entries on load collapse first-write-wins (earliest in file)
- No locking: concurrent saves to one path race, last writer wins
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from compilation_db import config
from compilation_db.core.entry import Entries, Entry, collect_entries
from compilation_db.core.errors import (
    ConversionError,
    DeserializationError,
    SerializationError,
)
from compilation_db.core.format import DatabaseFormat
from compilation_db.wire.codec import from_entry, into_entry
from compilation_db.wire.records import record_from_dict, validate_document

logger = logging.getLogger(__name__)


def _sort_key(entry: Entry) -> Tuple[str, str, Tuple[str, ...]]:
    return (str(entry.file), str(entry.directory), entry.command)


class Database:
    """A JSON compilation database stored at one path.

    Args:
        path: Location of the database file. Defaults to
            ``compile_commands.json`` (or $COMPILATION_DB_FILENAME) in the
            current working directory.
    """

    def __init__(self, path: Optional[Union[str, "os.PathLike[str]"]] = None) -> None:
        self._path = Path(path) if path is not None else config.default_database_path()

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"Database({str(self._path)!r})"

    def exists(self) -> bool:
        """Whether the backing file is present."""
        return self._path.is_file()

    def load(self) -> Entries:
        """Read the file and rebuild its entries.

        Returns:
            The set of entries in the file.

        Raises:
            OSError: If the file cannot be opened or read.
            DeserializationError: If the content is not valid JSON or a
                record matches neither shape.
            ConversionError: If one or more records cannot be converted.
                The error lists every failing record.
        """
        with open(self._path, encoding="utf-8") as f:
            try:
                document = json.load(f)
            except ValueError as exc:
                raise DeserializationError(f"Failed to parse {self._path}: {exc}") from exc

        validate_document(document)
        records = [record_from_dict(item) for item in document]

        entries: List[Entry] = []
        errors: List[str] = []
        for record in records:
            try:
                entries.append(into_entry(record))
            except ConversionError as exc:
                logger.warning("Unconvertible record in %s: %s", self._path, exc)
                errors.append(str(exc))
        if errors:
            raise ConversionError.aggregate(errors)

        result = collect_entries(entries)
        logger.info("Loaded %d entries from %s", len(result), self._path)
        return result

    def save(self, entries: Iterable[Entry], fmt: Optional[DatabaseFormat] = None) -> None:
        """Write ``entries`` to the file, replacing its content.

        Args:
            entries: The entries to store.
            fmt: Record shape options. Defaults to ``DatabaseFormat()``
                (argument arrays).

        Raises:
            PathEncodingError: If a path or argument is not valid UTF-8.
                Raised before the file is opened.
            SerializationError: If the records cannot be encoded as JSON.
            OSError: If the file cannot be created or written.
        """
        if fmt is None:
            fmt = DatabaseFormat()
        logger.debug("Saving %s with %r", self._path, fmt)

        records = [from_entry(entry, fmt) for entry in sorted(entries, key=_sort_key)]
        try:
            content = json.dumps(
                [record.to_dict() for record in records],
                indent=config.JSON_INDENT,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Failed to encode {self._path}: {exc}") from exc

        with open(self._path, "w", encoding="utf-8") as f:
            f.write(content)
            f.write("\n")
        logger.info("Saved %d entries to %s", len(records), self._path)
