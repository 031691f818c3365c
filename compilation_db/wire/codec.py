"""Conversion between Entry and its on-disk wire records.

WHY: The domain model speaks in path text and argument tuples; the file
speaks in UTF-8 strings and one of two record shapes. Both directions
are needed: ``from_entry`` for save, ``into_entry`` for load.

HOW: ``from_entry`` checks every path is encodable as UTF-8 and copies
its text unchanged, then picks the record shape from the
DatabaseFormat. ``into_entry`` undoes it: ArrayEntry arguments pass
through, StringEntry commands go through shellwords.split.

RULES:
- A path or command token that is not valid UTF-8 raises
  PathEncodingError before any record is produced
- Array form copies the arguments verbatim; string form shell-joins them
- Paths are copied as-is in both directions, no normalization
- A command string that cannot be split raises ConversionError naming
  the record's file
"""

from __future__ import annotations

import os
from typing import Optional

from compilation_db.core import shellwords
from compilation_db.core.entry import Entry
from compilation_db.core.errors import ConversionError, PathEncodingError
from compilation_db.core.format import DatabaseFormat
from compilation_db.wire.records import AnyWireRecord, ArrayEntry, StringEntry


def _encodable(text: str, original: object) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathEncodingError(original) from exc
    return text


def path_to_string(path: str) -> str:
    """Return the path text unchanged, or raise PathEncodingError.

    Paths decoded from undecodable bytes carry lone surrogates, which have
    no UTF-8 encoding.
    """
    return _encodable(os.fsdecode(path), path)


def _optional_path_to_string(path: Optional[str]) -> Optional[str]:
    if path is None:
        return None
    return path_to_string(path)


def from_entry(entry: Entry, fmt: DatabaseFormat) -> AnyWireRecord:
    """Convert an Entry into the wire record selected by ``fmt``."""
    directory = path_to_string(entry.directory)
    file = path_to_string(entry.file)
    output = _optional_path_to_string(entry.output)
    arguments = [_encodable(arg, arg) for arg in entry.command]

    if fmt.is_command_as_array():
        return ArrayEntry(
            directory=directory,
            file=file,
            arguments=arguments,
            output=output,
        )
    return StringEntry(
        directory=directory,
        file=file,
        command=shellwords.join(arguments),
        output=output,
    )


def into_entry(record: AnyWireRecord) -> Entry:
    """Rebuild an Entry from a wire record."""
    if isinstance(record, ArrayEntry):
        command = list(record.arguments)
    elif isinstance(record, StringEntry):
        try:
            command = shellwords.split(record.command)
        except shellwords.ShellwordsError as exc:
            raise ConversionError(
                f"Failed to split command of {record.file}: "
                f"{exc} in {record.command!r}"
            ) from exc
    else:
        raise TypeError(f"Unknown wire record type: {type(record).__name__}")

    return Entry(
        directory=record.directory,
        file=record.file,
        command=command,
        output=record.output,
    )
