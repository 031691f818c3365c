"""The domain record of a compilation database and its set semantics.

WHY: A compilation database answers "how was this file compiled?". Each
answer is one Entry: the working directory, the source file, the
argument vector and, optionally, the produced artifact. Producers emit
the same compilation more than once (re-runs, multi-output rules), so
entries live in a set and duplicates collapse.

HOW: Entry is a frozen dataclass. ``output`` is declared with
``compare=False`` so the generated ``__eq__`` and ``__hash__`` only see
``(directory, file, command)``. The command is stored as a tuple to keep
the record hashable. ``collect_entries`` builds an Entries set with a
deterministic tie-break.

RULES:
- Identity is (directory, file, command); output is ignored
- Paths are stored as the exact text given, never canonicalized or
  validated: "/build/" and "/build" are different directories here
- Bytes paths are decoded with os.fsdecode; undecodable bytes survive as
  surrogate escapes and are rejected later by the wire codec
- The command may be empty
- collect_entries is first-write-wins: the earliest duplicate survives
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Set, Tuple, Union

logger = logging.getLogger(__name__)

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _to_text(value: PathInput) -> str:
    return os.fsdecode(value)


@dataclass(frozen=True)
class Entry:
    """One build command recorded in the compilation database.

    Attributes:
        directory: Working directory the command ran in.
        file: The compiled source file.
        command: Argument vector, program name first.
        output: Produced object or artifact, if known. Not part of identity.
    """

    directory: str
    file: str
    command: Tuple[str, ...]
    output: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.command, (str, bytes)):
            raise TypeError("command must be a sequence of arguments, not a string")
        object.__setattr__(self, "directory", _to_text(self.directory))
        object.__setattr__(self, "file", _to_text(self.file))
        object.__setattr__(self, "command", tuple(self.command))
        if self.output is not None:
            object.__setattr__(self, "output", _to_text(self.output))


Entries = Set[Entry]


def collect_entries(entries: Iterable[Entry]) -> Entries:
    """Build an Entries set, keeping the first of any duplicates.

    Two entries are duplicates when they differ only in ``output``. The
    one seen first in iteration order is kept; later ones are dropped.
    """
    result: Entries = set()
    for entry in entries:
        if entry in result:
            logger.debug("Dropping duplicate entry for %s", entry.file)
            continue
        result.add(entry)
    return result
