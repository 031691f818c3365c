"""Shared test fixtures for the compilation_db test suite.

WHY: Most test modules need the same handful of realistic entries and a
database path inside an isolated temporary directory.

HOW: Pytest fixtures return fresh Entry objects and a Database bound to
a file under tmp_path.

RULES:
- All file I/O happens under tmp_path.
- Entries use absolute POSIX-style paths like a real build tree.
"""

import pytest

from compilation_db import Database, Entry


@pytest.fixture
def simple_entry():
    """The canonical one-file entry: /build/a.c compiled with cc -c a.c."""
    return Entry(directory="/build", file="/build/a.c", command=["cc", "-c", "a.c"])


@pytest.fixture
def sample_entries():
    """A small build: three sources, two with outputs and awkward flags."""
    return {
        Entry(
            directory="/build",
            file="/build/a.c",
            command=["cc", "-c", "a.c"],
        ),
        Entry(
            directory="/build/sub dir",
            file="/src/b.c",
            command=["cc", "-DMSG=\"hello world\"", "-I", "it's here", "-c", "/src/b.c", "-o", "b.o"],
            output="/build/sub dir/b.o",
        ),
        Entry(
            directory="/build",
            file="/src/c.cpp",
            command=["c++", "-std=c++17", "-O2", "-Wall", "", "-c", "/src/c.cpp"],
            output="/build/c.o",
        ),
    }


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "compile_commands.json"


@pytest.fixture
def database(db_path):
    return Database(db_path)
