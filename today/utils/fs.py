#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for dated entries.

Entries are flat files named by ISO date inside one directory:

    entries/
    ├── 2024-01-14.md
    └── 2024-01-15.md

The fixed-width YYYY-MM-DD name means lexicographic order of filenames is
chronological order.

Functions:
    list_entry_paths: All entry files in a directory, sorted
    entry_path: Path of the entry for a given date
    parse_date_from_filename: Date of an entry from its filename
    date_to_filename: Entry filename for a date
    ensure_entries_dir: Create the entries directory if needed
    read_entry / write_entry: Raw byte I/O with EntryIOError on failure

Usage:
    from today.utils.fs import entry_path, list_entry_paths

    today_path = entry_path(entries_dir, date.today())
    previous = list_entry_paths(entries_dir)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
from datetime import date
from pathlib import Path
from typing import List

# --- Local imports ---
from today.core.exceptions import EntryIOError

ENTRY_SUFFIX = ".md"
ENTRY_NAME_PATTERN = r"^\d{4}-\d{2}-\d{2}\.md$"
ENTRY_FILE_MODE = 0o644
ENTRIES_DIR_MODE = 0o755


def is_entry_filename(name: str) -> bool:
    """Check whether a filename looks like YYYY-MM-DD.md."""
    return re.match(ENTRY_NAME_PATTERN, name) is not None


def date_to_filename(day: date) -> str:
    """
    Convert a date to an entry filename.

    Examples:
        >>> date_to_filename(date(2024, 1, 5))
        '2024-01-05.md'
    """
    return f"{day.isoformat()}{ENTRY_SUFFIX}"


def entry_path(entries_dir: Path, day: date) -> Path:
    """Path of the entry for `day` inside `entries_dir`."""
    return Path(entries_dir) / date_to_filename(day)


def parse_date_from_filename(path: Path) -> date:
    """
    Parse the date of an entry from its filename.

    Args:
        path: Entry path such as entries/2024-01-15.md

    Returns:
        datetime.date for the entry

    Raises:
        ValueError: If the filename is not a valid YYYY-MM-DD.md name
    """
    name = Path(path).name
    if not is_entry_filename(name):
        raise ValueError(f"Not an entry filename: {name}")
    try:
        return date.fromisoformat(Path(name).stem)
    except ValueError as e:
        raise ValueError(f"Invalid date in filename: {name}") from e


def list_entry_paths(entries_dir: Path) -> List[Path]:
    """
    List all entry files in a directory, sorted oldest first.

    Only regular files named YYYY-MM-DD.md are returned; subdirectories and
    other files are ignored.

    Raises:
        EntryIOError: If the directory cannot be listed
    """
    entries_dir = Path(entries_dir)
    try:
        paths = [
            child
            for child in entries_dir.iterdir()
            if is_entry_filename(child.name) and child.is_file()
        ]
    except OSError as e:
        raise EntryIOError(f"listing entries: {e.strerror or e}", entries_dir) from e
    return sorted(paths, key=lambda p: p.name)


def ensure_entries_dir(entries_dir: Path) -> Path:
    """
    Create the entries directory (and parents) if it does not exist.

    Raises:
        EntryIOError: If the directory cannot be created
    """
    entries_dir = Path(entries_dir)
    try:
        entries_dir.mkdir(mode=ENTRIES_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise EntryIOError(
            f"creating entries directory: {e.strerror or e}", entries_dir
        ) from e
    return entries_dir


def read_entry(path: Path) -> bytes:
    """
    Read the raw content of an entry.

    Raises:
        EntryIOError: If the file does not exist or cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise EntryIOError(f"reading entry: {e.strerror or e}", Path(path)) from e


def write_entry(path: Path, content: bytes) -> None:
    """
    Write raw content to an entry, creating or truncating it.

    New files are created with mode 0644 (subject to the umask).

    Raises:
        EntryIOError: If the file cannot be written
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, ENTRY_FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
    except OSError as e:
        raise EntryIOError(f"writing entry: {e.strerror or e}", Path(path)) from e
