#!/usr/bin/env python3
"""
forward.py
-------------------
Create or carry forward today's entry.

Each run ends in one of three actions:

    no entries yet            -> CREATE_BLANK: write "# YYYY-MM-DD\\n"
    latest entry is today's   -> NOOP: leave it untouched
    latest entry is older     -> FORWARD: transform it into today's entry

Selection (`select_entry_action`) and content transformation (`transform`)
are pure; `create_or_forward` performs the filesystem work.

Programmatic API:
    from today.pipeline.forward import create_or_forward
    selection = create_or_forward(entries_dir, date.today(), bankruptcy_level=2)
    print(selection.today_path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

# --- Local imports ---
from today.core.logging_manager import TodayLogger, safe_logger
from today.pipeline.bankruptcy import undergo_bankruptcy
from today.utils.fs import (
    ensure_entries_dir,
    entry_path,
    list_entry_paths,
    read_entry,
    write_entry,
)
from today.utils.md import DEFAULT_RULES, MarkdownRules, make_heading, rewrite_date_heading


class EntryAction(Enum):
    """What to do about today's entry."""

    CREATE_BLANK = "create_blank"
    NOOP = "noop"
    FORWARD = "forward"


@dataclass(frozen=True)
class EntrySelection:
    """
    Outcome of entry selection.

    Attributes:
        action: Chosen action
        today_path: Path of today's entry
        source_path: Entry to forward from (FORWARD only)
    """

    action: EntryAction
    today_path: Path
    source_path: Optional[Path] = None


def select_entry_action(entry_paths: Sequence[Path], today_path: Path) -> EntrySelection:
    """
    Decide how to produce today's entry.

    The latest entry is the one with the greatest filename; with
    YYYY-MM-DD names that is the most recent date.

    Args:
        entry_paths: Existing entry paths (any order)
        today_path: Path today's entry would have

    Returns:
        EntrySelection describing the action
    """
    today_path = Path(today_path)
    if not entry_paths:
        return EntrySelection(EntryAction.CREATE_BLANK, today_path)

    latest = Path(max(entry_paths, key=lambda p: Path(p).name))
    if latest == today_path:
        return EntrySelection(EntryAction.NOOP, today_path)
    return EntrySelection(EntryAction.FORWARD, today_path, source_path=latest)


def transform(
    content: bytes,
    today: date,
    bankruptcy_level: Optional[int] = None,
    rules: MarkdownRules = DEFAULT_RULES,
) -> bytes:
    """
    Turn a previous entry's content into today's content.

    Rewrites a leading "# YYYY-MM-DD" heading to today's date, then, when
    a bankruptcy level is given, prunes sections nested deeper than it.

    Args:
        content: Raw content of the previous entry
        today: Date for the new heading
        bankruptcy_level: Pruning cutoff, or None to keep everything
        rules: Line patterns

    Returns:
        Content for today's entry
    """
    content = rewrite_date_heading(content, today, rules)
    if bankruptcy_level is None:
        return content
    return undergo_bankruptcy(content, bankruptcy_level, rules)


def create_or_forward(
    entries_dir: Path,
    today: date,
    bankruptcy_level: Optional[int] = None,
    logger: Optional[TodayLogger] = None,
) -> EntrySelection:
    """
    Make sure today's entry exists.

    Implementation Logic:
    ---------------------
    1. Create the entries directory if it is missing
    2. List existing entries and pick an action
    3. CREATE_BLANK writes just today's heading; FORWARD reads the latest
       entry, transforms it and writes the result; NOOP writes nothing

    Nothing is locked: two concurrent runs on the same directory may both
    write today's entry, and the last write wins.

    Args:
        entries_dir: Directory holding the entries
        today: Current date
        bankruptcy_level: Pruning cutoff for forwarded content
        logger: Optional logger

    Returns:
        The EntrySelection that was carried out

    Raises:
        EntryIOError: On any filesystem failure (nothing further is written)
    """
    log = safe_logger(logger)
    entries_dir = ensure_entries_dir(Path(entries_dir))

    today_path = entry_path(entries_dir, today)
    selection = select_entry_action(list_entry_paths(entries_dir), today_path)

    if selection.action is EntryAction.CREATE_BLANK:
        log.log_info("No previous entries found, creating a new one for today")
        write_entry(today_path, make_heading(today).encode("utf-8"))
        log.log_operation("create_entry", {"path": today_path})

    elif selection.action is EntryAction.FORWARD:
        log.log_info(f"Forwarding previous entry ({selection.source_path}) to today")
        content = read_entry(selection.source_path)
        write_entry(today_path, transform(content, today, bankruptcy_level))
        log.log_operation(
            "forward_entry",
            {
                "source": selection.source_path,
                "path": today_path,
                "bankruptcy_level": bankruptcy_level,
            },
        )

    else:
        log.log_info("Today's entry already exists")

    return selection
