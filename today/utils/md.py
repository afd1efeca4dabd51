#!/usr/bin/env python3
"""
md.py
-------------------
Markdown line primitives for today entries.

This is deliberately not a markdown parser. Entries are treated as
newline-delimited byte strings and every decision is line-local:

- a heading is a run of '#' followed by whitespace (level = run length)
- a code fence opens on a run of 3+ backticks or 3+ tildes and closes on a
  line that is exactly the same run
- a blank line is empty or whitespace-only

The patterns are carried in an immutable MarkdownRules value rather than
module state so callers (and tests) can substitute their own.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

LINE_SEPARATOR = b"\n"


@dataclass(frozen=True)
class MarkdownRules:
    """
    Compiled line patterns used by the heading rewriter and pruning filter.

    Attributes:
        date_heading: Matches a first line of the form "# YYYY-MM-DD";
            group 1 captures a trailing carriage return, if any
        heading: Matches a heading; group 1 captures the run of '#'
        fence_open: Matches a fence opener; group 1 captures the delimiter run
    """

    date_heading: re.Pattern[bytes] = field(
        default_factory=lambda: re.compile(rb"# \d{4}-\d{2}-\d{2}(\r?)")
    )
    heading: re.Pattern[bytes] = field(default_factory=lambda: re.compile(rb"^(#+)\s"))
    fence_open: re.Pattern[bytes] = field(
        default_factory=lambda: re.compile(rb"^\s*(`{3,}|~{3,})")
    )


DEFAULT_RULES = MarkdownRules()


class LineKind(Enum):
    """Classification of a single entry line during a scan."""

    BLANK = "blank"
    FENCE_OPEN = "fence_open"
    FENCE_CLOSE = "fence_close"
    HEADING = "heading"
    CONTENT = "content"


# ----- Headings -----
def make_heading(day: date) -> str:
    """
    Build the date heading line for an entry, including the newline.

    Examples:
        >>> make_heading(date(2024, 1, 15))
        '# 2024-01-15\\n'
    """
    return f"# {day.isoformat()}\n"


def rewrite_date_heading(
    content: bytes, day: date, rules: MarkdownRules = DEFAULT_RULES
) -> bytes:
    """
    Replace a leading "# YYYY-MM-DD" line with the heading for `day`.

    Only the very first line is examined. Content whose first line is
    anything else (including a heading with extra text) is returned
    unchanged.

    Args:
        content: Raw entry content
        day: Date for the new heading
        rules: Line patterns

    Returns:
        Content with the first line rewritten, or the original content

    Examples:
        >>> rewrite_date_heading(b"# 2024-01-01\\nbody", date(2024, 1, 2))
        b'# 2024-01-02\\nbody'
        >>> rewrite_date_heading(b"# Notes\\nbody", date(2024, 1, 2))
        b'# Notes\\nbody'
    """
    first, sep, rest = content.partition(LINE_SEPARATOR)
    match = rules.date_heading.fullmatch(first)
    if match is None:
        return content
    heading = f"# {day.isoformat()}".encode("ascii") + match.group(1)
    return heading + sep + rest


# ----- Line classification -----
def is_blank(line: bytes) -> bool:
    return not line.strip()


def heading_level(line: bytes, rules: MarkdownRules = DEFAULT_RULES) -> Optional[int]:
    """Number of leading '#' on a heading line, or None if not a heading."""
    match = rules.heading.match(line)
    return len(match.group(1)) if match else None


def fence_delimiter(line: bytes, rules: MarkdownRules = DEFAULT_RULES) -> Optional[bytes]:
    """
    Delimiter run of a fence-opening line, or None.

    The info string after the run is ignored:
        >>> fence_delimiter(b"```python")
        b'```'
        >>> fence_delimiter(b"  ~~~~")
        b'~~~~'
    """
    match = rules.fence_open.match(line)
    return match.group(1) if match else None


def closes_fence(line: bytes, open_fence: bytes) -> bool:
    """A line closes the open fence when, trimmed, it is exactly the delimiter."""
    return line.strip() == open_fence


def classify_line(
    line: bytes,
    open_fence: Optional[bytes],
    rules: MarkdownRules = DEFAULT_RULES,
) -> LineKind:
    """
    Classify a line given whether a code fence is currently open.

    Precedence: blank, then fence open/close, then heading, then content.
    Inside an open fence nothing is a heading, so '#' comments in code
    blocks stay content.
    """
    if is_blank(line):
        return LineKind.BLANK
    if open_fence is not None:
        if closes_fence(line, open_fence):
            return LineKind.FENCE_CLOSE
        return LineKind.CONTENT
    if fence_delimiter(line, rules) is not None:
        return LineKind.FENCE_OPEN
    if heading_level(line, rules) is not None:
        return LineKind.HEADING
    return LineKind.CONTENT
