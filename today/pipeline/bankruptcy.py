#!/usr/bin/env python3
"""
bankruptcy.py
-------------------
Prune deeply nested sections from an entry ("declare bankruptcy").

Because today's entry is a rolling list forwarded from day to day, clearing
out old tasks amounts to declaring task bankruptcy. A bankruptcy level lets
that be partial: content nested under headings deeper than the level is
dropped, shallower content is kept.

    # 2024-01-15          <- heading, always kept (level 1)
    loose note            <- kept while level 1 <= max_level
    ## Project            <- heading, always kept (level 2)
    - old task            <- dropped when max_level < 2

Rules, applied per line in order:
    1. Runs of blank lines collapse to a single blank line.
    2. Inside a code fence, the matching delimiter closes it and is kept;
       every other line is content. Outside, a fence opener starts a fence
       and is then filtered like content.
    3. Outside a fence, a heading sets the current level and is kept.
    4. Content is kept only while the current level <= max_level.

Text before the first heading (level 0) is always kept.

Programmatic API:
    from today.pipeline.bankruptcy import undergo_bankruptcy
    pruned = undergo_bankruptcy(content, max_level=1)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import List, Optional

# --- Local imports ---
from today.core.exceptions import ValidationError
from today.core.validators import DataValidator
from today.utils.md import (
    DEFAULT_RULES,
    LINE_SEPARATOR,
    LineKind,
    MarkdownRules,
    classify_line,
    fence_delimiter,
    heading_level,
    is_blank,
)


@dataclass
class ScanState:
    """
    State carried across lines while pruning.

    Attributes:
        max_level: Deepest heading level whose content is kept
        level: Level of the most recent heading (0 before any heading)
        open_fence: Delimiter of the currently open code fence, if any
        kept: Lines emitted so far
    """

    max_level: int
    level: int = 0
    open_fence: Optional[bytes] = None
    kept: List[bytes] = field(default_factory=list)

    def _keep(self, line: bytes) -> None:
        self.kept.append(line)

    def _last_kept_blank(self) -> bool:
        return bool(self.kept) and is_blank(self.kept[-1])

    def feed(self, line: bytes, rules: MarkdownRules = DEFAULT_RULES) -> "ScanState":
        """Process one line and return the (updated) state."""
        kind = classify_line(line, self.open_fence, rules)

        if kind is LineKind.BLANK:
            if not self._last_kept_blank():
                self._keep(line)
        elif kind is LineKind.FENCE_CLOSE:
            self.open_fence = None
            self._keep(line)
        elif kind is LineKind.HEADING:
            self.level = heading_level(line, rules)
            self._keep(line)
        else:
            if kind is LineKind.FENCE_OPEN:
                self.open_fence = fence_delimiter(line, rules)
            if self.level <= self.max_level:
                self._keep(line)
        return self


def undergo_bankruptcy(
    content: bytes,
    max_level: int,
    rules: MarkdownRules = DEFAULT_RULES,
) -> bytes:
    """
    Drop content nested under headings deeper than max_level.

    Args:
        content: Raw entry content
        max_level: Non-negative heading depth cutoff
        rules: Line patterns

    Returns:
        Pruned content, lines rejoined with '\\n'

    Raises:
        ValidationError: If max_level is negative or not an integer

    Examples:
        >>> undergo_bankruptcy(b"# Day\\n## Old\\n- task\\n# Next\\nkeep", 1)
        b'# Day\\n## Old\\n# Next\\nkeep'
    """
    max_level = DataValidator.normalize_bankruptcy_level(max_level)
    if max_level is None:
        raise ValidationError("max_level is required for pruning")

    state = ScanState(max_level=max_level)
    for line in content.split(LINE_SEPARATOR):
        state.feed(line, rules)

    # An unterminated fence at end of content needs no handling
    return LINE_SEPARATOR.join(state.kept)
