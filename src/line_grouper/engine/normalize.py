"""Line validation and normalization.

A raw line is either rejected or reduced to its canonical form: quotes
removed, surrounding whitespace trimmed. The canonical form is what gets
deduplicated, split into fields and written to the output.
"""

from __future__ import annotations

import re

QUOTE = '"'

# Characters trimmed from lines and fields. Non-breaking spaces (U+00A0,
# U+2007, U+202F) and NEL (U+0085) are content, not whitespace.
WHITESPACE = (
    "\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f "
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a"
    "\u2028\u2029\u205f\u3000"
)
_WHITESPACE_SET = frozenset(WHITESPACE)


# Two quoted numbers glued together, e.g. "8383"200000741652251".
# Concatenated phone exports look like this and break field splitting.
_ADJACENT_QUOTED_NUMBERS = re.compile(r'"\d+"\d+"', re.ASCII)


def is_valid_line(line: str, delimiter: str) -> bool:
    """Return True if the line carries usable content.

    Rejects blank lines, lines with adjacent quoted numbers, and lines made
    of nothing but delimiters, quotes and whitespace.
    """
    stripped = line.strip(WHITESPACE)
    if not stripped:
        return False

    if QUOTE in stripped and _ADJACENT_QUOTED_NUMBERS.search(stripped):
        return False

    return any(c != delimiter and c != QUOTE and c not in _WHITESPACE_SET for c in stripped)


def normalize_line(line: str) -> str:
    """Remove all quote characters and trim surrounding whitespace."""
    if QUOTE not in line:
        return line.strip(WHITESPACE)
    return line.replace(QUOTE, "").strip(WHITESPACE)


def clean_line(line: str, delimiter: str) -> str | None:
    """Validate and normalize in one step; None means the line is discarded."""
    if not is_valid_line(line, delimiter):
        return None
    return normalize_line(line)
