"""First pass: validate, deduplicate and tally field values.

Only values seen more than once anywhere in the file can ever join two
lines, so the second pass ignores everything else.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from line_grouper.engine.normalize import WHITESPACE, clean_line

logger = logging.getLogger(__name__)


def split_fields(line: str, delimiter: str) -> list[str]:
    """Split a line into trimmed fields.

    Empty fields are kept, so a line with N delimiters always gives N + 1
    fields and list positions are column indices.
    """
    return [field.strip(WHITESPACE) for field in line.split(delimiter)]


def iter_fields(line: str, delimiter: str) -> Iterator[tuple[int, str]]:
    """Yield (column, value) for every non-empty field of a line."""
    for column, value in enumerate(split_fields(line, delimiter)):
        if value:
            yield column, value


@dataclass(frozen=True)
class ScanResult:
    """Outcome of the frequency pass.

    Attributes:
        lines: Distinct normalized lines in first-seen order.
        grouping_values: Field values counted more than once.
        lines_read: Raw lines consumed.
        invalid_lines: Raw lines rejected by validation.
        duplicate_lines: Valid lines dropped as repeats.
        distinct_values: Distinct non-empty field values seen.
    """

    lines: list[str]
    grouping_values: frozenset[str]
    lines_read: int = 0
    invalid_lines: int = 0
    duplicate_lines: int = 0
    distinct_values: int = 0


def scan_lines(raw_lines: Iterable[str], delimiter: str) -> ScanResult:
    """Run the frequency pass over a stream of raw lines.

    Each distinct normalized line is counted once; a value repeated within
    one line counts once per occurrence.
    """
    frequencies: Counter[str] = Counter()
    unique_lines: list[str] = []
    seen: set[str] = set()
    lines_read = 0
    invalid = 0
    duplicates = 0

    for raw in raw_lines:
        lines_read += 1
        line = clean_line(raw, delimiter)
        if line is None:
            invalid += 1
            continue
        if line in seen:
            duplicates += 1
            continue
        seen.add(line)
        unique_lines.append(line)
        frequencies.update(value for _, value in iter_fields(line, delimiter))

    grouping_values = frozenset(value for value, count in frequencies.items() if count > 1)

    logger.info(
        "Scanned %d lines: %d unique, %d invalid, %d duplicates, %d/%d values repeat",
        lines_read,
        len(unique_lines),
        invalid,
        duplicates,
        len(grouping_values),
        len(frequencies),
    )

    return ScanResult(
        lines=unique_lines,
        grouping_values=grouping_values,
        lines_read=lines_read,
        invalid_lines=invalid,
        duplicate_lines=duplicates,
        distinct_values=len(frequencies),
    )
