"""Group ranking and the text format of the result file.

Format:

    <group count>
    <blank>
    Группа 1
    <member line>
    ...
    <blank>
    Группа 2
    ...
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

GROUP_HEADER = "Группа"


def rank_groups(groups: Iterable[list[str]]) -> list[list[str]]:
    """Order groups largest first; equal sizes keep their incoming order."""
    return sorted(groups, key=len, reverse=True)


def format_groups(groups: Sequence[Sequence[str]]) -> Iterator[str]:
    """Yield output lines (without newlines) for already ranked groups."""
    yield str(len(groups))
    yield ""
    for number, members in enumerate(groups, 1):
        yield f"{GROUP_HEADER} {number}"
        yield from members
        yield ""


def write_groups(groups: Sequence[Sequence[str]], sink: TextIO) -> int:
    """Write ranked groups to a text sink; returns the number of groups."""
    for line in format_groups(groups):
        sink.write(line)
        sink.write("\n")
    return len(groups)


def parse_groups(lines: Iterable[str]) -> list[list[str]]:
    """Read a result file back into member lists.

    The leading count and blank separators are skipped; the count is not
    cross-checked against the blocks found.
    """
    groups: list[list[str]] = []
    current: list[str] | None = None
    header_prefix = GROUP_HEADER + " "

    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith(header_prefix) and line[len(header_prefix):].isdigit():
            current = []
            groups.append(current)
        elif not line:
            current = None
        elif current is not None:
            current.append(line)

    return groups
