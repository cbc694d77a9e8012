"""Second pass: join lines sharing a value in the same column."""

from __future__ import annotations

import logging
from collections.abc import Sequence, Set

from line_grouper.engine.clustering import UnionFind
from line_grouper.engine.scanner import iter_fields

logger = logging.getLogger(__name__)


def join_key(value: str, column: int) -> str:
    """Key under which lines with this value at this column are joined."""
    return f"{value}:{column}"


def build_groups(
    lines: Sequence[str],
    grouping_values: Set[str],
    delimiter: str,
) -> list[list[str]]:
    """Partition lines into groups of two or more connected members.

    Two lines are connected when they hold the same non-empty value at the
    same column, directly or through a chain of other lines. Groups come
    out in order of their first member, members in input order.

    Args:
        lines: Distinct normalized lines; positions are element ids.
        grouping_values: Values worth joining on (seen more than once).
        delimiter: Field separator.

    Returns:
        Groups as lists of lines, singletons dropped.
    """
    if not grouping_values:
        logger.debug("No repeated values, skipping grouping pass")
        return []

    positions: dict[str, list[int]] = {}
    for index, line in enumerate(lines):
        for column, value in iter_fields(line, delimiter):
            if value in grouping_values:
                positions.setdefault(join_key(value, column), []).append(index)

    uf = UnionFind(len(lines))
    unions = 0
    for indices in positions.values():
        if len(indices) < 2:
            continue
        first = indices[0]
        for other in indices[1:]:
            uf.union(first, other)
            unions += 1

    groups = [
        [lines[i] for i in members] for members in uf.groups().values() if len(members) > 1
    ]

    logger.debug(
        "Grouping pass: %d join keys, %d unions, %d groups",
        len(positions),
        unions,
        len(groups),
    )
    return groups
