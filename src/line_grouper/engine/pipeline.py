"""Two-pass grouping pipeline: scan -> group -> rank -> write.

The whole input is held in memory between passes; nothing is written
until grouping has finished.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from line_grouper.engine.config import OUTPUT_ENCODING, GrouperConfig
from line_grouper.engine.grouper import build_groups
from line_grouper.engine.ranking import rank_groups, write_groups
from line_grouper.engine.scanner import scan_lines
from line_grouper.io.reader import open_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingStats:
    """Counters describing one run."""

    lines_read: int = 0
    invalid_lines: int = 0
    duplicate_lines: int = 0
    unique_lines: int = 0
    distinct_values: int = 0
    grouping_values: int = 0
    groups: int = 0
    grouped_lines: int = 0
    largest_group: int = 0


@dataclass(frozen=True)
class GroupingResult:
    """Ranked groups (largest first) plus run statistics."""

    groups: list[list[str]]
    stats: GroupingStats


class LineGrouper:
    """Groups lines of a delimited file by shared column values."""

    def __init__(self, config: GrouperConfig | None = None) -> None:
        self._config = config or GrouperConfig()

    @property
    def config(self) -> GrouperConfig:
        return self._config

    @property
    def delimiter(self) -> str:
        return self._config.delimiter

    def set_delimiter(self, delimiter: str) -> None:
        """Use the first character of ``delimiter`` as field separator."""
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self._config = dataclasses.replace(self._config, delimiter=delimiter[0])

    def process_lines(self, lines: Iterable[str]) -> GroupingResult:
        """Group an already opened stream of raw lines."""
        delimiter = self._config.delimiter
        scan = scan_lines(lines, delimiter)
        groups = rank_groups(build_groups(scan.lines, scan.grouping_values, delimiter))

        stats = GroupingStats(
            lines_read=scan.lines_read,
            invalid_lines=scan.invalid_lines,
            duplicate_lines=scan.duplicate_lines,
            unique_lines=len(scan.lines),
            distinct_values=scan.distinct_values,
            grouping_values=len(scan.grouping_values),
            groups=len(groups),
            grouped_lines=sum(len(g) for g in groups),
            largest_group=len(groups[0]) if groups else 0,
        )
        logger.info(
            "Found %d groups covering %d of %d unique lines (largest: %d)",
            stats.groups,
            stats.grouped_lines,
            stats.unique_lines,
            stats.largest_group,
        )
        return GroupingResult(groups=groups, stats=stats)

    def write_result(self, result: GroupingResult, output_path: str | Path) -> int:
        """Create or overwrite the output file (UTF-8) with ranked groups."""
        path = Path(output_path)
        with path.open("w", encoding=OUTPUT_ENCODING, newline="\n") as sink:
            count = write_groups(result.groups, sink)
        logger.debug("Wrote %d groups to %s", count, path)
        return count

    def process_file(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
    ) -> int:
        """Group the lines of ``input_path`` and write them to ``output_path``.

        Returns:
            Number of groups written.
        """
        destination = output_path if output_path is not None else self._config.output_path
        with open_lines(input_path, self._config.encoding) as lines:
            result = self.process_lines(lines)
        return self.write_result(result, destination)
