"""
Basic usage example for Line Grouper.

This example demonstrates:
1. Grouping an in-memory list of lines
2. Inspecting run statistics
3. Writing the result file from an input file
"""

import tempfile
from pathlib import Path

from line_grouper import GrouperConfig, LineGrouper


def main() -> None:
    # 1. Group lines held in memory
    grouper = LineGrouper(GrouperConfig(delimiter=";"))

    lines = [
        "111;123;222",
        "200;123;100",
        "300;;100",
        "400;500;600",
        '"79855053897"83100000580443402";"200000133000191"',
    ]
    result = grouper.process_lines(lines)

    for number, members in enumerate(result.groups, 1):
        print(f"Group {number}:")
        for line in members:
            print(f"  {line}")

    # 2. Statistics
    stats = result.stats
    print(
        f"\nRead {stats.lines_read} lines, {stats.invalid_lines} invalid, "
        f"{stats.groups} groups, largest has {stats.largest_group} lines"
    )

    # 3. File to file, with a comma-delimited input
    with tempfile.TemporaryDirectory() as tmp:
        src = Path(tmp) / "input.csv"
        src.write_text("111,222,333\n444,222,555\n666,777,888\n", encoding="utf-8")
        out = Path(tmp) / "result.txt"

        grouper.set_delimiter(",")
        count = grouper.process_file(src, out)
        print(f"\nWrote {count} group(s):\n")
        print(out.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
