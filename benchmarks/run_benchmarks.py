"""
Time the grouping passes on synthetic delimited input.

Usage:
    python benchmarks/run_benchmarks.py

Outputs:
    docs/benchmarks.md  -- benchmark results table
"""

from __future__ import annotations

import random
import statistics
import sys
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from line_grouper.engine.grouper import build_groups
from line_grouper.engine.ranking import rank_groups
from line_grouper.engine.scanner import scan_lines

DOCS_DIR = Path(__file__).resolve().parent.parent / "docs"

SIZES = [10_000, 100_000, 500_000]
COLUMNS = 3
DELIMITER = ";"


# ── Input builder ─────────────────────────────────────────────────────────────


def build_lines(n_lines: int, shared_ratio: float = 0.05, seed: int = 42) -> list[str]:
    """Phone-export-like lines; a small pool of values repeats across lines."""
    rng = random.Random(seed)
    pool_size = max(10, int(n_lines * shared_ratio))
    pool = [str(rng.randrange(10**10, 10**11)) for _ in range(pool_size)]

    lines: list[str] = []
    for _ in range(n_lines):
        fields = []
        for _ in range(COLUMNS):
            roll = rng.random()
            if roll < 0.1:
                fields.append("")
            elif roll < 0.3:
                fields.append(f'"{rng.choice(pool)}"')
            else:
                fields.append(f'"{rng.randrange(10**10, 10**11)}"')
        lines.append(DELIMITER.join(fields))
    return lines


# ── Timing helper ─────────────────────────────────────────────────────────────


def timed(fn: Callable[[], object], n: int = 3) -> list[float]:
    times: list[float] = []
    for _ in range(n):
        t0 = time.perf_counter()
        fn()
        times.append((time.perf_counter() - t0) * 1000)
    return times


# ── Benchmark: passes ─────────────────────────────────────────────────────────


def bench_passes(sizes: list[int], n_runs: int) -> list[dict]:
    rows: list[dict] = []
    for n in sizes:
        lines = build_lines(n)
        scan = scan_lines(lines, DELIMITER)
        groups = build_groups(scan.lines, scan.grouping_values, DELIMITER)

        scan_ms = timed(lambda: scan_lines(lines, DELIMITER), n_runs)
        group_ms = timed(
            lambda: build_groups(scan.lines, scan.grouping_values, DELIMITER), n_runs
        )
        rank_ms = timed(lambda: rank_groups(groups), n_runs)

        rows.append(
            {
                "lines": n,
                "unique": len(scan.lines),
                "values": len(scan.grouping_values),
                "groups": len(groups),
                "scan_ms": round(statistics.median(scan_ms), 1),
                "group_ms": round(statistics.median(group_ms), 1),
                "rank_ms": round(statistics.median(rank_ms), 1),
            }
        )
    return rows


# ── Markdown generation ───────────────────────────────────────────────────────


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join(" --- " for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines)


def generate_markdown(rows: list[dict], timestamp: str) -> str:
    headers = ["Lines", "Unique", "Repeated values", "Groups", "Scan (ms)", "Group (ms)", "Rank (ms)"]
    table = md_table(
        headers,
        [
            [
                f"{r['lines']:,}",
                f"{r['unique']:,}",
                f"{r['values']:,}",
                f"{r['groups']:,}",
                str(r["scan_ms"]),
                str(r["group_ms"]),
                str(r["rank_ms"]),
            ]
            for r in rows
        ],
    )
    return f"# Benchmarks\n\nGenerated {timestamp}. Median of runs per pass.\n\n{table}\n"


def main() -> None:
    print("Running pass benchmarks...")
    rows = bench_passes(SIZES, n_runs=3)
    for r in rows:
        print(
            f"  {r['lines']:>9,} lines  scan={r['scan_ms']}ms  group={r['group_ms']}ms  "
            f"rank={r['rank_ms']}ms  groups={r['groups']:,}"
        )

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M")
    DOCS_DIR.mkdir(parents=True, exist_ok=True)
    out_path = DOCS_DIR / "benchmarks.md"
    out_path.write_text(generate_markdown(rows, timestamp), encoding="utf-8")
    print(f"\nWrote {out_path}")


if __name__ == "__main__":
    main()
