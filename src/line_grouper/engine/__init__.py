"""Grouping engine: frequency scan, union-find grouping, ranking."""

from line_grouper.engine.clustering import UnionFind
from line_grouper.engine.config import GrouperConfig
from line_grouper.engine.pipeline import GroupingResult, GroupingStats, LineGrouper

__all__ = ["GrouperConfig", "GroupingResult", "GroupingStats", "LineGrouper", "UnionFind"]
