"""Line Grouper - group delimited lines that share column values."""

from line_grouper.engine import GrouperConfig, GroupingResult, GroupingStats, LineGrouper

__version__ = "0.1.0"

__all__ = ["GrouperConfig", "GroupingResult", "GroupingStats", "LineGrouper", "__version__"]
