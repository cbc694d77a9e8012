"""Input helpers for the grouping engine."""

from line_grouper.io.delimiter import detect_delimiter, sniff_stream
from line_grouper.io.reader import open_lines

__all__ = ["detect_delimiter", "open_lines", "sniff_stream"]
