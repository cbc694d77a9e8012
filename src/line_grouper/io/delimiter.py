"""Delimiter detection from a sample of lines."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from itertools import chain, islice

from line_grouper.engine.config import DEFAULT_DELIMITER

logger = logging.getLogger(__name__)

CANDIDATE_DELIMITERS = ";,\t|"


def detect_delimiter(
    lines: Iterable[str],
    candidates: str = CANDIDATE_DELIMITERS,
    default: str = DEFAULT_DELIMITER,
) -> str:
    """Guess the field delimiter of sample lines.

    Falls back to ``default`` when the sample is empty or ambiguous.
    """
    sample = "\n".join(line for line in lines if line.strip())
    if not sample:
        return default

    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=candidates)
    except csv.Error:
        logger.debug("Could not sniff delimiter, using %r", default)
        return default

    return dialect.delimiter


def sniff_stream(
    lines: Iterator[str],
    sample_size: int,
    candidates: str = CANDIDATE_DELIMITERS,
    default: str = DEFAULT_DELIMITER,
) -> tuple[str, Iterator[str]]:
    """Detect the delimiter from the head of a stream.

    Returns the delimiter and an iterator that still yields every line,
    sampled ones included.
    """
    head = list(islice(lines, sample_size))
    delimiter = detect_delimiter(head, candidates=candidates, default=default)
    logger.info("Detected delimiter %r from %d lines", delimiter, len(head))
    return delimiter, chain(head, lines)
