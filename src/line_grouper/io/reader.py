"""Line sources: local files, gzip archives and HTTP(S) URLs.

Gzip is recognised by file name or by the magic bytes at the start of the
stream, so compressed data behind an arbitrary name or URL still decodes.
"""

from __future__ import annotations

import contextlib
import gzip
import io
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

import requests

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
GZIP_SUFFIXES = (".gz", ".gzip")
URL_SCHEMES = ("http://", "https://")

# Read buffer for large inputs
_BUFFER_SIZE = 128 * 1024
_REQUEST_TIMEOUT = 30.0


def is_url(source: str) -> bool:
    return source.lower().startswith(URL_SCHEMES)


def has_gzip_suffix(source: str) -> bool:
    return source.lower().endswith(GZIP_SUFFIXES)


def _is_gzip_stream(stream: io.BufferedReader) -> bool:
    return stream.peek(len(GZIP_MAGIC))[: len(GZIP_MAGIC)] == GZIP_MAGIC


def _iter_text_lines(text: io.TextIOWrapper) -> Iterator[str]:
    for line in text:
        yield line.rstrip("\r\n")


@contextlib.contextmanager
def open_lines(
    source: str | Path,
    encoding: str = "utf-8",
    *,
    timeout: float = _REQUEST_TIMEOUT,
) -> Iterator[Iterator[str]]:
    """Open a source and yield an iterator over its lines.

    Lines come without their line terminators. Undecodable bytes are
    replaced rather than failing the run.

    Args:
        source: Local path or http(s) URL.
        encoding: Text encoding of the (decompressed) content.
        timeout: Connect/read timeout for URLs, in seconds.

    Raises:
        OSError: Missing or unreadable file, invalid gzip data.
        EOFError: Truncated gzip stream (raised while iterating).
        requests.RequestException: Network or HTTP status failure.
    """
    name = str(source)
    with contextlib.ExitStack() as stack:
        raw: BinaryIO
        if is_url(name):
            logger.debug("Fetching %s", name)
            response = stack.enter_context(requests.get(name, stream=True, timeout=timeout))
            response.raise_for_status()
            response.raw.decode_content = True
            raw = response.raw
        else:
            raw = stack.enter_context(open(name, "rb", buffering=0))

        buffered = stack.enter_context(io.BufferedReader(raw, _BUFFER_SIZE))
        if _is_gzip_stream(buffered) or (not is_url(name) and has_gzip_suffix(name)):
            logger.debug("Reading %s as gzip", name)
            binary: BinaryIO = stack.enter_context(gzip.GzipFile(fileobj=buffered))
        else:
            binary = buffered

        text = stack.enter_context(
            io.TextIOWrapper(binary, encoding=encoding, errors="replace", newline=None)
        )
        yield _iter_text_lines(text)
