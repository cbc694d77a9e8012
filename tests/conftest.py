"""Shared fixtures for line grouper tests."""

from __future__ import annotations

import gzip
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write dedented text to a file under tmp_path, gzipped for .gz names."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        text = textwrap.dedent(content)
        if name.endswith(".gz"):
            with gzip.open(path, "wt", encoding="utf-8") as f:
                f.write(text)
        else:
            path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    return tmp_path / "output.txt"
