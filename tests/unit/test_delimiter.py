"""Tests for delimiter detection."""

from __future__ import annotations

import pytest

from line_grouper.io.delimiter import detect_delimiter, sniff_stream


class TestDetectDelimiter:
    @pytest.mark.parametrize(
        ("lines", "expected"),
        [
            (["111;222;333", "444;222;555", "666;777;888"], ";"),
            (["111,222,333", "444,222,555", "666,777,888"], ","),
            (["a\tb\tc", "d\te\tf", "g\th\ti"], "\t"),
            (["a|b|c", "d|e|f", "g|h|i"], "|"),
        ],
    )
    def test_detects(self, lines: list[str], expected: str) -> None:
        assert detect_delimiter(lines) == expected

    def test_empty_sample_uses_default(self) -> None:
        assert detect_delimiter([]) == ";"
        assert detect_delimiter(["", "   "], default=",") == ","

    def test_undetectable_uses_default(self) -> None:
        assert detect_delimiter(["abc", "def"]) == ";"


class TestSniffStream:
    def test_sampled_lines_not_lost(self) -> None:
        source = iter(["1,2,3", "4,2,5", "6,7,8", "9,0,1"])
        delimiter, lines = sniff_stream(source, sample_size=2)
        assert delimiter == ","
        assert list(lines) == ["1,2,3", "4,2,5", "6,7,8", "9,0,1"]

    def test_short_stream(self) -> None:
        delimiter, lines = sniff_stream(iter([]), sample_size=10)
        assert delimiter == ";"
        assert list(lines) == []
