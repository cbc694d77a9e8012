"""Tests for line sources."""

from __future__ import annotations

import gzip
import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from line_grouper.io.reader import has_gzip_suffix, is_url, open_lines


def _fake_response(payload: bytes) -> MagicMock:
    response = MagicMock()
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    response.raw = io.BytesIO(payload)
    return response


class TestSourceKinds:
    @pytest.mark.parametrize(
        "source", ["http://example.com/a.txt", "HTTPS://example.com/a.txt.gz"]
    )
    def test_is_url(self, source: str) -> None:
        assert is_url(source) is True

    def test_local_path_not_url(self) -> None:
        assert is_url("/data/http.txt") is False

    @pytest.mark.parametrize("name", ["a.gz", "A.TXT.GZ", "b.gzip"])
    def test_gzip_suffix(self, name: str) -> None:
        assert has_gzip_suffix(name) is True

    def test_plain_suffix(self) -> None:
        assert has_gzip_suffix("a.txt") is False


class TestOpenLocal:
    def test_plain_file(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_text("a;b\nc;d\n", encoding="utf-8")
        with open_lines(path) as lines:
            assert list(lines) == ["a;b", "c;d"]

    def test_crlf_and_missing_final_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_bytes(b"a;b\r\nc;d")
        with open_lines(path) as lines:
            assert list(lines) == ["a;b", "c;d"]

    def test_gzip_by_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt.gz"
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write("x;1\ny;1\n")
        with open_lines(path) as lines:
            assert list(lines) == ["x;1", "y;1"]

    def test_gzip_by_magic_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_bytes(gzip.compress("x;1\ny;1\n".encode("utf-8")))
        with open_lines(path) as lines:
            assert list(lines) == ["x;1", "y;1"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        with open_lines(path) as lines:
            assert list(lines) == []

    def test_non_ascii(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_text("Группа;Москва\n", encoding="utf-8")
        with open_lines(path) as lines:
            assert list(lines) == ["Группа;Москва"]

    def test_undecodable_bytes_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_bytes(b"a;\xff\n")
        with open_lines(path) as lines:
            assert list(lines) == ["a;\ufffd"]

    def test_custom_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_bytes("Москва;1\n".encode("cp1251"))
        with open_lines(path, encoding="cp1251") as lines:
            assert list(lines) == ["Москва;1"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError), open_lines(tmp_path / "nope.txt") as lines:
            list(lines)

    def test_bad_gzip(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.gz"
        path.write_bytes(b"not gzip at all")
        with pytest.raises(OSError), open_lines(path) as lines:
            list(lines)


class TestOpenUrl:
    def test_plain_url(self) -> None:
        response = _fake_response(b"a;1\nb;1\n")
        with patch("line_grouper.io.reader.requests.get", return_value=response) as get:
            with open_lines("https://example.com/data.txt") as lines:
                assert list(lines) == ["a;1", "b;1"]
        get.assert_called_once()
        assert get.call_args.kwargs["stream"] is True
        response.raise_for_status.assert_called_once()

    def test_gz_url_with_plain_body_not_gunzipped(self) -> None:
        response = _fake_response(b"a;1\nb;1\n")
        with patch("line_grouper.io.reader.requests.get", return_value=response):
            with open_lines("https://example.com/data.txt.gz") as lines:
                assert list(lines) == ["a;1", "b;1"]

    def test_gzip_url(self) -> None:
        response = _fake_response(gzip.compress(b"a;1\nb;1\n"))
        with patch("line_grouper.io.reader.requests.get", return_value=response):
            with open_lines("https://example.com/data.txt.gz") as lines:
                assert list(lines) == ["a;1", "b;1"]

    def test_http_error_propagates(self) -> None:
        response = _fake_response(b"")
        response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        with patch("line_grouper.io.reader.requests.get", return_value=response):
            with pytest.raises(requests.HTTPError), open_lines("http://example.com/x"):
                pass

    def test_connection_error_propagates(self) -> None:
        with patch(
            "line_grouper.io.reader.requests.get",
            side_effect=requests.ConnectionError("refused"),
        ):
            with pytest.raises(requests.ConnectionError), open_lines("http://example.com/x"):
                pass
