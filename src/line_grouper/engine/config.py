"""Configuration for line grouping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_DELIMITER = ";"
DEFAULT_OUTPUT_PATH = "result.txt"
OUTPUT_ENCODING = "utf-8"

# Quotes are stripped before splitting; line breaks never survive reading
_FORBIDDEN_DELIMITERS = frozenset('"\r\n')


@dataclass(frozen=True)
class GrouperConfig:
    """Settings for one grouping run.

    Attributes:
        delimiter: Single character separating fields within a line.
        encoding: Text encoding used to decode input; output is always UTF-8.
        output_path: Destination used when no output path is given.
        sample_lines: Lines inspected when the delimiter is auto-detected.
    """

    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"
    output_path: str = DEFAULT_OUTPUT_PATH
    sample_lines: int = 50

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")
        if self.delimiter in _FORBIDDEN_DELIMITERS:
            raise ValueError(f"delimiter cannot be a quote or line break, got {self.delimiter!r}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        if not self.output_path:
            raise ValueError("output_path must not be empty")
        if self.sample_lines < 1:
            raise ValueError(f"sample_lines must be >= 1, got {self.sample_lines}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "delimiter": self.delimiter,
            "encoding": self.encoding,
            "output_path": self.output_path,
            "sample_lines": self.sample_lines,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GrouperConfig:
        try:
            return cls(
                delimiter=str(data.get("delimiter", DEFAULT_DELIMITER)),
                encoding=str(data.get("encoding", "utf-8")),
                output_path=str(data.get("output_path", DEFAULT_OUTPUT_PATH)),
                sample_lines=int(data.get("sample_lines", 50)),
            )
        except (ValueError, TypeError):
            return cls()  # Fall back to safe defaults
