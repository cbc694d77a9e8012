"""Line Grouper CLI entry point."""

from __future__ import annotations

import logging
import sys
import time
import zlib
from typing import Annotated

import requests
import typer

from line_grouper.engine.config import DEFAULT_DELIMITER, DEFAULT_OUTPUT_PATH, GrouperConfig
from line_grouper.engine.pipeline import LineGrouper
from line_grouper.io.delimiter import sniff_stream
from line_grouper.io.reader import open_lines

AUTO_DELIMITER = "auto"

# Exit status of argument parsing errors
_USAGE_ERROR_EXIT_CODE = 2

# Failures reported as "Error processing file" with exit status 1
_RUN_ERRORS = (
    OSError,
    EOFError,
    zlib.error,
    UnicodeError,
    LookupError,
    ValueError,
    requests.RequestException,
)

app = typer.Typer(
    name="line-grouper",
    help="Group lines of a delimited file that share a value in the same column.",
    add_completion=False,
)


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("line_grouper").setLevel(level)


def _version_callback(value: bool) -> None:
    if value:
        from line_grouper import __version__

        typer.echo(f"line-grouper v{__version__}")
        raise typer.Exit()


def run_grouping(
    input_path: str,
    output_path: str,
    delimiter: str,
    encoding: str,
) -> int:
    """Run one grouping job; returns the number of groups written."""
    grouper = LineGrouper(GrouperConfig(encoding=encoding, output_path=output_path))
    if delimiter.lower() != AUTO_DELIMITER:
        grouper.set_delimiter(delimiter)
        return grouper.process_file(input_path, output_path)

    with open_lines(input_path, encoding) as lines:
        detected, lines = sniff_stream(lines, grouper.config.sample_lines)
        grouper.set_delimiter(detected)
        result = grouper.process_lines(lines)
    return grouper.write_result(result, output_path)


@app.command()
def group(
    input_path: Annotated[
        str, typer.Argument(metavar="INPUT", help="Input file path or URL (.gz supported)")
    ],
    output_path: Annotated[
        str, typer.Argument(metavar="OUTPUT", help="Result file path")
    ] = DEFAULT_OUTPUT_PATH,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="Field delimiter, or 'auto' to detect it"),
    ] = DEFAULT_DELIMITER,
    encoding: Annotated[
        str, typer.Option("--encoding", "-e", help="Input text encoding (output is UTF-8)")
    ] = "utf-8",
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log pass summaries to stderr")
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log stage details to stderr")] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = False,
) -> None:
    """Group lines sharing a non-empty value at the same column position.

    Examples:
        line-grouper lng.txt
        line-grouper lng.txt.gz groups.txt
        line-grouper data.csv out.txt --delimiter ,
        line-grouper https://example.com/lng.txt.gz --delimiter auto
    """
    _configure_logging(verbose, debug)
    start = time.perf_counter()

    try:
        count = run_grouping(input_path, output_path, delimiter, encoding)
    except _RUN_ERRORS as e:
        typer.secho(f"Error processing file: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e

    elapsed = time.perf_counter() - start
    typer.echo(f"Groups with more than one element: {count}")
    typer.echo(f"Execution time: {elapsed:.3f} seconds")


def main() -> None:
    """Main entry point.

    Usage errors exit with status 1 instead of the usual 2.
    """
    try:
        app()
    except SystemExit as e:
        if e.code == _USAGE_ERROR_EXIT_CODE:
            sys.exit(1)
        raise


if __name__ == "__main__":
    main()
