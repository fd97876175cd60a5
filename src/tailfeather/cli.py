"""Command-line entry point: color each field of delimited input lines."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from tailfeather import __version__
from tailfeather.columns import ColumnSet
from tailfeather.config import COLOR_MODES, Config, config_from_env
from tailfeather.renderer import Renderer
from tailfeather.terminal import TerminalSession
from tailfeather.tokenizer import split_fields, strip_newline

LOG = logging.getLogger(__name__)

STDIN_NAME = "-"


def _build_parser(defaults: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tailfeather",
        description="Print fields of delimited input in colors based on their values.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files to read in order; '-' or no FILE reads standard input",
    )
    parser.add_argument(
        "--input-delimiter",
        "-input-delimiter",
        dest="input_delimiter",
        default=None,
        help=f"Input field delimiter (default: {defaults.input_delimiter!r})",
    )
    parser.add_argument(
        "--output-delimiter",
        "-output-delimiter",
        dest="output_delimiter",
        default=None,
        help=f"Output field delimiter (default: {defaults.output_delimiter!r})",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help=f"How to render colors (default: {defaults.color})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _open_sources(paths: Iterable[str], stdin: TextIO, stderr: TextIO, failures: List[str]) -> Iterator[TextIO]:
    """Yield readable streams for *paths*, reporting the ones that fail to open."""
    for path in paths:
        if path == STDIN_NAME:
            yield stdin
            continue
        try:
            handle = open(path, "r", encoding="utf-8", errors="replace", newline="\n")
        except OSError as exc:
            LOG.error("cannot open %s: %s", path, exc)
            print(f"tailfeather: {path}: {exc.strerror or exc}", file=stderr)
            failures.append(path)
            continue
        with handle:
            yield handle


def colorize(lines: Iterable[str], config: Config, renderer: Renderer, columns: Optional[ColumnSet] = None) -> int:
    """Render every line in *lines*; return the number of lines written."""
    cols = columns if columns is not None else ColumnSet()
    count = 0
    for raw in lines:
        fields = split_fields(strip_newline(raw), config.input_delimiter)
        renderer.write_line(fields, cols.colors_for(fields))
        renderer.stream.flush()
        count += 1
    return count


def _silence_stdout() -> None:
    # Further writes (including interpreter shutdown flushes) go nowhere.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: list[str] | None = None, *, install_signals: bool = True) -> int:
    defaults = config_from_env()
    parser = _build_parser(defaults)
    args = parser.parse_args(argv)

    config = defaults.with_overrides(
        input_delimiter=args.input_delimiter,
        output_delimiter=args.output_delimiter,
        color=args.color,
    )
    LOG.info(
        "input_delimiter=%r output_delimiter=%r color=%s",
        config.input_delimiter,
        config.output_delimiter,
        config.color,
    )

    stdin, stdout, stderr = sys.stdin, sys.stdout, sys.stderr
    reconfigure = getattr(stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", errors="replace", newline="\n")

    renderer = Renderer(config, stdout)
    columns = ColumnSet()
    failures: List[str] = []
    paths = args.files or [STDIN_NAME]

    try:
        with TerminalSession(renderer, install_signals=install_signals):
            for source in _open_sources(paths, stdin, stderr, failures):
                colorize(source, config, renderer, columns)
    except BrokenPipeError:
        LOG.debug("output closed by reader")
        _silence_stdout()
        return 0

    LOG.debug("done; %d shape reset(s)", columns.resets)
    return 1 if failures else 0


__all__ = ["colorize", "main"]
