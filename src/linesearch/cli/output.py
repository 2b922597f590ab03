"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linesearch/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, TextIO

from linesearch.options import MatchOptions
from linesearch.range import LineRange
from linesearch.scanner import LineMatch, ScanSummary


def should_use_rich_output(args: argparse.Namespace, stream: Optional[TextIO] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when the ``--rich`` flag is set, results are not being
    saved to a file, and the target stream is a TTY.
    """
    if not getattr(args, "rich", False) or getattr(args, "save", None) is not None:
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False
    return False


class RichMatchWriter:
    """Write match records through a rich console, highlighting the matched span."""

    def __init__(self, console: Any, show_positions: bool = False) -> None:
        self.console = console
        self.show_positions = show_positions

    @classmethod
    def for_stream(cls, stream: TextIO, show_positions: bool = False) -> "RichMatchWriter":
        from rich.console import Console

        return cls(Console(file=stream, highlight=False, soft_wrap=True), show_positions)

    def render(self, match: LineMatch) -> Any:
        """Build the styled line without its terminator."""
        from rich.text import Text

        text = Text()
        if self.show_positions:
            text.append(match.prefix(), style="green")
        start = len(text) + match.offset
        text.append(match.line.rstrip("\r\n"))
        text.stylize("bold yellow", start, min(start + match.length, len(text)))
        return text

    def __call__(self, match: LineMatch) -> None:
        body_length = len(match.line.rstrip("\r\n"))
        self.console.print(self.render(match), end=match.line[body_length:])


def print_search_banner(
    term: str,
    path: str,
    options: MatchOptions,
    line_range: Optional[LineRange] = None,
    save_path: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Describe the search about to run on the error stream."""
    out = stream or sys.stderr
    print(f'Searching for "{term}" in {path}', file=out)
    if options.isolate_words:
        print("Isolating matches...", file=out)
    if options.ignore_case:
        print("Ignoring cases...", file=out)
    if options.show_positions:
        print("Including line numbers/positions...", file=out)
    if options.dedupe_lines:
        print("Removing duplicate lines...", file=out)
    if options.range_filter_active and line_range is not None:
        print(f"Showing results in a range: {line_range.low}-{line_range.high}...", file=out)
    if options.save_to_file and save_path is not None:
        print(f"Saving results to {save_path}...", file=out)
    print(file=out)


def print_summary(summary: ScanSummary, stream: Optional[TextIO] = None) -> None:
    """Report the result count and destination on the error stream."""
    out = stream or sys.stderr
    print(f"\n{summary.results} results written to {summary.destination}.", file=out)
