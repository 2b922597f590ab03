#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line-by-line scanning loop.

This module drives the matcher over an input file: it reads one line at a
time, applies the optional line range, enumerates every match on the line and
hands each one to a writer. Counters are carried in a ``ScanSummary`` that is
returned to the caller instead of living in module state.
"""

from __future__ import annotations

import io
import logging
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, TextIO, Union

from linesearch.constants import (
    DEFAULT_ENCODING,
    MAX_LINE_LENGTH,
    MAX_TERM_LENGTH,
    PASSTHROUGH_ERRORS,
    POSITION_PREFIX_FORMAT,
    STDOUT_DESTINATION,
)
from linesearch.exceptions import InputFileError, OutputFileError, SearchTermError, ValidationError
from linesearch.matcher import iter_matches
from linesearch.options import MatchOptions
from linesearch.range import LineRange

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
MatchWriter = Callable[["LineMatch"], None]


@dataclass(frozen=True)
class LineMatch:
    """A single reported match.

    Attributes
    ----------
    line_number : int
        1-based number of the line holding the match
    column : int
        1-based column of the first matched character
    line : str
        Full line content, trailing newline included when present
    length : int
        Number of matched characters

    """

    line_number: int
    column: int
    line: str
    length: int

    @property
    def offset(self) -> int:
        return self.column - 1

    def prefix(self) -> str:
        return POSITION_PREFIX_FORMAT.format(line_number=self.line_number, column=self.column)

    def format(self, show_positions: bool = False) -> str:
        """Render the output record for this match."""
        if show_positions:
            return self.prefix() + self.line
        return self.line


@dataclass
class ScanSummary:
    """Running counters for one scan."""

    lines_read: int = 0
    lines_scanned: int = 0
    results: int = 0
    destination: str = STDOUT_DESTINATION


def validate_term(term: str) -> None:
    """Reject empty search terms and terms at or above the length cap.

    Raises
    ------
    SearchTermError
        If the term cannot be searched for

    """
    if not term:
        raise SearchTermError("ERROR: Search term is empty.", parameter_value=term)
    if len(term) >= MAX_TERM_LENGTH:
        raise SearchTermError("ERROR: Search term is too long.", parameter_value=term)


def read_lines(handle: TextIO, max_length: int = MAX_LINE_LENGTH) -> Iterator[str]:
    """Yield lines from ``handle`` in chunks of at most ``max_length - 1`` characters.

    A line longer than the cap is split, and each piece counts as a line of
    its own. A read error ends the iteration the same way end-of-file does.
    """
    while True:
        try:
            chunk = handle.readline(max_length - 1)
        except OSError as exc:
            logger.debug("Read error ends scan: %s", exc)
            return
        if not chunk:
            return
        yield chunk


def iter_line_matches(
    lines: Iterable[str],
    term: str,
    options: MatchOptions,
    line_range: Optional[LineRange] = None,
    summary: Optional[ScanSummary] = None,
) -> Iterator[LineMatch]:
    """Enumerate every reported match across ``lines``.

    Parameters
    ----------
    lines : Iterable[str]
        Input lines; numbering starts at 1 and counts every line, skipped or not
    term : str
        Validated search term
    options : MatchOptions
        Resolved option flags
    line_range : LineRange, optional
        Inclusive line filter, honoured when ``options.range_filter_active``
    summary : ScanSummary, optional
        Counters to update while scanning

    Yields
    ------
    LineMatch
        One item per reported match, in line then column order

    """
    if summary is None:
        summary = ScanSummary()
    filter_lines = options.range_filter_active and line_range is not None

    for line_number, line in enumerate(lines, start=1):
        summary.lines_read += 1
        if filter_lines and not line_range.contains(line_number):
            continue
        summary.lines_scanned += 1

        for offset in iter_matches(line, term, options):
            summary.results += 1
            yield LineMatch(line_number=line_number, column=offset + 1, line=line, length=len(term))


def passthrough_stream(stream: TextIO) -> TextIO:
    """Let ``stream`` write undecodable input bytes back out unchanged.

    Input is decoded with ``surrogateescape``, so a byte that is not valid
    UTF-8 reaches the writer as a lone surrogate. Text streams with a strict
    error handler are switched to ``surrogateescape``; streams without an
    encoder (``io.StringIO``) are returned as they are.
    """
    if getattr(stream, "errors", None) in (None, PASSTHROUGH_ERRORS) or not hasattr(stream, "reconfigure"):
        return stream
    try:
        stream.reconfigure(errors=PASSTHROUGH_ERRORS)
    except (io.UnsupportedOperation, ValueError) as exc:
        logger.debug("Could not reconfigure output stream: %s", exc)
    return stream


class StreamMatchWriter:
    """Write match records verbatim to a text stream."""

    def __init__(self, stream: TextIO, show_positions: bool = False) -> None:
        self.stream = stream
        self.show_positions = show_positions

    def __call__(self, match: LineMatch) -> None:
        self.stream.write(match.format(self.show_positions))


def scan_lines(
    lines: Iterable[str],
    term: str,
    options: MatchOptions,
    writer: MatchWriter,
    line_range: Optional[LineRange] = None,
    destination: str = STDOUT_DESTINATION,
) -> ScanSummary:
    """Scan ``lines`` and pass every match to ``writer``.

    Returns
    -------
    ScanSummary
        Final counters for the scan

    """
    summary = ScanSummary(destination=destination)
    for match in iter_line_matches(lines, term, options, line_range, summary):
        writer(match)

    logger.debug(
        "Scanned %d of %d lines, %d results", summary.lines_scanned, summary.lines_read, summary.results
    )
    return summary


def search_file(
    path: PathLike,
    term: str,
    options: MatchOptions,
    line_range: Optional[LineRange] = None,
    save_path: Optional[PathLike] = None,
    stdout: Optional[TextIO] = None,
    writer_factory: Optional[Callable[[TextIO], MatchWriter]] = None,
    on_ready: Optional[Callable[[], None]] = None,
) -> ScanSummary:
    """Search ``path`` for ``term`` and write the results.

    Results go to ``save_path`` when ``options.save_to_file`` is set and to
    ``stdout`` (``sys.stdout`` by default) otherwise. Both file handles are
    closed on every exit path.

    Parameters
    ----------
    path : str or Path
        File to search
    term : str
        Search term
    options : MatchOptions
        Resolved option flags
    line_range : LineRange, optional
        Inclusive line filter
    save_path : str or Path, optional
        Destination file for results
    stdout : TextIO, optional
        Stream used when results are not saved to a file
    writer_factory : callable, optional
        Builds the match writer for the chosen sink; defaults to
        ``StreamMatchWriter``
    on_ready : callable, optional
        Called once both files are open, before the first line is read

    Returns
    -------
    ScanSummary
        Final counters, with ``destination`` naming the sink

    Raises
    ------
    SearchTermError
        If the term is empty or too long
    InputFileError
        If ``path`` cannot be opened
    OutputFileError
        If ``save_path`` cannot be created

    """
    validate_term(term)
    if options.save_to_file and save_path is None:
        raise ValidationError("ERROR: No save file given.", parameter_name="save")

    with ExitStack() as stack:
        try:
            source = stack.enter_context(open(path, encoding=DEFAULT_ENCODING, errors=PASSTHROUGH_ERRORS, newline=""))
        except OSError as exc:
            raise InputFileError(str(path), original_error=exc) from exc

        if options.save_to_file:
            try:
                sink = stack.enter_context(
                    open(save_path, "w", encoding=DEFAULT_ENCODING, errors=PASSTHROUGH_ERRORS, newline="")
                )
            except OSError as exc:
                raise OutputFileError(str(save_path), original_error=exc) from exc
            destination = str(save_path)
        else:
            sink = passthrough_stream(stdout if stdout is not None else sys.stdout)
            destination = STDOUT_DESTINATION

        if writer_factory is None:
            writer: MatchWriter = StreamMatchWriter(sink, options.show_positions)
        else:
            writer = writer_factory(sink)

        if on_ready is not None:
            on_ready()

        logger.debug("Searching %s for %r", path, term)
        return scan_lines(read_lines(source), term, options, writer, line_range, destination)
