#  Copyright (c) 2025 Tom Villani, Ph.D.
"""linesearch - line-oriented literal text search.

Scan a file line by line for a literal term, with optional ASCII
case-insensitivity, whole-word isolation, line-range restriction and
per-line duplicate suppression.

Examples
--------
Search a file from Python:

    >>> from linesearch import MatchOptions, search_file
    >>> summary = search_file("sshd_config", "Port", MatchOptions(ignore_case=True))

Enumerate matches without writing anything:

    >>> from linesearch import iter_line_matches
    >>> with open("sshd_config") as handle:
    ...     columns = [m.column for m in iter_line_matches(handle, "Port", MatchOptions())]

"""

from linesearch.exceptions import (
    DuplicateOptionError,
    FileError,
    InputFileError,
    LineSearchError,
    OutputFileError,
    RangeFormatError,
    SearchTermError,
    ValidationError,
)
from linesearch.matcher import find_match, is_word_char, iter_matches
from linesearch.options import MatchOptions
from linesearch.range import LineRange, parse_line_range
from linesearch.scanner import (
    LineMatch,
    ScanSummary,
    StreamMatchWriter,
    iter_line_matches,
    read_lines,
    scan_lines,
    search_file,
    validate_term,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # Matching
    "find_match",
    "is_word_char",
    "iter_matches",
    "MatchOptions",
    # Ranges
    "LineRange",
    "parse_line_range",
    # Scanning
    "LineMatch",
    "ScanSummary",
    "StreamMatchWriter",
    "iter_line_matches",
    "read_lines",
    "scan_lines",
    "search_file",
    "validate_term",
    # Exceptions
    "LineSearchError",
    "ValidationError",
    "DuplicateOptionError",
    "RangeFormatError",
    "SearchTermError",
    "FileError",
    "InputFileError",
    "OutputFileError",
]
