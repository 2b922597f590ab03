#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Literal substring matching with ASCII case folding and word isolation.

The matcher scans a single line left to right and reports the offset of the
first occurrence of the search term that satisfies the active options. No
regular expressions are involved; the term is always matched literally.

Word characters are ASCII letters, ASCII digits and the underscore. When
``isolate_words`` is set, a match must not touch a word character on either
side. Line terminators are not word characters, so a term at the very end of
a line (before ``"\\n"``) is isolated on the right.
"""

from __future__ import annotations

from typing import Iterator

from linesearch.constants import ASCII_UPPER_TABLE, WORD_CHARACTERS
from linesearch.options import MatchOptions


def is_word_char(ch: str) -> bool:
    """Return True for ASCII letters, ASCII digits and underscore."""
    return ch in WORD_CHARACTERS


def ascii_upper(text: str) -> str:
    """Upper-case ``a``-``z`` only, leaving every other character unchanged."""
    return text.translate(ASCII_UPPER_TABLE)


def _is_isolated(line: str, start: int, end: int) -> bool:
    left_ok = start == 0 or not is_word_char(line[start - 1])
    right_ok = end >= len(line) or not is_word_char(line[end])
    return left_ok and right_ok


def find_match(line: str, term: str, options: MatchOptions, start: int = 0) -> int | None:
    """Find the leftmost occurrence of ``term`` in ``line`` at or after ``start``.

    Parameters
    ----------
    line : str
        The current line, trailing newline included when present
    term : str
        Non-empty search term
    options : MatchOptions
        Only ``ignore_case`` and ``isolate_words`` affect matching
    start : int, default 0
        Offset to resume scanning from

    Returns
    -------
    int or None
        Offset of the match within ``line``, or None when there is none

    Examples
    --------
    >>> find_match("Port 22\\n", "port", MatchOptions(ignore_case=True))
    0
    >>> find_match("Passport", "port", MatchOptions(ignore_case=True, isolate_words=True)) is None
    True

    """
    if not term:
        return None

    haystack = line
    needle = term
    if options.ignore_case:
        haystack = ascii_upper(line)
        needle = ascii_upper(term)

    term_length = len(needle)
    candidate = haystack.find(needle, start)
    while candidate != -1:
        if not options.isolate_words or _is_isolated(line, candidate, candidate + term_length):
            return candidate
        # Failed candidates advance by a single character
        candidate = haystack.find(needle, candidate + 1)
    return None


def iter_matches(line: str, term: str, options: MatchOptions) -> Iterator[int]:
    """Yield the offsets of successive non-overlapping matches on ``line``.

    Each search resumes at the end of the previous match. With
    ``dedupe_lines`` set only the first match is yielded.
    """
    offset = find_match(line, term, options)
    while offset is not None:
        yield offset
        if options.dedupe_lines:
            return
        offset = find_match(line, term, options, offset + len(term))
