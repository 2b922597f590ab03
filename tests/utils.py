"""Test utilities for the linesearch test suite.

This module provides helpers for creating input files and a reference
implementation of the matching rules that property tests compare against.
"""

import tempfile
from pathlib import Path
from typing import Iterable

WORD_CHARS = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    import shutil
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_lines(path: Path, lines: Iterable[str]) -> Path:
    """Write each line followed by a newline and return the path."""
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def fold(text: str) -> str:
    """Upper-case ASCII letters one character at a time."""
    return "".join(chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in text)


def reference_find(line: str, term: str, ignore_case: bool, isolate: bool, start: int = 0):
    """Brute-force scan used as an oracle for the matcher."""
    n = len(term)
    for i in range(start, len(line) - n + 1):
        candidate = line[i:i + n]
        if ignore_case:
            equal = fold(candidate) == fold(term)
        else:
            equal = candidate == term
        if not equal:
            continue
        if isolate:
            if i > 0 and line[i - 1] in WORD_CHARS:
                continue
            if i + n < len(line) and line[i + n] in WORD_CHARS:
                continue
        return i
    return None
