#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Match option flags resolved once at startup.

``MatchOptions`` replaces a bitmask of option flags with one named boolean
per option. Field metadata carries the command-line spelling and help text
so the CLI builder can generate the flag arguments from the dataclass.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class MatchOptions(CloneFrozenMixin):
    """Independent boolean flags controlling matching and output.

    ``range_filter_active`` and ``save_to_file`` have no flag of their own on
    the command line; they are switched on by ``--range`` and ``--save``.
    """

    ignore_case: bool = field(
        default=False,
        metadata={
            "help": "Search is not case sensitive",
            "cli_flags": ("-i", "--ignore-case"),
        },
    )
    isolate_words: bool = field(
        default=False,
        metadata={
            "help": "Only return a word where it is an exact match (not part of a compound word)",
            "cli_flags": ("-I", "--isolate"),
        },
    )
    show_positions: bool = field(
        default=False,
        metadata={
            "help": "Display line numbers and the starting position of the word",
            "cli_flags": ("-l", "--lines"),
        },
    )
    range_filter_active: bool = False
    dedupe_lines: bool = field(
        default=False,
        metadata={
            "help": "Only show a line once, regardless of how many matches it holds",
            "cli_flags": ("-R", "--remove-dupes"),
        },
    )
    save_to_file: bool = False

    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> "MatchOptions":
        """Build options from parsed command-line arguments.

        Parameters
        ----------
        namespace : argparse.Namespace
            Result of ``create_parser().parse_args()``

        Returns
        -------
        MatchOptions
            Resolved, immutable option set

        """
        return cls(
            ignore_case=bool(getattr(namespace, "ignore_case", False)),
            isolate_words=bool(getattr(namespace, "isolate_words", False)),
            show_positions=bool(getattr(namespace, "show_positions", False)),
            range_filter_active=getattr(namespace, "range", None) is not None,
            dedupe_lines=bool(getattr(namespace, "dedupe_lines", False)),
            save_to_file=getattr(namespace, "save", None) is not None,
        )
