#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction for the search CLI.

The boolean match flags are generated from the ``MatchOptions`` dataclass
field metadata; value-bearing options and logging controls are added
explicitly.
"""

from __future__ import annotations

import argparse
from dataclasses import fields

from linesearch.cli.custom_actions import OnceStoreAction, OnceStoreTrueAction, OrderedHelpAction
from linesearch.constants import DEFAULT_LOG_LEVEL, PROGRAM_NAME
from linesearch.options import MatchOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1

USAGE = f"{PROGRAM_NAME} [OPTION]... TERM FILE"

EPILOG = f"EG: {PROGRAM_NAME} Port /etc/ssh/sshd_config | grep 22"


def add_match_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per ``MatchOptions`` field that declares ``cli_flags``.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to extend

    """
    for option_field in fields(MatchOptions):
        flags = option_field.metadata.get("cli_flags")
        if not flags:
            continue
        parser.add_argument(
            *flags,
            dest=option_field.name,
            action=OnceStoreTrueAction,
            help=option_field.metadata.get("help"),
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        usage=USAGE,
        description="Search a file line by line for a literal term.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action=OrderedHelpAction, help="Show this help message and exit")

    parser.add_argument("term", nargs="?", metavar="TERM", help="Literal text to search for")
    parser.add_argument("file", nargs="?", metavar="FILE", help="File to search")

    add_match_option_arguments(parser)

    parser.add_argument(
        "-r",
        "--range",
        action=OnceStoreAction,
        metavar="NUM-NUM",
        help="Display results only from a given range of lines (e.g., -r 50-75)",
    )
    parser.add_argument(
        "-s",
        "--save",
        action=OnceStoreAction,
        metavar="FILE",
        help="Save results to a file",
    )
    parser.add_argument(
        "--rich",
        action=OnceStoreTrueAction,
        help="Highlight matches when writing to a terminal",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        action=OnceStoreAction,
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: %(default)s)",
    )
    logging_group.add_argument(
        "--log-file",
        action=OnceStoreAction,
        metavar="PATH",
        help="Also write log records to this file",
    )
    logging_group.add_argument(
        "--trace",
        action=OnceStoreTrueAction,
        help="Debug logging with timestamps and logger names",
    )

    return parser
