"""Command-line interface for the linesearch line search tool.

Searches a single file line by line for a literal term and prints every
matching line. Status messages go to stderr so that results written to stdout
or to a save file stay clean.

Environment Variable Support
----------------------------
Every option supports an environment variable default using the pattern
LINESEARCH_<OPTION_NAME>, where the option's destination name is upper-cased.
Boolean flags are enabled by ``true``, ``1``, ``yes`` or ``on``. CLI
arguments always override environment variables.

Examples
--------
Basic search::

    $ search Port /etc/ssh/sshd_config

Case-insensitive whole-word search with positions::

    $ search -i -I -l port /etc/ssh/sshd_config

Restrict to lines 50 through 75 and save the results::

    $ search --range 50-75 --save results.txt Port /etc/ssh/sshd_config

Use environment variables for defaults::

    $ export LINESEARCH_IGNORE_CASE=true
    $ search port /etc/ssh/sshd_config

"""

import argparse
import functools
import logging
import sys

from linesearch.cli.builder import EXIT_ERROR, EXIT_SUCCESS, USAGE, create_parser
from linesearch.cli.custom_actions import RAW_ARGS_ATTRIBUTE
from linesearch.cli.output import RichMatchWriter, print_search_banner, print_summary, should_use_rich_output
from linesearch.constants import PROGRAM_NAME
from linesearch.exceptions import LineSearchError
from linesearch.logging_utils import configure_logging
from linesearch.options import MatchOptions
from linesearch.range import parse_line_range
from linesearch.scanner import search_file, validate_term

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _parse_arguments(args: list[str] | None) -> tuple[argparse.Namespace | None, int]:
    parser = create_parser()
    raw_args = sys.argv[1:] if args is None else list(args)
    namespace = argparse.Namespace(**{RAW_ARGS_ATTRIBUTE: raw_args})
    try:
        # options may appear anywhere, including between TERM and FILE
        return parser.parse_intermixed_args(raw_args, namespace), EXIT_SUCCESS
    except SystemExit as e:
        # argparse calls sys.exit() on --help (0) or on a usage error (2)
        return None, EXIT_SUCCESS if e.code in (0, None) else EXIT_ERROR
    except LineSearchError as e:
        print(e.message, file=sys.stderr)
        return None, EXIT_ERROR


def _check_positionals(parsed_args: argparse.Namespace) -> bool:
    if parsed_args.term is None:
        print(f"USAGE: {USAGE}", file=sys.stderr)
        print(f"Try '{PROGRAM_NAME} --help' for more information", file=sys.stderr)
        return False
    if parsed_args.file is None:
        print("ERROR: Missing search file path.", file=sys.stderr)
        return False
    return True


def main(args: list[str] | None = None) -> int:
    """Execute the search CLI and return the process exit code."""
    parsed_args, exit_code = _parse_arguments(args)
    if parsed_args is None:
        return exit_code

    if not _check_positionals(parsed_args):
        return EXIT_ERROR

    _setup_logging_level(parsed_args)

    options = MatchOptions.from_namespace(parsed_args)
    try:
        line_range = parse_line_range(parsed_args.range) if options.range_filter_active else None
        validate_term(parsed_args.term)

        writer_factory = None
        if should_use_rich_output(parsed_args):
            logger.debug("Using rich output")
            writer_factory = functools.partial(RichMatchWriter.for_stream, show_positions=options.show_positions)

        summary = search_file(
            parsed_args.file,
            parsed_args.term,
            options,
            line_range=line_range,
            save_path=parsed_args.save,
            writer_factory=writer_factory,
            on_ready=lambda: print_search_banner(
                parsed_args.term, parsed_args.file, options, line_range, parsed_args.save
            ),
        )
    except LineSearchError as e:
        logger.debug("Search aborted", exc_info=e.original_error)
        print(e.message, file=sys.stderr)
        return EXIT_ERROR

    print_summary(summary)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
