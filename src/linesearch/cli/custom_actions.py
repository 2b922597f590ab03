"""Custom argparse actions for the search CLI.

Every option may be given at most once. These actions record which
destinations were supplied on the command line and reject a second
occurrence. They also read environment variable defaults using the pattern
``LINESEARCH_<DEST>``; a default taken from the environment does not count as
a supplied flag.

``OrderedHelpAction`` replaces the stock help flag so that an unknown option
given before ``-h`` is still reported as an error.
"""

from __future__ import annotations

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import os
import re
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from linesearch.constants import ENV_PREFIX, ENV_TRUE_VALUES
from linesearch.exceptions import DuplicateOptionError

logger = logging.getLogger(__name__)

# Namespace attribute holding the raw command line, read by OrderedHelpAction
RAW_ARGS_ATTRIBUTE = "_raw_args"

_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")


def env_key_for(dest: str) -> str:
    """Return the environment variable consulted for ``dest``."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"


def _long_option_name(option_strings: Sequence[str], dest: str) -> str:
    for option in option_strings:
        if option.startswith("--"):
            return option
    return option_strings[0] if option_strings else dest


def _mark_provided(action: argparse.Action, namespace: argparse.Namespace) -> None:
    if not hasattr(namespace, "_provided_args"):
        namespace._provided_args = set()
    if action.dest in namespace._provided_args:
        raise DuplicateOptionError(_long_option_name(action.option_strings, action.dest))
    namespace._provided_args.add(action.dest)


class OnceStoreAction(argparse.Action):
    """Store a value, refusing a second occurrence of the same option."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        const: Optional[Any] = None,
        default: Optional[Any] = None,
        type: Optional[Callable[[str], Any]] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        """Initialize the action, applying any environment variable default.

        Parameters
        ----------
        option_strings : Sequence[str]
            The option strings for this action
        dest : str
            The attribute name to store the value
        nargs : Optional[Union[int, str]]
            Number of arguments to consume
        const : Optional[Any]
            Constant value for special cases
        default : Optional[Any]
            Default value if not provided
        type : Optional[Any]
            Type conversion function
        choices : Optional[Sequence[Any]]
            Valid choices for the argument
        required : bool
            Whether this argument is required
        help : Optional[str]
            Help text for the argument
        metavar : Optional[Union[str, tuple[str, ...]]]
            Display name for the argument value

        """
        env_key = env_key_for(dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                default = type(env_value) if type is not None else env_value
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            const=const,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the value after checking the option was not seen before."""
        _mark_provided(self, namespace)
        setattr(namespace, self.dest, values)


class OnceStoreTrueAction(argparse.Action):
    """Store True for a flag, refusing a second occurrence of the same flag."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the flag, treating ``true/1/yes/on`` in the environment as set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in ENV_TRUE_VALUES

        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0, const=True, default=default, required=required, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store True after checking the flag was not seen before."""
        _mark_provided(self, namespace)
        setattr(namespace, self.dest, True)


def _lookup_option(table: dict[str, argparse.Action], token: str) -> Optional[argparse.Action]:
    name = token.split("=", 1)[0]
    if name in table:
        return table[name]
    if name.startswith("--"):
        # unique abbreviations of long options are accepted by argparse
        matches = {table[option] for option in table if option.startswith(name)}
        return matches.pop() if len(matches) == 1 else None
    return table.get(name[:2])


def first_unknown_option(
    parser: argparse.ArgumentParser, raw_args: Iterable[str], stop_at: Optional[argparse.Action] = None
) -> Optional[str]:
    """Return the first option in ``raw_args`` that ``parser`` does not define.

    Scanning stops at ``--`` and at the first occurrence of ``stop_at``.
    Values that belong to a preceding option are skipped.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser whose options are known
    raw_args : Iterable[str]
        Command-line arguments, program name excluded
    stop_at : argparse.Action, optional
        Action whose occurrence ends the scan

    Returns
    -------
    str or None
        The offending argument, or None when every option before the stop
        point is known

    """
    table = {option: action for action in parser._actions for option in action.option_strings}
    expect_value = False
    for token in raw_args:
        if expect_value:
            expect_value = False
            continue
        if token == "--":
            return None
        if not token.startswith("-") or token == "-" or " " in token or _NEGATIVE_NUMBER.match(token):
            continue

        action = _lookup_option(table, token)
        if action is None:
            return token
        if action is stop_at:
            return None
        if action.nargs == 0:
            # clustered short flags such as -ih
            if not token.startswith("--") and any(table.get(f"-{flag}") is stop_at for flag in token[2:]):
                return None
        elif "=" not in token and (token.startswith("--") or len(token) == 2):
            expect_value = True
    return None


class OrderedHelpAction(argparse.Action):
    """Print help and exit, unless an unknown option appeared before the help flag.

    argparse only reports unrecognised arguments once parsing has finished,
    so the stock help action would win over an earlier bad option. This
    action checks the raw arguments stored on the namespace under
    ``RAW_ARGS_ATTRIBUTE`` first.
    """

    def __init__(self, option_strings: list[str], dest: str = argparse.SUPPRESS, **kwargs: Any) -> None:
        kwargs.setdefault("default", argparse.SUPPRESS)
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        """Report an earlier unknown option, or print help and exit."""
        unknown = first_unknown_option(parser, getattr(namespace, RAW_ARGS_ATTRIBUTE, ()), stop_at=self)
        if unknown is not None:
            parser.error(f"unrecognized arguments: {unknown}")
        parser.print_help()
        parser.exit()
