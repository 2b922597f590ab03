"""Test custom argparse actions for the CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse

import pytest

from linesearch.cli.builder import create_parser
from linesearch.cli.custom_actions import OnceStoreAction, OnceStoreTrueAction, env_key_for, first_unknown_option
from linesearch.exceptions import DuplicateOptionError


@pytest.mark.unit
@pytest.mark.cli
class TestOnceActions:
    """Test the once-only argparse actions."""

    def test_store_true_records_provided(self):
        """Test OnceStoreTrueAction sets the flag and tracks it."""
        parser = argparse.ArgumentParser()
        parser.add_argument("-i", "--ignore-case", dest="ignore_case", action=OnceStoreTrueAction)

        args = parser.parse_args(["-i"])

        assert args.ignore_case is True
        assert args._provided_args == {"ignore_case"}

    def test_store_true_default(self):
        """Test an absent flag keeps its default and is not tracked."""
        parser = argparse.ArgumentParser()
        parser.add_argument("--flag", action=OnceStoreTrueAction)

        args = parser.parse_args([])

        assert args.flag is False
        assert not hasattr(args, "_provided_args")

    def test_store_true_repeat_rejected(self):
        """Test a repeated flag raises with the long option name."""
        parser = argparse.ArgumentParser()
        parser.add_argument("-i", "--ignore-case", dest="ignore_case", action=OnceStoreTrueAction)

        with pytest.raises(DuplicateOptionError) as exc_info:
            parser.parse_args(["-i", "--ignore-case"])

        assert exc_info.value.message == "ERROR: You can only employ a flag once (--ignore-case)"

    def test_store_repeat_rejected(self):
        """Test a repeated value option raises even with different values."""
        parser = argparse.ArgumentParser()
        parser.add_argument("-r", "--range", action=OnceStoreAction)

        with pytest.raises(DuplicateOptionError, match=r"\(--range\)"):
            parser.parse_args(["-r", "1-2", "--range", "3-4"])

    def test_store_value(self):
        """Test OnceStoreAction stores the given value."""
        parser = argparse.ArgumentParser()
        parser.add_argument("-s", "--save", action=OnceStoreAction)

        assert parser.parse_args(["-s", "out.txt"]).save == "out.txt"

    def test_short_only_option_name(self):
        """Test the first option string is reported when there is no long form."""
        parser = argparse.ArgumentParser()
        parser.add_argument("-x", dest="x", action=OnceStoreTrueAction)

        with pytest.raises(DuplicateOptionError, match=r"\(-x\)"):
            parser.parse_args(["-x", "-x"])


@pytest.mark.unit
@pytest.mark.cli
class TestEnvironmentDefaults:
    """Test LINESEARCH_* environment variable defaults."""

    def test_env_key(self):
        """Test environment variable naming."""
        assert env_key_for("ignore_case") == "LINESEARCH_IGNORE_CASE"
        assert env_key_for("log-level") == "LINESEARCH_LOG_LEVEL"

    @pytest.mark.parametrize("value,expected", [("true", True), ("YES", True), ("1", True), ("off", False)])
    def test_boolean_env_default(self, monkeypatch, value, expected):
        """Test boolean environment values."""
        monkeypatch.setenv("LINESEARCH_IGNORE_CASE", value)

        args = create_parser().parse_args(["Port", "file"])

        assert args.ignore_case is expected

    def test_env_default_does_not_count_as_provided(self, monkeypatch):
        """Test the flag can still be passed once when the environment sets it."""
        monkeypatch.setenv("LINESEARCH_IGNORE_CASE", "true")

        args = create_parser().parse_args(["-i", "Port", "file"])

        assert args.ignore_case is True

    def test_value_env_default_with_type(self, monkeypatch):
        """Test value options apply their type to the environment value."""
        monkeypatch.setenv("LINESEARCH_LOG_LEVEL", "debug")

        args = create_parser().parse_args(["Port", "file"])

        assert args.log_level == "DEBUG"

    def test_cli_overrides_env(self, monkeypatch):
        """Test a command-line value wins over the environment."""
        monkeypatch.setenv("LINESEARCH_RANGE", "1-2")

        args = create_parser().parse_args(["--range", "5-9", "Port", "file"])

        assert args.range == "5-9"

    def test_invalid_env_value_is_ignored(self, monkeypatch):
        """Test a value the type rejects leaves the default in place."""
        monkeypatch.setenv("LINESEARCH_COUNT", "many")
        parser = argparse.ArgumentParser()
        parser.add_argument("--count", action=OnceStoreAction, type=int, default=3)

        assert parser.parse_args([]).count == 3


@pytest.mark.unit
@pytest.mark.cli
class TestFirstUnknownOption:
    """Test detection of unknown options ahead of the help flag."""

    @staticmethod
    def _help_action(parser):
        return next(action for action in parser._actions if "--help" in action.option_strings)

    @pytest.mark.parametrize(
        "raw_args,expected",
        [
            (["--bogus", "-h"], "--bogus"),
            (["-i", "-x", "--help"], "-x"),
            (["-h", "--bogus"], None),
            (["-i", "-ih", "--bogus"], None),
            (["--he", "--bogus"], None),
            (["-s", "-h", "--bogus"], "--bogus"),
            (["--range=1-2", "-r5", "Port", "-h"], None),
            (["-5", "-h"], None),
            (["--", "--bogus", "-h"], None),
        ],
    )
    def test_scan(self, raw_args, expected):
        """Test the first unknown option before the help flag is reported."""
        parser = create_parser()
        assert first_unknown_option(parser, raw_args, stop_at=self._help_action(parser)) == expected

    def test_without_stop_action(self):
        """Test the whole argument list is scanned when no stop action is given."""
        parser = create_parser()
        assert first_unknown_option(parser, ["-i", "Port", "file", "--nope"]) == "--nope"
        assert first_unknown_option(parser, ["-i", "--ignore", "Port"]) is None
