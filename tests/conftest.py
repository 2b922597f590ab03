"""Pytest configuration and shared fixtures for the linesearch test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Callable, Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir, write_lines

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo handler changes made by ``configure_logging`` during a test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


@pytest.fixture(autouse=True)
def clear_linesearch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep LINESEARCH_* variables from the outer environment out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("LINESEARCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes lines to a file under ``tmp_path``."""

    def factory(lines, name: str = "input.txt") -> Path:
        return write_lines(tmp_path / name, lines)

    return factory


@pytest.fixture
def sshd_config(make_file) -> Path:
    """Provide a small sshd_config-like file with three Port lines."""
    return make_file(["Port 22", "#Port 22", "PORT forwarding enabled"], name="sshd_config")
