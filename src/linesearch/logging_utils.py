"""Logging setup for the search command.

Log records never share a stream with search results: they go to stderr and,
on request, to a log file. The user-facing status banner and summary are
printed separately and do not depend on the log level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from linesearch.constants import DEFAULT_LOG_LEVEL

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: Union[int, str, None], trace_mode: bool = False) -> int:
    """Turn a level name or number into a numeric logging level.

    Trace mode always means DEBUG. Names are matched case-insensitively and
    anything unrecognised falls back to ``DEFAULT_LOG_LEVEL``.
    """
    if trace_mode:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level

    level = logging.getLevelName(str(log_level or DEFAULT_LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def configure_logging(
    log_level: Union[int, str, None] = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the stderr handler, and optionally a file handler, on the root logger.

    Parameters
    ----------
    log_level : int | str, optional
        Numeric level or level name; ignored when ``trace_mode`` is set
    log_file : str, optional
        Append log records to this file as well
    trace_mode : bool, default False
        Log at DEBUG with timestamps and logger names

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    resolved_level = resolve_log_level(log_level, trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
