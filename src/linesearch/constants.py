#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for linesearch.

Limits mirror the fixed-size buffers of classic line-oriented tools: a line
is read in chunks of at most ``MAX_LINE_LENGTH - 1`` characters and a search
term must be shorter than ``MAX_TERM_LENGTH`` characters.
"""

from __future__ import annotations

import string

# =============================================================================
# Buffer limits
# =============================================================================

MAX_LINE_LENGTH = 2048
MAX_TERM_LENGTH = 128

# =============================================================================
# Range parsing
# =============================================================================

RANGE_SEPARATOR = "-"
MAX_RANGE_DIGITS = 10
MAX_RANGE_VALUE = 2**31 - 1

# =============================================================================
# Matching
# =============================================================================

WORD_CHARACTERS = frozenset(string.ascii_letters + string.digits + "_")

# ASCII-only case folding; non-ASCII characters are left untouched
ASCII_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

# =============================================================================
# Output
# =============================================================================

POSITION_PREFIX_FORMAT = "LINE {line_number}, POS {column}: "
STDOUT_DESTINATION = "stdout"
DEFAULT_ENCODING = "utf-8"

# Undecodable input bytes round-trip unchanged to the output
PASSTHROUGH_ERRORS = "surrogateescape"

# =============================================================================
# CLI
# =============================================================================

PROGRAM_NAME = "search"
ENV_PREFIX = "LINESEARCH_"
ENV_TRUE_VALUES = ("true", "1", "yes", "on")
DEFAULT_LOG_LEVEL = "WARNING"
