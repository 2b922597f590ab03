#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line range parsing.

Parses ``"LOW-HIGH"`` or a single ``"N"`` into an inclusive interval of
1-based line numbers.

Examples
--------
>>> parse_line_range("50-75")
LineRange(low=50, high=75)
>>> parse_line_range("75-50")
LineRange(low=50, high=75)
>>> parse_line_range("12")
LineRange(low=12, high=12)

"""

from __future__ import annotations

from dataclasses import dataclass

from linesearch.constants import MAX_RANGE_DIGITS, MAX_RANGE_VALUE, RANGE_SEPARATOR
from linesearch.exceptions import RangeFormatError


@dataclass(frozen=True)
class LineRange:
    """Inclusive interval of line numbers, normalized so ``low <= high``."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low < 0 or self.high < 0:
            raise RangeFormatError(parameter_value=(self.low, self.high))
        if self.high < self.low:
            low, high = self.high, self.low
            object.__setattr__(self, "low", low)
            object.__setattr__(self, "high", high)

    def contains(self, line_number: int) -> bool:
        """Return True when ``line_number`` lies within the range, bounds included."""
        return self.low <= line_number <= self.high

    def __str__(self) -> str:
        return f"{self.low}-{self.high}"


def _parse_bound(segment: str, spec: str) -> int:
    # str.isdigit() accepts non-ASCII digits such as "²", so check explicitly
    if not segment or len(segment) > MAX_RANGE_DIGITS or not all("0" <= ch <= "9" for ch in segment):
        raise RangeFormatError(parameter_value=spec)

    value = int(segment)
    if value > MAX_RANGE_VALUE:
        raise RangeFormatError(parameter_value=spec)
    return value


def parse_line_range(spec: str) -> LineRange:
    """Parse a range string into a validated ``LineRange``.

    Parameters
    ----------
    spec : str
        ``"N"`` or ``"N-M"`` where each bound is a non-negative decimal
        integer of at most ten digits. Bounds given high-to-low are swapped.

    Returns
    -------
    LineRange
        The normalized inclusive range

    Raises
    ------
    RangeFormatError
        If either bound is empty, non-numeric, negative, too long, or larger
        than a 32-bit signed integer

    """
    low_text, separator, high_text = spec.partition(RANGE_SEPARATOR)
    low = _parse_bound(low_text, spec)
    high = _parse_bound(high_text, spec) if separator else low
    return LineRange(low, high)
