"""Shared constants for dateentry.

Constants are grouped by domain:
- Input shape: separator, field widths, display length
- Year bounds: accepted configuration range and defaults
- Calendar tables: month lengths used by the day validators

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input shape
    "SEPARATOR",
    "MAX_SEPARATORS",
    "MAX_DISPLAY_LENGTH",
    "YEAR_DIGITS",
    # Year bounds
    "MIN_YEAR",
    "MAX_YEAR",
    "DEFAULT_START_YEAR",
    "DEFAULT_END_YEAR",
    # Field bounds
    "MAX_MONTH",
    "MAX_DAY",
    "FEBRUARY",
    "FEBRUARY_DAYS",
    "THIRTY_DAY_MONTHS",
    "THIRTY_ONE_DAY_MONTHS",
]

# ============================================================================
# INPUT SHAPE
# ============================================================================

# The only accepted divider between day, month and year fragments.
SEPARATOR: str = "/"

# A date has at most two separators; the third and everything after it is cut.
MAX_SEPARATORS: int = 2

# Length of "dd/mm/yyyy".
MAX_DISPLAY_LENGTH: int = 10

# A year is complete (and range-checked) once it has this many digits.
YEAR_DIGITS: int = 4

# ============================================================================
# YEAR BOUNDS
# ============================================================================

# Years are four digits without a leading zero.
MIN_YEAR: int = 1000
MAX_YEAR: int = 9999

DEFAULT_START_YEAR: int = MIN_YEAR
DEFAULT_END_YEAR: int = MAX_YEAR

# ============================================================================
# FIELD BOUNDS
# ============================================================================

MAX_MONTH: int = 12
MAX_DAY: int = 31

FEBRUARY: int = 2

# February is allowed 29 days until the year is known; the leap-year rule is
# applied when the fourth year digit arrives.
FEBRUARY_DAYS: int = 29

THIRTY_DAY_MONTHS: frozenset[int] = frozenset({4, 6, 9, 11})
THIRTY_ONE_DAY_MONTHS: frozenset[int] = frozenset({1, 3, 5, 7, 8, 10, 12})
