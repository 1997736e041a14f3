"""Calendar helpers for partially typed dates.

All helpers work on digit strings as they appear in the input field, so a
field that is still being typed ("2", "02", "0") can be checked without
first committing to a full date.

Python 3.11+. Zero external dependencies.
"""

from dateentry.constants import (
    FEBRUARY,
    FEBRUARY_DAYS,
    THIRTY_DAY_MONTHS,
    THIRTY_ONE_DAY_MONTHS,
)

__all__ = [
    "days_in_month",
    "field_number",
    "is_february",
    "is_leap_year",
    "trim_leading_zeros",
]

# Digit runs longer than this are larger than any date fragment. Capping them
# keeps int() away from the interpreter's digit-count limit on pasted input.
_MAX_SIGNIFICANT_DIGITS: int = 9
_OVERFLOW: int = 10**_MAX_SIGNIFICANT_DIGITS


def field_number(digits: str) -> int:
    """Numeric value of a digit string; "" counts as 0.

    Values too long to be a date fragment are reported as a large sentinel
    that fails every range check.

    Example:
        >>> field_number("07")
        7
        >>> field_number("")
        0
    """
    significant = digits.lstrip("0")
    if not significant:
        return 0
    if len(significant) > _MAX_SIGNIFICANT_DIGITS:
        return _OVERFLOW
    return int(significant)


def is_leap_year(year: str | int) -> bool:
    """Gregorian leap-year test.

    Args:
        year: Year as typed ("2024") or as an int

    Returns:
        True for years divisible by 4, except centuries not divisible by 400
    """
    value = year if isinstance(year, int) else field_number(year)
    return (value % 4 == 0 and value % 100 != 0) or value % 400 == 0


def is_february(month: str) -> bool:
    """True when the typed month resolves to February ("2" or "02")."""
    return field_number(month) == FEBRUARY


def days_in_month(month: str) -> int:
    """Number of days allowed for a typed month.

    February, an unset month ("") and a zero month all allow 29 days: the
    leap-year check waits until the year has four digits.

    Example:
        >>> days_in_month("4")
        30
        >>> days_in_month("02")
        29
    """
    value = field_number(month)
    if value in THIRTY_ONE_DAY_MONTHS:
        return 31
    if value in THIRTY_DAY_MONTHS:
        return 30
    return FEBRUARY_DAYS


def trim_leading_zeros(digits: str) -> str:
    """Normalize leading zeros of a day or month fragment.

    Values above 9 lose every leading zero. Smaller values keep exactly one
    leading zero when they had any, so a two-digit "03" survives as typed
    while runs of zeros collapse ("003" -> "03", "00" -> "0").

    Example:
        >>> trim_leading_zeros("012")
        '12'
        >>> trim_leading_zeros("03")
        '03'
        >>> trim_leading_zeros("000")
        '0'
    """
    if field_number(digits) > 9:
        return digits.lstrip("0")
    significant = digits.lstrip("0")
    if len(significant) == len(digits):
        return digits
    return "0" + significant
