"""Enumerations for dateentry type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

from enum import StrEnum


class DateField(StrEnum):
    """One of the three fragments of a typed date.

    StrEnum provides automatic string conversion: str(DateField.DAY) == "day"
    """

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class DateFormat(StrEnum):
    """Field order of the typed date.

    The value doubles as the input placeholder shown to the user.
    """

    MDY = "mm/dd/yyyy"
    """Month first: 03/15/2024"""

    DMY = "dd/mm/yyyy"
    """Day first: 15/03/2024"""

    @property
    def leading_field(self) -> DateField:
        """Field typed before the first separator."""
        return DateField.MONTH if self is DateFormat.MDY else DateField.DAY

    @property
    def middle_field(self) -> DateField:
        """Field typed between the first and second separator."""
        return DateField.DAY if self is DateFormat.MDY else DateField.MONTH


class FieldStatus(StrEnum):
    """State of a single day, month or year fragment.

    StrEnum provides automatic string conversion: str(FieldStatus.UNSET) == "unset"
    """

    UNSET = "unset"
    """Nothing typed for the field yet."""

    PROVISIONAL = "provisional"
    """Digits accepted so far; may still grow while the user types."""

    REJECTED = "rejected"
    """A literal zero: present in the display but not a usable value yet."""


__all__ = [
    "DateField",
    "DateFormat",
    "FieldStatus",
]
