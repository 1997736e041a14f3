"""Diagnostic codes and data structures.

Defines advisory error codes and the diagnostic record handed to shells.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from dateentry.enums import DateField

__all__ = [
    "Diagnostic",
    "ErrorKind",
]


class ErrorKind(Enum):
    """Advisory error codes with unique identifiers.

    None of these is ever raised: each one describes a correction the parser
    already applied to the display. Organized by category:
        1000-1999: Input shape (separators, stray characters)
        2000-2999: Field range (month, day, year, leap day)
        3000-3999: Finalization (date cleared on focus loss)
    """

    # Input shape (1000-1999)
    INVALID_SEPARATOR_START = 1001
    TOO_MANY_SEPARATORS = 1002
    NON_NUMERIC_CHARACTER = 1003

    # Field range (2000-2999)
    MONTH_OUT_OF_RANGE = 2001
    DAY_OUT_OF_RANGE = 2002
    YEAR_OUT_OF_RANGE = 2003
    INVALID_LEAP_DAY = 2004

    # Finalization (3000-3999)
    INCOMPLETE_DATE = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured advisory message.

    Attributes:
        code: Unique error code
        message: Human-readable message, suitable for a transient hint
        field: Date fragment the message is about (None for whole-input issues)
        hint: Suggestion for the user
        input_value: Raw text that triggered the correction
        severity: "warning" for corrections applied while typing, "error"
            when finalization discarded the date
    """

    code: ErrorKind
    message: str
    field: DateField | None = None
    hint: str | None = None
    input_value: str = ""
    severity: Literal["error", "warning"] = "warning"

    def __str__(self) -> str:
        """Return human-readable message."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            warning[MONTH_OUT_OF_RANGE]: Please enter a valid month.
              --> input: '13'
              = field: month
              = help: Months run from 1 to 12

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
