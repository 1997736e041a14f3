"""Error message templates.

Centralized advisory message templates for testable, consistent messages.
Python 3.11+. Zero external dependencies.
"""

from dateentry.enums import DateField

from .codes import Diagnostic, ErrorKind


class ErrorTemplate:
    """Centralized advisory message templates.

    All diagnostics are created here, so shells can rely on stable wording
    and tests can compare against a single source.
    """

    @staticmethod
    def separator_start(input_value: str) -> Diagnostic:
        """Input begins with a separator.

        Args:
            input_value: Raw text as typed

        Returns:
            Diagnostic for INVALID_SEPARATOR_START
        """
        return Diagnostic(
            code=ErrorKind.INVALID_SEPARATOR_START,
            message="Please start with digits.",
            hint="A date cannot begin with '/'",
            input_value=input_value,
        )

    @staticmethod
    def too_many_separators(input_value: str, *, leap_day: bool = False) -> Diagnostic:
        """Input contains a third separator.

        A third separator usually means the user is still trying to finish
        the year, so the message points at the year.

        Args:
            input_value: Raw text as typed
            leap_day: True when the stored date is February 29

        Returns:
            Diagnostic for TOO_MANY_SEPARATORS
        """
        msg = "Please enter a valid leap year." if leap_day else "Please enter a valid year."
        return Diagnostic(
            code=ErrorKind.TOO_MANY_SEPARATORS,
            message=msg,
            field=DateField.YEAR,
            hint="A date has at most two '/' separators",
            input_value=input_value,
        )

    @staticmethod
    def non_numeric(input_value: str) -> Diagnostic:
        """Input contains characters other than digits and separators.

        Args:
            input_value: Raw text as typed

        Returns:
            Diagnostic for NON_NUMERIC_CHARACTER
        """
        return Diagnostic(
            code=ErrorKind.NON_NUMERIC_CHARACTER,
            message='Please enter numbers 0 to 9 and the symbol "/".',
            hint="Other characters are removed",
            input_value=input_value,
        )

    @staticmethod
    def month_out_of_range(input_value: str) -> Diagnostic:
        """Month is not usable (above 12, zero, or shorter than the typed day).

        Args:
            input_value: Raw text as typed

        Returns:
            Diagnostic for MONTH_OUT_OF_RANGE
        """
        return Diagnostic(
            code=ErrorKind.MONTH_OUT_OF_RANGE,
            message="Please enter a valid month.",
            field=DateField.MONTH,
            hint="Months run from 1 to 12",
            input_value=input_value,
        )

    @staticmethod
    def day_out_of_range(input_value: str, max_day: int) -> Diagnostic:
        """Day is not usable (above the month's length, or zero).

        Args:
            input_value: Raw text as typed
            max_day: Number of days allowed in the current month

        Returns:
            Diagnostic for DAY_OUT_OF_RANGE
        """
        return Diagnostic(
            code=ErrorKind.DAY_OUT_OF_RANGE,
            message="Please enter a valid day.",
            field=DateField.DAY,
            hint=f"Days run from 1 to {max_day}",
            input_value=input_value,
        )

    @staticmethod
    def year_out_of_range(input_value: str, start_year: int, end_year: int) -> Diagnostic:
        """Year starts with zero or falls outside the configured range.

        Args:
            input_value: Raw text as typed
            start_year: First accepted year
            end_year: Last accepted year

        Returns:
            Diagnostic for YEAR_OUT_OF_RANGE
        """
        return Diagnostic(
            code=ErrorKind.YEAR_OUT_OF_RANGE,
            message=f"Please enter a year between {start_year} and {end_year}.",
            field=DateField.YEAR,
            hint="Years have four digits and cannot start with 0",
            input_value=input_value,
        )

    @staticmethod
    def invalid_leap_day(input_value: str) -> Diagnostic:
        """February 29 was given a year that is not a leap year.

        Args:
            input_value: Raw text as typed

        Returns:
            Diagnostic for INVALID_LEAP_DAY
        """
        return Diagnostic(
            code=ErrorKind.INVALID_LEAP_DAY,
            message="Please enter a valid leap year.",
            field=DateField.YEAR,
            hint="February 29 exists only in leap years",
            input_value=input_value,
        )

    @staticmethod
    def placeholder_blocks_year(input_value: str, field: DateField) -> Diagnostic:
        """A zero day or month prevents typing the year.

        Args:
            input_value: Raw text as typed
            field: The zero fragment (day or month)

        Returns:
            Diagnostic for DAY_OUT_OF_RANGE or MONTH_OUT_OF_RANGE
        """
        code = ErrorKind.DAY_OUT_OF_RANGE if field is DateField.DAY else ErrorKind.MONTH_OUT_OF_RANGE
        return Diagnostic(
            code=code,
            message="Please enter a valid date.",
            field=field,
            hint=f"Replace the 0 {field} before typing the year",
            input_value=input_value,
        )

    @staticmethod
    def incomplete_date(display: str) -> Diagnostic:
        """Finalization discarded an incomplete or out-of-range date.

        Args:
            display: Text that was shown before the field was cleared

        Returns:
            Diagnostic for INCOMPLETE_DATE
        """
        return Diagnostic(
            code=ErrorKind.INCOMPLETE_DATE,
            message="Invalid date",
            hint="Enter day, month and a four-digit year",
            input_value=display,
            severity="error",
        )
