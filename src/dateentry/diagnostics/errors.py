"""dateentry exception hierarchy.

Advisory input problems are never raised; they travel as Diagnostic records.
Exceptions here signal caller mistakes (bad configuration, wrong types).

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateEntryError(Exception):
    """Base exception for all dateentry errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateEntryError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(DateEntryError, ValueError):
    """Invalid parser configuration.

    Raised when a session is configured with an unknown date format, a year
    range outside 1000..9999, a start year after the end year, or a locale
    Babel does not know.

    Attributes:
        parameter: Name of the offending argument
    """

    def __init__(self, message: str, *, parameter: str = "") -> None:
        """Initialize ConfigurationError.

        Args:
            message: Error message string
            parameter: Name of the offending argument
        """
        super().__init__(message)
        self.parameter = parameter
