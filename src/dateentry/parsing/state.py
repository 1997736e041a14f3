"""Immutable parser state and result records.

ParserState is threaded through the pure process_input()/finalize_input()
functions; each call returns a new state instead of mutating the old one.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from dateentry.constants import DEFAULT_END_YEAR, DEFAULT_START_YEAR, MAX_YEAR, MIN_YEAR
from dateentry.diagnostics import ConfigurationError, Diagnostic, ErrorKind
from dateentry.enums import DateField, DateFormat, FieldStatus

from .calendar import field_number

__all__ = [
    "FieldValue",
    "FinalizeResult",
    "ParserConfig",
    "ParserState",
    "ProcessResult",
]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Session settings, fixed for the lifetime of a parser.

    Attributes:
        date_format: Field order (MDY or DMY); plain strings such as
            "dd/mm/yyyy" or "DMY" are accepted and converted
        start_year: First accepted four-digit year
        end_year: Last accepted four-digit year
    """

    date_format: DateFormat = DateFormat.MDY
    start_year: int = DEFAULT_START_YEAR
    end_year: int = DEFAULT_END_YEAR

    def __post_init__(self) -> None:
        """Validate ParserConfig invariants.

        Raises:
            ConfigurationError: If the format is unknown, a year is not an
                int, lies outside 1000..9999, or start_year exceeds end_year.
        """
        object.__setattr__(self, "date_format", _coerce_format(self.date_format))
        for name in ("start_year", "end_year"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                msg = f"{name} must be an int, got {type(value).__name__}"
                raise ConfigurationError(msg, parameter=name)
            if not MIN_YEAR <= value <= MAX_YEAR:
                msg = f"{name} must be between {MIN_YEAR} and {MAX_YEAR}, got {value}"
                raise ConfigurationError(msg, parameter=name)
        if self.start_year > self.end_year:
            msg = f"start_year ({self.start_year}) must be <= end_year ({self.end_year})"
            raise ConfigurationError(msg, parameter="start_year")

    def year_in_range(self, year: str) -> bool:
        """True when the typed year lies within [start_year, end_year]."""
        return self.start_year <= field_number(year) <= self.end_year


def _coerce_format(value: DateFormat | str) -> DateFormat:
    if isinstance(value, DateFormat):
        return value
    if isinstance(value, str):
        candidate = value.strip()
        if candidate.upper() in DateFormat.__members__:
            return DateFormat[candidate.upper()]
        try:
            return DateFormat(candidate.lower())
        except ValueError:
            pass
    allowed = ", ".join(f"'{member.value}'" for member in DateFormat)
    msg = f"date_format must be one of {allowed}, got {value!r}"
    raise ConfigurationError(msg, parameter="date_format")


@dataclass(frozen=True, slots=True)
class FieldValue:
    """A day, month or year fragment with an explicit status.

    Attributes:
        status: UNSET, PROVISIONAL or REJECTED
        digits: Digits shown for the field ("" when unset, "0" when rejected)
    """

    status: FieldStatus = FieldStatus.UNSET
    digits: str = ""

    def __post_init__(self) -> None:
        """Validate that status and digits agree.

        Raises:
            ValueError: If digits are not ASCII digits, or do not match status.
        """
        if self.digits and not (self.digits.isascii() and self.digits.isdigit()):
            msg = f"FieldValue.digits must be ASCII digits, got {self.digits!r}"
            raise ValueError(msg)
        if _status_of(self.digits) is not self.status:
            msg = f"FieldValue.status {self.status} does not match digits {self.digits!r}"
            raise ValueError(msg)

    @classmethod
    def of(cls, digits: str) -> "FieldValue":
        """Build a field from typed digits, deriving its status."""
        return cls(_status_of(digits), digits)

    @property
    def is_set(self) -> bool:
        """True for a usable, non-zero value."""
        return self.status is FieldStatus.PROVISIONAL

    @property
    def is_rejected(self) -> bool:
        """True for a literal zero."""
        return self.status is FieldStatus.REJECTED

    @property
    def number(self) -> int:
        """Numeric value (0 when unset or rejected)."""
        return field_number(self.digits)

    def __str__(self) -> str:
        return self.digits


def _status_of(digits: str) -> FieldStatus:
    if not digits:
        return FieldStatus.UNSET
    if field_number(digits) == 0:
        return FieldStatus.REJECTED
    return FieldStatus.PROVISIONAL


UNSET = FieldValue()


@dataclass(frozen=True, slots=True)
class ParserState:
    """Everything one input session remembers between keystrokes.

    Attributes:
        config: Format and year range of the session
        day: Last accepted day fragment
        month: Last accepted month fragment
        year: Last accepted year fragment
        display: Last display string handed back to the shell
        committed: Last finalized "day/month/year", or None
    """

    config: ParserConfig = field(default_factory=ParserConfig)
    day: FieldValue = UNSET
    month: FieldValue = UNSET
    year: FieldValue = UNSET
    display: str = ""
    committed: str | None = None

    def get(self, which: DateField) -> FieldValue:
        """Return the fragment for a DateField."""
        match which:
            case DateField.DAY:
                return self.day
            case DateField.MONTH:
                return self.month
            case DateField.YEAR:
                return self.year


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of one process() call.

    Attributes:
        display: Corrected text to put back into the field (at most 10 chars)
        is_complete: Day, month and a four-digit year are all present
        is_valid: Complete, and the year range and month lengths are respected
        diagnostics: Advisory corrections applied during this call, in order
    """

    display: str
    is_complete: bool
    is_valid: bool
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def error_code(self) -> ErrorKind | None:
        """Code of the first correction, or None when the input was accepted as typed."""
        return self.diagnostics[0].code if self.diagnostics else None


@dataclass(frozen=True, slots=True)
class FinalizeResult:
    """Outcome of finalize().

    Attributes:
        display: "" when the date was discarded, else the current display
        committed: "day/month/year" when valid, else None
        diagnostics: INCOMPLETE_DATE when the date was discarded
    """

    display: str
    committed: str | None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when a date was committed."""
        return self.committed is not None

    @property
    def error_code(self) -> ErrorKind | None:
        """Code of the first diagnostic, or None."""
        return self.diagnostics[0].code if self.diagnostics else None
