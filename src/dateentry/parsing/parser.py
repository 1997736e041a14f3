"""Incremental date parsing: the per-keystroke correction algorithm.

- process_input() returns tuple[ParserState, ProcessResult]
- finalize_input() returns tuple[ParserState, FinalizeResult]
- Functions NEVER raise on string input - corrections are reported as
  Diagnostic records in the result
- Pure: the previous state is read, a new state is returned, nothing else
  is touched

Correction model:
    The field text is split on "/" into a leading field (month for MDY, day
    for DMY), a middle field and the year. Each fragment is validated as soon
    as it is typed. An impossible fragment is replaced by the last value that
    was accepted for it, and anything typed after it is dropped, so the
    display is always a prefix of a date that can still be completed.

    A fragment holding a literal zero ("0") is kept on screen but blocks the
    separator that follows it until it is corrected.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass, replace

from dateentry.constants import MAX_DAY, MAX_DISPLAY_LENGTH, MAX_MONTH, YEAR_DIGITS
from dateentry.diagnostics import Diagnostic, ErrorTemplate
from dateentry.enums import DateField

from .calendar import days_in_month, field_number, is_february, is_leap_year, trim_leading_zeros
from .separators import find_separator, sanitize_input
from .state import UNSET, FieldValue, FinalizeResult, ParserConfig, ParserState, ProcessResult

__all__ = ["finalize_input", "is_valid_date", "process_input"]

# Largest value accepted for a leading field, before any cross-field check.
_LEADING_LIMITS: dict[DateField, int] = {
    DateField.MONTH: MAX_MONTH,
    DateField.DAY: MAX_DAY,
}

_LEAP_DAY: int = 29


@dataclass(slots=True)
class _Fields:
    """Working copy of the three fragments during a single process() call."""

    day: FieldValue
    month: FieldValue
    year: FieldValue

    def get(self, which: DateField) -> FieldValue:
        return getattr(self, which.value)

    def put(self, which: DateField, value: FieldValue) -> None:
        setattr(self, which.value, value)


class _Pass:
    """One process() call: the config, the raw input and the collected advisories."""

    __slots__ = ("config", "diagnostics", "fields", "raw")

    def __init__(self, config: ParserConfig, fields: _Fields, raw: str) -> None:
        self.config = config
        self.fields = fields
        self.raw = raw
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    # ------------------------------------------------------------------
    # Leading field
    # ------------------------------------------------------------------

    def leading_field(self, text: str) -> str:
        """Validate the fragment before the first separator."""
        which = self.config.date_format.leading_field
        divider = find_separator(text, 1)
        candidate = text if divider is None else text[:divider]

        if field_number(candidate) > _LEADING_LIMITS[which]:
            self.report(self._range_error(which))
            return self.fields.get(which).digits

        normalized = trim_leading_zeros(candidate)
        if len(candidate) > 1 and not candidate.strip("0"):
            # "00": the run of zeros collapses to the "0" placeholder.
            self.report(self._range_error(which))
        self.fields.put(which, FieldValue.of(normalized))
        return normalized + text[len(candidate) :]

    # ------------------------------------------------------------------
    # Middle field
    # ------------------------------------------------------------------

    def middle_field(self, text: str, divider1: int) -> str:
        """Validate the fragment between the first and second separator."""
        leading = self.config.date_format.leading_field
        which = self.config.date_format.middle_field
        divider2 = find_separator(text, 2)
        start = divider1 + 1
        head = text[:start]
        candidate = text[start:] if divider2 is None else text[start:divider2]

        if self.fields.get(leading).is_rejected:
            self.report(self._range_error(leading))
            self.fields.put(which, UNSET)
            return text[:divider1]

        if not candidate:
            if divider2 is not None:
                self.report(self._range_error(which))
            self.fields.put(which, UNSET)
            return head

        if not self._middle_fits(candidate):
            self.report(self._range_error(which))
            prior = self.fields.get(which)
            if prior.digits and not self._middle_fits(prior.digits):
                prior = UNSET
            self.fields.put(which, prior)
            return head + prior.digits

        normalized = trim_leading_zeros(candidate)
        self.fields.put(which, FieldValue.of(normalized))
        return head + normalized + text[start + len(candidate) :]

    def _middle_fits(self, candidate: str) -> bool:
        value = field_number(candidate)
        if self.config.date_format.middle_field is DateField.DAY:
            return value <= days_in_month(self.fields.month.digits)
        if value > MAX_MONTH:
            return False
        return self.fields.day.number <= days_in_month(candidate)

    # ------------------------------------------------------------------
    # Year
    # ------------------------------------------------------------------

    def year_field(self, text: str, divider2: int) -> str:
        """Validate the fragment after the second separator."""
        prefix = text[: divider2 + 1]
        candidate = text[divider2 + 1 :]

        for which in (DateField.DAY, DateField.MONTH):
            if self.fields.get(which).is_rejected:
                self.report(ErrorTemplate.placeholder_blocks_year(self.raw, which))
                self.fields.year = UNSET
                return text[:divider2]

        if candidate:
            if not self._year_in_bounds(candidate):
                self.report(
                    ErrorTemplate.year_out_of_range(
                        self.raw, self.config.start_year, self.config.end_year
                    )
                )
                prior = self.fields.year
                if prior.digits and not self._year_fits(prior.digits):
                    prior = UNSET
                self.fields.year = prior
                return prefix + prior.digits

            if not self._leap_day_fits(candidate):
                self.report(ErrorTemplate.invalid_leap_day(self.raw))
                self.fields.year = FieldValue.of(candidate[:-1])
                return text[:-1]

        self.fields.year = FieldValue.of(candidate)
        return text

    def _year_in_bounds(self, year: str) -> bool:
        if year.startswith("0"):
            return False
        return len(year) < YEAR_DIGITS or self.config.year_in_range(year)

    def _leap_day_fits(self, year: str) -> bool:
        if len(year) != YEAR_DIGITS:
            return True
        if self.fields.day.number != _LEAP_DAY or not is_february(self.fields.month.digits):
            return True
        return is_leap_year(year)

    def _year_fits(self, year: str) -> bool:
        return self._year_in_bounds(year) and self._leap_day_fits(year)

    # ------------------------------------------------------------------

    def _range_error(self, which: DateField) -> Diagnostic:
        if which is DateField.MONTH:
            return ErrorTemplate.month_out_of_range(self.raw)
        return ErrorTemplate.day_out_of_range(self.raw, days_in_month(self.fields.month.digits))


def process_input(state: ParserState, raw: str | None) -> tuple[ParserState, ProcessResult]:
    """Correct the field text after a keystroke.

    Args:
        state: State returned by the previous call (or a fresh ParserState)
        raw: Full text of the field after the keystroke; None is treated as ""

    Returns:
        Tuple of (new state, result). The result's display is what the field
        should show; its diagnostics list every correction applied.

    Raises:
        TypeError: If raw is neither str nor None

    Examples:
        >>> state = ParserState()
        >>> state, result = process_input(state, "02/29/2019")
        >>> result.display
        '02/29/201'
        >>> state, result = process_input(state, "02/29/2020")
        >>> result.display, result.is_valid
        ('02/29/2020', True)
    """
    if raw is None:
        raw = ""
    elif not isinstance(raw, str):
        msg = f"raw must be str or None, got {type(raw).__name__}"
        raise TypeError(msg)

    config = state.config
    fields = _Fields(day=state.day, month=state.month, year=state.year)
    leap_day = fields.day.number == _LEAP_DAY and is_february(fields.month.digits)

    text, sanitize_diagnostics = sanitize_input(raw, leap_day=leap_day)
    work = _Pass(config, fields, raw)
    work.diagnostics.extend(sanitize_diagnostics)

    text = work.leading_field(text)
    divider1 = find_separator(text, 1)
    if divider1 is not None:
        text = work.middle_field(text, divider1)

    divider2 = find_separator(text, 2)
    if divider2 is not None:
        text = work.year_field(text, divider2)

    text = text[:MAX_DISPLAY_LENGTH]

    # Fragments whose closing separator is gone are no longer confirmed.
    if find_separator(text, 1) is None:
        fields.put(config.date_format.middle_field, UNSET)
    if find_separator(text, 2) is None:
        fields.year = UNSET

    new_state = replace(state, day=fields.day, month=fields.month, year=fields.year, display=text)
    complete = _is_complete(new_state)
    result = ProcessResult(
        display=text,
        is_complete=complete,
        is_valid=complete and is_valid_date(new_state),
        diagnostics=tuple(work.diagnostics),
    )
    return (new_state, result)


def finalize_input(state: ParserState) -> tuple[ParserState, FinalizeResult]:
    """Commit the date on focus loss, or clear the field.

    A date is committed when day and month are set and the year lies in the
    configured range. The committed string is always "day/month/year",
    whatever the display order.

    Args:
        state: Current state

    Returns:
        Tuple of (new state, result)
    """
    if is_valid_date(state):
        committed = f"{state.day}/{state.month}/{state.year}"
        new_state = replace(state, committed=committed)
        return (new_state, FinalizeResult(display=state.display, committed=committed))

    cleared = ParserState(config=state.config)
    diagnostic = ErrorTemplate.incomplete_date(state.display)
    return (cleared, FinalizeResult(display="", committed=None, diagnostics=(diagnostic,)))


def is_valid_date(state: ParserState) -> bool:
    """True when the stored fragments form a real date within the year range."""
    if not (state.day.is_set and state.month.is_set):
        return False
    if not state.config.year_in_range(state.year.digits):
        return False
    if state.month.number > MAX_MONTH:
        return False
    if state.day.number > days_in_month(state.month.digits):
        return False
    if state.day.number == _LEAP_DAY and is_february(state.month.digits):
        return is_leap_year(state.year.digits)
    return True


def _is_complete(state: ParserState) -> bool:
    return state.day.is_set and state.month.is_set and len(state.year.digits) == YEAR_DIGITS
