"""IncrementalDateParser: one input session over the pure parsing core.

The session owns a ParserState and replaces it on every call. It adds the
pieces a UI shell needs around the pure functions: logging, an optional
error callback for transient messages, the placeholder text, and locale
based configuration.

Shell wiring:
    - on every change of the field text: result = parser.process(text),
      then show result.display
    - on focus loss, or after an idle period of the shell's choosing:
      result = parser.finalize(), then show result.display
    - pass on_error to receive each correction as a Diagnostic; rendering
      and expiring messages stays with the shell

Not thread-safe: a session belongs to a single input field.

Python 3.11+.
"""

import logging
from collections.abc import Callable

from dateentry.constants import DEFAULT_END_YEAR, DEFAULT_START_YEAR
from dateentry.diagnostics import Diagnostic
from dateentry.enums import DateFormat
from dateentry.parsing import (
    FinalizeResult,
    ParserConfig,
    ParserState,
    ProcessResult,
    finalize_input,
    process_input,
)

__all__ = ["ErrorCallback", "IncrementalDateParser", "configure"]

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[Diagnostic], None]


class IncrementalDateParser:
    """Keystroke-driven date parser for a single text field.

    Example:
        >>> parser = IncrementalDateParser(DateFormat.MDY)
        >>> parser.process("03/15/2024").display
        '03/15/2024'
        >>> parser.finalize().committed
        '15/03/2024'
    """

    __slots__ = ("_on_error", "_state")

    def __init__(
        self,
        date_format: DateFormat | str = DateFormat.MDY,
        start_year: int = DEFAULT_START_YEAR,
        end_year: int = DEFAULT_END_YEAR,
        *,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """Start a session.

        Args:
            date_format: Field order, DateFormat or "mm/dd/yyyy" / "dd/mm/yyyy"
            start_year: First accepted year (1000..9999)
            end_year: Last accepted year (start_year..9999)
            on_error: Called with every advisory Diagnostic, in order

        Raises:
            ConfigurationError: If the format or year range is invalid
        """
        config = ParserConfig(date_format=date_format, start_year=start_year, end_year=end_year)
        self._state = ParserState(config=config)
        self._on_error = on_error
        logger.debug(
            "Date session started: format=%s, years=%d..%d",
            config.date_format.name,
            config.start_year,
            config.end_year,
        )

    @classmethod
    def from_locale(
        cls,
        locale_code: str,
        start_year: int = DEFAULT_START_YEAR,
        end_year: int = DEFAULT_END_YEAR,
        *,
        on_error: ErrorCallback | None = None,
    ) -> "IncrementalDateParser":
        """Start a session using the field order of a locale.

        Requires Babel (`pip install dateentry[babel]`).

        Raises:
            BabelImportError: If Babel is not installed
            ConfigurationError: If the locale is unknown or the year range invalid
        """
        from dateentry.locale_utils import date_format_for_locale  # noqa: PLC0415

        return cls(
            date_format_for_locale(locale_code), start_year, end_year, on_error=on_error
        )

    @property
    def config(self) -> ParserConfig:
        """Format and year range of this session."""
        return self._state.config

    @property
    def state(self) -> ParserState:
        """Current immutable state snapshot."""
        return self._state

    @property
    def placeholder(self) -> str:
        """Hint text for the empty field, e.g. "mm/dd/yyyy"."""
        return self._state.config.date_format.value

    @property
    def display(self) -> str:
        """Text currently shown in the field."""
        return self._state.display

    @property
    def committed(self) -> str | None:
        """Last finalized "day/month/year", or None."""
        return self._state.committed

    def process(self, raw: str | None) -> ProcessResult:
        """Correct the field text after a keystroke or an external value change.

        Args:
            raw: Full field text; None is treated as an empty field

        Returns:
            ProcessResult with the text to display

        Raises:
            TypeError: If raw is neither str nor None
        """
        self._state, result = process_input(self._state, raw)
        logger.debug("Processed %r -> %r (complete=%s)", raw, result.display, result.is_complete)
        self._emit(result.diagnostics)
        return result

    def finalize(self) -> FinalizeResult:
        """Commit the date, or clear the field if it is incomplete or out of range.

        Returns:
            FinalizeResult; display is "" when the date was discarded
        """
        previous = self._state.display
        self._state, result = finalize_input(self._state)
        if result.is_valid:
            logger.info("Committed date %s", result.committed)
        else:
            logger.debug("Cleared incomplete date %r", previous)
        self._emit(result.diagnostics)
        return result

    def reset(self) -> None:
        """Forget all typed fragments and the committed date."""
        self._state = ParserState(config=self._state.config)

    def _emit(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        for diagnostic in diagnostics:
            logger.debug("Corrected input [%s]: %s", diagnostic.code.name, diagnostic.message)
            if self._on_error is not None:
                self._on_error(diagnostic)

    def __repr__(self) -> str:
        return (
            f"IncrementalDateParser(date_format={self.config.date_format.name}, "
            f"start_year={self.config.start_year}, end_year={self.config.end_year}, "
            f"display={self.display!r})"
        )


def configure(
    date_format: DateFormat | str = DateFormat.MDY,
    start_year: int = DEFAULT_START_YEAR,
    end_year: int = DEFAULT_END_YEAR,
    *,
    on_error: ErrorCallback | None = None,
) -> IncrementalDateParser:
    """Construct a new parsing session.

    Args:
        date_format: Field order (default MDY)
        start_year: First accepted year (default 1000)
        end_year: Last accepted year (default 9999)
        on_error: Optional callback for advisory diagnostics

    Returns:
        A fresh IncrementalDateParser

    Raises:
        ConfigurationError: If start_year > end_year, either lies outside
            1000..9999, or the format is unknown
    """
    return IncrementalDateParser(date_format, start_year, end_year, on_error=on_error)
