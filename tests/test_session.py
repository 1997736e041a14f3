"""Tests for IncrementalDateParser and configure()."""

import logging

import pytest

from dateentry import (
    ConfigurationError,
    DateFormat,
    Diagnostic,
    ErrorKind,
    IncrementalDateParser,
    configure,
)


class TestConfigure:
    """Test configure() and constructor validation."""

    def test_defaults(self) -> None:
        parser = configure()
        assert parser.config.date_format is DateFormat.MDY
        assert (parser.config.start_year, parser.config.end_year) == (1000, 9999)

    def test_format_string(self) -> None:
        parser = configure("dd/mm/yyyy", 2000, 2030)
        assert parser.config.date_format is DateFormat.DMY

    def test_invalid_range(self) -> None:
        with pytest.raises(ConfigurationError):
            configure(start_year=2031, end_year=2030)

    def test_placeholder_is_format(self) -> None:
        assert configure().placeholder == "mm/dd/yyyy"
        assert configure(DateFormat.DMY).placeholder == "dd/mm/yyyy"


class TestSessionFlow:
    """process() / finalize() through a session."""

    def test_commit_in_day_month_year_order(self) -> None:
        parser = IncrementalDateParser()
        assert parser.process("03/15/2024").display == "03/15/2024"
        result = parser.finalize()
        assert result.committed == "15/03/2024"
        assert parser.committed == "15/03/2024"
        assert parser.display == "03/15/2024"

    def test_finalize_clears_incomplete(self) -> None:
        parser = IncrementalDateParser()
        parser.process("01/")
        result = parser.finalize()
        assert result.display == ""
        assert result.committed is None
        assert parser.display == ""

    def test_typing_month_thirteen(self, typed) -> None:
        parser, result = typed("13")
        assert result.display == "1"
        assert parser.state.month.digits == "1"

    def test_typing_non_leap_year(self, typed) -> None:
        _, result = typed("02/29/2019")
        assert result.display == "02/29/201"
        assert result.error_code is ErrorKind.INVALID_LEAP_DAY

    def test_typing_year_out_of_range(self, typed) -> None:
        _, result = typed("01/01/1999", start_year=2000, end_year=2030)
        assert result.display == "01/01/199"
        assert result.error_code is ErrorKind.YEAR_OUT_OF_RANGE

    def test_typing_dmy(self, typed) -> None:
        parser, result = typed("31/12/2024", date_format=DateFormat.DMY)
        assert result.is_valid
        assert parser.finalize().committed == "31/12/2024"

    def test_reset(self) -> None:
        parser = IncrementalDateParser()
        parser.process("1/1/2020")
        parser.finalize()
        parser.reset()
        assert parser.display == ""
        assert parser.committed is None
        assert parser.state.day.digits == ""
        assert parser.config.date_format is DateFormat.MDY

    def test_external_value(self) -> None:
        """A value set by the application goes through the same correction."""
        parser = IncrementalDateParser(DateFormat.DMY)
        assert parser.process("31/04/2024").display == "31/"

    def test_repr(self) -> None:
        parser = IncrementalDateParser(DateFormat.DMY, 2000, 2030)
        parser.process("5/")
        assert repr(parser) == (
            "IncrementalDateParser(date_format=DMY, start_year=2000, end_year=2030, display='5/')"
        )


class TestErrorCallback:
    """on_error receives every advisory diagnostic."""

    def test_callback_receives_diagnostics_in_order(self) -> None:
        received: list[Diagnostic] = []
        parser = IncrementalDateParser(on_error=received.append)
        parser.process("x13")
        assert [d.code for d in received] == [
            ErrorKind.NON_NUMERIC_CHARACTER,
            ErrorKind.MONTH_OUT_OF_RANGE,
        ]
        assert received[1].message == "Please enter a valid month."

    def test_callback_on_finalize(self) -> None:
        received: list[Diagnostic] = []
        parser = IncrementalDateParser(on_error=received.append)
        parser.process("1/")
        parser.finalize()
        assert received[-1].code is ErrorKind.INCOMPLETE_DATE
        assert received[-1].message == "Invalid date"

    def test_no_callback_for_clean_input(self) -> None:
        received: list[Diagnostic] = []
        parser = IncrementalDateParser(on_error=received.append)
        parser.process("12/31/2024")
        parser.finalize()
        assert received == []

    def test_callback_errors_propagate(self) -> None:
        def explode(diagnostic: Diagnostic) -> None:
            raise RuntimeError(diagnostic.message)

        parser = IncrementalDateParser(on_error=explode)
        with pytest.raises(RuntimeError, match="valid month"):
            parser.process("13")


class TestLogging:
    """Session logging."""

    def test_commit_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        parser = IncrementalDateParser()
        parser.process("3/15/2024")
        with caplog.at_level(logging.INFO, logger="dateentry.session"):
            parser.finalize()
        assert "Committed date 15/3/2024" in caplog.text

    def test_corrections_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        parser = IncrementalDateParser()
        with caplog.at_level(logging.DEBUG, logger="dateentry.session"):
            parser.process("13")
        assert "MONTH_OUT_OF_RANGE" in caplog.text

    def test_clear_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        parser = IncrementalDateParser()
        parser.process("1/")
        with caplog.at_level(logging.DEBUG, logger="dateentry.session"):
            parser.finalize()
        assert "Cleared incomplete date '1/'" in caplog.text
