"""Tests for calendar helpers: leap years, month lengths, leading zeros."""

import calendar as stdlib_calendar

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dateentry.parsing.calendar import (
    days_in_month,
    field_number,
    is_february,
    is_leap_year,
    trim_leading_zeros,
)


class TestIsLeapYear:
    """Test is_leap_year()."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            ("2020", True),
            ("2019", False),
            ("1900", False),
            ("2000", True),
            ("2400", True),
            ("2100", False),
        ],
    )
    def test_gregorian_rule(self, year: str, expected: bool) -> None:
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(year) is expected

    def test_accepts_int(self) -> None:
        assert is_leap_year(2024)
        assert not is_leap_year(2023)

    @given(year=st.integers(min_value=1000, max_value=9999))
    def test_matches_stdlib(self, year: int) -> None:
        """Agrees with calendar.isleap for every four-digit year."""
        assert is_leap_year(str(year)) is stdlib_calendar.isleap(year)


class TestDaysInMonth:
    """Test days_in_month()."""

    @pytest.mark.parametrize("month", ["1", "3", "5", "7", "8", "10", "12", "01", "07"])
    def test_thirty_one_day_months(self, month: str) -> None:
        assert days_in_month(month) == 31

    @pytest.mark.parametrize("month", ["4", "6", "9", "11", "04", "09"])
    def test_thirty_day_months(self, month: str) -> None:
        assert days_in_month(month) == 30

    @pytest.mark.parametrize("month", ["2", "02"])
    def test_february_allows_leap_day(self, month: str) -> None:
        """February allows 29 days until the year is known."""
        assert days_in_month(month) == 29

    @pytest.mark.parametrize("month", ["", "0"])
    def test_unknown_month_defaults_to_29(self, month: str) -> None:
        assert days_in_month(month) == 29


class TestTrimLeadingZeros:
    """Test trim_leading_zeros().

    Values up to 9 keep a single leading zero when one was typed; "03"
    stays "03" rather than becoming "3" or "0".
    """

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            ("", ""),
            ("0", "0"),
            ("00", "0"),
            ("000", "0"),
            ("5", "5"),
            ("03", "03"),
            ("003", "03"),
            ("10", "10"),
            ("012", "12"),
            ("0031", "31"),
        ],
    )
    def test_normalization(self, digits: str, expected: str) -> None:
        assert trim_leading_zeros(digits) == expected

    @given(digits=st.text(alphabet="0123456789", max_size=12))
    def test_preserves_value(self, digits: str) -> None:
        assert field_number(trim_leading_zeros(digits)) == field_number(digits)

    @given(digits=st.text(alphabet="0123456789", max_size=12))
    def test_idempotent(self, digits: str) -> None:
        once = trim_leading_zeros(digits)
        assert trim_leading_zeros(once) == once


class TestFieldNumber:
    """Test field_number()."""

    def test_empty_is_zero(self) -> None:
        assert field_number("") == 0

    def test_leading_zeros_ignored(self) -> None:
        assert field_number("0007") == 7

    def test_huge_input_does_not_raise(self) -> None:
        """Pasted digit runs beyond int()'s string limit stay out of range."""
        assert field_number("9" * 10_000) > 9999


class TestIsFebruary:
    """Test is_february()."""

    @pytest.mark.parametrize(("month", "expected"), [("2", True), ("02", True), ("12", False), ("", False)])
    def test_detection(self, month: str, expected: bool) -> None:
        assert is_february(month) is expected
