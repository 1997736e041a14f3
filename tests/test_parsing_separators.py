"""Tests for separator scanning and input sanitation."""

from hypothesis import given
from hypothesis import strategies as st

from dateentry.diagnostics import ErrorKind
from dateentry.parsing.separators import find_separator, sanitize_input


class TestFindSeparator:
    """Test find_separator()."""

    def test_first_and_second(self) -> None:
        assert find_separator("12/31/2024", 1) == 2
        assert find_separator("12/31/2024", 2) == 5

    def test_absent_is_none(self) -> None:
        """Absence is None, never 0."""
        assert find_separator("1231", 1) is None
        assert find_separator("12/31", 2) is None

    def test_position_zero_is_found(self) -> None:
        assert find_separator("/12", 1) == 0


class TestSanitizeInput:
    """Test sanitize_input()."""

    def test_clean_input_unchanged(self) -> None:
        text, diagnostics = sanitize_input("03/15/2024")
        assert text == "03/15/2024"
        assert diagnostics == ()

    def test_strips_non_numeric(self) -> None:
        text, diagnostics = sanitize_input("0a3/1b5")
        assert text == "03/15"
        assert [d.code for d in diagnostics] == [ErrorKind.NON_NUMERIC_CHARACTER]

    def test_non_ascii_digits_stripped(self) -> None:
        """Superscripts and other scripts' digits are not date digits."""
        text, _ = sanitize_input("1²/٣")
        assert text == "1/"

    def test_leading_separator_empties_input(self) -> None:
        text, diagnostics = sanitize_input("/1/2020")
        assert text == ""
        assert [d.code for d in diagnostics] == [ErrorKind.INVALID_SEPARATOR_START]

    def test_separator_exposed_by_stripping_empties_input(self) -> None:
        text, diagnostics = sanitize_input("x/1")
        assert text == ""
        assert [d.code for d in diagnostics] == [
            ErrorKind.NON_NUMERIC_CHARACTER,
            ErrorKind.INVALID_SEPARATOR_START,
        ]

    def test_third_separator_truncates(self) -> None:
        text, diagnostics = sanitize_input("1/2/2020/5")
        assert text == "1/2/2020"
        assert [d.code for d in diagnostics] == [ErrorKind.TOO_MANY_SEPARATORS]
        assert diagnostics[0].message == "Please enter a valid year."

    def test_third_separator_on_leap_day_mentions_leap_year(self) -> None:
        _, diagnostics = sanitize_input("2/29/2019/", leap_day=True)
        assert diagnostics[0].message == "Please enter a valid leap year."

    @given(raw=st.text(max_size=40))
    def test_output_shape(self, raw: str) -> None:
        """Only digits and at most two separators, never a leading separator."""
        text, _ = sanitize_input(raw)
        assert set(text) <= set("0123456789/")
        assert text.count("/") <= 2
        assert not text.startswith("/")
