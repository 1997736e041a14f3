"""Separator scanning and input sanitation.

The sanitized text contains only ASCII digits and at most two separators,
and never begins with a separator.

Python 3.11+. Zero external dependencies.
"""

import re

from dateentry.constants import MAX_SEPARATORS, SEPARATOR
from dateentry.diagnostics import Diagnostic, ErrorTemplate

__all__ = ["find_separator", "sanitize_input"]

# str.isdigit() accepts superscripts and other scripts' digits; only ASCII
# digits are meaningful in a date fragment.
_DISALLOWED_PATTERN = re.compile(rf"[^0-9{re.escape(SEPARATOR)}]")


def find_separator(text: str, occurrence: int) -> int | None:
    """Index of the n-th separator in text.

    Args:
        text: Text to scan
        occurrence: 1 for the first separator, 2 for the second, ...

    Returns:
        Zero-based index, or None when text has fewer separators
    """
    count = 0
    for index, char in enumerate(text):
        if char == SEPARATOR:
            count += 1
            if count == occurrence:
                return index
    return None


def sanitize_input(
    raw: str,
    *,
    leap_day: bool = False,
) -> tuple[str, tuple[Diagnostic, ...]]:
    """Reduce raw field text to digits and separators.

    Steps, in order:
        1. Remove every character that is not an ASCII digit or separator.
        2. Text that begins with a separator becomes empty.
        3. Text with more than two separators is cut at the third one.

    Args:
        raw: Text as typed into the field
        leap_day: The stored date is February 29, so a stray third separator
            is reported against the leap year

    Returns:
        Tuple of (sanitized text, advisory diagnostics)
    """
    diagnostics: list[Diagnostic] = []

    text = _DISALLOWED_PATTERN.sub("", raw)
    if len(text) != len(raw):
        diagnostics.append(ErrorTemplate.non_numeric(raw))

    if text.startswith(SEPARATOR):
        diagnostics.append(ErrorTemplate.separator_start(raw))
        return ("", tuple(diagnostics))

    cut = find_separator(text, MAX_SEPARATORS + 1)
    if cut is not None:
        diagnostics.append(ErrorTemplate.too_many_separators(raw, leap_day=leap_day))
        text = text[:cut]

    return (text, tuple(diagnostics))
