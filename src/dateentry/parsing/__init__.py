"""Incremental parsing of a date typed into a single text field.

- process_input() returns tuple[ParserState, ProcessResult]
- finalize_input() returns tuple[ParserState, FinalizeResult]
- Functions NEVER raise on string input - corrections are returned as
  diagnostics in the result

Public API:
    State:
        ParserConfig - Format and year range of a session
        ParserState - Immutable per-session state
        FieldValue - Tri-state day/month/year fragment

    Operations:
        process_input - Correct the field text after a keystroke
        finalize_input - Commit or clear the date on focus loss
        is_valid_date - Check a state for a complete, real date

    Helpers:
        days_in_month, is_leap_year, trim_leading_zeros
        find_separator, sanitize_input

Python 3.11+. Zero external dependencies.
"""

from .calendar import days_in_month, is_leap_year, trim_leading_zeros
from .parser import finalize_input, is_valid_date, process_input
from .separators import find_separator, sanitize_input
from .state import FieldValue, FinalizeResult, ParserConfig, ParserState, ProcessResult

__all__ = [
    # State
    "FieldValue",
    "FinalizeResult",
    "ParserConfig",
    "ParserState",
    "ProcessResult",
    # Operations
    "finalize_input",
    "is_valid_date",
    "process_input",
    # Helpers
    "days_in_month",
    "find_separator",
    "is_leap_year",
    "sanitize_input",
    "trim_leading_zeros",
]
