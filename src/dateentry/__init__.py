"""dateentry - incremental date-text parsing for keystroke-driven input fields.

Corrects the text of a date field after every keystroke: impossible days,
months and years are reverted to the last accepted value, stray characters
are dropped, and February 29 is held to leap years. The result is always a
date that can still be completed by typing.

Public API:
    IncrementalDateParser - One input session (process / finalize / reset)
    configure - Construct a session
    DateFormat - Field order (MDY, DMY)
    ProcessResult, FinalizeResult - Per-call results
    ParserState, ParserConfig - Immutable state for the pure functions

Exceptions:
    DateEntryError - Base exception class
    ConfigurationError - Invalid format, year range or locale

Submodules:
    dateentry.parsing - Pure process_input / finalize_input and helpers
    dateentry.diagnostics - ErrorKind codes, Diagnostic, ErrorTemplate, formatter
    dateentry.locale_utils - CLDR field order lookup (requires Babel)
"""

from .diagnostics import ConfigurationError, DateEntryError, Diagnostic, ErrorKind
from .enums import DateField, DateFormat, FieldStatus
from .parsing import FinalizeResult, ParserConfig, ParserState, ProcessResult
from .session import IncrementalDateParser, configure

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("dateentry")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "DateEntryError",
    "DateField",
    "DateFormat",
    "Diagnostic",
    "ErrorKind",
    "FieldStatus",
    "FinalizeResult",
    "IncrementalDateParser",
    "ParserConfig",
    "ParserState",
    "ProcessResult",
    "__version__",
    "configure",
]
