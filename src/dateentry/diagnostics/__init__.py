"""Diagnostic system for dateentry.

Provides structured advisory diagnostics with codes, fields and hints,
plus the exception types reserved for caller mistakes.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorKind
from .errors import ConfigurationError, DateEntryError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "DateEntryError",
    "Diagnostic",
    "DiagnosticFormatter",
    "ErrorKind",
    "ErrorTemplate",
    "OutputFormat",
]
