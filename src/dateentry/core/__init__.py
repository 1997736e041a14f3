"""Core infrastructure shared across dateentry modules.

Python 3.11+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]
