"""Optional Babel gate for locale-driven field order.

The parser never needs Babel. Only `dateentry.locale_utils` does, to read a
locale's CLDR short date pattern and decide between MDY and DMY. Install
with `pip install dateentry[babel]`.

locale_utils calls require_babel() before importing from babel, so a plain
install fails with an install hint instead of a bare ModuleNotFoundError.

Python 3.11+.
"""

from functools import lru_cache

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """A locale helper was called without the babel extra installed.

    Attributes:
        feature: Name of the helper that needed CLDR data
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} needs CLDR date patterns from Babel to pick a field order. "
            "Install with: pip install dateentry[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """True when locale-based configuration can be used."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError unless Babel can be imported.

    Args:
        feature: Helper name reported in the error, e.g. "get_babel_locale"
    """
    if not _check_babel_available():
        raise BabelImportError(feature)
