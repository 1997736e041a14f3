"""Locale utilities: BCP-47 normalization and CLDR field order lookup.

The parser itself only knows two field orders. These helpers pick the order a
locale's users expect by reading the CLDR short date pattern through Babel,
so a shell can configure a session from the user's locale.

Requires the optional Babel dependency (`pip install dateentry[babel]`).

Python 3.11+.
"""

from __future__ import annotations

import functools
import logging
import re
from typing import TYPE_CHECKING

from dateentry.core.babel_compat import require_babel
from dateentry.diagnostics import ConfigurationError
from dateentry.enums import DateFormat

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "date_format_for_locale",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# CLDR patterns quote literal text: 'de' in "d 'de' MMMM".
_QUOTED_LITERAL = re.compile(r"'[^']*'")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        ConfigurationError: If the locale is unknown or malformed
    """
    require_babel("get_babel_locale")
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    try:
        return Locale.parse(normalized)
    except (UnknownLocaleError, ValueError) as e:
        msg = f"Unknown locale '{locale_code}': {e}"
        raise ConfigurationError(msg, parameter="locale_code") from e


def date_format_for_locale(locale_code: str) -> DateFormat:
    """Field order used by a locale's short date format.

    Month before day (en_US "M/d/yy", ja_JP "y/MM/dd") selects MDY; day
    before month (en_GB "dd/MM/y", de_DE "dd.MM.yy") selects DMY.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        DateFormat.MDY or DateFormat.DMY

    Raises:
        BabelImportError: If Babel is not installed
        ConfigurationError: If the locale is unknown

    Example:
        >>> date_format_for_locale("en-US")
        <DateFormat.MDY: 'mm/dd/yyyy'>
        >>> date_format_for_locale("fr_FR")
        <DateFormat.DMY: 'dd/mm/yyyy'>
    """
    locale = get_babel_locale(locale_code)
    pattern = locale.date_formats["short"].pattern
    return _order_from_pattern(pattern, locale_code)


def _order_from_pattern(pattern: str, locale_code: str) -> DateFormat:
    fields = _QUOTED_LITERAL.sub("", pattern)
    day = fields.find("d")
    month = next((i for i, char in enumerate(fields) if char in "ML"), -1)
    if day < 0 or month < 0:
        logger.warning(
            "No day/month order in date pattern '%s' for locale '%s'. Falling back to %s",
            pattern,
            locale_code,
            DateFormat.MDY.name,
        )
        return DateFormat.MDY
    return DateFormat.MDY if month < day else DateFormat.DMY
