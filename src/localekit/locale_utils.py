"""Conversion from session locale codes to Babel locales.

Session locales are opaque map keys ("en", "pt-BR", "fr_CA") and are never
rewritten. Only the formatting layer needs a Babel Locale, so the
conversion happens at that boundary and is cached.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from localekit.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Rewrite hyphen separators as underscores ("pt-BR" -> "pt_BR").

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("ca")
        'ca'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Resolve a session locale code to a cached Babel Locale.

    Args:
        locale_code: Session locale, hyphen or underscore separated

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the code cannot be parsed as a locale identifier
    """
    # Babel loads CLDR data on import; defer until a value is formatted
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
