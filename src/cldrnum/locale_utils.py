"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale identifier normalization used by the locale registry.
Provides canonical locale handling to ensure consistent lookups.

Python 3.11+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonicalize_locale",
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Registry keys use the POSIX form, so both separators are accepted.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "fr-CA")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "fr_CA")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def canonicalize_locale(locale_code: str) -> str | None:
    """Return Babel's canonical POSIX identifier for a locale code.

    Resolves letter case and CLDR language aliases, e.g. "EN-us" -> "en_US"
    and "iw" -> "he".

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Canonical identifier, or None if CLDR does not know the locale or
        the code is malformed.

    Example:
        >>> canonicalize_locale("EN-us")
        'en_US'
        >>> canonicalize_locale("xx") is None
        True
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    if not locale_code:
        return None

    try:
        return str(get_babel_locale(locale_code))
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
