"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent registry keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from tscatalog.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "language_subtag",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (it-IT), while Babel/POSIX and Qt Linguist use
    underscores (it_IT). Surrounding whitespace is stripped because
    ``language`` attributes in hand-edited catalogs occasionally carry it.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "pt-BR", "it_IT")

    Returns:
        POSIX-formatted locale code (e.g., "pt_BR", "it_IT")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("it")  # Already normalized
        'it'
    """
    return locale_code.strip().replace("-", "_")


def language_subtag(locale_code: str) -> str:
    """Return the lowercase language part of a locale code.

    Example:
        >>> language_subtag("pt-BR")
        'pt'
        >>> language_subtag("IT_it")
        'it'
    """
    return normalize_locale(locale_code).split("_", 1)[0].lower()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in hot paths like %L number formatting.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
