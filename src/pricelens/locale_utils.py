"""Locale utilities for BCP-47 to POSIX conversion and region lookup.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
import re
from typing import TYPE_CHECKING

from pricelens.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "extract_region",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

# BCP-47 uses hyphens, POSIX uses underscores; browsers and OS settings
# hand us either.
_SUBTAG_SEPARATOR = re.compile(r"[-_]")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "en-IN")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "en_IN")

    Example:
        >>> normalize_locale("en-IN")
        'en_IN'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def extract_region(locale_code: str | None) -> str | None:
    """Return the upper-cased trailing region subtag of a locale identifier.

    The region is whatever follows the last separator. Identifiers without a
    separator carry no region.

    Example:
        >>> extract_region("en-gb")
        'GB'
        >>> extract_region("zh_Hant_TW")
        'TW'
        >>> extract_region("en") is None
        True
    """
    if not locale_code:
        return None
    parts = _SUBTAG_SEPARATOR.split(locale_code.strip())
    if len(parts) < 2 or not parts[-1]:
        return None
    return parts[-1].upper()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Formatting runs once per
    displayed price, so the parse would otherwise be repeated on every hover.

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


def get_system_locale() -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Returns:
        Detected locale code in POSIX format, or "en_US" if not determinable.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            return normalize_locale(value.split(".")[0])

    return "en_US"
