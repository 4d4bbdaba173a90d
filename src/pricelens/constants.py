"""Shared constants for pricelens.

Centralized configuration constants used across the detection, html and
conversion packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Currency defaults: Pivot and fallback currencies
- Marker contract: Attributes placed on tagged price nodes
- Formatting: Display precision and fallback locale
- Rates: Rate-table freshness and manual override default
- Cache limits: Memory bounds for cached Babel locales

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currency defaults
    "PIVOT_CURRENCY",
    "DEFAULT_HOME_CURRENCY",
    "STRUCTURED_FALLBACK_CURRENCY",
    # Marker contract
    "MARKER_TAG",
    "MARKER_CLASS",
    "MARKER_DETECTED_ATTR",
    "MARKER_AMOUNT_ATTR",
    "MARKER_CURRENCY_ATTR",
    "MARKER_DETECTED_VALUE",
    # Formatting
    "DISPLAY_FRACTION_DIGITS",
    "FALLBACK_FORMAT_LOCALE",
    "FALLBACK_NUMBER_PATTERN",
    # Rates
    "RATE_CACHE_MAX_AGE_SECONDS",
    "DEFAULT_MANUAL_RATE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# CURRENCY DEFAULTS
# ============================================================================

# Every rate table is expressed as "units of <code> per one PIVOT_CURRENCY".
# Cross-currency conversion always routes through this code.
PIVOT_CURRENCY: str = "USD"

# Returned by default_currency_for_locale() for empty, region-less or unmapped
# locale identifiers.
DEFAULT_HOME_CURRENCY: str = "USD"

# The structured-element heuristic tries every other currency (and the context
# rule) before this one. The dollar sign is the symbol most often found next to
# numbers that are not the page's own prices.
STRUCTURED_FALLBACK_CURRENCY: str = "USD"

# ============================================================================
# MARKER CONTRACT
# ============================================================================
#
# A detected price is handed to the display layer solely through these three
# attributes (detected flag, amount, currency). They are written once and never
# mutated; their presence makes any later scan skip the node.

MARKER_TAG: str = "span"
MARKER_CLASS: str = "currency-converter-price"
MARKER_DETECTED_ATTR: str = "data-price-detected"
MARKER_AMOUNT_ATTR: str = "data-amount"
MARKER_CURRENCY_ATTR: str = "data-currency"
MARKER_DETECTED_VALUE: str = "true"

# ============================================================================
# FORMATTING
# ============================================================================

DISPLAY_FRACTION_DIGITS: int = 2

# Locale used for the plain-number fallback when a currency code is not known
# to Babel, and for registry entries whose formatting locale fails to load.
FALLBACK_FORMAT_LOCALE: str = "en_US"

# Grouped number with exactly DISPLAY_FRACTION_DIGITS fractional digits.
FALLBACK_NUMBER_PATTERN: str = "#,##0." + "0" * DISPLAY_FRACTION_DIGITS

# ============================================================================
# RATES
# ============================================================================

# A cached rate table older than this is refetched on next use.
RATE_CACHE_MAX_AGE_SECONDS: int = 24 * 60 * 60

# Initial manual INR-per-USD rate offered before the user sets one.
DEFAULT_MANUAL_RATE: float = 83.0

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of Babel Locale objects kept by locale_utils.get_babel_locale.
MAX_LOCALE_CACHE_SIZE: int = 128
