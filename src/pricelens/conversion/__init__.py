"""Currency conversion and display formatting.

Public API:
    convert - Amount between two currencies through the pivot
    format_price - Locale-correct display string with two decimals
    quote_conversion - Converted and original display strings for one price
    RateTable - Immutable pivot-relative rate table

Python 3.13+. Uses Babel for i18n.
"""

from .converter import convert
from .formatting import format_plain, format_price, resolve_formatting_locale
from .quote import ConversionQuote, quote_conversion
from .rates import RateTable, validate_rate

__all__ = [
    "ConversionQuote",
    "RateTable",
    "convert",
    "format_plain",
    "format_price",
    "quote_conversion",
    "resolve_formatting_locale",
    "validate_rate",
]
