"""Currency registry: supported currencies, detection patterns, locale defaults.

Python 3.13+.
"""

from .registry import (
    AMOUNT_PATTERN,
    DEFAULT_REGISTRY,
    LEAD_TOKEN_ORDER,
    LOCALE_CURRENCY_MAP,
    SUPPORTED_CURRENCIES,
    CurrencyDefinition,
    CurrencyRegistry,
    DetectionPattern,
    TokenKind,
    default_currency_for_locale,
    get_currency,
    list_currencies,
)

__all__ = [
    "AMOUNT_PATTERN",
    "DEFAULT_REGISTRY",
    "LEAD_TOKEN_ORDER",
    "LOCALE_CURRENCY_MAP",
    "SUPPORTED_CURRENCIES",
    "CurrencyDefinition",
    "CurrencyRegistry",
    "DetectionPattern",
    "TokenKind",
    "default_currency_for_locale",
    "get_currency",
    "list_currencies",
]
