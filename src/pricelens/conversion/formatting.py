"""Locale-correct display strings for monetary amounts.

Uses Babel's format_currency() with the formatting locale of the currency's
registry entry, so each currency is shown the way its home market writes it:
en_IN groups lakhs and crores (₹12,34,567.00), de_DE puts the symbol after a
comma decimal (1.234,56 €).

Always exactly two fractional digits. Codes Babel has no CLDR data for are
rendered as a plain grouped number followed by the code; formatting never
raises for an unknown currency.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from pricelens.constants import FALLBACK_FORMAT_LOCALE, FALLBACK_NUMBER_PATTERN
from pricelens.currencies import DEFAULT_REGISTRY
from pricelens.diagnostics import ErrorTemplate
from pricelens.locale_utils import get_babel_locale

__all__ = ["format_plain", "format_price", "resolve_formatting_locale"]

logger = logging.getLogger(__name__)


def resolve_formatting_locale(currency_code: str, locale_code: str | None = None) -> str:
    """Pick the locale used to format ``currency_code``.

    An explicit ``locale_code`` wins; otherwise the registry's formatting
    locale for the currency; otherwise FALLBACK_FORMAT_LOCALE.
    """
    if locale_code:
        return locale_code
    definition = DEFAULT_REGISTRY.get(currency_code)
    return definition.formatting_locale if definition is not None else FALLBACK_FORMAT_LOCALE


def format_plain(amount: int | float | Decimal, currency_code: str) -> str:
    """Grouped two-decimal number followed by the currency code.

    Example:
        >>> format_plain(1234.5, "XYZ")
        '1,234.50 XYZ'
    """
    number = babel_numbers.format_decimal(
        amount, format=FALLBACK_NUMBER_PATTERN, locale=FALLBACK_FORMAT_LOCALE
    )
    return f"{number} {currency_code}"


def format_price(
    amount: int | float | Decimal,
    currency_code: str,
    *,
    locale_code: str | None = None,
) -> str:
    """Format an amount for display in its currency.

    Args:
        amount: Amount to display
        currency_code: ISO 4217 code of the amount
        locale_code: Override the registry's formatting locale

    Returns:
        Formatted currency string with two fractional digits

    Examples:
        >>> format_price(999, "INR")
        '₹999.00'
        >>> format_price(1234567, "INR")
        '₹12,34,567.00'
        >>> format_price(1234.5, "USD")
        '$1,234.50'
        >>> format_price(5, "XYZ")
        '5.00 XYZ'
    """
    if not babel_numbers.is_currency(currency_code):
        logger.debug("%s", ErrorTemplate.format_currency_unsupported(currency_code))
        return format_plain(amount, currency_code)

    requested = resolve_formatting_locale(currency_code, locale_code)
    try:
        locale = get_babel_locale(requested)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown formatting locale '%s': %s. Falling back to %s",
            requested, e, FALLBACK_FORMAT_LOCALE,
        )
        locale = get_babel_locale(FALLBACK_FORMAT_LOCALE)

    # currency_digits=False keeps the pattern's two fraction digits even for
    # zero-decimal currencies such as JPY.
    return babel_numbers.format_currency(
        amount,
        currency_code,
        locale=locale,
        currency_digits=False,
        format_type="standard",
    )
