"""Conversion quote: what the display layer shows for one detected price."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pricelens.constants import DISPLAY_FRACTION_DIGITS

from .converter import convert
from .formatting import format_price
from .rates import RateTable

__all__ = ["ConversionQuote", "quote_conversion"]


@dataclass(frozen=True, slots=True)
class ConversionQuote:
    """Display strings for one price converted into the home currency.

    Attributes:
        value: Converted amount formatted in the home currency
        original: Original amount formatted in its own currency, plus its code
        rate_line: Rate used, e.g. "1 USD = 83.20 INR (live)"
        converted_amount: Unrounded converted amount
        target_currency: The home currency
    """

    value: str
    original: str
    rate_line: str
    converted_amount: float | Decimal | int
    target_currency: str


def quote_conversion(
    amount: int | float | Decimal,
    currency_code: str,
    home_currency: str,
    rates: RateTable,
) -> ConversionQuote:
    """Convert a detected price into the home currency and format both sides.

    The rate line names the non-pivot currency of the pair so that it always
    reads "1 <pivot> = <rate> <code>".

    Raises:
        MissingRateError: If ``rates`` lacks either currency
    """
    converted = convert(amount, currency_code, home_currency, rates)
    quoted = home_currency if home_currency != rates.pivot else currency_code
    rate = f"{rates.rate(quoted):.{DISPLAY_FRACTION_DIGITS}f}"
    return ConversionQuote(
        value=format_price(converted, home_currency),
        original=f"{format_price(amount, currency_code)} {currency_code}",
        rate_line=f"1 {rates.pivot} = {rate} {quoted} ({rates.source})",
        converted_amount=converted,
        target_currency=home_currency,
    )
