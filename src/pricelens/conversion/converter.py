"""Cross-currency conversion through a single pivot currency.

Arithmetic is plain float with no intermediate rounding; rounding happens
only when a value is formatted for display.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from pricelens.constants import PIVOT_CURRENCY
from pricelens.diagnostics import ErrorTemplate, MissingRateError

from .rates import RateTable, validate_rate

__all__ = ["convert"]

type Amount = int | float | Decimal


def _rate_for(rates: Mapping[str, float], currency_code: str, pivot: str) -> float:
    try:
        rate = rates[currency_code]
    except KeyError:
        raise MissingRateError(
            ErrorTemplate.rate_missing(currency_code, pivot), currency_code=currency_code
        ) from None
    return validate_rate(currency_code, rate)


def convert(
    amount: Amount,
    from_code: str,
    to_code: str,
    rates: RateTable | Mapping[str, float],
    *,
    pivot: str | None = None,
) -> Amount:
    """Convert ``amount`` from one currency to another.

    Identical codes return ``amount`` itself, untouched. Otherwise the amount
    is divided by the source rate (unless the source is the pivot) and
    multiplied by the target rate (unless the target is the pivot).

    Args:
        amount: Amount in ``from_code``
        from_code: Source currency code
        to_code: Target currency code
        rates: RateTable, or a plain mapping of pivot-relative rates
        pivot: Pivot currency of a plain mapping (default: PIVOT_CURRENCY;
            ignored for a RateTable, which carries its own)

    Returns:
        Converted amount as float (or ``amount`` unchanged for identity)

    Raises:
        MissingRateError: If a non-pivot currency has no rate
        InvalidRateError: If a needed rate is not a positive number

    Examples:
        >>> convert(100, "USD", "EUR", {"USD": 1, "EUR": 0.92})
        92.0
        >>> convert(8300, "INR", "USD", {"USD": 1, "INR": 83})
        100.0
    """
    if from_code == to_code:
        return amount

    if isinstance(rates, RateTable):
        base = rates.pivot
        from_rate = rates.rate(from_code) if from_code != base else 1.0
        to_rate = rates.rate(to_code) if to_code != base else 1.0
    else:
        base = pivot if pivot is not None else PIVOT_CURRENCY
        from_rate = _rate_for(rates, from_code, base) if from_code != base else 1.0
        to_rate = _rate_for(rates, to_code, base) if to_code != base else 1.0

    amount_in_pivot = float(amount) if from_code == base else float(amount) / from_rate
    return amount_in_pivot if to_code == base else amount_in_pivot * to_rate
