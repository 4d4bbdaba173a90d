"""Exchange-rate tables.

A RateTable maps currency codes to "units of that currency per one pivot
unit". Tables are produced by an external provider (network fetch, cache,
manual override) and handed to the conversion layer already resolved; the
core never fetches or refreshes them.

Python 3.13+.
"""

from __future__ import annotations

import math
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from pricelens.constants import PIVOT_CURRENCY
from pricelens.diagnostics import ErrorTemplate, InvalidRateError, MissingRateError

__all__ = ["RateTable", "validate_rate"]


def validate_rate(currency_code: str, rate: object) -> float:
    """Return ``rate`` as float, or raise if it is not a positive finite number.

    Raises:
        InvalidRateError: For bools, non-numbers, NaN, infinities, zero and negatives
    """
    if isinstance(rate, bool) or not isinstance(rate, int | float | Decimal):
        raise InvalidRateError(
            ErrorTemplate.rate_invalid(currency_code, rate), currency_code=currency_code
        )
    value = float(rate)
    if not math.isfinite(value) or value <= 0:
        raise InvalidRateError(
            ErrorTemplate.rate_invalid(currency_code, rate), currency_code=currency_code
        )
    return value


@dataclass(frozen=True, slots=True)
class RateTable:
    """Immutable pivot-relative rate table.

    Attributes:
        rates: Currency code -> units per one pivot unit
        pivot: Currency all rates are relative to (its own rate is always 1)
        timestamp: Epoch seconds when the rates were obtained
        source: Where the rates came from ("live", "manual", ...)

    Example:
        >>> table = RateTable({"USD": 1, "INR": 83.2})
        >>> table.rate("INR")
        83.2
    """

    rates: Mapping[str, float]
    pivot: str = PIVOT_CURRENCY
    timestamp: float | None = field(default=None, compare=False)
    source: str = "live"

    def __post_init__(self) -> None:
        checked = {code: validate_rate(code, rate) for code, rate in self.rates.items()}
        object.__setattr__(self, "rates", MappingProxyType(checked))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], *, source: str = "live") -> RateTable:
        """Build a table from a rates API response.

        Accepts the ``{"base": "USD", "rates": {...}}`` shape served by common
        exchange-rate APIs. A ``timestamp`` key (epoch seconds or milliseconds)
        is kept when present; otherwise the current time is recorded.

        Raises:
            KeyError: If the payload has no "rates" mapping
            InvalidRateError: If any rate is not a positive number
        """
        rates = payload["rates"]
        stamp = payload.get("timestamp")
        if isinstance(stamp, int | float) and stamp > 1e12:
            # JavaScript Date.now() milliseconds
            stamp = stamp / 1000
        return cls(
            rates=rates,
            pivot=payload.get("base", PIVOT_CURRENCY),
            timestamp=float(stamp) if isinstance(stamp, int | float) else time.time(),
            source=source,
        )

    def rate(self, currency_code: str) -> float:
        """Return the rate of ``currency_code`` relative to the pivot.

        Raises:
            MissingRateError: If the table has no entry for the code
        """
        if currency_code == self.pivot:
            return 1.0
        try:
            return self.rates[currency_code]
        except KeyError:
            raise MissingRateError(
                ErrorTemplate.rate_missing(currency_code, self.pivot),
                currency_code=currency_code,
            ) from None

    def covers(self, *currency_codes: str) -> bool:
        """Check that every code can be converted with this table."""
        return all(code == self.pivot or code in self.rates for code in currency_codes)

    def with_override(self, currency_code: str, rate: float, *, source: str = "manual") -> RateTable:
        """Return a copy with one rate replaced."""
        return RateTable(
            rates={**self.rates, currency_code: rate},
            pivot=self.pivot,
            timestamp=self.timestamp,
            source=source,
        )

    def age(self, now: float | None = None) -> float | None:
        """Seconds since the rates were obtained, or None if unknown."""
        if self.timestamp is None:
            return None
        current = time.time() if now is None else now
        return max(0.0, current - self.timestamp)
