"""Settings and rate-table providers.

The detection and conversion layers never read persisted state or fetch
rates themselves; they are handed a Settings value and a resolved RateTable.
This module defines the two provider seams and small in-memory
implementations for embedding and tests.

Architecture:
    - Settings: immutable snapshot of user preferences
    - SettingsProvider / RateTableProvider: read-only protocols
    - CachedRateTableProvider: wraps a fetch callable with age-based reuse
    - effective_rate_table(): applies the manual rate override

Thread Safety:
    CachedRateTableProvider guards its cached table with an RLock. Two
    callers racing on an expired table trigger at most one fetch.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from threading import RLock
from typing import Any, Protocol

from pricelens.constants import (
    DEFAULT_HOME_CURRENCY,
    DEFAULT_MANUAL_RATE,
    PIVOT_CURRENCY,
    RATE_CACHE_MAX_AGE_SECONDS,
)
from pricelens.conversion import RateTable
from pricelens.currencies import default_currency_for_locale
from pricelens.locale_utils import get_system_locale

__all__ = [
    "CachedRateTableProvider",
    "RateTableProvider",
    "Settings",
    "SettingsProvider",
    "StaticSettingsProvider",
    "effective_rate_table",
    "initial_settings",
]

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def _stored_flag(name: str, value: Any) -> bool:
    """Read a stored boolean, accepting the string forms storage layers emit.

    Raises:
        ValueError: For strings that are not a recognized boolean spelling
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        msg = f"Setting '{name}' must be a boolean, got {value!r}"
        raise ValueError(msg)
    return bool(value)


@dataclass(frozen=True, slots=True)
class Settings:
    """User preferences read at scan and display time.

    Attributes:
        home_currency: Currency prices are converted into
        enabled: When False, document scans are no-ops
        use_manual_rate: Replace the home currency's live rate with manual_rate
        manual_rate: Home-currency units per one pivot unit
    """

    home_currency: str = DEFAULT_HOME_CURRENCY
    enabled: bool = True
    use_manual_rate: bool = False
    manual_rate: float = DEFAULT_MANUAL_RATE

    @classmethod
    def from_mapping(cls, stored: Mapping[str, Any]) -> Settings:
        """Build settings from a stored key/value record.

        Accepts the camelCase keys a browser storage area holds
        (``homeCurrency``, ``enabled``, ``useManualRate``, ``manualRate``)
        as well as the snake_case field names. Missing keys keep defaults.
        Flags may be stored as booleans or as "true"/"false" style strings.

        Raises:
            ValueError: If a flag or the manual rate cannot be read
        """
        def pick(snake: str, camel: str, default: Any) -> Any:
            if snake in stored:
                return stored[snake]
            return stored.get(camel, default)

        return cls(
            home_currency=str(pick("home_currency", "homeCurrency", DEFAULT_HOME_CURRENCY)),
            enabled=_stored_flag("enabled", pick("enabled", "enabled", True)),
            use_manual_rate=_stored_flag(
                "use_manual_rate", pick("use_manual_rate", "useManualRate", False)
            ),
            manual_rate=float(pick("manual_rate", "manualRate", DEFAULT_MANUAL_RATE)),
        )


class SettingsProvider(Protocol):
    """Anything that can report the current settings."""

    def get_settings(self) -> Settings:
        """Return the settings in effect now."""
        ...  # pragma: no cover  # Protocol stub - not executable


class RateTableProvider(Protocol):
    """Anything that can hand out a resolved rate table."""

    def get_rate_table(self) -> RateTable | None:
        """Return the current table, or None if no rates are available."""
        ...  # pragma: no cover  # Protocol stub - not executable


class StaticSettingsProvider:
    """Settings provider holding one replaceable Settings value."""

    __slots__ = ("_settings",)

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else Settings()

    def get_settings(self) -> Settings:
        return self._settings

    def update(self, settings: Settings) -> None:
        """Replace the held settings."""
        self._settings = settings


class CachedRateTableProvider:
    """Rate-table provider that reuses a fetched table until it is too old.

    The fetch callable does the actual I/O and returns a RateTable. Fetch
    failures propagate to the caller; when a stale table is still held the
    caller can read it through ``cached``.

    Example:
        >>> provider = CachedRateTableProvider(lambda: RateTable({"INR": 83.0}))
        >>> provider.get_rate_table().rate("INR")
        83.0
    """

    __slots__ = ("_clock", "_fetch", "_lock", "_max_age", "_table")

    def __init__(
        self,
        fetch: Callable[[], RateTable],
        *,
        max_age: float = RATE_CACHE_MAX_AGE_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._fetch = fetch
        self._max_age = max_age
        self._clock = clock
        self._table: RateTable | None = None
        self._lock = RLock()

    @property
    def cached(self) -> RateTable | None:
        """The held table, fresh or not."""
        return self._table

    def is_stale(self) -> bool:
        """True when there is no table or the held one is older than max_age."""
        table = self._table
        if table is None:
            return True
        age = table.age(self._clock())
        return age is None or age > self._max_age

    def get_rate_table(self, *, force_refresh: bool = False) -> RateTable:
        """Return the held table, fetching a new one when stale or forced."""
        with self._lock:
            if force_refresh or self.is_stale():
                table = self._fetch()
                if table.timestamp is None:
                    table = RateTable(
                        rates=table.rates,
                        pivot=table.pivot,
                        timestamp=self._clock(),
                        source=table.source,
                    )
                logger.debug("Fetched rate table with %d rates", len(table.rates))
                self._table = table
            return self._table


def initial_settings(locale_code: str | None = None) -> Settings:
    """Default settings for a first run.

    The home currency comes from the locale's region subtag; without a
    locale the system locale is used.
    """
    locale = locale_code if locale_code is not None else get_system_locale()
    return Settings(home_currency=default_currency_for_locale(locale))


def effective_rate_table(settings: Settings, live: RateTable | None) -> RateTable | None:
    """Apply the manual rate override to a live table.

    With ``use_manual_rate`` set, the home currency's pivot-relative rate is
    replaced by ``manual_rate`` and the table is labelled "manual". A
    non-positive or non-finite manual rate is ignored with a warning. The
    pivot's own rate is fixed at 1 and is never overridden.

    Returns:
        The table to convert with, or None when there are no rates at all
    """
    if not settings.use_manual_rate:
        return live

    rate = settings.manual_rate
    if isinstance(rate, bool) or not math.isfinite(rate) or rate <= 0:
        logger.warning("Ignoring manual rate %r for %s: not positive", rate, settings.home_currency)
        return live

    pivot = live.pivot if live is not None else PIVOT_CURRENCY
    if settings.home_currency == pivot:
        logger.debug("Manual rate ignored: %s is the pivot currency", pivot)
        return live
    if live is None:
        return RateTable({settings.home_currency: rate}, pivot=pivot, source="manual")
    return live.with_override(settings.home_currency, rate)
