"""Static registry of supported currencies.

Each currency carries its display symbol, canonical code, display name, the
locale used to format its amounts, and the ordered detection patterns that
recognise it in page text. The registry is built once at import time and
shared read-only by the matcher, the annotator and the formatting layer.

Lead-token priority:
    Detection patterns are ranked into one explicit total order
    (``CurrencyRegistry.lead_token_order``):
    1. Symbol forms before three-letter code forms
    2. Longer tokens before shorter ones, so "US$" is tried before "$"
    3. Registry order, then pattern order, as the final tie-break
    The same order drives both the combined scanning pattern and the
    classification of a single candidate.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from pricelens.constants import DEFAULT_HOME_CURRENCY
from pricelens.diagnostics import ErrorTemplate, UnknownCurrencyError
from pricelens.locale_utils import extract_region

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

# Comma-grouped digits with an optional one or two digit fraction. The group
# run must start and end on a digit so a trailing comma stays plain text, and
# the amount may not stop short of further digits, whether they follow a
# period or a comma ("$1.234" and "$1,234.567" are not prices).
AMOUNT_PATTERN: str = r"\d(?:[\d,]*\d)?(?:\.\d{1,2})?(?![.,]?\d)"

# A letter-form marker must not continue a word: "hours 12" is not "Rs 12".
_NOT_AFTER_LETTER: str = r"(?<![^\W\d_])"

# Letter-form mentions must end their word.
_NOT_BEFORE_LETTER: str = r"(?![^\W\d_])"


class TokenKind(StrEnum):
    """Kind of lead token a detection pattern recognises."""

    SYMBOL = "symbol"
    """Currency glyph or abbreviation: $, US$, ₹, Rs."""

    CODE = "code"
    """Three-letter currency code: USD, INR"""


@dataclass(frozen=True, slots=True)
class DetectionPattern:
    """One recognition rule for a currency marker.

    Attributes:
        token: Canonical spelling of the marker, used for priority ordering
        marker: Regex fragment matching the marker itself (no amount)
        kind: Symbol or code form
        word_bounded: Reject the marker when a letter immediately precedes it
    """

    token: str
    marker: str
    kind: TokenKind
    word_bounded: bool = True

    @property
    def lead(self) -> str:
        """Marker regex including its word guard."""
        return f"{_NOT_AFTER_LETTER}{self.marker}" if self.word_bounded else self.marker

    @property
    def mention(self) -> str:
        """Marker regex for a bare mention, with no amount after it.

        Markers spelled with letters must also end a word, so "Europe" does
        not mention EUR.
        """
        if self.token[:1].isalpha():
            return f"{self.lead}{_NOT_BEFORE_LETTER}"
        return self.lead

    @property
    def regex(self) -> str:
        """Full pattern: marker, optional whitespace, grouped amount."""
        return rf"{self.lead}\s*{AMOUNT_PATTERN}"


def _symbol(token: str, *, word_bounded: bool = True, marker: str | None = None) -> DetectionPattern:
    return DetectionPattern(
        token=token,
        marker=marker if marker is not None else re.escape(token),
        kind=TokenKind.SYMBOL,
        word_bounded=word_bounded,
    )


def _code(code: str) -> DetectionPattern:
    return DetectionPattern(token=code, marker=code, kind=TokenKind.CODE)


@dataclass(frozen=True, slots=True)
class CurrencyDefinition:
    """A supported currency.

    Attributes:
        code: ISO 4217 code, unique registry key
        symbol: Display glyph
        display_name: English display name
        formatting_locale: Locale whose CLDR rules format this currency
        detection_patterns: Recognition rules, most specific first
    """

    code: str
    symbol: str
    display_name: str
    formatting_locale: str
    detection_patterns: tuple[DetectionPattern, ...]


SUPPORTED_CURRENCIES: tuple[CurrencyDefinition, ...] = (
    CurrencyDefinition(
        code="USD",
        symbol="$",
        display_name="US Dollar",
        formatting_locale="en_US",
        detection_patterns=(_symbol("US$"), _symbol("$"), _code("USD")),
    ),
    CurrencyDefinition(
        code="INR",
        symbol="₹",
        display_name="Indian Rupee",
        formatting_locale="en_IN",
        detection_patterns=(
            _symbol("₹", word_bounded=False),
            _symbol("Rs.", marker=r"Rs\.?"),
            _code("INR"),
        ),
    ),
    CurrencyDefinition(
        code="EUR",
        symbol="€",
        display_name="Euro",
        formatting_locale="de_DE",
        detection_patterns=(_symbol("€", word_bounded=False), _code("EUR")),
    ),
    CurrencyDefinition(
        code="GBP",
        symbol="£",
        display_name="British Pound",
        formatting_locale="en_GB",
        detection_patterns=(_symbol("£", word_bounded=False), _code("GBP")),
    ),
)

# Region subtag -> home currency. Only consulted to pick an initial home
# currency, never during detection.
LOCALE_CURRENCY_MAP: Mapping[str, str] = MappingProxyType({
    "US": "USD",
    "GB": "GBP",
    "IN": "INR",
    # Eurozone
    "DE": "EUR", "FR": "EUR", "ES": "EUR", "IT": "EUR", "NL": "EUR",
    "AT": "EUR", "BE": "EUR", "PT": "EUR", "IE": "EUR", "FI": "EUR",
})


class CurrencyRegistry:
    """Immutable, ordered collection of currency definitions.

    Validates at construction that codes are unique and that no two
    currencies share a lead token, which is what lets classification resolve
    every marker by fixed priority alone.
    """

    __slots__ = ("_by_code", "_currencies", "_lead_token_order")

    def __init__(self, currencies: tuple[CurrencyDefinition, ...]) -> None:
        by_code: dict[str, CurrencyDefinition] = {}
        owners: dict[str, str] = {}
        for definition in currencies:
            if definition.code in by_code:
                msg = f"Duplicate currency code '{definition.code}'"
                raise ValueError(msg)
            by_code[definition.code] = definition
            for pattern in definition.detection_patterns:
                key = pattern.token.casefold()
                owner = owners.setdefault(key, definition.code)
                if owner != definition.code:
                    msg = (
                        f"Lead token '{pattern.token}' is claimed by both "
                        f"'{owner}' and '{definition.code}'"
                    )
                    raise ValueError(msg)

        self._currencies = tuple(currencies)
        self._by_code: Mapping[str, CurrencyDefinition] = MappingProxyType(by_code)
        self._lead_token_order = self._rank_patterns(self._currencies)

    @staticmethod
    def _rank_patterns(
        currencies: tuple[CurrencyDefinition, ...],
    ) -> tuple[tuple[DetectionPattern, CurrencyDefinition], ...]:
        ranked = [
            ((pattern.kind is not TokenKind.SYMBOL, -len(pattern.token), c_idx, p_idx),
             pattern, definition)
            for c_idx, definition in enumerate(currencies)
            for p_idx, pattern in enumerate(definition.detection_patterns)
        ]
        ranked.sort(key=lambda item: item[0])
        return tuple((pattern, definition) for _, pattern, definition in ranked)

    @property
    def currencies(self) -> tuple[CurrencyDefinition, ...]:
        """Definitions in registry order."""
        return self._currencies

    @property
    def lead_token_order(self) -> tuple[tuple[DetectionPattern, CurrencyDefinition], ...]:
        """Every detection pattern paired with its currency, in priority order."""
        return self._lead_token_order

    def get(self, code: str) -> CurrencyDefinition | None:
        """Return the definition for ``code`` or None."""
        return self._by_code.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[CurrencyDefinition]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)


DEFAULT_REGISTRY = CurrencyRegistry(SUPPORTED_CURRENCIES)

# Priority order of every default detection pattern.
LEAD_TOKEN_ORDER: tuple[tuple[DetectionPattern, CurrencyDefinition], ...] = (
    DEFAULT_REGISTRY.lead_token_order
)


def list_currencies() -> tuple[CurrencyDefinition, ...]:
    """Return every supported currency in registry order."""
    return DEFAULT_REGISTRY.currencies


def get_currency(code: str) -> CurrencyDefinition:
    """Return the definition for a supported currency code.

    Raises:
        UnknownCurrencyError: If ``code`` is not registered
    """
    definition = DEFAULT_REGISTRY.get(code)
    if definition is None:
        raise UnknownCurrencyError(ErrorTemplate.currency_unknown(code), currency_code=code)
    return definition


def default_currency_for_locale(
    locale_code: str | None,
    *,
    fallback: str = DEFAULT_HOME_CURRENCY,
) -> str:
    """Pick an initial home currency from a locale identifier.

    The trailing region subtag is upper-cased and looked up in
    LOCALE_CURRENCY_MAP. Empty input, input without a region subtag, and
    unmapped regions all yield ``fallback``.

    Example:
        >>> default_currency_for_locale("en-IN")
        'INR'
        >>> default_currency_for_locale("fr")
        'USD'
    """
    region = extract_region(locale_code)
    if region is None:
        return fallback
    return LOCALE_CURRENCY_MAP.get(region, fallback)
