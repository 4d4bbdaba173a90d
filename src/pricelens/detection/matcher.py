"""Price recognition: combined scanning pattern and single-candidate classification.

API: parse_price() returns tuple[PriceMatch | None, tuple[PriceParseError, ...]].
Functions NEVER raise exceptions - errors returned in tuple. classify() is the
result-only form used by the annotator and the structured-element heuristic.

Architecture:
    PriceMatcher owns everything derived from a CurrencyRegistry:
    - The combined pattern (every detection pattern in lead-token order,
      one alternation, compiled once)
    - One anchored lead-token regex per detection pattern, for classification
    - One search pattern per currency, for the structured-element heuristic
    A module-level matcher over DEFAULT_REGISTRY backs the free functions.

    Matching is stateless: CombinedPattern.find_all() returns every
    non-overlapping hit of one call, so there is no cursor to reset between
    scans.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from pricelens.currencies import DEFAULT_REGISTRY, CurrencyDefinition, CurrencyRegistry
from pricelens.currencies.registry import AMOUNT_PATTERN
from pricelens.diagnostics import ErrorTemplate, PriceParseError

__all__ = [
    "CombinedPattern",
    "PatternHit",
    "PriceMatch",
    "PriceMatcher",
    "build_combined_pattern",
    "classify",
    "get_default_matcher",
    "parse_price",
]

logger = logging.getLogger(__name__)

_AMOUNT_FULL = re.compile(AMOUNT_PATTERN)


@dataclass(frozen=True, slots=True)
class PriceMatch:
    """One detected price.

    Attributes:
        amount: Parsed amount, always greater than zero
        currency_code: Registry code of the detected currency
        original_text: The exact matched substring
        span_start: Offset of the match in the scanned text
        span_end: End offset (exclusive) of the match in the scanned text
    """

    amount: Decimal
    currency_code: str
    original_text: str
    span_start: int = 0
    span_end: int = field(default=-1)

    def __post_init__(self) -> None:
        if not self.amount > 0:
            msg = f"PriceMatch.amount must be > 0, got {self.amount}"
            raise ValueError(msg)
        if self.span_end == -1:
            object.__setattr__(self, "span_end", self.span_start + len(self.original_text))
        if self.span_start < 0 or self.span_end < self.span_start:
            msg = f"Invalid span ({self.span_start}, {self.span_end})"
            raise ValueError(msg)

    def shifted(self, offset: int) -> PriceMatch:
        """Return a copy whose span is moved ``offset`` characters right."""
        return PriceMatch(
            amount=self.amount,
            currency_code=self.currency_code,
            original_text=self.original_text,
            span_start=self.span_start + offset,
            span_end=self.span_end + offset,
        )


@dataclass(frozen=True, slots=True)
class PatternHit:
    """Raw occurrence of the combined pattern, before classification."""

    start: int
    end: int
    text: str


@dataclass(frozen=True, slots=True)
class CombinedPattern:
    """Compiled alternation of every detection pattern.

    Immutable and shareable; every call works on its own iterator.
    """

    pattern: re.Pattern[str]

    def find_all(self, text: str) -> tuple[PatternHit, ...]:
        """Return every non-overlapping hit in ``text``, left to right."""
        return tuple(
            PatternHit(start=m.start(), end=m.end(), text=m.group(0))
            for m in self.pattern.finditer(text)
        )

    def search(self, text: str) -> PatternHit | None:
        """Return the leftmost hit in ``text`` or None."""
        m = self.pattern.search(text)
        if m is None:
            return None
        return PatternHit(start=m.start(), end=m.end(), text=m.group(0))


def build_combined_pattern(registry: CurrencyRegistry) -> CombinedPattern:
    """Join every detection pattern of ``registry`` into one case-insensitive alternation.

    Alternatives appear in the registry's lead-token order so that, at any
    position, a longer or symbol-form marker is tried before a shorter one.
    """
    alternatives = "|".join(
        f"(?:{pattern.regex})" for pattern, _ in registry.lead_token_order
    )
    return CombinedPattern(re.compile(alternatives, re.IGNORECASE))


class PriceMatcher:
    """Recognition rules compiled from one registry.

    Attributes:
        registry: The registry the rules were built from
        combined: The combined scanning pattern
    """

    __slots__ = ("_currency_patterns", "_leads", "_mentions", "combined", "registry")

    def __init__(self, registry: CurrencyRegistry) -> None:
        self.registry = registry
        self.combined = build_combined_pattern(registry)
        self._leads: tuple[tuple[re.Pattern[str], CurrencyDefinition], ...] = tuple(
            (re.compile(rf"{pattern.lead}\s*", re.IGNORECASE), definition)
            for pattern, definition in registry.lead_token_order
        )
        self._mentions: tuple[tuple[re.Pattern[str], str], ...] = tuple(
            (re.compile(pattern.mention, re.IGNORECASE), definition.code)
            for pattern, definition in registry.lead_token_order
        )
        self._currency_patterns: dict[str, CombinedPattern] = {
            definition.code: CombinedPattern(re.compile(
                "|".join(
                    f"(?:{pattern.regex})"
                    for pattern, owner in registry.lead_token_order
                    if owner is definition
                ),
                re.IGNORECASE,
            ))
            for definition in registry.currencies
        }

    def parse(self, value: str) -> tuple[PriceMatch | None, tuple[PriceParseError, ...]]:
        """Classify one candidate string.

        The candidate is trimmed; the highest-priority lead token that starts
        it decides the currency and is stripped together with any following
        whitespace. What remains must be a complete grouped decimal greater
        than zero.

        Args:
            value: Candidate text, e.g. "₹1,234.56" or "USD 50"

        Returns:
            Tuple of (result, errors):
            - result: PriceMatch, or None if the candidate is not a price
            - errors: Tuple of PriceParseError (empty tuple on success)
        """
        if not isinstance(value, str):
            diagnostic = ErrorTemplate.price_input_invalid(  # type: ignore[unreachable]
                type(value).__name__
            )
            return (None, (PriceParseError(diagnostic, input_value=str(value)),))

        candidate = value.strip()
        if not candidate:
            return (None, (PriceParseError(ErrorTemplate.price_empty(), input_value=value),))

        offset = len(value) - len(value.lstrip())

        for lead, definition in self._leads:
            m = lead.match(candidate)
            if m is None:
                continue
            amount_str = candidate[m.end():]
            amount, error = self._parse_amount(amount_str, candidate)
            if error is not None:
                logger.debug("Rejected price candidate %r: %s", candidate, error)
                return (None, (error,))
            assert amount is not None  # Type narrowing: amount parsed
            return (
                PriceMatch(
                    amount=amount,
                    currency_code=definition.code,
                    original_text=candidate,
                    span_start=offset,
                ),
                (),
            )

        diagnostic = ErrorTemplate.price_no_currency_marker(candidate)
        return (None, (PriceParseError(diagnostic, input_value=value),))

    @staticmethod
    def _parse_amount(
        amount_str: str, candidate: str
    ) -> tuple[Decimal | None, PriceParseError | None]:
        if _AMOUNT_FULL.fullmatch(amount_str) is None:
            diagnostic = ErrorTemplate.price_amount_invalid(amount_str, candidate)
            return (None, PriceParseError(diagnostic, input_value=candidate))
        try:
            amount = Decimal(amount_str.replace(",", ""))
        except InvalidOperation:
            diagnostic = ErrorTemplate.price_amount_invalid(amount_str, candidate)
            return (None, PriceParseError(diagnostic, input_value=candidate))
        if amount <= 0:
            diagnostic = ErrorTemplate.price_amount_not_positive(amount_str, candidate)
            return (None, PriceParseError(diagnostic, input_value=candidate))
        return (amount, None)

    def classify(self, value: str) -> PriceMatch | None:
        """Result-only form of parse()."""
        result, _ = self.parse(value)
        return result

    def search_currency(self, text: str, currency_code: str) -> PriceMatch | None:
        """Return the first price of one currency found anywhere in ``text``.

        Hits that fail classification are skipped, not returned.
        """
        pattern = self._currency_patterns.get(currency_code)
        if pattern is None:
            return None
        for hit in pattern.find_all(text):
            match = self.classify(hit.text)
            if match is not None:
                return match.shifted(hit.start)
        return None

    def mentions_currency(self, text: str, currency_code: str) -> bool:
        """Check whether any lead token of one currency appears in ``text``.

        Unlike search_currency() no amount needs to follow the token, but a
        token spelled with letters must stand as a word of its own.
        """
        return any(
            code == currency_code and mention.search(text)
            for mention, code in self._mentions
        )


_default_matcher = PriceMatcher(DEFAULT_REGISTRY)


def get_default_matcher() -> PriceMatcher:
    """Return the shared matcher over the default registry."""
    return _default_matcher


def parse_price(value: str) -> tuple[PriceMatch | None, tuple[PriceParseError, ...]]:
    """Parse a price candidate against the default registry.

    Examples:
        >>> result, errors = parse_price("₹1,234.56")
        >>> result.amount, result.currency_code
        (Decimal('1234.56'), 'INR')

        >>> result, errors = parse_price("$0")
        >>> result is None
        True
        >>> errors[0].diagnostic.code.name
        'PRICE_AMOUNT_NOT_POSITIVE'
    """
    return _default_matcher.parse(value)


def classify(value: str) -> PriceMatch | None:
    """Return the PriceMatch for a candidate string, or None if it is not a price.

    Examples:
        >>> classify("€100").currency_code
        'EUR'
        >>> classify("12 hours") is None
        True
    """
    return _default_matcher.classify(value)
