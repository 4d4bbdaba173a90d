"""Structured-element heuristic for prices split across child elements.

Storefronts often render "₹1,499" as separate nodes (symbol, whole part,
fraction) so no single text run holds a complete price. This pass looks at
known price containers as a whole, picks one best-guess amount/currency, and
tags the container itself.

Containers are found by a prioritized selector list: site-specific price
containers first, then generic "price"-classed elements. Within one container
the text content is tried against these rules, first success wins:

1. The leftmost marker-adjacent amount of any currency other than the
   fallback
2. A bare amount (the whole text is digits) when the container, or its
   nearest price-classed ancestor, mentions a non-fallback currency marker
3. A marker-adjacent amount of the fallback currency

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

import lxml.html

from pricelens.constants import STRUCTURED_FALLBACK_CURRENCY
from pricelens.currencies.registry import AMOUNT_PATTERN
from pricelens.detection import PriceMatch, PriceMatcher, get_default_matcher

from .eligibility import should_skip
from .markers import mark_element

__all__ = [
    "GENERIC_PRICE_SELECTORS",
    "SITE_PRICE_SELECTORS",
    "STRUCTURED_PRICE_SELECTORS",
    "extract_from_element",
    "scan_structured",
]

logger = logging.getLogger(__name__)


def _has_class(name: str) -> str:
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


_UNMARKED = "[not(@data-price-detected)]"

# Site-specific containers (Amazon's split whole/fraction markup and its
# screen-reader copy of the full price).
SITE_PRICE_SELECTORS: tuple[str, ...] = (
    f"descendant-or-self::*[{_has_class('a-price')}]{_UNMARKED}",
    f"descendant-or-self::*[{_has_class('a-price-whole')}]{_UNMARKED}",
    f"descendant-or-self::*[@data-a-color='price']//*[{_has_class('a-offscreen')}]{_UNMARKED}",
)

# Anything whose class attribute looks like a price container.
GENERIC_PRICE_SELECTORS: tuple[str, ...] = (
    f"descendant-or-self::*[contains(@class, 'price')]{_UNMARKED}",
    f"descendant-or-self::*[contains(@class, 'Price')]{_UNMARKED}",
)

STRUCTURED_PRICE_SELECTORS: tuple[str, ...] = SITE_PRICE_SELECTORS + GENERIC_PRICE_SELECTORS

_BARE_AMOUNT = re.compile(AMOUNT_PATTERN)


def _price_context(element: lxml.html.HtmlElement) -> str:
    """Text of the nearest price-classed ancestor-or-self, or ""."""
    for candidate in (element, *element.iterancestors()):
        if "price" in (candidate.get("class") or "").lower():
            return candidate.text_content()
    return ""


def _bare_amount(text: str) -> Decimal | None:
    if _BARE_AMOUNT.fullmatch(text) is None:
        return None
    try:
        amount = Decimal(text.replace(",", ""))
    except InvalidOperation:
        return None
    return amount if amount > 0 else None


def extract_from_element(
    element: lxml.html.HtmlElement,
    *,
    matcher: PriceMatcher | None = None,
    fallback_currency: str = STRUCTURED_FALLBACK_CURRENCY,
) -> PriceMatch | None:
    """Extract one best-guess price from a structured container.

    Skipped elements (already marked, hidden, editable, non-rendering) yield
    None and are never modified. This function does not modify the element
    either; scan_structured() does the tagging.

    Args:
        element: Candidate price container
        matcher: Recognition rules (default: shared default-registry matcher)
        fallback_currency: Currency tried last, after the context rule

    Returns:
        PriceMatch whose span is relative to the container's stripped text,
        or None if no rule succeeds

    Example:
        >>> el = lxml.html.fromstring(
        ...     '<span class="a-price"><span>₹</span><span>1,499</span></span>')
        >>> extract_from_element(el).amount
        Decimal('1499')
    """
    if should_skip(element):
        return None
    text = element.text_content().strip()
    if not text:
        return None

    rules = matcher if matcher is not None else get_default_matcher()
    primary = [c.code for c in rules.registry.currencies if c.code != fallback_currency]

    marked = [
        match for code in primary
        if (match := rules.search_currency(text, code)) is not None
    ]
    if marked:
        # Leftmost marker wins when several currencies appear
        match = min(marked, key=lambda m: m.span_start)
        logger.debug("Structured price %r: %s marker match", text, match.currency_code)
        return match

    amount = _bare_amount(text)
    if amount is not None:
        context = f"{text} {_price_context(element)}"
        for code in primary:
            if rules.mentions_currency(context, code):
                logger.debug("Structured price %r: %s from surrounding context", text, code)
                return PriceMatch(amount=amount, currency_code=code, original_text=text)

    match = rules.search_currency(text, fallback_currency)
    if match is not None:
        logger.debug("Structured price %r: fallback %s match", text, fallback_currency)
    return match


def scan_structured(
    root: lxml.html.HtmlElement,
    *,
    matcher: PriceMatcher | None = None,
) -> int:
    """Tag every structured price container under ``root``.

    Selectors run in priority order, each against the tree as left by the
    previous one, so a container claimed by a site-specific selector is not
    reconsidered by the generic ones.

    Returns:
        Number of containers tagged
    """
    tagged = 0
    for selector in STRUCTURED_PRICE_SELECTORS:
        for element in root.xpath(selector):
            match = extract_from_element(element, matcher=matcher)
            if match is None:
                continue
            mark_element(element, match)
            tagged += 1
    return tagged
