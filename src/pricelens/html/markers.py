"""Marker nodes: the detected/amount/currency hand-off to the display layer.

Every detected price ends up carrying three attributes: the detected flag,
the amount and the currency code. They are written once, never mutated, and
are the only thing the tooltip layer reads.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import lxml.html

from pricelens.constants import (
    MARKER_AMOUNT_ATTR,
    MARKER_CLASS,
    MARKER_CURRENCY_ATTR,
    MARKER_DETECTED_ATTR,
    MARKER_DETECTED_VALUE,
    MARKER_TAG,
)
from pricelens.detection import PriceMatch

__all__ = [
    "build_marker",
    "format_amount_attr",
    "is_marked",
    "mark_element",
    "read_marker",
]


def format_amount_attr(amount: Decimal) -> str:
    """Render an amount for the data-amount attribute.

    Plain notation, no trailing fractional zeros: 2500.00 -> "2500",
    1234.50 -> "1234.5".
    """
    return format(amount.normalize(), "f")


def _write_attrs(element: lxml.html.HtmlElement, match: PriceMatch) -> None:
    element.set(MARKER_DETECTED_ATTR, MARKER_DETECTED_VALUE)
    element.set(MARKER_AMOUNT_ATTR, format_amount_attr(match.amount))
    element.set(MARKER_CURRENCY_ATTR, match.currency_code)


def build_marker(match: PriceMatch, text: str) -> lxml.html.HtmlElement:
    """Create the inline marker element wrapping one detected price."""
    marker = lxml.html.Element(MARKER_TAG)
    marker.set("class", MARKER_CLASS)
    _write_attrs(marker, match)
    marker.text = text
    return marker


def mark_element(element: lxml.html.HtmlElement, match: PriceMatch) -> None:
    """Tag an existing element as a detected price in place.

    Used for structured price containers, whose children keep their layout.
    """
    _write_attrs(element, match)
    classes = (element.get("class") or "").split()
    if MARKER_CLASS not in classes:
        classes.append(MARKER_CLASS)
    element.set("class", " ".join(classes))


def is_marked(element: lxml.html.HtmlElement) -> bool:
    """Check for the detected flag on ``element`` itself."""
    return element.get(MARKER_DETECTED_ATTR) == MARKER_DETECTED_VALUE


def read_marker(element: lxml.html.HtmlElement) -> tuple[Decimal, str] | None:
    """Read the (amount, currency) hand-off from a marked element.

    Returns None when the flag is absent or the amount/currency attributes
    are missing or malformed.
    """
    if not is_marked(element):
        return None
    currency = (element.get(MARKER_CURRENCY_ATTR) or "").strip()
    raw_amount = (element.get(MARKER_AMOUNT_ATTR) or "").strip()
    if not currency or not raw_amount:
        return None
    try:
        amount = Decimal(raw_amount)
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return (amount, currency)
