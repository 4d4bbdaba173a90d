"""Text annotation: split a text run into plain and price segments.

annotate() is a pure text-to-segments transform. It never touches a document;
the traversal driver (pricelens.html.scanner) applies the segments back onto
the tree. Concatenating the text of every segment always reproduces the input
run exactly.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .matcher import PriceMatch, PriceMatcher, get_default_matcher

__all__ = [
    "Annotation",
    "PriceSegment",
    "Segment",
    "TextSegment",
    "annotate",
]

logger = logging.getLogger(__name__)

_MINUS_SIGNS = frozenset("-−")


@dataclass(frozen=True, slots=True)
class TextSegment:
    """Run of text left untouched."""

    text: str


@dataclass(frozen=True, slots=True)
class PriceSegment:
    """Run of text recognised as a price.

    Attributes:
        match: The detected price, span relative to the annotated run
        text: Literal matched text, shown unchanged inside the marker
    """

    match: PriceMatch
    text: str


type Segment = TextSegment | PriceSegment


@dataclass(frozen=True, slots=True)
class Annotation:
    """Ordered reconstruction of one text run."""

    segments: tuple[Segment, ...]

    @property
    def did_match(self) -> bool:
        """True if at least one segment is a price."""
        return any(isinstance(s, PriceSegment) for s in self.segments)

    @property
    def prices(self) -> tuple[PriceMatch, ...]:
        """Detected prices in text order."""
        return tuple(s.match for s in self.segments if isinstance(s, PriceSegment))

    @property
    def text(self) -> str:
        """The original run, rebuilt from the segments."""
        return "".join(s.text for s in self.segments)


def _is_negated(text: str, start: int) -> bool:
    """Check for a standalone minus sign directly before ``start``.

    "-$50" is negated; the second price in "$10-$20" is not, because its dash
    follows a digit.
    """
    if start == 0 or text[start - 1] not in _MINUS_SIGNS:
        return False
    return start == 1 or not text[start - 2].isalnum()


def annotate(text: str, *, matcher: PriceMatcher | None = None) -> Annotation:
    """Find every price in a text run.

    Hits of the combined pattern that fail classification, or that carry a
    leading minus sign, stay inside the surrounding plain text.

    Args:
        text: Text run to scan
        matcher: Recognition rules (default: shared default-registry matcher)

    Returns:
        Annotation whose segments never overlap and rebuild ``text`` exactly

    Example:
        >>> result = annotate("Was ₹999, now ₹499")
        >>> [s.text for s in result.segments]
        ['Was ', '₹999', ', now ', '₹499']
    """
    if not text:
        return Annotation(segments=())

    rules = matcher if matcher is not None else get_default_matcher()
    segments: list[Segment] = []
    cursor = 0

    for hit in rules.combined.find_all(text):
        if _is_negated(text, hit.start):
            logger.debug("Skipped negated price %r at %d", hit.text, hit.start)
            continue
        match = rules.classify(hit.text)
        if match is None:
            continue
        if hit.start > cursor:
            segments.append(TextSegment(text[cursor:hit.start]))
        segments.append(PriceSegment(match=match.shifted(hit.start), text=hit.text))
        cursor = hit.end

    if cursor < len(text):
        segments.append(TextSegment(text[cursor:]))

    return Annotation(segments=tuple(segments))
