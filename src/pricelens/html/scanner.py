"""Document traversal driver: applies detection to an lxml tree in place.

One call to scan_document() is one atomic pass over a subtree:

1. The structured-element pass tags split-markup price containers
2. Every eligible text run is collected (element text and child tails)
3. Each collected run is annotated and its price segments are spliced in as
   marker elements

Runs are collected before the tree is touched, so markers created by a pass
are never rescanned by that same pass; later passes skip them through the
eligibility predicate. Passes must not run concurrently on overlapping
subtrees; the caller serializes them.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import lxml.html

from pricelens.detection import (
    Annotation,
    PriceMatcher,
    PriceSegment,
    TextSegment,
    annotate,
    get_default_matcher,
)

from .eligibility import should_skip, skips_self
from .markers import build_marker
from .structured import scan_structured

if TYPE_CHECKING:
    from pricelens.providers import Settings

__all__ = ["ScanReport", "apply_annotation", "scan_document", "scan_text"]

logger = logging.getLogger(__name__)

# (parent, None) addresses parent.text; (parent, child) addresses child.tail.
type TextRun = tuple[lxml.html.HtmlElement, lxml.html.HtmlElement | None]


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Counts from one scan pass.

    Attributes:
        structured_elements: Containers tagged by the structured pass
        text_runs: Text runs that received at least one marker
        text_prices: Markers inserted by the text pass
    """

    structured_elements: int = 0
    text_runs: int = 0
    text_prices: int = 0

    @property
    def total(self) -> int:
        """All prices tagged by the pass."""
        return self.structured_elements + self.text_prices


def _collect_runs(root: lxml.html.HtmlElement, matcher: PriceMatcher) -> list[TextRun]:
    runs: list[TextRun] = []
    if should_skip(root):
        return runs

    stack = [root]
    while stack:
        element = stack.pop()
        if element.text and matcher.combined.search(element.text):
            runs.append((element, None))
        children = list(element)
        for child in children:
            if child.tail and matcher.combined.search(child.tail):
                runs.append((element, child))
        stack.extend(reversed([c for c in children if not skips_self(c)]))
    return runs


def _run_text(run: TextRun) -> str:
    parent, child = run
    return (parent.text if child is None else child.tail) or ""


def apply_annotation(
    parent: lxml.html.HtmlElement,
    child: lxml.html.HtmlElement | None,
    annotation: Annotation,
) -> int:
    """Splice an annotation back into the tree.

    Replaces ``parent.text`` (``child`` is None) or ``child.tail`` with the
    annotation's leading plain text and inserts one marker per price segment
    right after it. Text between and after prices becomes marker tails.

    Returns:
        Number of markers inserted
    """
    segments = list(annotation.segments)
    leading = ""
    if segments and isinstance(segments[0], TextSegment):
        leading = segments.pop(0).text

    if child is None:
        parent.text = leading or None
        position = 0
    else:
        child.tail = leading or None
        position = parent.index(child) + 1

    inserted = 0
    previous: lxml.html.HtmlElement | None = None
    for segment in segments:
        if isinstance(segment, PriceSegment):
            previous = build_marker(segment.match, segment.text)
            parent.insert(position, previous)
            position += 1
            inserted += 1
        elif previous is not None:
            previous.tail = segment.text
    return inserted


def scan_text(
    root: lxml.html.HtmlElement,
    *,
    matcher: PriceMatcher | None = None,
) -> tuple[int, int]:
    """Annotate every eligible text run under ``root``.

    Returns:
        Tuple of (runs changed, markers inserted)
    """
    rules = matcher if matcher is not None else get_default_matcher()
    runs = _collect_runs(root, rules)

    changed = 0
    inserted = 0
    for parent, child in runs:
        annotation = annotate(_run_text((parent, child)), matcher=rules)
        if not annotation.did_match:
            continue
        inserted += apply_annotation(parent, child, annotation)
        changed += 1
    return (changed, inserted)


def scan_document(
    root: lxml.html.HtmlElement,
    *,
    settings: Settings | None = None,
    matcher: PriceMatcher | None = None,
) -> ScanReport:
    """Run one full detection pass over ``root``.

    Args:
        root: Document or subtree root (e.g. a newly inserted element)
        settings: When given and disabled, the pass is a no-op
        matcher: Recognition rules (default: shared default-registry matcher)

    Returns:
        ScanReport with the counts of the pass

    Example:
        >>> doc = lxml.html.fromstring("<p>Only ₹499 today</p>")
        >>> scan_document(doc).text_prices
        1
    """
    if settings is not None and not settings.enabled:
        logger.debug("Price detection disabled; scan skipped")
        return ScanReport()

    structured = scan_structured(root, matcher=matcher)
    runs, prices = scan_text(root, matcher=matcher)
    report = ScanReport(structured_elements=structured, text_runs=runs, text_prices=prices)
    if report.total:
        logger.info(
            "Marked %d text prices in %d runs and %d structured elements",
            prices, runs, structured,
        )
    return report
