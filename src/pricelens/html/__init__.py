"""HTML integration: eligibility, markers, structured heuristic, traversal.

Works on lxml.html trees. The traversal driver (scan_document) is the
reference collaborator that applies text annotations back onto a document.

Python 3.13+.
"""

from .eligibility import SKIP_TAGS, is_hidden, should_skip
from .markers import build_marker, is_marked, mark_element, read_marker
from .parsing import parse_html, to_html
from .scanner import ScanReport, apply_annotation, scan_document, scan_text
from .structured import STRUCTURED_PRICE_SELECTORS, extract_from_element, scan_structured

__all__ = [
    "SKIP_TAGS",
    "STRUCTURED_PRICE_SELECTORS",
    "ScanReport",
    "apply_annotation",
    "build_marker",
    "extract_from_element",
    "is_hidden",
    "is_marked",
    "mark_element",
    "parse_html",
    "read_marker",
    "scan_document",
    "scan_structured",
    "scan_text",
    "should_skip",
    "to_html",
]
