"""Price detection: pattern matching and text annotation.

Public API:
    classify - Candidate string -> PriceMatch | None
    parse_price - Candidate string -> (PriceMatch | None, errors)
    build_combined_pattern - Registry -> CombinedPattern
    annotate - Text run -> Annotation (plain and price segments)

Python 3.13+.
"""

from .annotator import Annotation, PriceSegment, Segment, TextSegment, annotate
from .matcher import (
    CombinedPattern,
    PatternHit,
    PriceMatch,
    PriceMatcher,
    build_combined_pattern,
    classify,
    get_default_matcher,
    parse_price,
)

__all__ = [
    "Annotation",
    "CombinedPattern",
    "PatternHit",
    "PriceMatch",
    "PriceMatcher",
    "PriceSegment",
    "Segment",
    "TextSegment",
    "annotate",
    "build_combined_pattern",
    "classify",
    "get_default_matcher",
    "parse_price",
]
