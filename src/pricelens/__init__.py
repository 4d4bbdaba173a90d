"""pricelens - price detection and currency conversion for HTML text.

Recognizes monetary amounts written in page text or split across storefront
markup, tags them with a machine-readable marker, and converts tagged prices
into a home currency with locale-correct formatting.

Public API:
    classify - Candidate string -> PriceMatch | None
    parse_price - Candidate string -> (PriceMatch | None, errors)
    build_combined_pattern - Registry -> scanning pattern
    annotate - Text run -> plain and price segments
    extract_from_element - Structured price container -> PriceMatch | None
    scan_document - Tag every price in an lxml tree
    convert - Amount between currencies through the pivot
    format_price - Locale-correct display string
    default_currency_for_locale - Locale identifier -> home currency code
    list_currencies / get_currency - Currency registry access

Exceptions:
    PriceLensError - Base exception class
    MissingRateError - Rate table lacks a needed currency

Submodules:
    pricelens.currencies - Currency registry and detection patterns
    pricelens.detection - Pattern matcher and text annotator
    pricelens.html - Eligibility, markers, structured heuristic, traversal
    pricelens.conversion - Rate tables, conversion, formatting, quotes
    pricelens.providers - Settings and rate-table providers
    pricelens.diagnostics - Error codes, templates and exceptions
"""

# Essential Public API - Minimal exports for clean namespace
from .conversion import RateTable, convert, format_price
from .currencies import (
    CurrencyDefinition,
    default_currency_for_locale,
    get_currency,
    list_currencies,
)
from .detection import PriceMatch, annotate, build_combined_pattern, classify, parse_price
from .diagnostics import MissingRateError, PriceLensError
from .html import extract_from_element, scan_document

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pricelens")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyDefinition",
    "MissingRateError",
    "PriceLensError",
    "PriceMatch",
    "RateTable",
    "__version__",
    "annotate",
    "build_combined_pattern",
    "classify",
    "convert",
    "default_currency_for_locale",
    "extract_from_element",
    "format_price",
    "get_currency",
    "list_currencies",
    "parse_price",
    "scan_document",
]
