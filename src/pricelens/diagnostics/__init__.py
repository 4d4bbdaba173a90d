"""Diagnostic system for pricelens errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidRateError,
    MissingRateError,
    PriceLensError,
    PriceParseError,
    UnknownCurrencyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidRateError",
    "MissingRateError",
    "OutputFormat",
    "PriceLensError",
    "PriceParseError",
    "UnknownCurrencyError",
]
