"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for detection, conversion and
formatting failures.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Detection errors (candidate text is not a price)
        4100-4199: Conversion errors (rate table contract violations)
        4200-4299: Formatting and registry errors
    """

    # Detection errors (4000-4099)
    PRICE_INPUT_INVALID = 4001
    PRICE_EMPTY = 4002
    PRICE_NO_CURRENCY_MARKER = 4003
    PRICE_AMOUNT_INVALID = 4004
    PRICE_AMOUNT_NOT_POSITIVE = 4005

    # Conversion errors (4100-4199)
    RATE_MISSING = 4101
    RATE_INVALID = 4102

    # Formatting and registry errors (4200-4299)
    CURRENCY_UNKNOWN = 4201
    FORMAT_CURRENCY_UNSUPPORTED = 4202


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[RATE_MISSING]: No rate for 'JPY' in rate table
              = help: Refresh the rate table so it covers both currencies

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
