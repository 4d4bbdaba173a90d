"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def price_input_invalid(received_type: str) -> Diagnostic:
        """Candidate passed to the price parser is not a string."""
        return Diagnostic(
            code=DiagnosticCode.PRICE_INPUT_INVALID,
            message=f"Expected string price candidate, got {received_type}",
            hint="Pass the text content of the node, not the node itself",
        )

    @staticmethod
    def price_empty() -> Diagnostic:
        """Candidate is empty or whitespace only."""
        return Diagnostic(
            code=DiagnosticCode.PRICE_EMPTY,
            message="Price candidate is empty",
        )

    @staticmethod
    def price_no_currency_marker(value: str) -> Diagnostic:
        """No supported currency symbol or code leads the candidate.

        Args:
            value: The candidate text
        """
        return Diagnostic(
            code=DiagnosticCode.PRICE_NO_CURRENCY_MARKER,
            message=f"No supported currency marker leads '{value}'",
            hint="Supported markers are listed by pricelens.list_currencies()",
        )

    @staticmethod
    def price_amount_invalid(amount_str: str, value: str) -> Diagnostic:
        """Numeric remainder does not follow the grouped-decimal grammar.

        Args:
            amount_str: The remainder after the currency marker was stripped
            value: The full candidate text
        """
        return Diagnostic(
            code=DiagnosticCode.PRICE_AMOUNT_INVALID,
            message=f"Failed to parse amount '{amount_str}' from '{value}'",
            hint="Amounts use comma digit grouping and at most two decimals after a period",
        )

    @staticmethod
    def price_amount_not_positive(amount_str: str, value: str) -> Diagnostic:
        """Amount parsed but is zero.

        Args:
            amount_str: The remainder after the currency marker was stripped
            value: The full candidate text
        """
        return Diagnostic(
            code=DiagnosticCode.PRICE_AMOUNT_NOT_POSITIVE,
            message=f"Amount '{amount_str}' in '{value}' is not greater than zero",
        )

    @staticmethod
    def rate_missing(currency_code: str, pivot: str) -> Diagnostic:
        """Rate table lacks an entry needed for a conversion.

        Args:
            currency_code: The currency with no rate
            pivot: The rate table's pivot currency
        """
        return Diagnostic(
            code=DiagnosticCode.RATE_MISSING,
            message=f"No rate for '{currency_code}' in rate table (pivot '{pivot}')",
            hint="Refresh the rate table so it covers both currencies",
        )

    @staticmethod
    def rate_invalid(currency_code: str, rate: object) -> Diagnostic:
        """Rate table entry is not a positive finite number.

        Args:
            currency_code: The currency whose rate is invalid
            rate: The offending value
        """
        return Diagnostic(
            code=DiagnosticCode.RATE_INVALID,
            message=f"Rate for '{currency_code}' must be a positive number, got {rate!r}",
        )

    @staticmethod
    def currency_unknown(currency_code: str) -> Diagnostic:
        """Currency code is not in the registry.

        Args:
            currency_code: The unregistered code
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=f"Currency '{currency_code}' is not supported",
            hint="Supported codes are listed by pricelens.list_currencies()",
        )

    @staticmethod
    def format_currency_unsupported(currency_code: str) -> Diagnostic:
        """Babel has no CLDR data for a currency code.

        Args:
            currency_code: The code Babel rejected
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_CURRENCY_UNSUPPORTED,
            message=f"Currency '{currency_code}' unknown to CLDR; using plain number format",
            severity="warning",
        )
