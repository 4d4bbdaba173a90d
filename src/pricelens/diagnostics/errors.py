"""pricelens exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidRateError",
    "MissingRateError",
    "PriceLensError",
    "PriceParseError",
    "UnknownCurrencyError",
]


class PriceLensError(Exception):
    """Base exception for all pricelens errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PriceLensError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PriceParseError(PriceLensError):
    """A candidate string could not be read as a price.

    Detection never raises: these errors are returned alongside a None result
    so that a malformed price on a page is skipped and the scan carries on.

    Attributes:
        input_value: The candidate text that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        super().__init__(message)
        self.input_value = input_value


class MissingRateError(PriceLensError, KeyError):
    """Rate table has no entry for a currency a conversion needs.

    Attributes:
        currency_code: The currency with no rate
    """

    def __init__(self, message: str | Diagnostic, *, currency_code: str = "") -> None:
        super().__init__(message)
        self.currency_code = currency_code

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return Exception.__str__(self)


class UnknownCurrencyError(PriceLensError, LookupError):
    """Currency code is not in the registry.

    Attributes:
        currency_code: The unregistered code
    """

    def __init__(self, message: str | Diagnostic, *, currency_code: str = "") -> None:
        super().__init__(message)
        self.currency_code = currency_code


class InvalidRateError(PriceLensError, ValueError):
    """Rate table entry is not a positive finite number.

    Attributes:
        currency_code: The currency whose rate is invalid
    """

    def __init__(self, message: str | Diagnostic, *, currency_code: str = "") -> None:
        super().__init__(message)
        self.currency_code = currency_code
