"""Tests for locale-correct price formatting and conversion quotes.

Babel separates some symbols from numbers with a non-breaking space, so the
assertions for those locales check the parts rather than the exact spacing.
"""

import logging
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pricelens.constants import DISPLAY_FRACTION_DIGITS
from pricelens.conversion import (
    RateTable,
    format_plain,
    format_price,
    quote_conversion,
    resolve_formatting_locale,
)


class TestFormatPrice:
    """Test format_price() per registered currency."""

    def test_inr_indian_grouping(self) -> None:
        """INR groups lakhs and crores the Indian way."""
        assert format_price(1234567, "INR") == "₹12,34,567.00"

    def test_inr_small(self) -> None:
        """Amounts below a thousand get no separator."""
        assert format_price(999, "INR") == "₹999.00"

    def test_usd(self) -> None:
        """USD uses en_US grouping with the symbol in front."""
        assert format_price(1234.5, "USD") == "$1,234.50"

    def test_gbp(self) -> None:
        """GBP uses en_GB conventions."""
        assert format_price(Decimal("0.99"), "GBP") == "£0.99"

    def test_eur_german_conventions(self) -> None:
        """EUR uses de_DE separators with the symbol after the number."""
        result = format_price(1234.56, "EUR")
        assert result.startswith("1.234,56")
        assert result.endswith("€")

    def test_rounds_to_two_digits(self) -> None:
        """Display always has exactly two fractional digits."""
        assert format_price(18.016826923, "USD") == "$18.02"
        assert format_price(5, "USD") == "$5.00"

    def test_locale_override(self) -> None:
        """An explicit locale replaces the registry's formatting locale."""
        assert format_price(1234567, "INR", locale_code="en_US") == "₹1,234,567.00"

    def test_unknown_code_plain_fallback(self) -> None:
        """Codes without CLDR data use the plain-number fallback."""
        assert format_price(5, "XYZ") == "5.00 XYZ"
        assert format_price(1234.5, "XYZ") == "1,234.50 XYZ"

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """A bad locale logs a warning and formats with en_US."""
        with caplog.at_level(logging.WARNING, logger="pricelens.conversion.formatting"):
            result = format_price(10, "USD", locale_code="xx_YY")
        assert result == "$10.00"
        assert "Unknown formatting locale" in caplog.text

    @given(st.decimals(min_value=Decimal("0.01"), max_value=Decimal(10**9), places=2))
    def test_never_raises_for_unknown_codes(self, amount: Decimal) -> None:
        """The fallback keeps two fractional digits for any amount."""
        result = format_price(amount, "ZZZ")
        assert result.endswith(" ZZZ")
        assert result.split(" ")[0].split(".")[1].isdigit()


class TestFormattingHelpers:
    """Test locale resolution and the plain formatter."""

    def test_registry_locale(self) -> None:
        """Registered currencies use their own formatting locale."""
        assert resolve_formatting_locale("INR") == "en_IN"
        assert resolve_formatting_locale("EUR") == "de_DE"

    def test_unregistered_locale(self) -> None:
        """Unregistered currencies use the fallback locale."""
        assert resolve_formatting_locale("JPY") == "en_US"

    def test_plain_fraction_digits(self) -> None:
        """The plain fallback shows DISPLAY_FRACTION_DIGITS fractional digits."""
        number = format_plain(Decimal("3.14159"), "ABC").split(" ")[0]
        assert len(number.split(".")[1]) == DISPLAY_FRACTION_DIGITS

    def test_format_plain(self) -> None:
        """Plain format is a grouped two-decimal number plus the code."""
        assert format_plain(Decimal("1000000"), "ABC") == "1,000,000.00 ABC"


class TestQuoteConversion:
    """Test the display strings produced for one detected price."""

    def test_inr_price_for_usd_home(self, rates: RateTable) -> None:
        """An INR price viewed by a USD user."""
        quote = quote_conversion(Decimal("1499"), "INR", "USD", rates)
        assert quote.value == "$18.02"
        assert quote.original == "₹1,499.00 INR"
        assert quote.rate_line == "1 USD = 83.20 INR (live)"
        assert quote.target_currency == "USD"

    def test_usd_price_for_inr_home(self, rates: RateTable) -> None:
        """A USD price viewed by an INR user."""
        quote = quote_conversion(Decimal("10"), "USD", "INR", rates)
        assert quote.value == "₹832.00"
        assert quote.rate_line == "1 USD = 83.20 INR (live)"

    def test_manual_source_label(self, rates: RateTable) -> None:
        """The rate line names where the rate came from."""
        quote = quote_conversion(Decimal("10"), "USD", "INR", rates.with_override("INR", 90))
        assert quote.rate_line == "1 USD = 90.00 INR (manual)"
        assert quote.value == "₹900.00"

    def test_same_currency(self, rates: RateTable) -> None:
        """Identity quotes show the amount unchanged."""
        quote = quote_conversion(Decimal("1499"), "INR", "INR", rates)
        assert quote.value == "₹1,499.00"
        assert quote.converted_amount == Decimal("1499")
