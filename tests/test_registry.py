"""Tests for the currency registry and locale-to-currency defaults."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pricelens.currencies import (
    DEFAULT_REGISTRY,
    LEAD_TOKEN_ORDER,
    LOCALE_CURRENCY_MAP,
    CurrencyDefinition,
    CurrencyRegistry,
    DetectionPattern,
    TokenKind,
    default_currency_for_locale,
    get_currency,
    list_currencies,
)
from pricelens.diagnostics import DiagnosticCode, UnknownCurrencyError


class TestRegistryContents:
    """Test the default set of supported currencies."""

    def test_supported_codes_in_order(self) -> None:
        """Registry lists USD, INR, EUR, GBP in declaration order."""
        assert [c.code for c in list_currencies()] == ["USD", "INR", "EUR", "GBP"]

    def test_every_currency_has_patterns(self) -> None:
        """Each currency carries at least one detection pattern."""
        for definition in list_currencies():
            assert definition.detection_patterns

    def test_get_currency(self) -> None:
        """get_currency returns the definition with its formatting locale."""
        inr = get_currency("INR")
        assert inr.symbol == "₹"
        assert inr.formatting_locale == "en_IN"

    def test_get_currency_unknown_raises(self) -> None:
        """Unregistered codes raise UnknownCurrencyError with a diagnostic."""
        with pytest.raises(UnknownCurrencyError) as exc_info:
            get_currency("JPY")
        assert exc_info.value.currency_code == "JPY"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CURRENCY_UNKNOWN

    def test_unknown_currency_is_lookup_error(self) -> None:
        """Callers catching LookupError also catch unknown currencies."""
        with pytest.raises(LookupError):
            get_currency("XYZ")

    def test_membership_and_len(self) -> None:
        """Registry supports `in` and len()."""
        assert "EUR" in DEFAULT_REGISTRY
        assert "JPY" not in DEFAULT_REGISTRY
        assert len(DEFAULT_REGISTRY) == 4


class TestLeadTokenOrder:
    """Test the total priority order of lead tokens."""

    def test_symbols_before_codes(self) -> None:
        """Every symbol-form pattern ranks before every code-form pattern."""
        kinds = [pattern.kind for pattern, _ in LEAD_TOKEN_ORDER]
        first_code = kinds.index(TokenKind.CODE)
        assert all(kind is TokenKind.CODE for kind in kinds[first_code:])

    def test_longer_symbol_first(self) -> None:
        """US$ is tried before the bare dollar sign."""
        tokens = [pattern.token for pattern, _ in LEAD_TOKEN_ORDER]
        assert tokens.index("US$") < tokens.index("$")

    def test_exact_order(self) -> None:
        """Ties fall back to registry order, then pattern order."""
        tokens = [pattern.token for pattern, _ in LEAD_TOKEN_ORDER]
        assert tokens == ["US$", "Rs.", "$", "₹", "€", "£", "USD", "INR", "EUR", "GBP"]


class TestRegistryValidation:
    """Test construction-time validation of custom registries."""

    @staticmethod
    def _currency(code: str, token: str) -> CurrencyDefinition:
        return CurrencyDefinition(
            code=code,
            symbol=token,
            display_name=code,
            formatting_locale="en_US",
            detection_patterns=(
                DetectionPattern(token=token, marker=token, kind=TokenKind.SYMBOL),
            ),
        )

    def test_duplicate_code_rejected(self) -> None:
        """Two definitions with one code are refused."""
        with pytest.raises(ValueError, match="Duplicate currency code"):
            CurrencyRegistry((self._currency("AAA", "A"), self._currency("AAA", "B")))

    def test_shared_token_rejected(self) -> None:
        """A lead token claimed by two currencies is refused, case-insensitively."""
        with pytest.raises(ValueError, match="claimed by both"):
            CurrencyRegistry((self._currency("AAA", "kr"), self._currency("BBB", "KR")))


class TestDefaultCurrencyForLocale:
    """Test default_currency_for_locale() region lookup."""

    @pytest.mark.parametrize(
        ("locale_code", "expected"),
        [
            ("en-US", "USD"),
            ("en_GB", "GBP"),
            ("hi-IN", "INR"),
            ("en-in", "INR"),
            ("de-DE", "EUR"),
            ("fr_FR", "EUR"),
            ("zh-Hant-TW", "USD"),
        ],
    )
    def test_region_lookup(self, locale_code: str, expected: str) -> None:
        """Region subtag decides the currency; unmapped regions fall back."""
        assert default_currency_for_locale(locale_code) == expected

    @pytest.mark.parametrize("locale_code", ["", None, "fr", "en-"])
    def test_no_region_falls_back(self, locale_code: str | None) -> None:
        """Empty or region-less identifiers yield the default."""
        assert default_currency_for_locale(locale_code) == "USD"

    def test_custom_fallback(self) -> None:
        """Callers may choose their own fallback."""
        assert default_currency_for_locale("ja-JP", fallback="EUR") == "EUR"

    @given(st.text(max_size=20))
    def test_always_returns_a_code(self, locale_code: str) -> None:
        """Any input maps to a mapped currency or the fallback."""
        result = default_currency_for_locale(locale_code)
        assert result == "USD" or result in LOCALE_CURRENCY_MAP.values()
