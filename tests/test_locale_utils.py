"""Tests for locale_utils.py.

Covers normalize_locale, extract_region, get_babel_locale and
get_system_locale.

Python 3.13+.
"""

import locale

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from pricelens.locale_utils import (
    extract_region,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-IN") == "en_IN"

    def test_already_posix(self) -> None:
        """POSIX input is returned unchanged."""
        assert normalize_locale("de_DE") == "de_DE"

    @given(st.text(alphabet="abcdefgh-_", max_size=12))
    def test_no_hyphens_remain(self, code: str) -> None:
        """Output never contains a hyphen."""
        assert "-" not in normalize_locale(code)


class TestExtractRegion:
    """Test extract_region function."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "US"), ("en_in", "IN"), ("zh-Hant-TW", "TW"), ("en", None), ("", None), (None, None)],
    )
    def test_region(self, code: str | None, expected: str | None) -> None:
        """The trailing subtag is returned upper-cased."""
        assert extract_region(code) == expected


class TestGetBabelLocale:
    """Test cached Babel locale lookup."""

    def test_accepts_bcp47(self) -> None:
        """Hyphenated codes resolve to the right Babel locale."""
        result = get_babel_locale("en-IN")
        assert isinstance(result, Locale)
        assert result.territory == "IN"

    def test_cached(self) -> None:
        """Repeated lookups return the same object."""
        assert get_babel_locale("de_DE") is get_babel_locale("de_DE")

    def test_unknown_locale(self) -> None:
        """Unknown codes raise Babel's UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx_YY")


class TestGetSystemLocale:
    """Test system locale detection."""

    def test_from_getlocale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The OS locale wins when set; the encoding suffix is dropped."""
        monkeypatch.setattr(locale, "getlocale", lambda: ("en_IN.UTF-8", "UTF-8"))
        assert get_system_locale() == "en_IN"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables are consulted after the OS locale."""
        monkeypatch.setattr(locale, "getlocale", lambda: (None, None))
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.delenv("LC_MESSAGES", raising=False)
        monkeypatch.setenv("LANG", "en-GB.UTF-8")
        assert get_system_locale() == "en_GB"

    def test_pseudo_locales_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """C and POSIX fall through to the default."""
        monkeypatch.setattr(locale, "getlocale", lambda: ("C", None))
        monkeypatch.setenv("LC_ALL", "POSIX")
        monkeypatch.delenv("LC_MESSAGES", raising=False)
        monkeypatch.delenv("LANG", raising=False)
        assert get_system_locale() == "en_US"
