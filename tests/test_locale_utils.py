"""Tests for locale id normalization, fallback chains and Babel locale caching.

Python 3.13+.
"""

import string

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from localeengine.locale_utils import (
    get_babel_locale,
    locale_fallback_chain,
    normalize_locale_id,
    to_posix_locale,
)

_subtag = st.text(alphabet=string.ascii_letters, min_size=1, max_size=8)


class TestNormalizeLocaleId:
    """Test normalize_locale_id."""

    @pytest.mark.parametrize(
        ("locale_id", "expected"),
        [
            ("en", "en"),
            ("en-US", "en-us"),
            ("en_US", "en-us"),
            ("EN-us", "en-us"),
            ("zh-Hant-TW", "zh-hant-tw"),
            ("en_US_POSIX", "en-us-posix"),
        ],
    )
    def test_normalization(self, locale_id: str, expected: str) -> None:
        """Case and separators are unified."""
        assert normalize_locale_id(locale_id) == expected

    @given(st.lists(_subtag, min_size=1, max_size=4), st.sampled_from(["-", "_"]))
    def test_idempotent(self, subtags: list[str], separator: str) -> None:
        """Normalizing twice gives the same key."""
        once = normalize_locale_id(separator.join(subtags))
        assert normalize_locale_id(once) == once
        assert "_" not in once
        assert once == once.lower()


class TestLocaleFallbackChain:
    """Test locale_fallback_chain."""

    def test_posix_variant_chain(self) -> None:
        """Every parent is tried, longest first."""
        assert locale_fallback_chain("en-US-posix") == ("en-us-posix", "en-us", "en")

    def test_single_subtag(self) -> None:
        """A bare language is its own chain."""
        assert locale_fallback_chain("fr") == ("fr",)

    def test_empty_id(self) -> None:
        """An empty id has no candidates."""
        assert locale_fallback_chain("") == ()

    @given(st.lists(_subtag, min_size=1, max_size=5))
    def test_chain_length_matches_subtags(self, subtags: list[str]) -> None:
        """One candidate per subtag, each a prefix of the previous one."""
        chain = locale_fallback_chain("-".join(subtags))
        assert len(chain) == len(subtags)
        for longer, shorter in zip(chain, chain[1:], strict=False):
            assert longer.startswith(shorter + "-")


class TestPosixConversion:
    """Test to_posix_locale and get_babel_locale."""

    def test_to_posix(self) -> None:
        """Hyphens become underscores."""
        assert to_posix_locale("pt-BR") == "pt_BR"

    def test_get_babel_locale(self) -> None:
        """BCP-47 ids parse into Babel locales."""
        locale = get_babel_locale("de-CH")
        assert isinstance(locale, Locale)
        assert (locale.language, locale.territory) == ("de", "CH")

    def test_get_babel_locale_cached(self) -> None:
        """Repeated lookups return the cached object."""
        assert get_babel_locale("fr-FR") is get_babel_locale("fr-FR")

    def test_unknown_locale_raises(self) -> None:
        """Unknown languages raise Babel's error."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx-YY")
