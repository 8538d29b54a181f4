"""Tests for locale_utils.py - locale code normalization and Babel lookup.

Python 3.13+.
"""

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from tscatalog.locale_utils import get_babel_locale, language_subtag, normalize_locale


class TestNormalizeLocale:
    """normalize_locale converts BCP-47 to POSIX without changing case."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_already_normalized(self) -> None:
        assert normalize_locale("it_IT") == "it_IT"

    def test_whitespace_stripped(self) -> None:
        assert normalize_locale(" it ") == "it"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"


class TestLanguageSubtag:
    """language_subtag extracts the lowercase language."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("pt-BR", "pt"), ("IT_it", "it"), ("sr_Latn_RS", "sr"), ("en", "en"), ("", "")],
    )
    def test_language(self, code: str, expected: str) -> None:
        assert language_subtag(code) == expected


class TestGetBabelLocale:
    """get_babel_locale parses and caches Babel locales."""

    def test_parses_bcp47(self) -> None:
        locale = get_babel_locale("pt-BR")
        assert isinstance(locale, Locale)
        assert (locale.language, locale.territory) == ("pt", "BR")

    def test_cached(self) -> None:
        assert get_babel_locale("it_IT") is get_babel_locale("it_IT")

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx")


@given(st.from_regex(r"[a-z]{2,3}([-_][A-Za-z]{2,4}){0,2}", fullmatch=True))
def test_normalized_has_no_hyphens(code: str) -> None:
    normalized = normalize_locale(code)
    assert "-" not in normalized
    assert normalize_locale(normalized) == normalized
    assert language_subtag(code) == code[:3].split("-")[0].split("_")[0].lower()
