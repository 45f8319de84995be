"""
Tests for locale helpers (Open Graph and BCP 47 forms)
"""

import pytest

from universal_seo.i18n.locale import OG_LOCALE_MAP, locale_to_lang_attr, locale_to_og


class TestLocaleToOg:
    @pytest.mark.parametrize("locale", ["it_IT", "en_GB", "fil_PHL", "pt_BR"])
    def test_og_shaped_passes_through(self, locale):
        assert locale_to_og(locale) == locale

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [("it", "it_IT"), ("en", "en_US"), ("IT", "it_IT"), ("de_DE_formal", "de_DE"), ("en-GB", "en_US")],
    )
    def test_prefix_lookup(self, locale, expected):
        assert locale_to_og(locale) == expected

    def test_unknown_prefix_unchanged(self):
        assert locale_to_og("xx") == "xx"
        assert locale_to_og("tlh_Klingon") == "tlh_Klingon"

    def test_map_has_34_entries(self):
        assert len(OG_LOCALE_MAP) == 34

    def test_map_values_are_og_shaped(self):
        for value in OG_LOCALE_MAP.values():
            assert locale_to_og(value) == value


class TestLocaleToLangAttr:
    def test_underscore_becomes_hyphen(self):
        assert locale_to_lang_attr("pt_BR") == "pt-BR"

    def test_plain_language_unchanged(self):
        assert locale_to_lang_attr("it") == "it"
