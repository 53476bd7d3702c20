"""
Tests for locale resolution.
"""

import pytest

from cms_translate.core.errors import UnsupportedLocale
from cms_translate.core.models import TranslationService
from cms_translate.i18n.languages import (
    load_supported_locales,
    require_source_locale,
    require_target_locale,
    resolve_source_locale,
    resolve_target_locale,
    split_locale,
)


class TestTables:
    def test_tables_are_loaded_lowercase(self):
        tables = load_supported_locales()
        assert {"yandex", "deepl_from", "deepl_to"} <= set(tables)
        assert "de" in tables["deepl_from"]
        assert "pt-br" in tables["deepl_to"]
        # YAML would read a bare no as False
        assert "no" in tables["yandex"]

    def test_split_locale(self):
        assert split_locale("pt-BR") == ("pt-br", "pt")
        assert split_locale("it") == ("it", "it")


class TestTargetLocale:
    @pytest.mark.parametrize(
        "locale, expected",
        [
            ("en", "EN-US"),
            ("pt", "PT-PT"),
            ("pt-BR", "PT-BR"),
            ("en-GB", "EN-GB"),
            ("de", "DE"),
            ("de-AT", "DE"),
            ("it", "IT"),
        ],
    )
    def test_deepl(self, locale, expected):
        assert resolve_target_locale(locale, TranslationService.DEEPL) == expected
        assert resolve_target_locale(locale, "deeplFree") == expected

    def test_yandex_uses_base(self):
        assert resolve_target_locale("pt-BR", TranslationService.YANDEX) == "pt"
        assert resolve_target_locale("EN", "yandex") == "en"

    def test_other_services_pass_through(self):
        assert resolve_target_locale("pt-BR", TranslationService.OPENAI) == "pt-BR"
        assert resolve_target_locale("pt-BR", None) == "pt-BR"
        assert resolve_target_locale("pt-BR", "unknown") == "pt-BR"


class TestSourceLocale:
    def test_deepl(self):
        assert resolve_source_locale("en-US", TranslationService.DEEPL) == "EN"
        assert resolve_source_locale("xx", TranslationService.DEEPL) == ""

    def test_yandex(self):
        assert resolve_source_locale("de-CH", TranslationService.YANDEX) == "de"
        assert resolve_source_locale("xx", TranslationService.YANDEX) == ""

    def test_other_services_pass_through(self):
        assert resolve_source_locale("xx", TranslationService.MOCK) == "xx"

    def test_require_source_raises(self):
        with pytest.raises(UnsupportedLocale) as exc:
            require_source_locale("xx", TranslationService.DEEPL)

        assert exc.value.locale == "xx"
        assert exc.value.service == "deepl"

    def test_require_target(self):
        assert require_target_locale("it", "yandex") == "it"
        with pytest.raises(UnsupportedLocale):
            require_target_locale("", "yandex")
