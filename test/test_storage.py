"""
Tests for metadata keys, the meta stores and the settings store
"""

import json

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from universal_seo.exceptions import StorageError, ValidationError
from universal_seo.models import MetadataField, SupportedLocale
from universal_seo.storage import InMemoryMetaStore, MetaAccessor, SettingsStore, meta_key, meta_prefix
from universal_seo.storage.options import SUPPORTED_LOCALES_OPTION, sanitize_locales_option

# ══════════════════════════════════════════════════════════════════════════════
# 1. Meta keys
# ══════════════════════════════════════════════════════════════════════════════


class TestMetaKey:
    def test_format(self):
        assert meta_key("it_IT", MetadataField.OG_TITLE) == "_gg_seo_it_it_og_title"

    def test_plain_string_field(self):
        assert meta_key("en_US", "title") == "_gg_seo_en_us_title"

    def test_sanitizes_locale(self):
        assert meta_key("pt-BR <x>", "description") == "_gg_seo_pt-brx_description"

    def test_custom_namespace(self):
        assert meta_key("it_IT", "title", namespace="acme") == "_acme_it_it_title"
        assert meta_prefix("acme") == "_acme_"

    def test_injective_over_practical_domain(self):
        locales = ["en_US", "en_GB", "it_IT", "it", "pt_BR", "pt-BR", "de_DE_formal", "zh_Hans", "fil_PHL"]
        keys = {(loc.lower(), f): meta_key(loc, f) for loc in locales for f in MetadataField}
        assert len(set(keys.values())) == len(keys)


# ══════════════════════════════════════════════════════════════════════════════
# 2. MetaAccessor
# ══════════════════════════════════════════════════════════════════════════════


class TestMetaAccessor:
    def test_trimmed_string(self, meta_store, seed_meta):
        seed_meta(1, "it_IT", title="  Ciao  ")
        assert MetaAccessor(meta_store).get_field(1, "it_IT", "title") == "Ciao"

    @pytest.mark.parametrize("value", ["", "   ", ["a"], {"a": 1}, 5, None])
    def test_non_strings_and_blanks_are_absent(self, meta_store, value):
        meta_store.set(1, meta_key("it_IT", "title"), value)
        assert MetaAccessor(meta_store).get_field(1, "it_IT", "title") is None

    def test_missing_is_absent(self, meta_store):
        assert MetaAccessor(meta_store).get_field(99, "it_IT", "description") is None


# ══════════════════════════════════════════════════════════════════════════════
# 3. Stores
# ══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def sql_store():
    from universal_seo.storage.sql import SqlAlchemyMetaStore

    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    return SqlAlchemyMetaStore(engine=engine)


@pytest.fixture(params=["memory", "sql"])
def any_store(request, sql_store):
    return InMemoryMetaStore() if request.param == "memory" else sql_store


class TestMetaStores:
    def test_set_get_overwrite(self, any_store):
        any_store.set(1, "_gg_seo_it_it_title", "A")
        any_store.set(1, "_gg_seo_it_it_title", "B")
        assert any_store.get(1, "_gg_seo_it_it_title") == "B"

    def test_delete(self, any_store):
        any_store.set(1, "k", "v")
        any_store.delete(1, "k")
        assert any_store.get(1, "k") is None

    def test_delete_item(self, any_store):
        any_store.set(1, "a", "1")
        any_store.set(1, "b", "2")
        any_store.set(2, "a", "3")
        assert any_store.delete_item(1) == 2
        assert any_store.get(2, "a") == "3"

    def test_delete_prefix(self, any_store):
        any_store.set(1, "_gg_seo_it_it_title", "x")
        any_store.set(2, "_gg_seo_en_us_title", "y")
        any_store.set(2, "_other_key", "z")
        assert any_store.delete_prefix("_gg_seo_") == 2
        assert any_store.get(2, "_other_key") == "z"

    def test_delete_prefix_escapes_wildcards(self, sql_store):
        sql_store.set(1, "_gg_seo_title", "x")
        sql_store.set(1, "XggXseoXtitle", "y")
        assert sql_store.delete_prefix("_gg_seo_") == 1
        assert sql_store.get(1, "XggXseoXtitle") == "y"

    def test_sql_rejects_non_string(self, sql_store):
        with pytest.raises(ValidationError):
            sql_store.set(1, "k", 5)


# ══════════════════════════════════════════════════════════════════════════════
# 4. Settings store / supported locales
# ══════════════════════════════════════════════════════════════════════════════


class TestSanitizeLocalesOption:
    def test_cleans_codes_and_labels(self):
        raw = [{"code": " it_IT<script> ", "label": "<b>Italiano</b>"}]
        assert sanitize_locales_option(raw) == [{"code": "it_ITscript", "label": "Italiano"}]

    def test_drops_bad_rows(self):
        raw = [{"code": "!!!", "label": "x"}, "en_US", None, {"label": "no code"}, {"code": "de_DE"}]
        assert sanitize_locales_option(raw) == [{"code": "de_DE", "label": ""}]

    def test_non_list_is_empty(self):
        assert sanitize_locales_option("en_US") == []


class TestSettingsStore:
    def test_missing_file_is_empty(self, tmp_path):
        store = SettingsStore(tmp_path / "none.json")
        assert store.load() == {}
        assert store.get_supported_locales() == []

    def test_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text("{not json", encoding="utf-8")
        assert SettingsStore(path).load() == {}

    def test_save_and_read_locales(self, settings_store):
        assert settings_store.get_supported_locales() == [
            SupportedLocale("en_US", "English"),
            SupportedLocale("it_IT", "Italiano"),
        ]
        assert settings_store.get_supported_codes() == ["en_US", "it_IT"]

    def test_entries_without_both_keys_skipped(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text(
            json.dumps({SUPPORTED_LOCALES_OPTION: [{"code": "it_IT"}, {"code": "", "label": "x"}, {"code": "de_DE", "label": "D"}]}),
            encoding="utf-8",
        )
        assert SettingsStore(path).get_supported_codes() == ["de_DE"]

    def test_duplicates_first_wins(self, settings_store):
        settings_store.save_supported_locales([{"code": "it_IT", "label": "First"}, {"code": "it_IT", "label": "Second"}])
        assert settings_store.find_locale("it_IT").label == "First"
        assert settings_store.find_locale("fr_FR") is None

    def test_seed_defaults_only_once(self, tmp_path):
        store = SettingsStore(tmp_path / "s.json")
        assert store.seed_defaults() is True
        assert store.get_supported_codes() == ["en_US"]

        store.save_supported_locales([])
        assert store.seed_defaults() is False
        assert store.get_supported_codes() == []

    def test_delete_option(self, settings_store):
        assert settings_store.delete_option(SUPPORTED_LOCALES_OPTION) is True
        assert settings_store.delete_option(SUPPORTED_LOCALES_OPTION) is False

    def test_save_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        store = SettingsStore(blocker / "nested" / "s.json")
        with pytest.raises(StorageError):
            store.update_option("a", 1)
