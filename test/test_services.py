"""
Tests for request orchestration, metadata editing and install/uninstall
"""

import pytest

from universal_seo.context import RequestContext
from universal_seo.exceptions import LocaleNotSupportedError, UnsupportedPostTypeError
from universal_seo.host import HostEnvironment
from universal_seo.models import ContentItem
from universal_seo.services.frontend import Frontend
from universal_seo.services.lifecycle import activate, uninstall
from universal_seo.services.meta_box import MetaBoxService, clean_field_value
from universal_seo.services.resolver import MetadataResolver
from universal_seo.storage.meta import MetaAccessor, meta_key
from universal_seo.storage.options import SUPPORTED_LOCALES_OPTION, SettingsStore


@pytest.fixture
def make_frontend(meta_store, settings_store, italian_detector):
    def _make(env=None):
        resolver = MetadataResolver(MetaAccessor(meta_store), settings_store)
        return Frontend(italian_detector, resolver, env or HostEnvironment())

    return _make


# ══════════════════════════════════════════════════════════════════════════════
# 1. Frontend
# ══════════════════════════════════════════════════════════════════════════════


class TestFrontend:
    def test_resolves_in_detected_locale(self, make_frontend, seed_meta, ctx):
        seed_meta(42, "it_IT", title="Ciao")
        seed_meta(42, "en_US", title="Hello")
        assert make_frontend().resolve_for_request(ctx).title == "Ciao"

    def test_resolution_memoized(self, make_frontend, seed_meta, meta_store, ctx):
        seed_meta(42, "it_IT", title="Ciao")
        frontend = make_frontend()
        first = frontend.resolve_for_request(ctx)
        meta_store.set(42, meta_key("it_IT", "title"), "Changed")
        assert frontend.resolve_for_request(ctx) is first

    def test_no_item_is_empty(self, make_frontend):
        assert make_frontend().resolve_for_request(RequestContext()).is_empty

    def test_non_singular_registers_nothing(self, make_frontend, seed_meta):
        seed_meta(42, "it_IT", title="Ciao")
        ctx = RequestContext()
        ctx.set_item(ContentItem(42), singular=False)
        assert make_frontend().register_seo_hooks(ctx) == []

    def test_empty_overrides_register_nothing(self, make_frontend, ctx):
        assert make_frontend().register_seo_hooks(ctx) == []
        assert ctx.filters.apply_filters("pre_get_document_title", "Hello") == "Hello"

    def test_native_strategy_wired(self, make_frontend, seed_meta, ctx):
        seed_meta(42, "it_IT", title="Ciao")
        regs = make_frontend().register_seo_hooks(ctx)
        assert [r.hook for r in regs] == ["pre_get_document_title", "wp_head"]
        assert ctx.filters.apply_filters("pre_get_document_title", "Hello") == "Ciao"

    def test_yoast_strategy_wired(self, make_frontend, seed_meta, ctx):
        seed_meta(42, "it_IT", description="Descrizione")
        frontend = make_frontend(HostEnvironment(constants={"WPSEO_VERSION": "22.0"}))
        frontend.register_seo_hooks(ctx)
        assert ctx.filters.apply_filters("wpseo_metadesc", "English") == "Descrizione"
        assert ctx.filters.apply_filters("wpseo_locale", "en_US") == "it_IT"
        assert ctx.filters.apply_filters("wpseo_title", "English title") == "English title"

    def test_aioseo_strategy_wired(self, make_frontend, seed_meta, ctx):
        seed_meta(42, "it_IT", og_image="https://cdn.example.com/it.jpg")
        frontend = make_frontend(HostEnvironment(constants={"AIOSEO_VERSION": "4.6"}))
        frontend.register_seo_hooks(ctx)
        tags = ctx.filters.apply_filters("aioseo_facebook_tags", {"og:image": "old", "og:image:width": "800"})
        assert tags["og:image"] == "https://cdn.example.com/it.jpg"
        assert tags["og:image:width"] == ""


# ══════════════════════════════════════════════════════════════════════════════
# 2. MetaBoxService
# ══════════════════════════════════════════════════════════════════════════════


class TestCleanFieldValue:
    def test_text_stripped_of_markup(self):
        assert clean_field_value("title", "  <b>Ciao</b>   mondo ") == "Ciao mondo"

    def test_url_sanitized(self):
        assert clean_field_value("og_image", "cdn.example.com/a.jpg") == "https://cdn.example.com/a.jpg"
        assert clean_field_value("canonical_url", "javascript:alert(1)") == ""

    def test_none_is_empty(self):
        assert clean_field_value("title", None) == ""


class TestMetaBoxService:
    def test_save_every_locale_and_field(self, meta_store, settings_store):
        service = MetaBoxService(meta_store, settings_store)
        submitted = {
            meta_key("it_IT", "title"): "<i>Titolo</i>",
            meta_key("en_US", "description"): "Description",
            meta_key("fr_FR", "title"): "ignored, locale not supported",
        }
        written = service.save(7, "post", submitted)

        assert written == {"it_IT": {"title": "Titolo"}, "en_US": {"description": "Description"}}
        assert meta_store.get(7, meta_key("fr_FR", "title")) is None

    def test_empty_value_deletes(self, meta_store, settings_store, seed_meta):
        seed_meta(7, "it_IT", title="Old", description="Old desc")
        MetaBoxService(meta_store, settings_store).save(7, "page", {meta_key("it_IT", "title"): "   "})
        assert meta_store.get(7, meta_key("it_IT", "title")) is None
        assert meta_store.get(7, meta_key("it_IT", "description")) is None

    def test_unsupported_post_type(self, meta_store, settings_store):
        with pytest.raises(UnsupportedPostTypeError):
            MetaBoxService(meta_store, settings_store).save(7, "attachment", {})

    def test_save_locale_and_load(self, meta_store, settings_store):
        service = MetaBoxService(meta_store, settings_store)
        values = service.save_locale(7, "it_IT", {"title": "Titolo", "canonical_url": "/it/pagina/"})
        assert values == {
            "title": "Titolo",
            "description": None,
            "og_title": None,
            "og_description": None,
            "og_image": None,
            "canonical_url": "/it/pagina/",
        }

    def test_save_locale_unknown(self, meta_store, settings_store):
        with pytest.raises(LocaleNotSupportedError):
            MetaBoxService(meta_store, settings_store).save_locale(7, "fr_FR", {"title": "x"})


# ══════════════════════════════════════════════════════════════════════════════
# 3. Lifecycle
# ══════════════════════════════════════════════════════════════════════════════


class TestLifecycle:
    def test_activate_seeds_english(self, tmp_path):
        store = SettingsStore(tmp_path / "s.json")
        assert activate(store) is True
        assert store.get_option(SUPPORTED_LOCALES_OPTION) == [{"code": "en_US", "label": "English"}]
        assert activate(store) is False

    def test_uninstall_removes_option_and_meta(self, meta_store, settings_store, seed_meta):
        seed_meta(1, "it_IT", title="a", description="b")
        seed_meta(2, "en_US", title="c")
        meta_store.set(2, "_thumbnail_id", "9")

        assert uninstall(settings_store, meta_store) == 3
        assert not settings_store.has_option(SUPPORTED_LOCALES_OPTION)
        assert meta_store.get(2, "_thumbnail_id") == "9"
