"""
Pytest configuration and fixtures for Universal SEO tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from universal_seo.context import RequestContext  # noqa: E402
from universal_seo.host import HostEnvironment  # noqa: E402
from universal_seo.i18n.detector import LocaleDetector  # noqa: E402
from universal_seo.models import ContentItem, ResolvedOverrideSet  # noqa: E402
from universal_seo.storage.meta import InMemoryMetaStore, meta_key  # noqa: E402
from universal_seo.storage.options import SettingsStore  # noqa: E402

LOCALES = [{"code": "en_US", "label": "English"}, {"code": "it_IT", "label": "Italiano"}]


@pytest.fixture
def settings_store(tmp_path):
    """Settings file in a temp dir with English and Italian configured."""
    store = SettingsStore(tmp_path / "seo_settings.json")
    store.save_supported_locales(LOCALES)
    return store


@pytest.fixture
def meta_store():
    return InMemoryMetaStore()


@pytest.fixture
def seed_meta(meta_store):
    """seed_meta(item_id, locale, title="...", ...) writes raw values under their meta keys."""

    def _seed(item_id, locale, **values):
        for field, value in values.items():
            meta_store.set(item_id, meta_key(locale, field), value)

    return _seed


@pytest.fixture
def ctx():
    """Singular request for item 42."""
    context = RequestContext(url="https://example.com/it/hello/")
    context.set_item(ContentItem(id=42))
    return context


@pytest.fixture
def full_overrides():
    return ResolvedOverrideSet(
        title="Ciao & Benvenuti",
        description="Descrizione",
        og_title="OG Titolo",
        og_description="OG Descrizione",
        og_image="https://cdn.example.com/it.jpg",
        canonical_url="https://example.com/it/hello/",
        locale="it_IT",
    )


@pytest.fixture
def italian_detector():
    """Detector with no providers, so the platform locale (it_IT) always wins."""
    return LocaleDetector(HostEnvironment(), providers=[], platform_locale="it_IT")


@pytest.fixture
def plugin(meta_store, settings_store, italian_detector):
    from universal_seo.plugins.seo_plugin import UniversalSEOPlugin

    return UniversalSEOPlugin(store=meta_store, settings_store=settings_store, detector=italian_detector)


@pytest.fixture
def app(plugin, tmp_path, monkeypatch):
    from universal_seo.app import create_app
    from universal_seo.plugins.registry import PluginRegistry

    monkeypatch.setattr("universal_seo.plugins.loader._PLUGINS_CONFIG_FILE", tmp_path / "plugins_config.json")
    return create_app(plugin=plugin, registry=PluginRegistry(), configure_logging=False)


@pytest.fixture
def client(app):
    """TestClient with the lifespan running, so the plugin is loaded and registered."""
    with TestClient(app) as test_client:
        yield test_client
