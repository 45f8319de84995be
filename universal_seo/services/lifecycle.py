"""Install-time seeding and uninstall cleanup."""

from __future__ import annotations

import logging

from universal_seo.storage.meta import MetaStore, meta_prefix
from universal_seo.storage.options import SUPPORTED_LOCALES_OPTION, SettingsStore

logger = logging.getLogger(__name__)


def activate(settings_store: SettingsStore) -> bool:
    """Seed the supported locales with English unless the option already exists."""
    seeded = settings_store.seed_defaults()
    if seeded:
        logger.info("Seeded default supported locales")
    return seeded


def uninstall(settings_store: SettingsStore, store: MetaStore, namespace: str | None = None) -> int:
    """
    Remove every trace of the plugin: the locale option and all metadata
    keys under the plugin's prefix. Returns the number of metadata rows removed.
    """
    settings_store.delete_option(SUPPORTED_LOCALES_OPTION)
    removed = store.delete_prefix(meta_prefix(namespace))
    logger.info("Uninstalled: removed option and %d metadata entries", removed)
    return removed
