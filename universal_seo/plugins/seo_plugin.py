"""
Universal SEO Plugin

Composes the per-locale metadata pipeline and exposes it to the host:

  - request.ready    → wire the override strategy for the active SEO
                       extension into the request's filter registry
  - content.deleted  → drop the item's stored metadata (fired by the
                       host's delete path, DELETE /content/{id})
  - content.updated  → log (values are read fresh on every render)
  - locales.updated  → log the new locale list
"""

from __future__ import annotations

import logging
from typing import Any

from starlette.concurrency import run_in_threadpool

from universal_seo.config import settings
from universal_seo.host import HostEnvironment
from universal_seo.i18n.detector import LocaleDetector
from universal_seo.overrides.buffer import BufferOverride
from universal_seo.plugins.base import PluginBase, PluginMeta
from universal_seo.plugins.hooks import (
    ALL_HOOKS,
    HOOK_CONTENT_DELETED,
    HOOK_CONTENT_UPDATED,
    HOOK_LOCALES_UPDATED,
    HOOK_REQUEST_READY,
)
from universal_seo.services.frontend import Frontend
from universal_seo.services.lifecycle import activate
from universal_seo.services.meta_box import MetaBoxService
from universal_seo.services.resolver import MetadataResolver
from universal_seo.storage.meta import MetaAccessor, MetaStore
from universal_seo.storage.options import SettingsStore

logger = logging.getLogger(__name__)

_META = PluginMeta(
    name="universal_seo",
    version=settings.app_version,
    description=(
        "Per-locale SEO title, description, Open Graph and canonical overrides "
        "for Yoast SEO, Rank Math, All in One SEO or the bare platform"
    ),
    hooks=list(ALL_HOOKS),
    config_schema={
        "buffer_enabled": {"type": "boolean", "default": True},
        "seed_default_locales": {"type": "boolean", "default": True},
    },
)


class UniversalSEOPlugin(PluginBase):
    def __init__(
        self,
        store: MetaStore | None = None,
        settings_store: SettingsStore | None = None,
        env: HostEnvironment | None = None,
        detector: LocaleDetector | None = None,
    ) -> None:
        if store is None:
            from universal_seo.storage.sql import SqlAlchemyMetaStore

            store = SqlAlchemyMetaStore()
        self.store = store
        self.settings_store = settings_store or SettingsStore()
        self.env = env or HostEnvironment()
        self.detector = detector or LocaleDetector(self.env)

        self.resolver = MetadataResolver(MetaAccessor(self.store), self.settings_store)
        self.frontend = Frontend(self.detector, self.resolver, self.env)
        self.buffer = BufferOverride(self.frontend)
        self.meta_box = MetaBoxService(self.store, self.settings_store)
        self._config: dict[str, Any] = {}

    @property
    def meta(self) -> PluginMeta:
        return _META

    @property
    def buffer_enabled(self) -> bool:
        """Whether the plugin config allows the output rewrite."""
        return bool(self._config.get("buffer_enabled", True))

    async def on_load(self, config: dict[str, Any]) -> None:
        self._config = config
        if config.get("seed_default_locales", True):
            await run_in_threadpool(activate, self.settings_store)
        logger.debug("UniversalSEOPlugin loaded (config=%s)", config)

    async def handle_hook(self, hook_name: str, payload: dict[str, Any]) -> Any:
        if hook_name == HOOK_REQUEST_READY:
            return await run_in_threadpool(self.frontend.register_seo_hooks, payload["context"])

        if hook_name == HOOK_CONTENT_DELETED:
            removed = await run_in_threadpool(self.store.delete_item, payload["content_id"])
            logger.info("Removed %d SEO metadata entries for deleted item %s", removed, payload["content_id"])
            return removed

        if hook_name in (HOOK_CONTENT_UPDATED, HOOK_LOCALES_UPDATED):
            logger.debug("UniversalSEOPlugin: %s (%s)", hook_name, payload)
        return None
