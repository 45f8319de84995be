"""
SEO Settings Routes

Manage the supported-locale list. Locales are stored in the JSON settings
file (``data/seo_settings.json``) and sanitized on save.
"""

import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from universal_seo.i18n.detector import TranslatePressProvider
from universal_seo.plugins.hooks import HOOK_LOCALES_UPDATED
from universal_seo.plugins.registry import PluginRegistry
from universal_seo.plugins.seo_plugin import UniversalSEOPlugin
from universal_seo.routes.deps import get_plugin_registry, get_seo_plugin
from universal_seo.schemas import LocaleEntry, LocalesResponse, LocalesUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo/settings", tags=["SEO Settings"])


def _response(plugin: UniversalSEOPlugin) -> LocalesResponse:
    return LocalesResponse(
        locales=[LocaleEntry(**locale.to_dict()) for locale in plugin.settings_store.get_supported_locales()],
        suggested=[LocaleEntry(**entry) for entry in TranslatePressProvider().published_languages(plugin.env)],
    )


@router.get("/locales", response_model=LocalesResponse)
async def get_supported_locales(plugin: UniversalSEOPlugin = Depends(get_seo_plugin)) -> LocalesResponse:
    """
    List the configured locales.

    ``suggested`` holds the languages TranslatePress publishes, when it is
    installed, so an operator can copy them over.
    """
    return await run_in_threadpool(_response, plugin)


@router.put("/locales", response_model=LocalesResponse)
async def update_supported_locales(
    data: LocalesUpdate,
    plugin: UniversalSEOPlugin = Depends(get_seo_plugin),
    registry: PluginRegistry = Depends(get_plugin_registry),
) -> LocalesResponse:
    """
    Replace the locale list.

    Codes keep only letters, digits, ``_`` and ``-``; rows with an empty
    code are dropped.
    """
    saved = await run_in_threadpool(plugin.settings_store.save_supported_locales, data.locales)
    await registry.fire_hook(HOOK_LOCALES_UPDATED, {"codes": [locale.code for locale in saved]})
    return await run_in_threadpool(_response, plugin)
