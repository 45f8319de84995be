"""
SEO Override Routes

Read and edit the per-locale metadata of a content item.
"""

import logging

from fastapi import APIRouter, Depends, status
from starlette.concurrency import run_in_threadpool

from universal_seo.exceptions import LocaleNotSupportedError
from universal_seo.models import ContentItem
from universal_seo.plugins.hooks import HOOK_CONTENT_UPDATED
from universal_seo.plugins.registry import PluginRegistry
from universal_seo.plugins.seo_plugin import UniversalSEOPlugin
from universal_seo.routes.deps import get_plugin_registry, get_seo_plugin
from universal_seo.schemas import MetaBoxSubmission, OverridesResponse, OverrideValues

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo/items", tags=["SEO Overrides"])


def _overrides_response(plugin: UniversalSEOPlugin, item_id: int, locale: str) -> OverridesResponse:
    resolved = plugin.resolver.resolve(ContentItem(id=item_id), locale).as_dict()
    resolved.pop("locale", None)
    return OverridesResponse(
        item_id=item_id,
        locale=locale,
        values=plugin.meta_box.load(item_id, locale),
        resolved=resolved,
    )


@router.get("/{item_id}/overrides/{locale}", response_model=OverridesResponse)
async def get_overrides(
    item_id: int,
    locale: str,
    plugin: UniversalSEOPlugin = Depends(get_seo_plugin),
) -> OverridesResponse:
    """
    Stored values for one locale plus the effective set after OG fallbacks.
    """
    if await run_in_threadpool(plugin.settings_store.find_locale, locale) is None:
        raise LocaleNotSupportedError(locale)
    return await run_in_threadpool(_overrides_response, plugin, item_id, locale)


@router.put("/{item_id}/overrides/{locale}", response_model=OverridesResponse)
async def update_overrides(
    item_id: int,
    locale: str,
    data: OverrideValues,
    plugin: UniversalSEOPlugin = Depends(get_seo_plugin),
    registry: PluginRegistry = Depends(get_plugin_registry),
) -> OverridesResponse:
    """
    Replace the six fields of one locale. Omitted or blank fields are cleared.
    """
    plugin.meta_box.check_post_type(data.post_type)
    await run_in_threadpool(plugin.meta_box.save_locale, item_id, locale, data.model_dump(exclude={"post_type"}))
    await registry.fire_hook(HOOK_CONTENT_UPDATED, {"content_id": item_id, "locale": locale})
    return await run_in_threadpool(_overrides_response, plugin, item_id, locale)


@router.post("/{item_id}/meta", status_code=status.HTTP_200_OK)
async def save_meta_box(
    item_id: int,
    data: MetaBoxSubmission,
    plugin: UniversalSEOPlugin = Depends(get_seo_plugin),
    registry: PluginRegistry = Depends(get_plugin_registry),
) -> dict[str, dict[str, str]]:
    """
    Save a full edit-form submission keyed by meta key
    (``_gg_seo_<locale>_<field>``) across every supported locale.
    """
    written = await run_in_threadpool(plugin.meta_box.save, item_id, data.post_type, data.fields)
    await registry.fire_hook(HOOK_CONTENT_UPDATED, {"content_id": item_id})
    return written
