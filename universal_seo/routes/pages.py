"""
Content rendering routes

A minimal host page renderer: it records the addressed item on the request
context, lets plugins wire their hooks through ``request.ready`` and renders
the document head through the request's filter registry. The output
rewrite middleware then patches the finished document. Deleting an item
fires ``content.deleted`` so plugins can drop their per-item data.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from universal_seo.config import settings
from universal_seo.context import RequestContext, get_request_context
from universal_seo.i18n.locale import locale_to_lang_attr
from universal_seo.models import ContentItem
from universal_seo.plugins import hooks
from universal_seo.plugins.registry import PluginRegistry
from universal_seo.routes.deps import get_plugin_registry
from universal_seo.utils.sanitize import esc_attr, esc_html, esc_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}">
<head>
<meta charset="utf-8" />
<title>{title}</title>
{head}</head>
<body>
<article id="item-{item_id}"><h1>{heading}</h1></article>
</body>
</html>
"""


def _platform_head(ctx: RequestContext) -> None:
    """Register what the platform itself prints in the head."""

    def rel_canonical() -> str:
        return f'<link rel="canonical" href="{esc_url(ctx.url)}" />\n'

    ctx.filters.add_action(hooks.HEAD, rel_canonical, priority=10, name=hooks.REL_CANONICAL)


@router.get("/content/{item_id}", response_class=HTMLResponse)
async def render_content(
    item_id: int,
    request: Request,
    post_type: str = "post",
    registry: PluginRegistry = Depends(get_plugin_registry),
) -> HTMLResponse:
    ctx = get_request_context(request)
    ctx.set_item(ContentItem(id=item_id, post_type=post_type))
    _platform_head(ctx)

    await registry.fire_hook(hooks.HOOK_REQUEST_READY, {"context": ctx})

    default_title = f"Item {item_id}"
    title = ctx.filters.apply_filters(hooks.DOCUMENT_TITLE, esc_html(default_title))
    locale = getattr(request.state, "locale", settings.default_locale)

    return HTMLResponse(
        PAGE_TEMPLATE.format(
            lang=esc_attr(locale_to_lang_attr(locale)),
            title=title,
            head=ctx.filters.do_action(hooks.HEAD),
            item_id=item_id,
            heading=esc_html(default_title),
        )
    )


@router.delete("/content/{item_id}")
async def delete_content(
    item_id: int,
    registry: PluginRegistry = Depends(get_plugin_registry),
) -> dict[str, int]:
    """Host deletion lifecycle: plugins drop whatever they keep for the item."""
    results = await registry.fire_hook(hooks.HOOK_CONTENT_DELETED, {"content_id": item_id})
    removed = sum(r for r in results if isinstance(r, int))
    logger.info("Content %s deleted, %d plugin entries removed", item_id, removed)
    return {"item_id": item_id, "removed": removed}
