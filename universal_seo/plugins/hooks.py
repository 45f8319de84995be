"""
Hook Name Constants

Two families of names live here:

* lifecycle hooks fired through PluginRegistry.fire_hook(), following the
  ``category.action`` convention;
* extensibility points of the host and of the SEO extensions, wired into a
  request's FilterRegistry by the override strategies.
"""

from __future__ import annotations

# ── Request lifecycle ─────────────────────────────────────────────────────────
HOOK_REQUEST_READY = "request.ready"

# ── Content lifecycle ─────────────────────────────────────────────────────────
HOOK_CONTENT_UPDATED = "content.updated"
HOOK_CONTENT_DELETED = "content.deleted"

# ── Settings ──────────────────────────────────────────────────────────────────
HOOK_LOCALES_UPDATED = "locales.updated"

# ── Master list ───────────────────────────────────────────────────────────────
ALL_HOOKS: list[str] = [
    HOOK_REQUEST_READY,
    HOOK_CONTENT_UPDATED,
    HOOK_CONTENT_DELETED,
    HOOK_LOCALES_UPDATED,
]

# ── Platform (no SEO extension) ───────────────────────────────────────────────
DOCUMENT_TITLE = "pre_get_document_title"
HEAD = "wp_head"
REL_CANONICAL = "rel_canonical"

# ── Yoast SEO ─────────────────────────────────────────────────────────────────
YOAST_TITLE = "wpseo_title"
YOAST_METADESC = "wpseo_metadesc"
YOAST_CANONICAL = "wpseo_canonical"
YOAST_OG_TITLE = "wpseo_opengraph_title"
YOAST_OG_DESC = "wpseo_opengraph_desc"
YOAST_OG_IMAGE = "wpseo_opengraph_image"
YOAST_LOCALE = "wpseo_locale"

# ── Rank Math ─────────────────────────────────────────────────────────────────
RANKMATH_TITLE = "rank_math/frontend/title"
RANKMATH_DESCRIPTION = "rank_math/frontend/description"
RANKMATH_CANONICAL = "rank_math/frontend/canonical"
RANKMATH_OG_TITLE = "rank_math/opengraph/facebook/og_title"
RANKMATH_OG_DESCRIPTION = "rank_math/opengraph/facebook/og_description"
RANKMATH_OG_LOCALE = "rank_math/opengraph/facebook/og_locale"

# ── All in One SEO ────────────────────────────────────────────────────────────
AIOSEO_TITLE = "aioseo_title"
AIOSEO_DESCRIPTION = "aioseo_description"
AIOSEO_FACEBOOK_TAGS = "aioseo_facebook_tags"
AIOSEO_TWITTER_TAGS = "aioseo_twitter_tags"
AIOSEO_OG_LOCALE = "aioseo_og_locale"
AIOSEO_CANONICAL_URL = "aioseo_canonical_url"
AIOSEO_SCHEMA_OUTPUT = "aioseo_schema_output"
