"""
All in One SEO override strategy

AIOSEO builds its social tags and JSON-LD graph as arrays before printing
them, so besides the scalar filters we patch those arrays in place. All
registrations use priority 99999 to run after AIOSEO's own processing.
"""

from __future__ import annotations

from typing import Any

from universal_seo.i18n.locale import locale_to_lang_attr, locale_to_og
from universal_seo.models import ResolvedOverrideSet
from universal_seo.overrides.base import ExtensionAdapter, HookRegistration, OverrideCallbacks
from universal_seo.plugins import hooks
from universal_seo.services.extensions import Extension
from universal_seo.utils.sanitize import esc_attr, esc_url

# Schema node types whose name/description/inLanguage follow the overrides
PAGE_NODE_TYPES = frozenset({"WebPage", "Article", "BlogPosting", "NewsArticle", "ItemPage", "CollectionPage"})
BREADCRUMB_NODE_TYPE = "BreadcrumbList"


class AioseoCallbacks(OverrideCallbacks):
    def override_facebook_tags(self, tags: Any) -> dict[str, Any]:
        if not isinstance(tags, dict):
            tags = {}
        o = self.overrides
        if o.og_title is not None:
            tags["og:title"] = esc_attr(o.og_title)
        if o.og_description is not None:
            tags["og:description"] = esc_attr(o.og_description)
        if o.og_image is not None:
            tags["og:image"] = esc_url(o.og_image)
            # dimensions belong to the replaced image
            tags["og:image:width"] = ""
            tags["og:image:height"] = ""
        if o.locale is not None:
            tags["og:locale"] = locale_to_og(o.locale)
        if o.canonical_url is not None:
            tags["og:url"] = esc_url(o.canonical_url)
        return tags

    def override_twitter_tags(self, tags: Any) -> dict[str, Any]:
        if not isinstance(tags, dict):
            tags = {}
        o = self.overrides
        if o.og_title is not None:
            tags["twitter:title"] = esc_attr(o.og_title)
        if o.og_description is not None:
            tags["twitter:description"] = esc_attr(o.og_description)
        if o.og_image is not None:
            tags["twitter:image"] = esc_url(o.og_image)
        return tags

    def override_schema(self, schema: Any) -> Any:
        if not isinstance(schema, list):
            return schema

        o = self.overrides
        for node in schema:
            if not isinstance(node, dict) or "@type" not in node:
                continue
            node_type = node["@type"]
            types = set(node_type) if isinstance(node_type, list) else {node_type}

            if types & PAGE_NODE_TYPES:
                if o.title is not None and "name" in node:
                    node["name"] = o.title
                if o.description is not None and "description" in node:
                    node["description"] = o.description
                if o.locale is not None:
                    node["inLanguage"] = locale_to_lang_attr(o.locale)

            if BREADCRUMB_NODE_TYPE in types and o.locale is not None:
                node["inLanguage"] = locale_to_lang_attr(o.locale)
        return schema


class AioseoAdapter(ExtensionAdapter):
    extension = Extension.AIOSEO
    priority = 99999

    def apply(self, overrides: ResolvedOverrideSet) -> list[HookRegistration]:
        cb = AioseoCallbacks(overrides)
        regs: list[HookRegistration] = []

        if overrides.title is not None:
            regs.append(self._filter(hooks.AIOSEO_TITLE, cb.override_title))
            regs.append(self._filter(hooks.DOCUMENT_TITLE, cb.override_title))
        if overrides.description is not None:
            regs.append(self._filter(hooks.AIOSEO_DESCRIPTION, cb.override_description))

        regs.append(self._filter(hooks.AIOSEO_FACEBOOK_TAGS, cb.override_facebook_tags))
        regs.append(self._filter(hooks.AIOSEO_TWITTER_TAGS, cb.override_twitter_tags))

        if overrides.locale is not None:
            regs.append(self._filter(hooks.AIOSEO_OG_LOCALE, cb.override_og_locale))
        if overrides.canonical_url is not None:
            regs.append(self._filter(hooks.AIOSEO_CANONICAL_URL, cb.override_canonical))

        regs.append(self._filter(hooks.AIOSEO_SCHEMA_OUTPUT, cb.override_schema))
        return regs
