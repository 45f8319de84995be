"""
Metadata Resolver

Computes the effective override set for a content item in a locale:
reads the six fields through the MetaAccessor, applies the Open Graph
fallbacks and memoizes the result on the request context.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from universal_seo.models import ContentItem, MetadataField, ResolvedOverrideSet
from universal_seo.storage.meta import MetaAccessor
from universal_seo.storage.options import SettingsStore

if TYPE_CHECKING:
    from universal_seo.context import RequestContext

logger = logging.getLogger(__name__)


class MetadataResolver:
    def __init__(self, accessor: MetaAccessor, settings_store: SettingsStore) -> None:
        self.accessor = accessor
        self.settings_store = settings_store

    def resolve(self, item: Any, locale: str | None, context: RequestContext | None = None) -> ResolvedOverrideSet:
        """
        Return the override set for item in locale.

        Non-content items (and items on non-singular views when a context is
        given) resolve to the empty set without touching storage. With a
        context, the result is cached for the rest of the request.
        """
        if not isinstance(item, ContentItem) or (context is not None and not context.is_singular):
            return ResolvedOverrideSet.empty()
        if not locale:
            return ResolvedOverrideSet.empty()

        if context is None:
            return self._resolve(item, locale, self.settings_store.get_supported_codes())

        codes = context.memoize("supported_codes", self.settings_store.get_supported_codes)
        return context.memoize(("overrides", item.id, locale), lambda: self._resolve(item, locale, codes))

    def _resolve(self, item: ContentItem, locale: str, supported_codes: list[str]) -> ResolvedOverrideSet:
        if locale not in supported_codes:
            logger.debug("Locale %s not supported; no overrides for item %s", locale, item.id)
            return ResolvedOverrideSet.empty()

        def fetch(field: MetadataField) -> str | None:
            return self.accessor.get_field(item.id, locale, field)

        title = fetch(MetadataField.TITLE)
        description = fetch(MetadataField.DESCRIPTION)
        og_title = fetch(MetadataField.OG_TITLE)
        og_description = fetch(MetadataField.OG_DESCRIPTION)
        og_image = fetch(MetadataField.OG_IMAGE)
        canonical_url = fetch(MetadataField.CANONICAL_URL)

        return ResolvedOverrideSet(
            title=title,
            description=description,
            og_title=og_title if og_title is not None else title,
            og_description=og_description if og_description is not None else description,
            og_image=og_image,
            canonical_url=canonical_url,
            locale=locale,
        )
