"""
Per-item metadata editing

MetaBoxService is the write side of the metadata store: it takes operator
input for a content item, sanitizes each field and persists it under the
locale's meta keys. Empty values delete the key so reads see "absent".
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from universal_seo.config import settings
from universal_seo.exceptions import LocaleNotSupportedError, UnsupportedPostTypeError
from universal_seo.models import URL_FIELDS, MetadataField
from universal_seo.storage.meta import MetaAccessor, MetaStore
from universal_seo.storage.options import SettingsStore
from universal_seo.utils.sanitize import sanitize_plain_text, sanitize_url

logger = logging.getLogger(__name__)


def clean_field_value(field: MetadataField | str, raw: Any) -> str:
    """Sanitize one submitted value; returns "" for anything unusable."""
    if raw is None:
        return ""
    if MetadataField(field) in URL_FIELDS:
        return sanitize_url(str(raw)) or ""
    return sanitize_plain_text(str(raw))


class MetaBoxService:
    def __init__(self, store: MetaStore, settings_store: SettingsStore, namespace: str | None = None) -> None:
        self.store = store
        self.settings_store = settings_store
        self.accessor = MetaAccessor(store, namespace)

    def check_post_type(self, post_type: str) -> None:
        if post_type not in settings.seo_post_types:
            raise UnsupportedPostTypeError(post_type, list(settings.seo_post_types))

    def save(self, item_id: int, post_type: str, submitted: Mapping[str, Any]) -> dict[str, dict[str, str]]:
        """
        Save a whole form submission keyed by meta key.

        Every supported locale and every field is visited: a key missing
        from ``submitted`` counts as empty and deletes the stored value.

        Returns:
            The non-empty values written, grouped by locale code.
        """
        self.check_post_type(post_type)

        written: dict[str, dict[str, str]] = {}
        for code in self.settings_store.get_supported_codes():
            for field in MetadataField:
                key = self.accessor.key(code, field)
                if self._store_value(item_id, key, clean_field_value(field, submitted.get(key))):
                    written.setdefault(code, {})[field.value] = self.store.get(item_id, key)

        logger.info("Saved SEO metadata for item %s (%d locales)", item_id, len(written))
        return written

    def save_locale(self, item_id: int, locale: str, values: Mapping[str, Any]) -> dict[str, str | None]:
        """Replace all six fields of one locale. Fields left out are cleared."""
        if self.settings_store.find_locale(locale) is None:
            raise LocaleNotSupportedError(locale)

        for field in MetadataField:
            self._store_value(item_id, self.accessor.key(locale, field), clean_field_value(field, values.get(field.value)))

        logger.info("Saved SEO metadata for item %s in %s", item_id, locale)
        return self.load(item_id, locale)

    def load(self, item_id: int, locale: str) -> dict[str, str | None]:
        """Stored values for one locale, without OG fallbacks applied."""
        return {field.value: self.accessor.get_field(item_id, locale, field) for field in MetadataField}

    def _store_value(self, item_id: int, key: str, value: str) -> bool:
        if value:
            self.store.set(item_id, key, value)
            return True
        self.store.delete(item_id, key)
        return False
