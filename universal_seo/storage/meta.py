"""
Content item metadata storage

Keys follow ``_<namespace>_<locale>_<field>`` with both parts passed
through sanitize_key, e.g. ``_gg_seo_it_it_og_title``. The same key builder
is used on the read path (rendering) and the write path (override editing).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from universal_seo.config import settings
from universal_seo.models import MetadataField
from universal_seo.utils.sanitize import sanitize_key

logger = logging.getLogger(__name__)


def meta_prefix(namespace: str | None = None) -> str:
    """Prefix shared by every key this plugin writes, e.g. ``_gg_seo_``."""
    return f"_{namespace or settings.meta_namespace}_"


def meta_key(locale: str, field: MetadataField | str, namespace: str | None = None) -> str:
    """Build the storage key for a locale/field pair."""
    field_name = field.value if isinstance(field, MetadataField) else field
    return f"{meta_prefix(namespace)}{sanitize_key(locale)}_{sanitize_key(field_name)}"


class MetaStore(ABC):
    """Key/value metadata attached to content items."""

    @abstractmethod
    def get(self, item_id: int, key: str) -> Any:
        """Return the stored value or None."""

    @abstractmethod
    def set(self, item_id: int, key: str, value: str) -> None: ...

    @abstractmethod
    def delete(self, item_id: int, key: str) -> None: ...

    @abstractmethod
    def delete_item(self, item_id: int) -> int:
        """Delete every key of one item. Returns the number of rows removed."""

    @abstractmethod
    def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with prefix across all items."""


class InMemoryMetaStore(MetaStore):
    """Dict-backed store for tests and single-process hosts."""

    def __init__(self, data: dict[int, dict[str, Any]] | None = None) -> None:
        self._data: dict[int, dict[str, Any]] = data if data is not None else {}

    def get(self, item_id: int, key: str) -> Any:
        return self._data.get(item_id, {}).get(key)

    def set(self, item_id: int, key: str, value: str) -> None:
        self._data.setdefault(item_id, {})[key] = value

    def delete(self, item_id: int, key: str) -> None:
        self._data.get(item_id, {}).pop(key, None)

    def delete_item(self, item_id: int) -> int:
        return len(self._data.pop(item_id, {}))

    def delete_prefix(self, prefix: str) -> int:
        removed = 0
        for meta in self._data.values():
            for key in [k for k in meta if k.startswith(prefix)]:
                del meta[key]
                removed += 1
        return removed


class MetaAccessor:
    """Read-side view over a MetaStore: (item, locale, field) → trimmed string or None."""

    def __init__(self, store: MetaStore, namespace: str | None = None) -> None:
        self.store = store
        self.namespace = namespace

    def key(self, locale: str, field: MetadataField | str) -> str:
        return meta_key(locale, field, self.namespace)

    def get_field(self, item_id: int, locale: str, field: MetadataField | str) -> str | None:
        """
        Return the trimmed stored value, or None.

        Anything that is not a string with non-whitespace content (missing,
        empty, lists, dicts, numbers) counts as absent.
        """
        value = self.store.get(item_id, self.key(locale, field))
        if isinstance(value, str) and value.strip():
            return value.strip()
        if value is not None and not isinstance(value, str):
            logger.debug("Ignoring non-string meta value for item %s key %s", item_id, self.key(locale, field))
        return None
