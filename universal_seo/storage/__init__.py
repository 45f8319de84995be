"""
Storage package

Per-item metadata (MetaStore backends + MetaAccessor) and the persisted
supported-locale option (SettingsStore).
"""

from .meta import InMemoryMetaStore, MetaAccessor, MetaStore, meta_key, meta_prefix
from .options import SettingsStore, sanitize_locales_option

__all__ = [
    "InMemoryMetaStore",
    "MetaAccessor",
    "MetaStore",
    "SettingsStore",
    "meta_key",
    "meta_prefix",
    "sanitize_locales_option",
]
