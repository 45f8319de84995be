"""
Core data types shared by the resolver, the override strategies and the
output rewriter.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields


class MetadataField(str, enum.Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    OG_TITLE = "og_title"
    OG_DESCRIPTION = "og_description"
    OG_IMAGE = "og_image"
    CANONICAL_URL = "canonical_url"


# Fields whose values are URLs (escaped with esc_url, sanitized with sanitize_url)
URL_FIELDS: frozenset[MetadataField] = frozenset({MetadataField.OG_IMAGE, MetadataField.CANONICAL_URL})


@dataclass(frozen=True)
class SupportedLocale:
    """A locale the operator provides metadata for, e.g. ``it_IT`` / ``Italiano``."""

    code: str
    label: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "label": self.label}


@dataclass(frozen=True)
class ContentItem:
    """A singular, addressable piece of content (post, page, product)."""

    id: int
    post_type: str = "post"


@dataclass(frozen=True)
class ResolvedOverrideSet:
    """
    Effective metadata for one content item in one locale.

    ``og_title`` and ``og_description`` already carry their fallbacks to
    ``title`` and ``description``. ``locale`` is set whenever the locale was
    supported, even if no field has a value.
    """

    title: str | None = None
    description: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    canonical_url: str | None = None
    locale: str | None = None

    @classmethod
    def empty(cls) -> ResolvedOverrideSet:
        return cls()

    @property
    def is_empty(self) -> bool:
        """True when no metadata field has a value (the locale does not count)."""
        return all(self.get(f) is None for f in MetadataField)

    def get(self, field: MetadataField | str) -> str | None:
        return getattr(self, MetadataField(field).value)

    def as_dict(self) -> dict[str, str | None]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
