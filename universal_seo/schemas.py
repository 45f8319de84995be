"""Request/response bodies for the operator API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LocaleEntry(BaseModel):
    code: str
    label: str = ""


class LocalesUpdate(BaseModel):
    """Unsanitized rows as submitted; cleaning happens in the settings store."""

    model_config = ConfigDict(extra="ignore")

    locales: list[dict] = Field(default_factory=list)


class LocalesResponse(BaseModel):
    locales: list[LocaleEntry]
    suggested: list[LocaleEntry] = Field(default_factory=list)


class OverrideValues(BaseModel):
    model_config = ConfigDict(extra="forbid")

    post_type: str = "post"
    title: Optional[str] = None
    description: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    canonical_url: Optional[str] = None


class MetaBoxSubmission(BaseModel):
    """A whole edit-form submission: meta key → raw value, for every locale."""

    post_type: str = "post"
    fields: dict[str, Optional[str]] = Field(default_factory=dict)


class OverridesResponse(BaseModel):
    item_id: int
    locale: str
    values: dict[str, Optional[str]]
    resolved: dict[str, Optional[str]]
