"""Yoast SEO override strategy."""

from __future__ import annotations

from universal_seo.models import ResolvedOverrideSet
from universal_seo.overrides.base import ExtensionAdapter, HookRegistration, OverrideCallbacks
from universal_seo.plugins import hooks
from universal_seo.services.extensions import Extension


class YoastAdapter(ExtensionAdapter):
    extension = Extension.YOAST

    TABLE = [
        (hooks.YOAST_TITLE, "title", "override_title"),
        (hooks.YOAST_METADESC, "description", "override_description"),
        (hooks.YOAST_CANONICAL, "canonical_url", "override_canonical"),
        (hooks.YOAST_OG_TITLE, "og_title", "override_og_title"),
        (hooks.YOAST_OG_DESC, "og_description", "override_og_description"),
        (hooks.YOAST_OG_IMAGE, "og_image", "override_og_image"),
        (hooks.YOAST_LOCALE, None, "override_locale"),
    ]

    def apply(self, overrides: ResolvedOverrideSet) -> list[HookRegistration]:
        return self._filters_for_present(overrides, OverrideCallbacks(overrides), self.TABLE)
