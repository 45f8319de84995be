"""Rank Math override strategy."""

from __future__ import annotations

from universal_seo.models import ResolvedOverrideSet
from universal_seo.overrides.base import ExtensionAdapter, HookRegistration, OverrideCallbacks
from universal_seo.plugins import hooks
from universal_seo.services.extensions import Extension


class RankMathAdapter(ExtensionAdapter):
    extension = Extension.RANKMATH

    # Rank Math has no og:image filter; the output rewriter covers it
    TABLE = [
        (hooks.RANKMATH_TITLE, "title", "override_title"),
        (hooks.RANKMATH_DESCRIPTION, "description", "override_description"),
        (hooks.RANKMATH_CANONICAL, "canonical_url", "override_canonical"),
        (hooks.RANKMATH_OG_TITLE, "og_title", "override_og_title"),
        (hooks.RANKMATH_OG_DESCRIPTION, "og_description", "override_og_description"),
        (hooks.RANKMATH_OG_LOCALE, None, "override_og_locale"),
    ]

    def apply(self, overrides: ResolvedOverrideSet) -> list[HookRegistration]:
        return self._filters_for_present(overrides, OverrideCallbacks(overrides), self.TABLE)
