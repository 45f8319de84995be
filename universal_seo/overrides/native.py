"""
Platform-native strategy, used when no SEO extension is active.

The platform only offers a document-title filter, so the remaining tags are
printed from a head action. When a canonical override exists, the platform's
own canonical action is removed and replaced.
"""

from __future__ import annotations

from universal_seo.i18n.locale import locale_to_og
from universal_seo.models import ResolvedOverrideSet
from universal_seo.overrides.base import ExtensionAdapter, HookKind, HookRegistration, OverrideCallbacks
from universal_seo.plugins import hooks
from universal_seo.services.extensions import Extension
from universal_seo.utils.sanitize import esc_attr, esc_url

HEAD_PRIORITY = 1


class NativeCallbacks(OverrideCallbacks):
    def render_fallback_meta(self) -> str:
        o = self.overrides
        lines: list[str] = []
        if o.description is not None:
            lines.append(f'<meta name="description" content="{esc_attr(o.description)}" />')
        if o.og_title is not None:
            lines.append(f'<meta property="og:title" content="{esc_attr(o.og_title)}" />')
        if o.og_description is not None:
            lines.append(f'<meta property="og:description" content="{esc_attr(o.og_description)}" />')
        if o.og_image is not None:
            lines.append(f'<meta property="og:image" content="{esc_url(o.og_image)}" />')
        if o.locale is not None:
            lines.append(f'<meta property="og:locale" content="{esc_attr(locale_to_og(o.locale))}" />')
        return "".join(line + "\n" for line in lines)

    def render_canonical(self) -> str:
        if self.overrides.canonical_url is None:
            return ""
        return f'<link rel="canonical" href="{esc_url(self.overrides.canonical_url)}" />\n'


class NativeAdapter(ExtensionAdapter):
    extension = Extension.NONE

    def apply(self, overrides: ResolvedOverrideSet) -> list[HookRegistration]:
        cb = NativeCallbacks(overrides)
        regs: list[HookRegistration] = []

        if overrides.title is not None:
            regs.append(self._filter(hooks.DOCUMENT_TITLE, cb.override_title))

        if any(v is not None for v in (overrides.description, overrides.og_title, overrides.og_description, overrides.og_image)):
            regs.append(
                HookRegistration(hook=hooks.HEAD, callback=cb.render_fallback_meta, priority=HEAD_PRIORITY, kind=HookKind.ACTION)
            )

        if overrides.canonical_url is not None:
            regs.append(HookRegistration(hook=hooks.HEAD, kind=HookKind.REMOVE, target=hooks.REL_CANONICAL))
            regs.append(
                HookRegistration(hook=hooks.HEAD, callback=cb.render_canonical, priority=HEAD_PRIORITY, kind=HookKind.ACTION)
            )
        return regs
