"""
Hook-based override strategies: shared pieces

An ExtensionAdapter turns a ResolvedOverrideSet into a declarative list of
HookRegistration effects: which extensibility point to attach to, with which
callback and priority. FilterRegistry.wire() applies them to the host.

OverrideCallbacks holds the value transforms. Each returns the escaped
override when the field is set and the original value untouched otherwise.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from universal_seo.i18n.locale import locale_to_og
from universal_seo.models import ResolvedOverrideSet
from universal_seo.services.extensions import Extension
from universal_seo.utils.sanitize import esc_attr, esc_html, esc_url


class HookKind(str, enum.Enum):
    FILTER = "filter"
    ACTION = "action"
    REMOVE = "remove"


@dataclass(frozen=True)
class HookRegistration:
    hook: str
    callback: Callable[..., Any] | None = None
    priority: int = 10
    kind: HookKind = HookKind.FILTER
    target: str | None = None


def _original(value: Any) -> str:
    return "" if value is None else str(value)


class OverrideCallbacks:
    """Value transforms bound to one request's override set."""

    def __init__(self, overrides: ResolvedOverrideSet) -> None:
        self.overrides = overrides

    def override_title(self, original: Any = "") -> str:
        title = self.overrides.title
        return esc_html(title) if title is not None else _original(original)

    def override_description(self, original: Any = "") -> str:
        desc = self.overrides.description
        return esc_attr(desc) if desc is not None else _original(original)

    def override_og_title(self, original: Any = "") -> str:
        og_title = self.overrides.og_title
        return esc_attr(og_title) if og_title is not None else _original(original)

    def override_og_description(self, original: Any = "") -> str:
        og_desc = self.overrides.og_description
        return esc_attr(og_desc) if og_desc is not None else _original(original)

    def override_og_image(self, original: Any = "") -> str:
        image = self.overrides.og_image
        return esc_url(image) if image is not None else _original(original)

    def override_canonical(self, original: Any = "") -> str:
        canonical = self.overrides.canonical_url
        return esc_url(canonical) if canonical is not None else _original(original)

    def override_og_locale(self, original: Any = "") -> str:
        locale = self.overrides.locale
        return locale_to_og(locale) if locale is not None else _original(original)

    # Yoast's wpseo_locale filter takes the same value as og:locale
    override_locale = override_og_locale


class ExtensionAdapter(ABC):
    extension: ClassVar[Extension]
    priority: ClassVar[int] = 20

    @abstractmethod
    def apply(self, overrides: ResolvedOverrideSet) -> list[HookRegistration]:
        """Return the registrations that route overrides into this extension."""

    def _filter(self, hook: str, callback: Callable[..., Any], priority: int | None = None) -> HookRegistration:
        return HookRegistration(hook=hook, callback=callback, priority=priority or self.priority)

    def _filters_for_present(
        self, overrides: ResolvedOverrideSet, callbacks: OverrideCallbacks, table: list[tuple[str, str | None, str]]
    ) -> list[HookRegistration]:
        """
        Build filter registrations from (hook, field, callback name) rows,
        skipping rows whose field is absent. A field of None means the row
        depends on the resolved locale.
        """
        registrations = []
        for hook, field, callback_name in table:
            value = overrides.locale if field is None else overrides.get(field)
            if value is not None:
                registrations.append(self._filter(hook, getattr(callbacks, callback_name)))
        return registrations
