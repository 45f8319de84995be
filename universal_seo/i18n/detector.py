"""
Locale detection

LocaleDetector asks a fixed, ordered list of localization providers for the
current (or default) language and returns the first non-empty answer,
falling back to the platform locale.

Providers are probes over the HostEnvironment. A provider whose plugin is
not installed answers None; a provider that raises is logged at DEBUG and
treated the same way. Detection itself never raises.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from universal_seo.config import settings
from universal_seo.host import HostEnvironment

if TYPE_CHECKING:
    from universal_seo.context import RequestContext

logger = logging.getLogger(__name__)


def _non_empty(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class LocaleProvider(ABC):
    """A localization plugin that may know the request language."""

    name: str = "provider"

    @abstractmethod
    def current_locale(self, env: HostEnvironment, ctx: RequestContext) -> str | None:
        """Return the language selected for this request, or None."""

    @abstractmethod
    def default_locale(self, env: HostEnvironment) -> str | None:
        """Return the site's source language according to this provider, or None."""


class TranslatePressProvider(LocaleProvider):
    """
    TranslatePress.

    The plugin publishes the full locale in the ``TRP_LANGUAGE`` request
    variable early in the request. When that is not set yet, its service
    singleton can map the request URL to a language through the
    ``url_converter`` component, and finally reports its configured default.
    """

    name = "translatepress"
    VARIABLE = "TRP_LANGUAGE"
    SERVICE = "TRP_Translate_Press"

    def current_locale(self, env: HostEnvironment, ctx: RequestContext) -> str | None:
        lang = _non_empty(ctx.variables.get(self.VARIABLE))
        if lang:
            return lang

        trp = env.service(self.SERVICE)
        if trp is None:
            return None

        trp_settings = trp.get_component("settings")
        if not trp_settings:
            return None

        converter = trp.get_component("url_converter")
        if converter is not None and hasattr(converter, "get_lang_from_url_string"):
            lang = _non_empty(converter.get_lang_from_url_string(ctx.url))
            if lang:
                return lang

        return _non_empty(trp_settings.get_settings().get("default-language"))

    def default_locale(self, env: HostEnvironment) -> str | None:
        trp = env.service(self.SERVICE)
        if trp is None:
            return None
        trp_settings = trp.get_component("settings")
        if not trp_settings:
            return None
        return _non_empty(trp_settings.get_settings().get("default-language"))

    def published_languages(self, env: HostEnvironment) -> list[dict[str, str]]:
        """List the languages TranslatePress publishes as ``{code, label}`` dicts."""
        trp = env.service(self.SERVICE)
        if trp is None:
            return []

        try:
            trp_settings = trp.get_component("settings")
            languages = trp.get_component("languages")
            if not trp_settings or not languages:
                return []

            publish = trp_settings.get_settings().get("publish-languages") or []
            names = languages.get_language_names(publish) or {}
            return [{"code": code, "label": names.get(code, code)} for code in publish]
        except Exception as exc:
            logger.debug("TranslatePress languages unavailable: %s", exc)
            return []


class PolylangProvider(LocaleProvider):
    """Polylang: ``pll_current_language('locale')`` / ``pll_default_language('locale')``."""

    name = "polylang"

    def current_locale(self, env: HostEnvironment, ctx: RequestContext) -> str | None:
        fn = env.function("pll_current_language")
        return _non_empty(fn("locale")) if fn else None

    def default_locale(self, env: HostEnvironment) -> str | None:
        fn = env.function("pll_default_language")
        return _non_empty(fn("locale")) if fn else None


class WPMLProvider(LocaleProvider):
    """
    WPML.

    WPML exposes a short language code (``ICL_LANGUAGE_CODE``) that has to be
    mapped to a full locale through its ``wpml_locale`` mapping.
    """

    name = "wpml"
    CONSTANT = "ICL_LANGUAGE_CODE"

    def current_locale(self, env: HostEnvironment, ctx: RequestContext) -> str | None:
        if not env.is_defined(self.CONSTANT):
            return None
        return self._map(env, env.constant(self.CONSTANT))

    def default_locale(self, env: HostEnvironment) -> str | None:
        fn = env.function("icl_get_default_language")
        if fn is None:
            return None
        return self._map(env, fn())

    @staticmethod
    def _map(env: HostEnvironment, code: Any) -> str | None:
        mapper = env.function("wpml_locale")
        if mapper is None:
            return None
        return _non_empty(mapper(code))


def default_providers() -> list[LocaleProvider]:
    """Providers in priority order."""
    return [TranslatePressProvider(), PolylangProvider(), WPMLProvider()]


class LocaleDetector:
    """Resolve the request locale from the first provider that answers."""

    def __init__(
        self,
        env: HostEnvironment | None = None,
        providers: list[LocaleProvider] | None = None,
        platform_locale: str | None = None,
    ) -> None:
        self.env = env or HostEnvironment()
        self.providers = providers if providers is not None else default_providers()
        self._platform_locale = platform_locale

    def platform_locale(self) -> str:
        """The platform's configured locale: host ``get_locale()``, else settings."""
        if self._platform_locale:
            return self._platform_locale
        fn = self.env.function("get_locale")
        if fn is not None:
            try:
                locale = _non_empty(fn())
            except Exception as exc:
                logger.debug("Platform get_locale() failed: %s", exc)
                locale = None
            if locale:
                return locale
        return settings.default_locale

    def detect_locale(self, ctx: RequestContext) -> str:
        """Return the current request locale. Memoized on the request context."""
        return ctx.memoize("locale", lambda: self._first(lambda p: p.current_locale(self.env, ctx)))

    def get_default_locale(self) -> str:
        """Return the site's default (source) locale."""
        return self._first(lambda p: p.default_locale(self.env))

    def is_translated_request(self, ctx: RequestContext) -> bool:
        return self.detect_locale(ctx) != self.get_default_locale()

    def _first(self, ask) -> str:
        for provider in self.providers:
            try:
                locale = _non_empty(ask(provider))
            except Exception as exc:
                logger.debug("Locale provider %s failed: %s", getattr(provider, "name", provider), exc)
                continue
            if locale:
                logger.debug("Locale %s from provider %s", locale, getattr(provider, "name", provider))
                return locale
        return self.platform_locale()
