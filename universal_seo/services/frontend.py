"""
Frontend orchestration

Per request: detect the locale, resolve the override set for the addressed
item, pick the strategy for the active SEO extension and wire its
registrations into the request's filter registry.
"""

from __future__ import annotations

import logging

from universal_seo.context import RequestContext
from universal_seo.host import HostEnvironment
from universal_seo.i18n.detector import LocaleDetector
from universal_seo.models import ResolvedOverrideSet
from universal_seo.overrides import ADAPTERS
from universal_seo.overrides.base import HookRegistration
from universal_seo.services.extensions import Extension, detect_active_extension
from universal_seo.services.resolver import MetadataResolver

logger = logging.getLogger(__name__)


class Frontend:
    def __init__(self, detector: LocaleDetector, resolver: MetadataResolver, env: HostEnvironment | None = None) -> None:
        self.detector = detector
        self.resolver = resolver
        self.env = env if env is not None else detector.env

    def resolve_for_request(self, ctx: RequestContext) -> ResolvedOverrideSet:
        """Override set for the request's item in the request's locale (memoized)."""

        def compute() -> ResolvedOverrideSet:
            if ctx.item is None or not ctx.is_singular:
                return ResolvedOverrideSet.empty()
            return self.resolver.resolve(ctx.item, self.detector.detect_locale(ctx), ctx)

        return ctx.memoize("request_overrides", compute)

    def active_extension(self, ctx: RequestContext) -> Extension:
        return ctx.memoize("extension", lambda: detect_active_extension(self.env))

    def register_seo_hooks(self, ctx: RequestContext) -> list[HookRegistration]:
        """
        Wire the override strategy for this request.

        Returns the registrations that were applied; an empty list when the
        request is not a singular view or nothing is overridden.
        """
        if not ctx.is_singular:
            return []

        overrides = self.resolve_for_request(ctx)
        if overrides.is_empty:
            return []

        extension = self.active_extension(ctx)
        registrations = ADAPTERS[extension]().apply(overrides)
        ctx.filters.wire(registrations)
        logger.debug(
            "SEO overrides for item %s (%s) via %s: %d registrations",
            ctx.item.id if ctx.item else None,
            overrides.locale,
            extension.value,
            len(registrations),
        )
        return registrations
