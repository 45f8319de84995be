"""
Language Detection Middleware

Sets request.state.locale from the LocaleDetector (TranslatePress →
Polylang → WPML → platform default) and echoes it as ``Content-Language``.
The value is memoized on the request context, so the resolver sees the same
locale later in the request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from universal_seo.context import get_request_context
from universal_seo.i18n.locale import locale_to_lang_attr

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

    from universal_seo.i18n.detector import LocaleDetector


class LanguageMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, detector: LocaleDetector) -> None:
        super().__init__(app)
        self.detector = detector

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        locale = self.detector.detect_locale(get_request_context(request))
        request.state.locale = locale
        response = await call_next(request)
        response.headers.setdefault("Content-Language", locale_to_lang_attr(locale))
        return response
