"""
SEO Output Rewrite Middleware

Captures complete ``text/html`` 200 responses for requests that qualify and
runs them through BufferOverride before they are sent. The whole body is
held in memory; there is no streaming rewrite.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from universal_seo.config import settings
from universal_seo.context import get_request_context

if TYPE_CHECKING:
    from universal_seo.plugins.seo_plugin import UniversalSEOPlugin

logger = logging.getLogger(__name__)


def _charset(content_type: str) -> str:
    for part in content_type.split(";")[1:]:
        name, _, value = part.strip().partition("=")
        if name.lower() == "charset" and value:
            return value.strip("\"' ")
    return "utf-8"


class SEOBufferMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, plugin: UniversalSEOPlugin) -> None:
        super().__init__(app)
        self.plugin = plugin

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        # Created up front so the endpoint and this middleware share one context
        ctx = get_request_context(request)

        response = await call_next(request)

        if not (settings.buffer_enabled and self.plugin.buffer_enabled):
            return response

        content_type = response.headers.get("content-type", "")
        if response.status_code != 200 or "text/html" not in content_type:
            return response

        rewrite = await run_in_threadpool(self.plugin.buffer.maybe_start_buffer, ctx)
        if rewrite is None:
            return response

        body = b""
        async for chunk in response.body_iterator:
            body += chunk if isinstance(chunk, bytes) else chunk.encode()

        charset = _charset(content_type)
        try:
            html = body.decode(charset)
        except (UnicodeDecodeError, LookupError) as exc:
            logger.debug("Output rewrite skipped for %s: %s", request.url.path, exc)
            return self._rebuild(response, body)

        rewritten = await run_in_threadpool(rewrite, html)
        return self._rebuild(response, rewritten.encode(charset, errors="xmlcharrefreplace"))

    @staticmethod
    def _rebuild(response: Response, body: bytes) -> Response:
        rebuilt = Response(content=body, status_code=response.status_code)
        # raw_headers keeps repeated headers such as Set-Cookie
        rebuilt.raw_headers.extend(
            (key, value) for key, value in response.raw_headers if key.lower() != b"content-length"
        )
        return rebuilt
