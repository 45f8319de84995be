"""
Request-scoped state.

One RequestContext is created per incoming request. It carries what the host
knows about the request (addressed item, request phase, URL, request
variables) and memoizes everything derived from it (detected locale, active
extension, resolved overrides) so every consumer within the request sees the
same values and storage is read at most once.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from universal_seo.config import settings
from universal_seo.models import ContentItem
from universal_seo.plugins.filters import FilterRegistry

if TYPE_CHECKING:
    from fastapi import Request

T = TypeVar("T")

_STATE_ATTR = "seo_context"


def _under(path: str, prefix: str) -> bool:
    """True when path is prefix itself or lies below it, on segment boundaries."""
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def _is_feed(path: str, feed_path: str) -> bool:
    # Item and archive feeds end in a feed segment, e.g. /blog/feed
    return _under(path, feed_path) or path.endswith(feed_path.rstrip("/"))


@dataclass
class RequestContext:
    item: ContentItem | None = None
    is_singular: bool = False
    url: str = ""
    variables: dict[str, Any] = field(default_factory=dict)

    # Request phase flags
    is_admin: bool = False
    doing_ajax: bool = False
    doing_cron: bool = False
    is_rest: bool = False
    is_xmlrpc: bool = False
    is_feed: bool = False
    is_robots: bool = False

    filters: FilterRegistry = field(default_factory=FilterRegistry, repr=False)
    _memo: dict[Hashable, Any] = field(default_factory=dict, repr=False)

    def memoize(self, key: Hashable, compute: Callable[[], T]) -> T:
        """Return the cached value for key, computing it on first access."""
        if key not in self._memo:
            self._memo[key] = compute()
        return self._memo[key]

    def set_item(self, item: ContentItem | None, singular: bool = True) -> None:
        """Record the addressed item. Call before anything resolves overrides."""
        self.item = item
        self.is_singular = singular and item is not None

    @classmethod
    def from_request(cls, request: Request) -> RequestContext:
        """Derive the request phase flags from the URL path and headers."""
        path = request.url.path.rstrip("/") or "/"
        return cls(
            url=str(request.url),
            is_admin=_under(path, settings.admin_path_prefix),
            doing_ajax=(
                path == settings.ajax_path
                or request.headers.get("X-Requested-With", "").lower() == "xmlhttprequest"
            ),
            doing_cron=path == settings.cron_path,
            is_rest=_under(path, settings.rest_path_prefix),
            is_xmlrpc=path == settings.xmlrpc_path,
            is_feed=any(_is_feed(path, p) for p in settings.feed_paths),
            is_robots=path == "/robots.txt",
        )


def get_request_context(request: Request) -> RequestContext:
    """Return the context attached to request.state, creating it on first use."""
    ctx = getattr(request.state, _STATE_ATTR, None)
    if ctx is None:
        ctx = RequestContext.from_request(request)
        setattr(request.state, _STATE_ATTR, ctx)
    return ctx
