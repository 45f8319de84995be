"""
Output rewriting strategy

Works on the fully rendered document as one string, whichever extension (if
any) produced it. Each rule rewrites at most the first matching tag and
leaves every other byte alone; only the meta description is injected when
missing. Replacement values go through lambdas so backslashes and group
references in stored values are written literally.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from universal_seo.i18n.locale import locale_to_lang_attr, locale_to_og
from universal_seo.models import ResolvedOverrideSet
from universal_seo.utils.sanitize import esc_attr, esc_html, esc_url

if TYPE_CHECKING:
    from universal_seo.context import RequestContext
    from universal_seo.services.frontend import Frontend

logger = logging.getLogger(__name__)

# Attribute run inside a start tag; a ">" inside a quoted value does not end it
_ATTRS = r"""(?:[^>"']|"[^"]*"|'[^']*')*"""

_HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)
_TITLE_RE = re.compile(r"<title\b" + _ATTRS + r">.*?</title>", re.IGNORECASE | re.DOTALL)
_CANONICAL_RE = re.compile(
    r"<link\b" + _ATTRS + r"""(?<![\w-])rel\s*=\s*["']canonical["']""" + _ATTRS + r"/?>", re.IGNORECASE
)
_HTML_LANG_RE = re.compile(
    r"(<html\b" + _ATTRS + r"""?)(?<![\w:-])lang\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE
)

_ATTR_VALUE = r"""\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'>/]+)"""


def _tag_re(attr: str, value: str) -> re.Pattern[str]:
    return re.compile(
        r"<meta\b" + _ATTRS + r"(?<![\w-])" + attr + r"""\s*=\s*["']""" + re.escape(value) + r"""["']"""
        + _ATTRS + r"/?>",
        re.IGNORECASE,
    )


def _attr_re(attr: str) -> re.Pattern[str]:
    return re.compile(r"(?<![\w-])" + attr + _ATTR_VALUE, re.IGNORECASE)


_CONTENT_ATTR_RE = _attr_re("content")
_HREF_ATTR_RE = _attr_re("href")


def _set_attr(tag: str, attr_re: re.Pattern[str], attr: str, escaped: str, rebuilt: str) -> str:
    """Replace one attribute of a matched tag in place, or fall back to the rebuilt tag."""
    new_tag, count = attr_re.subn(lambda _m: f'{attr}="{escaped}"', tag, count=1)
    return new_tag if count else rebuilt


def replace_title(html: str, title: str) -> str:
    new_title = f"<title>{esc_html(title)}</title>"
    return _TITLE_RE.sub(lambda _m: new_title, html, count=1)


def replace_meta_name(html: str, name: str, escaped: str, inject_if_missing: bool = False) -> str:
    """Rewrite the content of <meta name=...>; optionally inject the tag before </head>."""
    new_tag = f'<meta name="{esc_attr(name)}" content="{escaped}" />'
    html, count = _tag_re("name", name).subn(
        lambda m: _set_attr(m.group(0), _CONTENT_ATTR_RE, "content", escaped, new_tag), html, count=1
    )
    if count or not inject_if_missing:
        return html
    return _HEAD_CLOSE_RE.sub(lambda m: new_tag + "\n" + m.group(0), html, count=1)


def replace_og_property(html: str, prop: str, escaped: str) -> str:
    """Rewrite the content of <meta property=...>; absent tags are not injected."""
    new_tag = f'<meta property="{esc_attr(prop)}" content="{escaped}" />'
    return _tag_re("property", prop).sub(
        lambda m: _set_attr(m.group(0), _CONTENT_ATTR_RE, "content", escaped, new_tag), html, count=1
    )


def replace_canonical(html: str, escaped_url: str) -> str:
    new_tag = f'<link rel="canonical" href="{escaped_url}" />'
    return _CANONICAL_RE.sub(
        lambda m: _set_attr(m.group(0), _HREF_ATTR_RE, "href", escaped_url, new_tag), html, count=1
    )


def replace_html_lang(html: str, locale: str) -> str:
    lang = esc_attr(locale_to_lang_attr(locale))
    return _HTML_LANG_RE.sub(lambda m: f'{m.group(1)}lang="{lang}"', html, count=1)


def apply_overrides(html: str, overrides: ResolvedOverrideSet) -> str:
    """
    Apply every rewrite rule whose field is present, in a fixed order:
    title, OG/Twitter title, description, OG/Twitter description,
    OG/Twitter image, OG locale with <html lang>, canonical with og:url.
    """
    o = overrides

    if o.title is not None:
        html = replace_title(html, o.title)

    if o.og_title is not None:
        html = replace_og_property(html, "og:title", esc_attr(o.og_title))
        html = replace_meta_name(html, "twitter:title", esc_attr(o.og_title))

    if o.description is not None:
        html = replace_meta_name(html, "description", esc_attr(o.description), inject_if_missing=True)

    if o.og_description is not None:
        html = replace_og_property(html, "og:description", esc_attr(o.og_description))
        html = replace_meta_name(html, "twitter:description", esc_attr(o.og_description))

    image = esc_url(o.og_image) if o.og_image is not None else ""
    if image:
        html = replace_og_property(html, "og:image", image)
        html = replace_meta_name(html, "twitter:image", image)

    if o.locale is not None:
        html = replace_og_property(html, "og:locale", esc_attr(locale_to_og(o.locale)))
        html = replace_html_lang(html, o.locale)

    canonical = esc_url(o.canonical_url) if o.canonical_url is not None else ""
    if canonical:
        html = replace_canonical(html, canonical)
        html = replace_og_property(html, "og:url", canonical)

    return html


class BufferOverride:
    """Decides whether a response gets rewritten and performs the rewrite."""

    def __init__(self, frontend: Frontend) -> None:
        self.frontend = frontend

    @staticmethod
    def should_skip(ctx: RequestContext) -> bool:
        return (
            ctx.is_admin
            or ctx.doing_ajax
            or ctx.doing_cron
            or ctx.is_rest
            or ctx.is_xmlrpc
            or ctx.is_feed
            or ctx.is_robots
        )

    def maybe_start_buffer(self, ctx: RequestContext) -> Callable[[str], str] | None:
        """
        Return the rewrite callback for this request's output, or None when
        the output must not be captured at all.
        """
        if self.should_skip(ctx):
            logger.debug("Output rewrite skipped for %s (request phase)", ctx.url)
            return None

        overrides = self.frontend.resolve_for_request(ctx)
        if overrides.is_empty:
            return None

        return lambda html: self.process_buffer(html, overrides)

    @staticmethod
    def process_buffer(html: str, overrides: ResolvedOverrideSet) -> str:
        """Rewrite a captured document; anything without a </head> passes through."""
        if not html or not _HEAD_CLOSE_RE.search(html):
            return html
        return apply_overrides(html, overrides)
