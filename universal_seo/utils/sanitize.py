"""
Input Sanitization and Output Escaping Utilities

Sanitizers clean operator input before it is persisted (locale codes,
storage keys, plain-text metadata, URLs). Escapers make stored values safe
for the HTML context they are written into.
"""

import html
import re
from typing import Optional

import bleach

# Allowed protocols for URLs
ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

_DANGEROUS_PROTOCOLS = ["javascript:", "data:", "vbscript:", "file:"]

_KEY_DISALLOWED = re.compile(r"[^a-z0-9_\-]")
_LOCALE_DISALLOWED = re.compile(r"[^a-zA-Z0-9_\-]")


def sanitize_plain_text(text: Optional[str]) -> str:
    """
    Strip all HTML tags and return plain text only.
    Used for metadata titles, descriptions and locale labels.

    Args:
        text: The text to sanitize

    Returns:
        Plain text with HTML tags stripped
    """
    if text is None:
        return ""

    # Strip all HTML tags
    cleaned = bleach.clean(text, tags=[], strip=True)

    # bleach leaves entities encoded; stored values are raw text
    cleaned = html.unescape(cleaned)

    # Normalize whitespace
    cleaned = re.sub(r"\s+", " ", cleaned).strip()

    return cleaned


def sanitize_url(url: Optional[str]) -> Optional[str]:
    """
    Validate and sanitize URLs to prevent javascript: and data: URLs.

    Root-relative and fragment URLs are kept as-is; bare hosts get https://.

    Args:
        url: The URL to sanitize

    Returns:
        Sanitized URL or None if invalid
    """
    if not url:
        return None

    url = url.strip()
    if not url:
        return None

    url_lower = url.lower()

    # Block dangerous protocols
    if any(url_lower.startswith(proto) for proto in _DANGEROUS_PROTOCOLS):
        return None

    if url_lower.startswith(("/", "#", "?")):
        return url

    # If no protocol, assume https://
    if not any(url_lower.startswith(f"{proto}:") for proto in ALLOWED_PROTOCOLS):
        url = f"https://{url}"

    return url


def sanitize_key(key: Optional[str]) -> str:
    """
    Lowercase a storage key fragment and drop everything outside [a-z0-9_-].

    Matches the host platform's key sanitizer so keys written here can be
    read back by the platform and vice versa.
    """
    if not key:
        return ""
    return _KEY_DISALLOWED.sub("", key.lower())


def sanitize_locale_code(code: Optional[str]) -> str:
    """Keep only alphanumerics, underscores and hyphens; case is preserved."""
    if not code:
        return ""
    return _LOCALE_DISALLOWED.sub("", code)


# ── Output escaping ───────────────────────────────────────────────────────────


def esc_html(text: str) -> str:
    """Escape text placed inside element content (e.g. <title>)."""
    return html.escape(text, quote=False)


def esc_attr(text: str) -> str:
    """Escape text placed inside a double- or single-quoted attribute value."""
    return html.escape(text, quote=True)


def esc_url(url: str) -> str:
    """
    Escape a URL for an href/content attribute.

    Dangerous schemes yield an empty string, spaces are percent-encoded and
    the remainder is attribute-escaped.
    """
    cleaned = sanitize_url(url)
    if cleaned is None:
        return ""
    return esc_attr(cleaned.replace(" ", "%20"))
