"""
Locale helpers

Pure functions converting platform locale codes (``it_IT``) into the forms
other consumers expect: Open Graph ``og:locale`` values and BCP 47 tags for
the ``<html lang>`` attribute and schema ``inLanguage``.
"""

from __future__ import annotations

import re

# ── Constants ─────────────────────────────────────────────────────────────────

# Already OpenGraph-shaped: language_REGION, 2–3 letters each
_OG_LOCALE_RE = re.compile(r"^[a-z]{2,3}_[A-Z]{2,3}$")

# Best-effort language → OpenGraph locale for short codes
OG_LOCALE_MAP: dict[str, str] = {
    "en": "en_US",
    "it": "it_IT",
    "fr": "fr_FR",
    "de": "de_DE",
    "es": "es_ES",
    "pt": "pt_PT",
    "nl": "nl_NL",
    "ru": "ru_RU",
    "ja": "ja_JP",
    "ko": "ko_KR",
    "zh": "zh_CN",
    "ar": "ar_SA",
    "hi": "hi_IN",
    "pl": "pl_PL",
    "sv": "sv_SE",
    "da": "da_DK",
    "fi": "fi_FI",
    "nb": "nb_NO",
    "tr": "tr_TR",
    "cs": "cs_CZ",
    "ro": "ro_RO",
    "hu": "hu_HU",
    "el": "el_GR",
    "he": "he_IL",
    "th": "th_TH",
    "vi": "vi_VN",
    "uk": "uk_UA",
    "bg": "bg_BG",
    "hr": "hr_HR",
    "sk": "sk_SK",
    "sl": "sl_SI",
    "et": "et_EE",
    "lv": "lv_LV",
    "lt": "lt_LT",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def locale_to_og(locale: str) -> str:
    """Convert a platform locale code to an OpenGraph-compatible locale.

    ``it_IT`` and ``fil_PHL`` pass through unchanged. Anything else is looked
    up by its lowercased two-letter prefix (``it`` → ``it_IT``,
    ``en-GB`` → ``en_US``); unknown prefixes pass through unchanged.

    Args:
        locale: Platform locale code, e.g. "it_IT", "it", "de_DE_formal".

    Returns:
        The OpenGraph locale string.
    """
    if _OG_LOCALE_RE.match(locale):
        return locale

    return OG_LOCALE_MAP.get(locale[:2].lower(), locale)


def locale_to_lang_attr(locale: str) -> str:
    """Return the BCP 47 form of a platform locale: ``pt_BR`` → ``pt-BR``."""
    return locale.replace("_", "-")
