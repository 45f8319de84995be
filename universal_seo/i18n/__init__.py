"""
i18n package

Locale detection across localization providers and the locale format
helpers used when writing ``og:locale`` and ``lang`` attributes.
"""

from .locale import OG_LOCALE_MAP, locale_to_lang_attr, locale_to_og

__all__ = [
    "OG_LOCALE_MAP",
    "locale_to_lang_attr",
    "locale_to_og",
]
