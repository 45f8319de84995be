"""
Extension Detector

Identifies which third-party SEO extension is active by probing the host
for each extension's version constant or well-known symbol.
"""

from __future__ import annotations

import enum

from universal_seo.host import HostEnvironment


class Extension(str, enum.Enum):
    YOAST = "yoast"
    RANKMATH = "rankmath"
    AIOSEO = "aioseo"
    NONE = "none"


def detect_active_extension(env: HostEnvironment) -> Extension:
    """Return the first active extension in priority order, or Extension.NONE."""
    if env.is_defined("WPSEO_VERSION"):
        return Extension.YOAST

    if env.class_exists("\\RankMath\\Helper"):
        return Extension.RANKMATH

    if env.is_defined("AIOSEO_VERSION") or env.function_exists("aioseo"):
        return Extension.AIOSEO

    return Extension.NONE
