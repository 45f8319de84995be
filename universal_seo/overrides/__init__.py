"""
Override strategies

One ExtensionAdapter per supported SEO extension plus the platform-native
fallback, selected through ADAPTERS by the detected Extension. The output
rewriter in ``buffer`` runs independently of the selected adapter.
"""

from universal_seo.overrides.aioseo import AioseoAdapter
from universal_seo.overrides.base import ExtensionAdapter, HookKind, HookRegistration, OverrideCallbacks
from universal_seo.overrides.native import NativeAdapter
from universal_seo.overrides.rankmath import RankMathAdapter
from universal_seo.overrides.yoast import YoastAdapter
from universal_seo.services.extensions import Extension

ADAPTERS: dict[Extension, type[ExtensionAdapter]] = {
    Extension.YOAST: YoastAdapter,
    Extension.RANKMATH: RankMathAdapter,
    Extension.AIOSEO: AioseoAdapter,
    Extension.NONE: NativeAdapter,
}

__all__ = [
    "ADAPTERS",
    "AioseoAdapter",
    "ExtensionAdapter",
    "HookKind",
    "HookRegistration",
    "NativeAdapter",
    "OverrideCallbacks",
    "RankMathAdapter",
    "YoastAdapter",
]
