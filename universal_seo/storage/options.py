"""
Plugin options

Options are stored in a JSON file (``data/seo_settings.json`` by default),
one top-level key per option. The supported-locale list lives under
``gg_seo_supported_locales`` as ``[{"code": ..., "label": ...}, ...]``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from universal_seo.config import settings
from universal_seo.exceptions import StorageError
from universal_seo.models import SupportedLocale
from universal_seo.utils.sanitize import sanitize_locale_code, sanitize_plain_text

logger = logging.getLogger(__name__)

SUPPORTED_LOCALES_OPTION = "gg_seo_supported_locales"

DEFAULT_LOCALES: list[dict[str, str]] = [{"code": "en_US", "label": "English"}]


def sanitize_locales_option(raw: Any) -> list[dict[str, str]]:
    """
    Clean a submitted locale list before saving.

    Codes keep only ``[A-Za-z0-9_-]``, labels are stripped of markup. Rows
    that are not mappings or whose code ends up empty are dropped.
    """
    clean: list[dict[str, str]] = []
    if not isinstance(raw, (list, tuple)):
        return clean

    for entry in raw:
        if not isinstance(entry, dict):
            continue
        code = sanitize_locale_code(str(entry.get("code") or "").strip())
        label = sanitize_plain_text(str(entry.get("label") or "").strip())
        if not code:
            continue
        clean.append({"code": code, "label": label})

    return clean


class SettingsStore:
    """Read/write access to the plugin's persisted options."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else settings.settings_file

    # ── Generic options ───────────────────────────────────────────────────────

    def load(self) -> dict[str, Any]:
        """Load every option, returning {} if the file doesn't exist or is unreadable."""
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Failed to read settings file %s: %s", self.path, e)
                return {}
            return data if isinstance(data, dict) else {}
        return {}

    def save(self, options: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(options, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write settings file %s: %s", self.path, e)
            raise StorageError("Failed to save SEO settings", operation="save_settings") from e

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.load().get(name, default)

    def has_option(self, name: str) -> bool:
        return name in self.load()

    def update_option(self, name: str, value: Any) -> None:
        options = self.load()
        options[name] = value
        self.save(options)

    def delete_option(self, name: str) -> bool:
        options = self.load()
        if name not in options:
            return False
        del options[name]
        self.save(options)
        return True

    # ── Supported locales ─────────────────────────────────────────────────────

    def get_supported_locales(self) -> list[SupportedLocale]:
        """
        Return the configured locales in their stored order.

        Entries without both keys, or whose code is empty after sanitization,
        are skipped. Duplicate codes are kept; lookups take the first.
        """
        raw = self.get_option(SUPPORTED_LOCALES_OPTION, [])
        if not isinstance(raw, list):
            return []

        locales: list[SupportedLocale] = []
        for entry in raw:
            if not isinstance(entry, dict) or "code" not in entry or "label" not in entry:
                continue
            code = sanitize_locale_code(str(entry["code"]).strip())
            if not code:
                continue
            locales.append(SupportedLocale(code=code, label=str(entry["label"])))
        return locales

    def get_supported_codes(self) -> list[str]:
        return [locale.code for locale in self.get_supported_locales()]

    def find_locale(self, code: str) -> SupportedLocale | None:
        return next((locale for locale in self.get_supported_locales() if locale.code == code), None)

    def save_supported_locales(self, raw: Any) -> list[SupportedLocale]:
        clean = sanitize_locales_option(raw)
        self.update_option(SUPPORTED_LOCALES_OPTION, clean)
        logger.info("Supported locales updated: %s", [entry["code"] for entry in clean])
        return [SupportedLocale(**entry) for entry in clean]

    def seed_defaults(self) -> bool:
        """Create the locale option with English only if it was never saved. Returns True if seeded."""
        if self.has_option(SUPPORTED_LOCALES_OPTION):
            return False
        self.update_option(SUPPORTED_LOCALES_OPTION, [dict(entry) for entry in DEFAULT_LOCALES])
        return True
