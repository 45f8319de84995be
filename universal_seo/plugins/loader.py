"""
Plugin Loader

Reads/writes plugin configuration from ``data/plugins_config.json`` and
initialises the built-in plugin at application startup.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from universal_seo.plugins.base import PluginBase
    from universal_seo.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)

_PLUGINS_CONFIG_FILE = Path("data/plugins_config.json")

_DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "universal_seo": {"enabled": True, "buffer_enabled": True, "seed_default_locales": True},
}


def load_plugins_config() -> dict[str, dict[str, Any]]:
    """Load plugin configuration, falling back to defaults if missing or unreadable."""
    if _PLUGINS_CONFIG_FILE.exists():
        try:
            return json.loads(_PLUGINS_CONFIG_FILE.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Failed to read plugins config: %s", exc)
    return copy.deepcopy(_DEFAULT_CONFIG)


def save_plugins_config(config: dict[str, dict[str, Any]]) -> None:
    """Persist plugin configuration to disk."""
    _PLUGINS_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    _PLUGINS_CONFIG_FILE.write_text(
        json.dumps(config, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )


async def initialize_plugins(registry: PluginRegistry, plugins: list[PluginBase]) -> None:
    """
    Load and register the given plugins.

    Plugins whose config has ``"enabled": false`` are skipped. A missing
    config file is written with the defaults so operators can edit it.
    """
    config = load_plugins_config()
    if not _PLUGINS_CONFIG_FILE.exists():
        save_plugins_config(config)

    loaded = 0
    for plugin in plugins:
        plugin_config = config.get(plugin.meta.name, {})
        if not plugin_config.get("enabled", True):
            logger.info("Plugin disabled by config: %s", plugin.meta.name)
            continue
        await plugin.on_load(plugin_config)
        registry.register(plugin)
        loaded += 1

    logger.info("Plugin initialisation complete, %d plugins loaded", loaded)
