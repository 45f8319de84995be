"""
Plugin Registry

PluginRegistry: in-process singleton that stores registered plugins and
dispatches lifecycle hook events to subscribers.

Each subscriber's handle_hook() is awaited in sequence; exceptions are
caught, logged, and dispatch continues.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from universal_seo.plugins.base import PluginBase

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry of plugins indexed by name and by hook subscription."""

    def __init__(self) -> None:
        self._plugins: dict[str, PluginBase] = {}
        self._hook_subscriptions: dict[str, list[PluginBase]] = defaultdict(list)

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, plugin: PluginBase) -> None:
        """Register a plugin and index its hook subscriptions."""
        self._plugins[plugin.meta.name] = plugin
        for hook in plugin.meta.hooks:
            self._hook_subscriptions[hook].append(plugin)
        logger.info("Plugin registered: %s v%s", plugin.meta.name, plugin.meta.version)

    async def unregister(self, name: str) -> bool:
        """Unload and drop the named plugin. Returns False if it was not registered."""
        plugin = self._plugins.pop(name, None)
        if plugin is None:
            return False
        for subscribers in self._hook_subscriptions.values():
            if plugin in subscribers:
                subscribers.remove(plugin)
        await plugin.on_unload()
        logger.info("Plugin unregistered: %s", name)
        return True

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, name: str) -> PluginBase | None:
        return self._plugins.get(name)

    def all_plugins(self) -> list[PluginBase]:
        return list(self._plugins.values())

    def is_registered(self, name: str) -> bool:
        return name in self._plugins

    # ── Hook dispatch ─────────────────────────────────────────────────────────

    async def fire_hook(self, hook_name: str, payload: dict[str, Any]) -> list[Any]:
        """
        Fire a hook to all subscribing plugins.

        A misbehaving plugin never prevents others from running or blocks
        request processing.

        Returns:
            List of return values from each subscriber that did not raise.
        """
        results: list[Any] = []
        for plugin in self._hook_subscriptions.get(hook_name, []):
            try:
                result = await plugin.handle_hook(hook_name, payload)
                results.append(result)
            except Exception as exc:
                logger.warning(
                    "Plugin %s hook %s raised: %s",
                    plugin.meta.name,
                    hook_name,
                    exc,
                )
        return results


# ── Global singleton ──────────────────────────────────────────────────────────
plugin_registry = PluginRegistry()
