"""
Universal SEO plugin system

Public API:
    PluginMeta      plugin metadata dataclass
    PluginBase      abstract base class for plugins
    PluginRegistry  registry + lifecycle hook dispatcher
    plugin_registry global singleton registry instance
    FilterRegistry  request-scoped filters/actions (host extensibility points)
"""

from .base import PluginBase, PluginMeta
from .filters import FilterRegistry
from .registry import PluginRegistry, plugin_registry

__all__ = ["FilterRegistry", "PluginBase", "PluginMeta", "PluginRegistry", "plugin_registry"]
