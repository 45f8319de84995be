"""Shared route dependencies."""

from fastapi import Request

from universal_seo.plugins.registry import PluginRegistry
from universal_seo.plugins.seo_plugin import UniversalSEOPlugin


def get_seo_plugin(request: Request) -> UniversalSEOPlugin:
    return request.app.state.seo_plugin


def get_plugin_registry(request: Request) -> PluginRegistry:
    return request.app.state.plugin_registry
