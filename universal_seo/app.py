"""
Application factory

Wires configuration, structured logging, exception handlers, the plugin
registry and the middleware stack around the SEO routes.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from universal_seo.config import settings
from universal_seo.exception_handlers import register_exception_handlers
from universal_seo.middleware.buffer import SEOBufferMiddleware
from universal_seo.middleware.language import LanguageMiddleware
from universal_seo.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from universal_seo.plugins.loader import initialize_plugins
from universal_seo.plugins.registry import PluginRegistry, plugin_registry
from universal_seo.plugins.seo_plugin import UniversalSEOPlugin
from universal_seo.routes import overrides, pages
from universal_seo.routes import settings as settings_routes

logger = logging.getLogger(__name__)


def create_app(
    plugin: UniversalSEOPlugin | None = None,
    registry: PluginRegistry | None = None,
    configure_logging: bool = True,
) -> FastAPI:
    """Create the FastAPI application."""
    if configure_logging:
        setup_structured_logging(settings.log_level, json_format=settings.json_logs)

    plugin = plugin or UniversalSEOPlugin()
    registry = registry if registry is not None else plugin_registry

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await initialize_plugins(registry, [plugin])
        yield
        await registry.unregister(plugin.meta.name)

    app = FastAPI(
        title=settings.app_name,
        description="Per-locale SEO metadata overrides",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.seo_plugin = plugin
    app.state.plugin_registry = registry

    register_exception_handlers(app)

    # Starlette runs the last-added middleware first
    app.add_middleware(SEOBufferMiddleware, plugin=plugin)
    app.add_middleware(LanguageMiddleware, detector=plugin.detector)
    app.add_middleware(StructuredLoggingMiddleware)

    app.include_router(settings_routes.router)
    app.include_router(overrides.router)
    app.include_router(pages.router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": settings.app_version}

    if settings.debug:
        logger.info("Running in %s mode", settings.environment)

    return app
