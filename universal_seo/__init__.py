"""Per-locale SEO metadata overrides for multilingual sites."""

__version__ = "1.1.0"
