"""Configuration for Insight YouTube SEO."""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = ["Settings", "DEFAULT_SETTINGS"]
