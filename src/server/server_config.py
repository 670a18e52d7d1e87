"""Configuration for the preview server."""

from __future__ import annotations

from mdsite.config import IndexerSettings, settings_from_env

APP_TITLE = "mdsite preview"
APP_DESCRIPTION = "Serves freshly built navigation and search index artifacts."


def get_settings() -> IndexerSettings:
    """FastAPI dependency returning settings from the environment."""
    return settings_from_env()
