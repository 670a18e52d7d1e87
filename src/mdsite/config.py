"""Configuration for mdsite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mdsite.exceptions import ConfigError

DEFAULT_CONTENT_DOMAIN = "cms"
DEFAULT_CONTENT_PATH = "./docs"
DEFAULT_OUTPUT_DIR = "public"
DEFAULT_MAX_CONCURRENCY = 16
DEFAULT_LOG_LEVEL = "INFO"

NAVIGATION_FILENAME = "_navigation.json"
SEARCH_INDEX_FILENAME = "_search-index.json"
MENU_BASENAME = "_menu"
SITE_CONFIG_BASENAME = "content.config"
CONFIG_EXTENSIONS = (".yaml", ".yml")

MDSITE_LOG_LEVEL = os.getenv("MDSITE_LOG_LEVEL", DEFAULT_LOG_LEVEL)


class IndexerSettings(BaseModel):
    """Explicit settings passed to the builders and the orchestrator.

    Attributes:
        content_dir: Root directory holding the markdown tree and menu file.
        output_dir: Directory the JSON artifacts are written to.
        domain: Content domain identifier, used for logging only.
        max_concurrency: Upper bound on concurrent file reads.
        navigation_filename: File name of the navigation artifact.
        search_index_filename: File name of the search index artifact.
    """

    content_dir: Path
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    domain: str = DEFAULT_CONTENT_DOMAIN
    max_concurrency: int = Field(default=DEFAULT_MAX_CONCURRENCY, ge=1)
    navigation_filename: str = NAVIGATION_FILENAME
    search_index_filename: str = SEARCH_INDEX_FILENAME

    @property
    def navigation_path(self) -> Path:
        return self.output_dir / self.navigation_filename

    @property
    def search_index_path(self) -> Path:
        return self.output_dir / self.search_index_filename


class SiteConfig(BaseModel):
    """Contents of a ``content.config.yml`` or ``<domain>.config.yml`` file.

    Only the keys the indexer needs are typed; theme, feature and repository
    keys are kept as extra fields for the site renderer.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    content_path: str | None = Field(default=None, alias="contentPath")
    domain: str | None = None
    site_name: str | None = Field(default=None, alias="siteName")


def find_config(directory: Path, basename: str) -> Path | None:
    """Return ``<basename>.yaml`` or ``<basename>.yml`` in ``directory``, if any."""
    for extension in CONFIG_EXTENSIONS:
        candidate = directory / f"{basename}{extension}"
        if candidate.is_file():
            return candidate
    return None


def load_site_config(directory: Path, domain: str | None = None) -> tuple[SiteConfig, Path]:
    """Load the site config, preferring a domain-specific file.

    Args:
        directory: Directory to look for config files in.
        domain: Optional domain; ``<domain>.config.*`` is tried first.

    Returns:
        Tuple of (parsed config, path of the file it came from).

    Raises:
        ConfigError: If no config file exists or it cannot be parsed.
    """
    config_path = find_config(directory, f"{domain}.config") if domain else None
    if config_path is None:
        config_path = find_config(directory, SITE_CONFIG_BASENAME)
    if config_path is None:
        raise ConfigError(
            f"No configuration file found in {directory}. "
            "Create content.config.yml with e.g. 'contentPath: ./docs'."
        )

    try:
        raw: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read configuration {config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration {config_path} must be a mapping")

    try:
        return SiteConfig.model_validate(raw), config_path
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration {config_path}: {exc}") from exc


def settings_from_env(
    *,
    content_dir: Path | None = None,
    output_dir: Path | None = None,
) -> IndexerSettings:
    """Build settings from ``CONTENT``, ``CONTENT_DIR`` and ``MDSITE_*`` variables."""
    domain = os.getenv("CONTENT", DEFAULT_CONTENT_DOMAIN)
    if content_dir is None:
        env_dir = os.getenv("CONTENT_DIR")
        content_dir = Path(env_dir) if env_dir else Path(DEFAULT_CONTENT_PATH)
    if output_dir is None:
        output_dir = Path(os.getenv("MDSITE_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))
    max_concurrency = int(os.getenv("MDSITE_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY)))

    return IndexerSettings(
        content_dir=content_dir.expanduser().resolve(),
        output_dir=output_dir.expanduser().resolve(),
        domain=domain,
        max_concurrency=max_concurrency,
    )


def resolve_settings(
    cwd: Path,
    *,
    domain: str | None = None,
    content_dir: Path | None = None,
    output_dir: Path | None = None,
    config_dir: Path | None = None,
    max_concurrency: int | None = None,
) -> IndexerSettings:
    """Resolve CLI settings.

    The content directory comes from, in order: ``content_dir``, the
    ``CONTENT_DIR`` environment variable, the site config ``contentPath``
    (relative to the config file), and finally ``./docs``.

    Raises:
        ConfigError: If no explicit content directory is given and no site
            config file can be loaded.
    """
    active_domain = domain or os.getenv("CONTENT")
    env_content_dir = os.getenv("CONTENT_DIR")

    if content_dir is not None:
        resolved_content = (cwd / content_dir).resolve()
    elif env_content_dir:
        resolved_content = (cwd / env_content_dir).resolve()
    else:
        site_config, config_path = load_site_config(config_dir or cwd, active_domain)
        active_domain = active_domain or site_config.domain
        resolved_content = (config_path.parent / (site_config.content_path or DEFAULT_CONTENT_PATH)).resolve()

    if output_dir is None:
        output_dir = Path(os.getenv("MDSITE_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))
    if max_concurrency is None:
        max_concurrency = int(os.getenv("MDSITE_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY)))

    try:
        return IndexerSettings(
            content_dir=resolved_content,
            output_dir=(cwd / output_dir).resolve(),
            domain=active_domain or DEFAULT_CONTENT_DOMAIN,
            max_concurrency=max_concurrency,
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
