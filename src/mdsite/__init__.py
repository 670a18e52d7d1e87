"""mdsite: build navigation and search index JSON from a markdown content tree."""

from mdsite.config import IndexerSettings, SiteConfig, load_site_config, settings_from_env
from mdsite.exceptions import ConfigError, MdSiteError, MenuSpecError
from mdsite.menu import find_menu_file, load_menu, parse_menu
from mdsite.metadata import extract_metadata
from mdsite.navigation import build_navigation, count_nodes
from mdsite.orchestrator import (
    build_content_data,
    generate_navigation_json,
    generate_search_index_json,
)
from mdsite.paths import resolve_path
from mdsite.schemas import MarkdownMetadata, SearchIndexEntry, TreeNode
from mdsite.search_index import build_search_index

__all__ = [
    "ConfigError",
    "IndexerSettings",
    "MarkdownMetadata",
    "MdSiteError",
    "MenuSpecError",
    "SearchIndexEntry",
    "SiteConfig",
    "TreeNode",
    "build_content_data",
    "build_navigation",
    "build_search_index",
    "count_nodes",
    "extract_metadata",
    "find_menu_file",
    "generate_navigation_json",
    "generate_search_index_json",
    "load_menu",
    "load_site_config",
    "parse_menu",
    "resolve_path",
    "settings_from_env",
]
