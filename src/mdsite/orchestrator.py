"""Run the builders and write their JSON artifacts."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel

from mdsite.config import IndexerSettings
from mdsite.exceptions import MenuSpecError
from mdsite.fs_utils import mkdir_async, write_text_async
from mdsite.menu import find_menu_file, load_menu
from mdsite.navigation import build_navigation, count_nodes
from mdsite.schemas import SearchIndexEntry, TreeNode
from mdsite.search_index import build_search_index

logger = logging.getLogger(__name__)


@dataclass
class ArtifactReport:
    """Outcome of writing one artifact."""

    path: Path
    size_bytes: int
    item_count: int

    @property
    def size_kb(self) -> str:
        return f"{self.size_bytes / 1024:.2f}"


@dataclass
class BuildReport:
    """Outcome of a full build."""

    navigation: ArtifactReport
    search_index: ArtifactReport


def serialize_models(models: Iterable[BaseModel]) -> str:
    """Serialize models as a pretty-printed JSON array, omitting unset fields."""
    payload = [model.model_dump(mode="json", by_alias=True, exclude_none=True) for model in models]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


async def load_navigation_tree(settings: IndexerSettings) -> list[TreeNode]:
    """Build the navigation tree; a missing or malformed menu yields an empty tree."""
    menu_path = await asyncio.to_thread(find_menu_file, settings.content_dir)
    if menu_path is None:
        logger.warning("No _menu.yaml or _menu.yml found in %s", settings.content_dir)
        return []

    try:
        items = await asyncio.to_thread(load_menu, menu_path)
    except (MenuSpecError, OSError, UnicodeDecodeError) as exc:
        logger.error("Error building navigation tree from %s: %s", menu_path, exc)
        return []

    result = await build_navigation(
        items,
        content_root=settings.content_dir,
        max_concurrency=settings.max_concurrency,
    )
    return result.nodes


async def _write_artifact(path: Path, content: str) -> int:
    await mkdir_async(path.parent, parents=True, exist_ok=True)
    await write_text_async(path, content)
    return len(content.encode("utf-8"))


async def generate_navigation_json(settings: IndexerSettings) -> ArtifactReport:
    """Build the navigation tree and write ``_navigation.json``."""
    logger.info("Building navigation tree for: %s", settings.domain)
    tree = await load_navigation_tree(settings)

    size = await _write_artifact(settings.navigation_path, serialize_models(tree))
    report = ArtifactReport(path=settings.navigation_path, size_bytes=size, item_count=count_nodes(tree))
    logger.info(
        "Navigation tree generated: %s (%s KB), total menu items: %d",
        report.path,
        report.size_kb,
        report.item_count,
    )
    return report


async def generate_search_index_json(settings: IndexerSettings) -> ArtifactReport:
    """Build the search index and write ``_search-index.json``."""
    logger.info("Building search index for: %s", settings.domain)
    entries: list[SearchIndexEntry] = await build_search_index(
        settings.content_dir, max_concurrency=settings.max_concurrency
    )

    size = await _write_artifact(settings.search_index_path, serialize_models(entries))
    report = ArtifactReport(path=settings.search_index_path, size_bytes=size, item_count=len(entries))
    logger.info(
        "Search index generated: %s (%s KB), total indexed pages: %d",
        report.path,
        report.size_kb,
        report.item_count,
    )
    return report


async def build_content_data(settings: IndexerSettings) -> BuildReport:
    """Generate both artifacts; the two builders run concurrently."""
    navigation, search_index = await asyncio.gather(
        generate_navigation_json(settings),
        generate_search_index_json(settings),
    )
    return BuildReport(navigation=navigation, search_index=search_index)
