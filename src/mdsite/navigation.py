"""Build the navigation tree from typed menu items."""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import Iterable

from mdsite.config import DEFAULT_MAX_CONCURRENCY
from mdsite.fs_utils import read_text_async
from mdsite.metadata import extract_metadata
from mdsite.paths import is_within_root, join_site_path, markdown_path_for, resolve_path
from mdsite.schemas import MarkdownMetadata, MenuItem, NavigationResult, TreeNode

logger = logging.getLogger(__name__)

SEPARATOR_TITLE = "---"
HOME_SEGMENT = "home"
_WHITESPACE_RE = re.compile(r"\s+")


class NavigationBuilder:
    """Resolve menu items into ``TreeNode``s against a content root.

    Sibling entries are resolved concurrently, with file reads bounded by a
    semaphore shared across the whole tree. Output order always follows the
    menu order.
    """

    def __init__(self, content_root: Path, *, max_concurrency: int = DEFAULT_MAX_CONCURRENCY) -> None:
        self.content_root = content_root
        self._read_limit = asyncio.Semaphore(max_concurrency)

    async def build(
        self,
        items: list[MenuItem],
        context_path: str = "/",
        start_order: int = 0,
    ) -> NavigationResult:
        """Build nodes for one menu level.

        Args:
            items: Menu items of this level, in display order.
            context_path: Site path relative names are resolved against.
            start_order: Value of the positional counter for the first item.

        Returns:
            The nodes and the counter value following the last node.
        """
        nodes = await asyncio.gather(
            *(
                self._build_node(item, context_path, order)
                for order, item in enumerate(items, start=start_order)
            )
        )
        return NavigationResult(nodes=list(nodes), next_order=start_order + len(items))

    async def _build_node(self, item: MenuItem, context_path: str, order: int) -> TreeNode:
        if item.kind == "separator":
            return TreeNode(
                id=f"separator-{order}",
                title=SEPARATOR_TITLE,
                path=join_site_path(context_path, f"__separator-{order}"),
                type="separator",
            )

        if item.kind == "header":
            return TreeNode(
                id=f"header-{order}",
                title=item.title,
                path=join_site_path(context_path, f"__header-{order}"),
                type="header",
            )

        if item.kind == "external":
            return TreeNode(id=f"external-{order}", title=item.title, path=item.url, type="external")

        if item.kind == "alias":
            resolved = resolve_path(item.target, context_path)
            metadata = await self._load_metadata(resolved)
            slug = _WHITESPACE_RE.sub("-", item.title).lower()
            return TreeNode(
                id=f"link-{slug}-{order}",
                title=item.title,
                path=resolved,
                type="link",
                description=metadata.description,
                is_primary=False,
            )

        if item.kind == "submenu":
            resolved = resolve_path(item.target, context_path)
            metadata, children = await asyncio.gather(
                self._load_metadata(resolved),
                self.build(item.children, resolved, 0),
            )
            return TreeNode(
                id=_page_id(resolved, order),
                title=metadata.title or item.target,
                path=resolved,
                type="link",
                description=metadata.description,
                is_primary=True,
                children=children.nodes,
            )

        # label
        resolved = resolve_path(item.target, context_path)
        metadata = await self._load_metadata(resolved)
        return TreeNode(
            id=_page_id(resolved, order),
            title=metadata.title or item.target,
            path=resolved,
            type="link",
            description=metadata.description,
            is_primary=True,
        )

    async def _load_metadata(self, site_path: str) -> MarkdownMetadata:
        """Read the markdown file behind ``site_path``; empty metadata if unavailable."""
        markdown_path = markdown_path_for(site_path, self.content_root)
        if not is_within_root(markdown_path, self.content_root):
            logger.warning("Menu entry %s points outside the content root, ignoring its file", site_path)
            return MarkdownMetadata()
        async with self._read_limit:
            try:
                content = await read_text_async(markdown_path)
            except FileNotFoundError:
                logger.warning("Markdown file not found for menu entry %s: %s", site_path, markdown_path)
                return MarkdownMetadata()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Cannot read %s for menu entry %s: %s", markdown_path, site_path, exc)
                return MarkdownMetadata()
        return extract_metadata(content)


def _page_id(site_path: str, order: int) -> str:
    segments = [segment for segment in site_path.split("/") if segment]
    return f"{segments[-1] if segments else HOME_SEGMENT}-{order}"


async def build_navigation(
    items: list[MenuItem],
    context_path: str = "/",
    start_order: int = 0,
    *,
    content_root: Path,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> NavigationResult:
    """Build a navigation tree for ``items`` against ``content_root``."""
    builder = NavigationBuilder(content_root, max_concurrency=max_concurrency)
    return await builder.build(items, context_path, start_order)


def count_nodes(nodes: Iterable[TreeNode]) -> int:
    """Count nodes in the tree, children included."""
    total = 0
    for node in nodes:
        total += 1
        if node.children:
            total += count_nodes(node.children)
    return total
