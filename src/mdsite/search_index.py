"""Build the flat search index from every published markdown file."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from mdsite.config import DEFAULT_MAX_CONCURRENCY
from mdsite.fs_utils import read_text_async
from mdsite.metadata import extract_metadata
from mdsite.paths import MARKDOWN_SUFFIX, file_path_to_url_path
from mdsite.schemas import SearchIndexEntry

logger = logging.getLogger(__name__)

DRAFT_SUFFIX = ".draft.md"


def is_indexable(name: str) -> bool:
    """Return True for markdown file names that are not drafts."""
    return name.endswith(MARKDOWN_SUFFIX) and not name.endswith(DRAFT_SUFFIX)


def list_markdown_files(content_root: Path) -> list[Path]:
    """Recursively list indexable markdown files under ``content_root``.

    Directory entries are visited in sorted name order, so the listing is
    stable for an unchanged tree. A missing root yields an empty list and
    unreadable directories are skipped. Each real directory is walked once,
    so symlinks pointing back up the tree do not repeat files.
    """
    files: list[Path] = []
    if not content_root.is_dir():
        logger.warning("Content root does not exist: %s", content_root)
        return files

    visited: set[Path] = set()

    def _walk(directory: Path) -> None:
        real_directory = directory.resolve()
        if real_directory in visited:
            logger.warning("Skipping already visited directory %s", directory)
            return
        visited.add(real_directory)

        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            logger.warning("Cannot list %s: %s", directory, exc)
            return
        for entry in entries:
            if entry.is_dir():
                _walk(entry)
            elif entry.is_file() and is_indexable(entry.name):
                files.append(entry)

    _walk(content_root)
    return files


class SearchIndexBuilder:
    """Read markdown files with bounded concurrency and build index entries."""

    def __init__(self, content_root: Path, *, max_concurrency: int = DEFAULT_MAX_CONCURRENCY) -> None:
        self.content_root = content_root
        self._read_limit = asyncio.Semaphore(max_concurrency)

    async def build(self) -> list[SearchIndexEntry]:
        files = await asyncio.to_thread(list_markdown_files, self.content_root)
        entries = await asyncio.gather(*(self._build_entry(path) for path in files))
        return [entry for entry in entries if entry is not None]

    async def _build_entry(self, file_path: Path) -> SearchIndexEntry | None:
        relative = file_path.relative_to(self.content_root).as_posix()
        async with self._read_limit:
            try:
                content = await read_text_async(file_path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Failed to read %s: %s", relative, exc)
                return None

        metadata = extract_metadata(content, with_excerpt=True)
        if not metadata.title:
            logger.warning("No H1 found in %s, skipping", relative)
            return None

        return SearchIndexEntry(
            path=file_path_to_url_path(file_path, self.content_root),
            title=metadata.title,
            description=metadata.description,
            keywords=metadata.keywords,
            excerpt=metadata.excerpt,
        )


async def build_search_index(
    content_root: Path,
    *,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> list[SearchIndexEntry]:
    """Build search index entries for every published page under ``content_root``.

    Drafts (``*.draft.md``) and files without an H1 heading are left out.
    Entries follow the file listing order.
    """
    builder = SearchIndexBuilder(content_root, max_concurrency=max_concurrency)
    return await builder.build()
