"""Non-blocking file access for the builders and the artifact writer.

Markdown pages and JSON artifacts are read and written on the default
thread pool so that many pages can be in flight under one event loop.
"""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a markdown page (or any text file) without blocking the loop.

    Raises:
        FileNotFoundError: If the page does not exist; callers decide whether
            that means "no metadata" or "skip this entry".
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write a serialized artifact, replacing any previous run's output."""
    await asyncio.to_thread(path.write_text, content, encoding=encoding)


async def mkdir_async(path: Path, parents: bool = False, exist_ok: bool = False) -> None:
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
