"""Tests for async filesystem helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdsite.fs_utils import mkdir_async, read_text_async, write_text_async


class TestReadWrite:
    """Tests for read_text_async and write_text_async."""

    @pytest.mark.asyncio
    async def test_round_trip_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "page.md"
        await write_text_async(path, "# Überschrift\n")

        assert await read_text_async(path) == "# Überschrift\n"

    @pytest.mark.asyncio
    async def test_read_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await read_text_async(tmp_path / "missing.md")

    @pytest.mark.asyncio
    async def test_respects_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.md"
        path.write_text("Café", encoding="latin-1")

        assert await read_text_async(path, encoding="latin-1") == "Café"


class TestMkdirAsync:
    """Tests for mkdir_async."""

    @pytest.mark.asyncio
    async def test_mkdir_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"
        await mkdir_async(target, parents=True, exist_ok=True)

        assert target.is_dir()

    @pytest.mark.asyncio
    async def test_mkdir_existing_without_exist_ok(self, tmp_path: Path) -> None:
        with pytest.raises(FileExistsError):
            await mkdir_async(tmp_path)
