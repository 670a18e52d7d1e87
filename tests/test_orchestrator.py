"""Tests for artifact generation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mdsite.config import IndexerSettings
from mdsite.orchestrator import (
    build_content_data,
    generate_navigation_json,
    generate_search_index_json,
    serialize_models,
)
from mdsite.schemas import TreeNode


@pytest.fixture
def settings(content_root: Path, tmp_path: Path) -> IndexerSettings:
    return IndexerSettings(content_dir=content_root, output_dir=tmp_path / "public", domain="test")


class TestSerializeModels:
    """Tests for serialize_models."""

    def test_omits_unset_fields_and_uses_aliases(self) -> None:
        node = TreeNode(id="a-0", title="A", path="/a", type="link", is_primary=True)
        payload = json.loads(serialize_models([node]))

        assert payload == [{"id": "a-0", "title": "A", "path": "/a", "type": "link", "isPrimary": True}]

    def test_keeps_non_ascii_and_trailing_newline(self) -> None:
        node = TreeNode(id="x-0", title="Überblick", path="/x", type="link")
        text = serialize_models([node])

        assert "Überblick" in text
        assert text.endswith("]\n")

    def test_empty_list(self) -> None:
        assert serialize_models([]) == "[]\n"


class TestGenerateArtifacts:
    """Tests for the artifact writers."""

    @pytest.mark.asyncio
    async def test_build_content_data_writes_both_files(self, settings: IndexerSettings) -> None:
        report = await build_content_data(settings)

        navigation = json.loads(settings.navigation_path.read_text(encoding="utf-8"))
        search_index = json.loads(settings.search_index_path.read_text(encoding="utf-8"))

        assert report.navigation.item_count == 9
        assert report.search_index.item_count == 5
        assert report.navigation.size_bytes == settings.navigation_path.stat().st_size
        assert isinstance(navigation, list)
        assert navigation[3]["children"][0]["title"] == "Installation"
        assert "children" not in navigation[0]
        assert navigation[5]["isPrimary"] is False
        assert {entry["path"] for entry in search_index} == {"/", "/guide", "/guide/install", "/guide/sub/page"}

    @pytest.mark.asyncio
    async def test_output_is_idempotent(self, settings: IndexerSettings) -> None:
        await build_content_data(settings)
        first = (settings.navigation_path.read_bytes(), settings.search_index_path.read_bytes())

        await build_content_data(settings)
        second = (settings.navigation_path.read_bytes(), settings.search_index_path.read_bytes())

        assert first == second

    @pytest.mark.asyncio
    async def test_missing_menu_writes_empty_tree(self, settings: IndexerSettings) -> None:
        (settings.content_dir / "_menu.yaml").unlink()

        report = await generate_navigation_json(settings)

        assert report.item_count == 0
        assert settings.navigation_path.read_text(encoding="utf-8") == "[]\n"

    @pytest.mark.asyncio
    async def test_yml_menu_is_used(self, settings: IndexerSettings) -> None:
        menu = settings.content_dir / "_menu.yaml"
        menu.rename(settings.content_dir / "_menu.yml")

        report = await generate_navigation_json(settings)

        assert report.item_count == 9

    @pytest.mark.asyncio
    async def test_malformed_menu_writes_empty_tree(self, settings: IndexerSettings) -> None:
        (settings.content_dir / "_menu.yaml").write_text("just a scalar\n", encoding="utf-8")

        report = await generate_navigation_json(settings)

        assert report.item_count == 0
        assert json.loads(settings.navigation_path.read_text(encoding="utf-8")) == []

    @pytest.mark.asyncio
    async def test_search_index_for_missing_root(self, tmp_path: Path) -> None:
        settings = IndexerSettings(content_dir=tmp_path / "missing", output_dir=tmp_path / "out")

        report = await generate_search_index_json(settings)

        assert report.item_count == 0
        assert settings.search_index_path.read_text(encoding="utf-8") == "[]\n"

    @pytest.mark.asyncio
    async def test_existing_output_is_overwritten(self, settings: IndexerSettings) -> None:
        settings.output_dir.mkdir(parents=True)
        settings.search_index_path.write_text("stale", encoding="utf-8")

        await generate_search_index_json(settings)

        assert settings.search_index_path.read_text(encoding="utf-8").startswith("[")
