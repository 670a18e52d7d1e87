"""Tests for the command line entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from mdsite.__main__ import main


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch: pytest.MonkeyPatch):
    for name in ("CONTENT", "CONTENT_DIR", "MDSITE_OUTPUT_DIR", "MDSITE_MAX_CONCURRENCY"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "_mdsite_handler", False):
            root.removeHandler(handler)
    root.setLevel(level)


class TestMain:
    """Tests for main()."""

    def test_builds_both_artifacts(self, content_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out_dir = tmp_path / "out"

        exit_code = main(["--content-dir", str(content_root), "--output-dir", str(out_dir)])

        assert exit_code == 0
        assert json.loads((out_dir / "_navigation.json").read_text(encoding="utf-8"))
        assert len(json.loads((out_dir / "_search-index.json").read_text(encoding="utf-8"))) == 5
        stdout = capsys.readouterr().out
        assert "_navigation.json" in stdout
        assert "9 items" in stdout

    def test_only_search(self, content_root: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"

        exit_code = main(["--content-dir", str(content_root), "--output-dir", str(out_dir), "--only", "search"])

        assert exit_code == 0
        assert (out_dir / "_search-index.json").exists()
        assert not (out_dir / "_navigation.json").exists()

    def test_uses_site_config(
        self, content_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        project = tmp_path / "project"
        project.mkdir()
        (project / "handbook.config.yml").write_text(f"contentPath: {content_root}\n", encoding="utf-8")
        monkeypatch.chdir(project)

        exit_code = main(["handbook", "--only", "navigation"])

        assert exit_code == 0
        assert (project / "public" / "_navigation.json").exists()

    def test_missing_config_exits_with_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.chdir(tmp_path)

        exit_code = main([])

        assert exit_code == 1
        assert "No configuration file found" in capsys.readouterr().err

    def test_json_logs(self, content_root: Path, tmp_path: Path) -> None:
        exit_code = main(
            ["--content-dir", str(content_root), "--output-dir", str(tmp_path / "out"), "--json-logs"]
        )
        assert exit_code == 0
