"""Test setup for mdsite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """A small content tree with a menu, nested pages, a draft and an untitled page."""
    root = tmp_path / "content"
    (root / "guide" / "sub").mkdir(parents=True)

    (root / "index.md").write_text(
        "---\ndescription: Home page\nkeywords: [home, start]\n---\n# Welcome\n\nWelcome to the docs.\n",
        encoding="utf-8",
    )
    (root / "guide.md").write_text(
        "---\ndescription: The guide\n---\n# Guide\n\nGuide intro.\n", encoding="utf-8"
    )
    (root / "guide" / "index.md").write_text("# Guide Index\n\nIndex body.\n", encoding="utf-8")
    (root / "guide" / "install.md").write_text(
        "# Installation\n\nRun the installer.\n\nMore details.\n", encoding="utf-8"
    )
    (root / "guide" / "sub" / "page.md").write_text("# Sub Page\n", encoding="utf-8")
    (root / "guide" / "secret.draft.md").write_text("# Secret Draft\n\nNot yet.\n", encoding="utf-8")
    (root / "notes.md").write_text("Just notes, no heading.\n", encoding="utf-8")
    (root / "_menu.yaml").write_text(
        "- index\n"
        "- ===\n"
        "- Reference: ===\n"
        "- guide:\n"
        "    - install\n"
        "    - sub/page\n"
        "    - ./secret.draft\n"
        "- Project Home: https://example.com/project\n"
        "- Getting Started: /guide/install\n",
        encoding="utf-8",
    )
    return root
