"""Markdown metadata model."""

from __future__ import annotations

from pydantic import BaseModel


class MarkdownMetadata(BaseModel):
    """Fields extracted from a markdown document."""

    title: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    excerpt: str | None = None
