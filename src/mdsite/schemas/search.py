"""Search index entry model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SearchIndexEntry(BaseModel):
    """One indexed page; only files with an H1 title produce an entry."""

    model_config = ConfigDict(frozen=True)

    path: str
    title: str
    description: str | None = None
    keywords: list[str] | None = None
    excerpt: str | None = None
