"""Extract title, frontmatter fields and excerpts from markdown text.

Extraction uses targeted patterns rather than a markdown or YAML parser and
never raises: anything malformed simply yields an absent field.
"""

from __future__ import annotations

import re

from mdsite.schemas import MarkdownMetadata

EXCERPT_MAX_LENGTH = 150

_H1_RE = re.compile(r"^#[ \t]+(\S.*)$", re.MULTILINE)
_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.MULTILINE | re.DOTALL)
_DESCRIPTION_RE = re.compile(r"^description:[ \t]*(.*?)[ \t\r]*$", re.MULTILINE)
_KEYWORDS_RE = re.compile(r"^keywords:[ \t]*\[(.*)\][ \t\r]*$", re.MULTILINE)
_QUOTE_CHARS = "'\""


def extract_h1_title(content: str) -> str | None:
    """Return the text of the first level-1 heading, trimmed."""
    match = _H1_RE.search(content)
    if not match:
        return None
    return match.group(1).strip()


def extract_frontmatter(content: str) -> str | None:
    """Return the raw frontmatter block at the very start of ``content``."""
    match = _FRONTMATTER_RE.match(content)
    return match.group(1) if match else None


def _extract_description(frontmatter: str) -> str | None:
    match = _DESCRIPTION_RE.search(frontmatter)
    if not match:
        return None
    return match.group(1).strip() or None


def _extract_keywords(frontmatter: str) -> list[str] | None:
    match = _KEYWORDS_RE.search(frontmatter)
    if not match:
        return None
    keywords = [item.strip().strip(_QUOTE_CHARS).strip() for item in match.group(1).split(",")]
    keywords = [keyword for keyword in keywords if keyword]
    return keywords or None


def extract_excerpt(content: str, max_length: int = EXCERPT_MAX_LENGTH) -> str | None:
    """Return the first paragraph after the frontmatter and H1, truncated.

    Truncation is a plain character cut and may split a word.
    """
    body = _FRONTMATTER_RE.sub("", content, count=1)
    body = _H1_RE.sub("", body, count=1)
    first_paragraph = body.strip().split("\n\n", 1)[0].strip()
    excerpt = first_paragraph[:max_length]
    return excerpt or None


def extract_metadata(content: str, *, with_excerpt: bool = False) -> MarkdownMetadata:
    """Extract page metadata from raw markdown.

    Args:
        content: Raw markdown file contents.
        with_excerpt: Also derive the search excerpt.

    Returns:
        Metadata with ``title`` set to None when the document has no H1.
    """
    metadata = MarkdownMetadata(title=extract_h1_title(content))

    frontmatter = extract_frontmatter(content)
    if frontmatter is not None:
        metadata.description = _extract_description(frontmatter)
        metadata.keywords = _extract_keywords(frontmatter)

    if with_excerpt:
        metadata.excerpt = extract_excerpt(content)

    return metadata
