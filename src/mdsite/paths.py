"""Site path resolution for menu entries and content files."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

MARKDOWN_SUFFIX = ".md"
_PARENT_PREFIX = "../"
_CURRENT_PREFIX = "./"


def join_site_path(context_path: str, name: str) -> str:
    """Append ``name`` under ``context_path`` without doubling the root slash."""
    return f"/{name}" if context_path == "/" else f"{context_path}/{name}"


def resolve_path(token: str, context_path: str) -> str:
    """Resolve a menu path token against the path of the enclosing menu.

    Rules, first match wins:

    1. ``/abs`` is returned unchanged.
    2. ``../rest`` drops the last segment of ``context_path`` and appends
       ``rest``. Only a single level of ascent is supported.
    3. ``./rest`` appends ``rest`` under ``context_path``.
    4. Anything else is a bare name appended under ``context_path``.

    Examples:
        >>> resolve_path("sub/page", "/guide")
        '/guide/sub/page'
        >>> resolve_path("../other", "/guide/sub")
        '/guide/other'
        >>> resolve_path("./x", "/")
        '/x'
    """
    if token.startswith("/"):
        return token

    if token.startswith(_PARENT_PREFIX):
        segments = [segment for segment in context_path.split("/") if segment]
        if segments:
            segments.pop()
        remainder = token[len(_PARENT_PREFIX):]
        if segments:
            return "/" + "/".join(segments) + "/" + remainder
        return "/" + remainder

    if token.startswith(_CURRENT_PREFIX):
        return join_site_path(context_path, token[len(_CURRENT_PREFIX):])

    return join_site_path(context_path, token)


def markdown_path_for(site_path: str, content_root: Path) -> Path:
    """Map an absolute site path to its markdown file under ``content_root``."""
    relative = site_path.lstrip("/")
    if not relative.endswith(MARKDOWN_SUFFIX):
        relative = f"{relative}{MARKDOWN_SUFFIX}"
    return content_root / relative


def is_within_root(path: PurePath, content_root: PurePath) -> bool:
    """Return True if ``path`` stays under ``content_root`` once ``..`` segments collapse."""
    return PurePath(os.path.normpath(path)).is_relative_to(os.path.normpath(content_root))


def file_path_to_url_path(file_path: PurePath, content_root: PurePath) -> str:
    """Derive the URL path of a markdown file.

    ``<root>/guide/intro.md`` becomes ``/guide/intro``, a trailing ``index``
    segment collapses into its directory and ``<root>/index.md`` becomes ``/``.
    """
    parts = list(file_path.relative_to(content_root).parts)
    if not parts:
        return "/"

    name = parts[-1]
    if name.endswith(MARKDOWN_SUFFIX):
        name = name[: -len(MARKDOWN_SUFFIX)]
    parts[-1] = name
    if parts[-1] == "index":
        parts.pop()

    url_path = "/" + "/".join(part for part in parts if part)
    return url_path.rstrip("/") or "/"
