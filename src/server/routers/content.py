"""Artifact endpoints for the preview API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mdsite.config import NAVIGATION_FILENAME, SEARCH_INDEX_FILENAME, IndexerSettings
from mdsite.orchestrator import load_navigation_tree
from mdsite.search_index import build_search_index
from mdsite.utils.logging_config import get_logger
from server.server_config import get_settings

logger = get_logger(__name__)

router = APIRouter()

SettingsDep = Annotated[IndexerSettings, Depends(get_settings)]


def _dump(models: list) -> list[dict]:
    return [model.model_dump(mode="json", by_alias=True, exclude_none=True) for model in models]


@router.get("/health")
async def health(settings: SettingsDep) -> dict[str, str]:
    """Report liveness and the active content domain."""
    return {"status": "ok", "domain": settings.domain}


@router.get(f"/{NAVIGATION_FILENAME}")
async def navigation(settings: SettingsDep) -> JSONResponse:
    """Build and return the navigation tree.

    **Returns**

    - **JSONResponse**: The ``_navigation.json`` array; empty when no menu file exists
    """
    tree = await load_navigation_tree(settings)
    logger.info("Served navigation tree", extra={"domain": settings.domain, "nodes": len(tree)})
    return JSONResponse(content=_dump(tree))


@router.get(f"/{SEARCH_INDEX_FILENAME}")
async def search_index(settings: SettingsDep) -> JSONResponse:
    """Build and return the search index.

    **Returns**

    - **JSONResponse**: The ``_search-index.json`` array
    """
    entries = await build_search_index(settings.content_dir, max_concurrency=settings.max_concurrency)
    logger.info("Served search index", extra={"domain": settings.domain, "entries": len(entries)})
    return JSONResponse(content=_dump(entries))
