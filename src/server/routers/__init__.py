"""Routers for the preview server."""

from server.routers.content import router as content_router

__all__ = ["content_router"]
