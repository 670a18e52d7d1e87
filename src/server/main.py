"""FastAPI application for previewing generated artifacts."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import content_router
from server.server_config import APP_DESCRIPTION, APP_TITLE

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION)
app.include_router(content_router)
