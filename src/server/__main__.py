"""Server module entry point for running with python -m server."""

import os

import uvicorn

from mdsite.config import MDSITE_LOG_LEVEL
from mdsite.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    configure_logging(MDSITE_LOG_LEVEL)

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Starting mdsite preview server",
        extra={
            "host": host,
            "port": port,
        },
    )

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Disable uvicorn's default logging config
    )
