"""Vercel MCP FastAPI application."""
import logging
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .. import __version__
from ..config import Settings, get_settings
from ..logging_config import configure_logging
from . import mcp_http

logger = logging.getLogger("vercel-mcp")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the HTTP application. Fails if BASE_URL is not configured."""
    settings = settings or get_settings()
    configure_logging(settings)
    logger.info(f"MCP Server starting with BASE_URL: {settings.api_base_url}")

    app = FastAPI(
        title="Vercel MCP Tools",
        description="Vercel REST API exposed as Model Context Protocol tools",
        version=__version__,
    )
    app.include_router(mcp_http.router)

    @app.get("/health")
    def health_check():
        """Liveness check."""
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()


def run():
    """Entry point for the vercel-mcp console script."""
    settings = get_settings()
    logger.info(f"MCP Stateless HTTP Server listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
