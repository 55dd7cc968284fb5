"""
HTTP front end for the Mentortools MCP server.

Serves the MCP streamable HTTP endpoint at /mcp plus a couple of plain
endpoints for humans and load balancers.
"""

import logging
from typing import Dict

from fastapi import FastAPI
from fastmcp import FastMCP

from . import __version__
from .tools.mcp_registry import SERVER_NAME

logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"


def server_info() -> Dict:
    return {
        "name": SERVER_NAME,
        "version": __version__,
        "status": "running",
        "endpoints": {
            "mcp": MCP_PATH,
            "health": "/healthz",
        },
    }


def create_app(mcp: FastMCP) -> FastAPI:
    """
    Build the FastAPI app around ``mcp``.

    The MCP sub-app owns the session manager, so its lifespan must drive the
    outer app's lifespan.
    """
    mcp_app = mcp.http_app(path=MCP_PATH)
    app = FastAPI(title=SERVER_NAME, version=__version__, lifespan=mcp_app.lifespan)

    @app.get("/")
    async def root():
        """Root endpoint with basic info"""
        return server_info()

    @app.get("/healthz")
    async def healthz():
        """Health check endpoint"""
        return {"status": "ok"}

    # Mounted last so the routes above take precedence.
    app.mount("/", mcp_app)
    logger.info(f"MCP endpoint mounted at {MCP_PATH}")
    return app
