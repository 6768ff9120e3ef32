"""
FastAPI application factory.

Creates the HTTP-mode application: CORS, the health route, and the MCP SDK's
streamable-HTTP app (which owns sessions and the ``/mcp`` endpoint).
"""
import contextlib
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.fastmcp import FastMCP

from . import config
from .api.http import router as http_router

logger = logging.getLogger(__name__)


def create_app(mcp: FastMCP) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        mcp: the MCP server whose streamable-HTTP transport is mounted.

    Returns:
        Configured FastAPI instance
    """
    # Building the streamable-HTTP app also creates mcp.session_manager
    mcp_app = mcp.streamable_http_app()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        # A mounted app's own lifespan never runs, so the session manager
        # has to be started here.
        async with mcp.session_manager.run():
            logger.info("Insights MCP Server listening on port %s", mcp.settings.port)
            logger.info("Endpoint: http://%s:%s/mcp", mcp.settings.host, mcp.settings.port)
            logger.info("Health: http://%s:%s/health", mcp.settings.host, mcp.settings.port)
            yield
        logger.info("HTTP server closed")

    app = FastAPI(
        title=config.SERVER_TITLE,
        description="MCP Server for interacting with the Zilliqa validators metrics and APIs",
        version=config.SERVER_VERSION,
        lifespan=lifespan,
    )
    app.state.mcp = mcp

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS", "DELETE"],
        allow_headers=["Content-Type", "Authorization", "mcp-session-id"],
        allow_credentials=True,
        expose_headers=["Content-Type", "Access-Control-Allow-Origin", "mcp-session-id"],
    )

    # Register HTTP REST routes (e.g., /health)
    app.include_router(http_router)

    # Everything else, including /mcp, goes to the MCP transport
    app.mount("/", mcp_app)

    return app
