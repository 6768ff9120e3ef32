"""
HTTP REST API endpoints.

Only the health check lives here; MCP traffic is served by the SDK's
streamable-HTTP app mounted next to this router.
"""

from fastapi import APIRouter, Request


router = APIRouter()


def active_session_count(mcp) -> int:
    """Number of live streamable-HTTP sessions held by the SDK session manager."""
    try:
        manager = mcp.session_manager
    except RuntimeError:
        # The streamable-HTTP app has not been built yet
        return 0
    # Private to StreamableHTTPSessionManager (mcp 1.10+); fails loudly if renamed
    return len(manager._server_instances)


# ============================================
# Health Check
# ============================================


@router.get("/health")
async def health_check(request: Request):
    """Check if the server is running."""
    return {
        "status": "ok",
        "server": "initialized",
        "active_sessions": active_session_count(request.app.state.mcp),
    }
