"""
Entry point.

    insights-mcp            # stdio transport (default)
    insights-mcp --http     # streamable HTTP on HOST:PORT
"""

import argparse
import logging
import sys

import uvicorn

from . import config
from .app import create_app
from .logger import configure_logging
from .mcp_integration.server import build_server

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="insights-mcp", description=__doc__)
    parser.add_argument(
        "--http",
        action="store_true",
        help="Serve MCP over streamable HTTP instead of stdio.",
    )
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    configure_logging()
    mcp = build_server(host=args.host, port=args.port)

    try:
        if args.http:
            logger.info(
                "Starting Insights MCP Server on %s:%s with Streamable HTTP transport",
                args.host, args.port,
            )
            uvicorn.run(create_app(mcp), host=args.host, port=args.port, log_config=None)
        else:
            logger.info("MCP Server running on stdio")
            mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Received SIGINT, shutting down gracefully...")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
