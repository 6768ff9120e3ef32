"""
Downstream monitoring MCP client.

The metrics live behind another MCP server (the observability server) that
exposes a ``list_time_series`` tool. We launch it as a child process over
stdio for each tool call, the same way the MCP SDK's stdio client launches
any server, and always tear the connection down afterwards.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

from .. import config
from ..metrics.queries import MetricQuery
from ..metrics.timeseries import parse_series

logger = logging.getLogger(__name__)


class DownstreamError(Exception):
    """The downstream server answered a tool call with an error result."""


def _result_text(result: Any) -> str:
    parts = []
    for block in getattr(result, "content", None) or []:
        if hasattr(block, "text"):
            parts.append(block.text)
    return "\n".join(parts)


def series_from_result(result: Any) -> List[Dict[str, Any]]:
    """Pull the list of series out of a ``CallToolResult``.

    The list may come back as structured content (either bare or wrapped under
    ``result``) or as JSON text in the first text content part.
    """
    structured = getattr(result, "structuredContent", None)
    if isinstance(structured, list):
        return parse_series(structured)
    if isinstance(structured, dict) and isinstance(structured.get("result"), list):
        return parse_series(structured["result"])

    content = getattr(result, "content", None) or []
    if content and isinstance(getattr(content[0], "text", None), str):
        return parse_series(content[0].text)
    return []


class MonitoringClient:
    """Thin wrapper around a connected session to the observability server."""

    def __init__(self, session: ClientSession, tool_name: str = config.DOWNSTREAM_TOOL):
        self._session = session
        self._tool_name = tool_name

    async def list_time_series(self, query: MetricQuery) -> List[Dict[str, Any]]:
        arguments = query.to_arguments()
        logger.debug("Calling %s with filter %s", self._tool_name, query.filter)
        result = await self._session.call_tool(self._tool_name, arguments=arguments)
        if getattr(result, "isError", False):
            raise DownstreamError(_result_text(result) or f"{self._tool_name} failed")
        series = series_from_result(result)
        logger.debug("Received %d time series", len(series))
        return series


def _leaf_exception(exc: BaseException) -> BaseException:
    """Unwrap single-member exception groups raised by the SDK's task groups."""
    while isinstance(getattr(exc, "exceptions", None), tuple) and len(exc.exceptions) == 1:
        exc = exc.exceptions[0]
    return exc


@asynccontextmanager
async def open_monitoring_client(
    command: str = config.DOWNSTREAM_COMMAND,
    args: Optional[List[str]] = None,
    env: Optional[Dict[str, str]] = None,
) -> AsyncIterator[MonitoringClient]:
    """Connect to the observability server for the duration of the block.

    Errors raised inside the block are re-raised as-is once the connection
    is closed, not wrapped in the transport's exception group.
    """
    server_params = StdioServerParameters(
        command=command,
        args=list(config.DOWNSTREAM_ARGS if args is None else args),
        env=env if env is not None else {**os.environ},
    )
    error: Optional[Exception] = None
    logger.info("Connecting to downstream MCP server...")
    try:
        async with stdio_client(server_params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                try:
                    yield MonitoringClient(session)
                except Exception as e:
                    error = e
                finally:
                    logger.info("Closing connection to downstream MCP server.")
    except Exception as e:
        leaf = _leaf_exception(e)
        if leaf is e:
            raise
        raise leaf from None
    if error is not None:
        raise error
