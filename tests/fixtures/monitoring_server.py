"""Stand-in observability server launched over stdio by the downstream tests.

Run with ``fail`` as the first argument to make every call raise.
"""

import json
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

FAIL = len(sys.argv) > 1 and sys.argv[1] == "fail"

mcp = FastMCP("fake-observability")


@mcp.tool()
def list_time_series(
    name: str = "",
    filter: str = "",
    interval: Optional[dict] = None,
    aggregation: Optional[dict] = None,
) -> str:
    if FAIL:
        raise RuntimeError("quota exceeded for project")
    return json.dumps([
        {
            "metric": {"labels": {"address": "0xa11ce"}},
            "points": [{"value": {"doubleValue": 2.5}}],
        },
        {
            "metric": {"labels": {"address": "0xa11ce"}},
            "points": [{"value": {"int64Value": "1"}}],
        },
    ])


if __name__ == "__main__":
    mcp.run(transport="stdio")
