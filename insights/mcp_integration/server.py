"""
MCP server definition.

Registers every validator insight operation as an MCP tool. Each tool returns
a single text block holding the JSON envelope produced by ``ValidatorInsights``.
"""

import json
import logging
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .. import config
from .descriptions import (
    END_TIME_PARAM_DESCRIPTION,
    GET_COSIGNER_SUCCESS_RATE_DESCRIPTION,
    GET_PROPOSER_SUCCESS_RATE_DESCRIPTION,
    GET_TOP_COSIGNER_SUCCESS_RATE_DESCRIPTION,
    GET_TOP_PROPOSER_SUCCESS_RATE_DESCRIPTION,
    GET_TOP_VALIDATORS_BY_EARNINGS_DESCRIPTION,
    GET_TOP_VALIDATORS_BY_STAKE_DESCRIPTION,
    GET_TOTAL_VALIDATOR_EARNINGS_DESCRIPTION,
    GET_VALIDATOR_EARNINGS_BREAKDOWN_DESCRIPTION,
    GET_VALIDATOR_INFO_DESCRIPTION,
    GET_VALIDATOR_STAKE_DESCRIPTION,
    LIMIT_PARAM_DESCRIPTION,
    LIST_VALIDATORS_DESCRIPTION,
    START_TIME_PARAM_DESCRIPTION,
    VALIDATOR_PARAM_DESCRIPTION,
)
from .downstream import open_monitoring_client
from .roster import MetricRoster, RosterProvider, StaticRoster
from .tools import ValidatorInsights
from .validators import STATIC_VALIDATORS

logger = logging.getLogger(__name__)

INSTRUCTIONS = "MCP Server for interacting with the Zilliqa validators metrics and APIs"

ValidatorParam = Annotated[str, Field(description=VALIDATOR_PARAM_DESCRIPTION)]
StartTimeParam = Annotated[Optional[str], Field(description=START_TIME_PARAM_DESCRIPTION)]
EndTimeParam = Annotated[Optional[str], Field(description=END_TIME_PARAM_DESCRIPTION)]
LimitParam = Annotated[
    int, Field(description=LIMIT_PARAM_DESCRIPTION, ge=1, le=config.MAX_TOP_LIMIT)
]


def roster_from_config(source: str = config.ROSTER_SOURCE) -> RosterProvider:
    """Pick the roster provider named by ROSTER_SOURCE."""
    static = StaticRoster(STATIC_VALIDATORS)
    if source == config.RosterSource.METRICS:
        logger.info("Using validator roster from %s", config.VALIDATORS_METRIC_TYPE)
        return MetricRoster(open_monitoring_client, fallback=static)
    if source != config.RosterSource.STATIC:
        logger.warning("Unknown ROSTER_SOURCE %r, using the static roster", source)
    return static


def _dump(envelope: dict) -> str:
    return json.dumps(envelope)


def build_server(
    insights: Optional[ValidatorInsights] = None,
    host: str = config.HOST,
    port: int = config.PORT,
) -> FastMCP:
    if insights is None:
        insights = ValidatorInsights(roster_from_config())

    mcp = FastMCP(config.SERVER_NAME, instructions=INSTRUCTIONS, host=host, port=port)

    # ------------------------------------------------------------------
    # Directory
    # ------------------------------------------------------------------
    @mcp.tool(description=GET_VALIDATOR_INFO_DESCRIPTION)
    async def get_validator_info(validator: ValidatorParam) -> str:
        return _dump(await insights.get_validator_info(validator))

    @mcp.tool(description=LIST_VALIDATORS_DESCRIPTION)
    async def list_validators() -> str:
        return _dump(await insights.list_validators())

    # ------------------------------------------------------------------
    # Per-validator metrics
    # ------------------------------------------------------------------
    @mcp.tool(description=GET_TOTAL_VALIDATOR_EARNINGS_DESCRIPTION)
    async def get_total_validator_earnings(
        validator: ValidatorParam,
        startTime: StartTimeParam = None,
        endTime: EndTimeParam = None,
    ) -> str:
        return _dump(await insights.get_total_validator_earnings(validator, startTime, endTime))

    @mcp.tool(description=GET_VALIDATOR_EARNINGS_BREAKDOWN_DESCRIPTION)
    async def get_validator_earnings_breakdown(
        validator: ValidatorParam,
        startTime: StartTimeParam = None,
        endTime: EndTimeParam = None,
    ) -> str:
        return _dump(
            await insights.get_validator_earnings_breakdown(validator, startTime, endTime)
        )

    @mcp.tool(description=GET_VALIDATOR_STAKE_DESCRIPTION)
    async def get_validator_stake(validator: ValidatorParam) -> str:
        return _dump(await insights.get_validator_stake(validator))

    @mcp.tool(description=GET_PROPOSER_SUCCESS_RATE_DESCRIPTION)
    async def get_proposer_success_rate(
        validator: ValidatorParam,
        startTime: StartTimeParam = None,
        endTime: EndTimeParam = None,
    ) -> str:
        return _dump(await insights.get_proposer_success_rate(validator, startTime, endTime))

    @mcp.tool(description=GET_COSIGNER_SUCCESS_RATE_DESCRIPTION)
    async def get_cosigner_success_rate(
        validator: ValidatorParam,
        startTime: StartTimeParam = None,
        endTime: EndTimeParam = None,
    ) -> str:
        return _dump(await insights.get_cosigner_success_rate(validator, startTime, endTime))

    # ------------------------------------------------------------------
    # Rankings
    # ------------------------------------------------------------------
    @mcp.tool(description=GET_TOP_VALIDATORS_BY_STAKE_DESCRIPTION)
    async def get_top_validators_by_stake(limit: LimitParam = config.DEFAULT_TOP_LIMIT) -> str:
        return _dump(await insights.get_top_validators_by_stake(limit))

    @mcp.tool(description=GET_TOP_VALIDATORS_BY_EARNINGS_DESCRIPTION)
    async def get_top_validators_by_earnings(
        limit: LimitParam = config.DEFAULT_TOP_LIMIT,
        startTime: StartTimeParam = None,
        endTime: EndTimeParam = None,
    ) -> str:
        return _dump(await insights.get_top_validators_by_earnings(limit, startTime, endTime))

    @mcp.tool(description=GET_TOP_PROPOSER_SUCCESS_RATE_DESCRIPTION)
    async def get_top_proposer_success_rate(
        limit: LimitParam = config.DEFAULT_TOP_LIMIT,
        startTime: StartTimeParam = None,
        endTime: EndTimeParam = None,
    ) -> str:
        return _dump(await insights.get_top_proposer_success_rate(limit, startTime, endTime))

    @mcp.tool(description=GET_TOP_COSIGNER_SUCCESS_RATE_DESCRIPTION)
    async def get_top_cosigner_success_rate(
        limit: LimitParam = config.DEFAULT_TOP_LIMIT,
        startTime: StartTimeParam = None,
        endTime: EndTimeParam = None,
    ) -> str:
        return _dump(await insights.get_top_cosigner_success_rate(limit, startTime, endTime))

    return mcp
