"""
MCP (Model Context Protocol) integration module.
"""
from .downstream import MonitoringClient, DownstreamError, open_monitoring_client
from .roster import ValidatorRecord, StaticRoster, MetricRoster, resolve
from .tools import ValidatorInsights
from .server import build_server, roster_from_config

__all__ = [
    'MonitoringClient', 'DownstreamError', 'open_monitoring_client',
    'ValidatorRecord', 'StaticRoster', 'MetricRoster', 'resolve',
    'ValidatorInsights', 'build_server', 'roster_from_config',
]
