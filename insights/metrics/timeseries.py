"""
Time-series value extraction and grouping.

The downstream monitoring server answers ``list_time_series`` with a list of
series shaped like Cloud Monitoring's REST API::

    [{"metric": {"labels": {"validator": "0xab..."}},
      "points": [{"value": {"doubleValue": 12.5}}, ...]}]

Points are ordered most-recent-first, so ``points[0]`` is always the value we
want. Parse failures are logged and treated as "no data": none of the
functions here raise on bad input.
"""

import json
import logging
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

RawSeries = Union[str, List[Dict[str, Any]], None]


def parse_series(raw: RawSeries) -> List[Dict[str, Any]]:
    """Decode a downstream payload into a list of series.

    Accepts the JSON text from a text content block or an already decoded
    list (structured content).
    """
    if raw is None:
        return []
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            logger.error("Failed to parse time series data from downstream MCP: %s", e)
            return []
    if not isinstance(raw, list):
        logger.error(
            "Expected a list of time series from downstream MCP, got %s",
            type(raw).__name__,
        )
        return []
    return [series for series in raw if isinstance(series, dict)]


def point_value(series: Dict[str, Any]) -> float:
    """Value of the most recent point, 0 when there is none."""
    points = series.get("points") or []
    if not points or not isinstance(points[0], dict):
        return 0.0
    value = points[0].get("value") or {}

    double_value = value.get("doubleValue")
    if isinstance(double_value, (int, float)) and not isinstance(double_value, bool):
        return float(double_value)

    # int64 values arrive as JSON strings from the REST API
    int_value = value.get("int64Value")
    if int_value is not None:
        try:
            return float(int_value)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-numeric int64Value %r", int_value)
    return 0.0


def series_label(series: Dict[str, Any], label_key: str) -> str | None:
    labels = (series.get("metric") or {}).get("labels") or {}
    return labels.get(label_key)


def extract_value(raw: RawSeries) -> float:
    """Sum the latest value of every series (counters and deltas)."""
    return sum((point_value(series) for series in parse_series(raw)), 0.0)


def extract_latest(raw: RawSeries) -> float:
    """Latest value of the first series only (gauges).

    Gauge queries often come back with duplicate series for the same
    validator, so summing them would double-count.
    """
    data = parse_series(raw)
    if not data:
        return 0.0
    return point_value(data[0])


def group_sum(raw: RawSeries, label_key: str) -> Dict[str, float]:
    """Sum series values per value of ``label_key``."""
    totals: Dict[str, float] = {}
    for series in parse_series(raw):
        label = series_label(series, label_key)
        if label is None:
            continue
        totals[label] = totals.get(label, 0.0) + point_value(series)
    return totals


def group_latest(raw: RawSeries, label_key: str) -> Dict[str, float]:
    """Latest value per value of ``label_key``; the first series seen wins."""
    latest: Dict[str, float] = {}
    for series in parse_series(raw):
        label = series_label(series, label_key)
        if label is None or label in latest:
            continue
        latest[label] = point_value(series)
    return latest
