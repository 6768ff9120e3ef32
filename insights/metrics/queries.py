"""
Metric query construction.

Builds the argument object for the downstream ``list_time_series`` tool.
Counter queries use one ALIGN_DELTA bucket spanning the whole window so each
series carries a single value: the change over the window. Gauge queries
carry no aggregation since only the latest point matters.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from .windows import TimeWindow, format_timestamp

ALIGN_DELTA = "ALIGN_DELTA"
ALIGN_MEAN = "ALIGN_MEAN"


class Interval(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")


class Aggregation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    alignment_period: str = Field(alias="alignmentPeriod")
    per_series_aligner: str = Field(alias="perSeriesAligner")


class MetricQuery(BaseModel):
    """Request descriptor sent verbatim to the downstream service."""

    model_config = ConfigDict(frozen=True)

    name: str
    filter: str
    interval: Interval
    aggregation: Optional[Aggregation] = None

    def to_arguments(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def build_filter(
    metric_type: str,
    metric_labels: Optional[Mapping[str, str]] = None,
    resource_type: Optional[str] = None,
    resource_labels: Optional[Mapping[str, str]] = None,
) -> str:
    clauses = [f'metric.type = "{metric_type}"']
    for key, value in (metric_labels or {}).items():
        clauses.append(f'metric.labels.{key} = "{value}"')
    if resource_type:
        clauses.append(f'resource.type = "{resource_type}"')
    for key, value in (resource_labels or {}).items():
        clauses.append(f'resource.labels.{key} = "{value}"')
    return " AND ".join(clauses)


def _interval(window: TimeWindow) -> Interval:
    return Interval(
        start_time=format_timestamp(window.start),
        end_time=format_timestamp(window.end),
    )


def counter_query(
    metric_type: str,
    window: TimeWindow,
    labels: Optional[Mapping[str, str]] = None,
    resource_type: Optional[str] = None,
    resource_labels: Optional[Mapping[str, str]] = None,
    aligner: str = ALIGN_DELTA,
) -> MetricQuery:
    return MetricQuery(
        name=f"projects/{config.GCP_PROJECT_ID}",
        filter=build_filter(metric_type, labels, resource_type, resource_labels),
        interval=_interval(window),
        aggregation=Aggregation(
            alignment_period=window.alignment_period,
            per_series_aligner=aligner,
        ),
    )


def gauge_query(
    metric_type: str,
    window: TimeWindow,
    labels: Optional[Mapping[str, str]] = None,
) -> MetricQuery:
    return MetricQuery(
        name=f"projects/{config.GCP_PROJECT_ID}",
        filter=build_filter(metric_type, labels),
        interval=_interval(window),
    )


# ── Metric-specific builders ───────────────────────────────────────────


def earnings_query(
    window: TimeWindow,
    address: Optional[str] = None,
    role: Optional[str] = None,
) -> MetricQuery:
    """Validator rewards, optionally for one address and one role
    (``proposer`` or ``cosigner``). Without an address every validator's
    series comes back, labelled by ``address``."""
    labels: Dict[str, str] = {}
    if address:
        labels["address"] = address
    if role:
        labels["role"] = role
    return counter_query(
        config.METRIC_TYPE_EARNINGS,
        window,
        labels,
        resource_type=config.RESOURCE_TYPE,
        resource_labels={"instance_id": config.GCE_INSTANCE_ID},
    )


def proposals_query(
    window: TimeWindow,
    public_key: Optional[str] = None,
    status: Optional[str] = None,
) -> MetricQuery:
    labels: Dict[str, str] = {}
    if public_key:
        labels["validator"] = public_key
    if status:
        labels["status"] = status
    return counter_query(config.METRIC_TYPE_PROPOSALS, window, labels)


def cosignatures_query(
    window: TimeWindow,
    public_key: Optional[str] = None,
    cosigned_only: bool = False,
) -> MetricQuery:
    labels: Dict[str, str] = {}
    if public_key:
        labels["validator"] = public_key
    if cosigned_only:
        labels["cosigned"] = "true"
    return counter_query(config.METRIC_TYPE_COSIGNATURES, window, labels)


def stake_query(window: TimeWindow, public_key: Optional[str] = None) -> MetricQuery:
    labels = {"validator": public_key} if public_key else None
    return gauge_query(config.METRIC_TYPE_STAKE, window, labels)


def roster_query(window: TimeWindow) -> MetricQuery:
    """The validators custom metric is a labelled snapshot; ALIGN_MEAN keeps
    one series per validator."""
    return counter_query(config.VALIDATORS_METRIC_TYPE, window, aligner=ALIGN_MEAN)
