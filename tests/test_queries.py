"""Tests for downstream metric query construction."""

from insights import config
from insights.metrics.queries import (
    build_filter,
    cosignatures_query,
    earnings_query,
    proposals_query,
    roster_query,
    stake_query,
)
from insights.metrics.windows import resolve_window, snapshot_window

from conftest import NOW


def test_build_filter_joins_clauses():
    assert build_filter("m", {"a": "1"}, "gce_instance", {"instance_id": "9"}) == (
        'metric.type = "m" AND metric.labels.a = "1" AND '
        'resource.type = "gce_instance" AND resource.labels.instance_id = "9"'
    )


def test_earnings_query_arguments():
    window = resolve_window(None, None, now=NOW)
    args = earnings_query(window, address="0xabc", role="proposer").to_arguments()

    assert args["name"] == f"projects/{config.GCP_PROJECT_ID}"
    assert f'metric.type = "{config.METRIC_TYPE_EARNINGS}"' in args["filter"]
    assert 'metric.labels.address = "0xabc"' in args["filter"]
    assert 'metric.labels.role = "proposer"' in args["filter"]
    assert f'resource.labels.instance_id = "{config.GCE_INSTANCE_ID}"' in args["filter"]
    assert args["interval"] == {
        "startTime": "2025-01-01T11:00:00.000Z",
        "endTime": "2025-01-01T12:00:00.000Z",
    }
    assert args["aggregation"] == {
        "alignmentPeriod": "3600s",
        "perSeriesAligner": "ALIGN_DELTA",
    }


def test_earnings_query_without_address_covers_all_validators():
    window = resolve_window(None, None, now=NOW)
    assert "metric.labels.address" not in earnings_query(window).filter


def test_stake_query_has_no_aggregation():
    args = stake_query(snapshot_window(NOW), "0xpk").to_arguments()
    assert "aggregation" not in args
    assert args["filter"] == (
        f'metric.type = "{config.METRIC_TYPE_STAKE}" AND metric.labels.validator = "0xpk"'
    )
    assert args["interval"]["startTime"] == "2025-01-01T11:55:00.000Z"


def test_status_and_cosigned_filters():
    window = resolve_window(None, None, now=NOW)
    assert 'metric.labels.status = "proposed"' in proposals_query(window, "0xpk", "proposed").filter
    assert 'metric.labels.status' not in proposals_query(window, "0xpk").filter
    assert 'metric.labels.cosigned = "true"' in cosignatures_query(window, cosigned_only=True).filter


def test_roster_query_uses_mean_aligner():
    args = roster_query(resolve_window(None, None, now=NOW)).to_arguments()
    assert args["aggregation"]["perSeriesAligner"] == "ALIGN_MEAN"
    assert config.VALIDATORS_METRIC_TYPE in args["filter"]
