"""Tests for query time windows."""

from datetime import datetime, timedelta, timezone

import pytest

from insights.metrics.windows import (
    format_timestamp,
    parse_timestamp,
    resolve_window,
    snapshot_window,
)

from conftest import NOW


def test_no_bounds_gives_last_hour_ending_now():
    window = resolve_window(None, None, now=NOW)
    assert window.end == NOW
    assert window.start == NOW - timedelta(hours=1)
    assert not window.explicit
    assert window.describe() == " in the last hour"


def test_only_end_gives_hour_before_that_end():
    window = resolve_window(None, "2024-06-01T08:00:00Z", now=NOW)
    end = datetime(2024, 6, 1, 8, tzinfo=timezone.utc)
    assert window.end == end
    assert window.start == end - timedelta(hours=1)
    assert window.explicit


def test_only_start_ends_now():
    window = resolve_window("2025-01-01T06:00:00Z", None, now=NOW)
    assert window.start == datetime(2025, 1, 1, 6, tzinfo=timezone.utc)
    assert window.end == NOW
    assert window.describe() == (
        " between 2025-01-01T06:00:00.000Z and 2025-01-01T12:00:00.000Z"
    )


def test_naive_timestamps_are_utc():
    assert parse_timestamp("2025-01-01T06:00:00") == datetime(2025, 1, 1, 6, tzinfo=timezone.utc)


def test_offsets_are_normalised_to_utc():
    assert parse_timestamp("2025-01-01T08:00:00+02:00") == datetime(
        2025, 1, 1, 6, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "start, end",
    [
        ("yesterday", None),
        ("2025-01-01T13:00:00Z", "2025-01-01T12:00:00Z"),
        ("2025-01-01T12:00:00Z", "2025-01-01T12:00:00Z"),
    ],
)
def test_invalid_ranges_raise_value_error(start, end):
    with pytest.raises(ValueError):
        resolve_window(start, end, now=NOW)


def test_format_timestamp_uses_milliseconds_and_z():
    assert format_timestamp(NOW) == "2025-01-01T12:00:00.000Z"


def test_alignment_period_spans_whole_window():
    assert resolve_window(None, None, now=NOW).alignment_period == "3600s"


def test_widened_window_keeps_end():
    window = resolve_window(None, None, now=NOW).widened()
    assert window.end == NOW
    assert window.duration == timedelta(hours=24)
    assert not window.explicit


def test_snapshot_window_is_five_minutes():
    window = snapshot_window(NOW)
    assert window.end == NOW
    assert window.duration == timedelta(minutes=5)
