"""
Query time windows.

``end`` defaults to now and ``start`` to one hour before ``end``. The two
defaults are independent: an explicit end with no start still gives a
one-hour window ending at that end.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..config import DEFAULT_WINDOW, SNAPSHOT_WINDOW, WIDENED_WINDOW


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC."""
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render as ``2024-01-01T00:00:00.000Z``."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime
    # True when the caller supplied either bound
    explicit: bool = False

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def alignment_period(self) -> str:
        """One bucket covering the whole window, in whole seconds."""
        seconds = max(1, int(self.duration.total_seconds()))
        return f"{seconds}s"

    def widened(self, span: timedelta = WIDENED_WINDOW) -> "TimeWindow":
        return TimeWindow(start=self.end - span, end=self.end, explicit=self.explicit)

    def describe(self) -> str:
        if not self.explicit:
            return " in the last hour"
        return f" between {format_timestamp(self.start)} and {format_timestamp(self.end)}"


def resolve_window(
    start_time: Optional[str],
    end_time: Optional[str],
    now: Optional[datetime] = None,
    default: timedelta = DEFAULT_WINDOW,
) -> TimeWindow:
    """Build the effective window for a query.

    Raises:
        ValueError: a bound is not ISO-8601, or start is not before end.
    """
    end = parse_timestamp(end_time) if end_time else (now or utc_now())
    start = parse_timestamp(start_time) if start_time else end - default
    if start >= end:
        raise ValueError(
            f"start {format_timestamp(start)} must be before end {format_timestamp(end)}"
        )
    return TimeWindow(start=start, end=end, explicit=bool(start_time or end_time))


def snapshot_window(now: Optional[datetime] = None, span: timedelta = SNAPSHOT_WINDOW) -> TimeWindow:
    """Short trailing window for "current value" gauge reads."""
    end = now or utc_now()
    return TimeWindow(start=end - span, end=end)
