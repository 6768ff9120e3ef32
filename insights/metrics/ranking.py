"""
Top-N ranking of per-validator metrics.

Rankings are computed from the grouped mappings produced by
``timeseries.group_sum`` / ``timeseries.group_latest``. When the default
window yields fewer validators than requested, callers re-run their queries
over a wider window and merge with ``prefer_narrow``: fresher data wins,
older data only fills gaps.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, TypeVar

from .windows import TimeWindow

V = TypeVar("V")


@dataclass
class RankedEntry:
    key: str
    value: float
    formatted_rate: Optional[str] = None
    name: Optional[str] = None
    public_key: Optional[str] = None
    address: Optional[str] = None
    zil_address: Optional[str] = None

    def to_dict(self, rank: int, value_field: str) -> Dict[str, Any]:
        row: Dict[str, Any] = {
            "rank": rank,
            "name": self.name,
            "public_key": self.public_key,
            "address": self.address,
            "zil_address": self.zil_address,
        }
        row[value_field] = self.formatted_rate if self.formatted_rate is not None else self.value
        return row


@dataclass(frozen=True)
class Attempts:
    successful: float
    total: float

    @property
    def rate(self) -> float:
        return self.successful / self.total * 100


def format_rate(rate: float) -> str:
    return f"{rate:.2f}%"


def rank_totals(totals: Mapping[str, float], limit: int) -> List[RankedEntry]:
    """Largest totals first."""
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [RankedEntry(key=key, value=value) for key, value in ordered[:limit]]


def count_attempts(
    successful: Mapping[str, float], totals: Mapping[str, float]
) -> Dict[str, Attempts]:
    """Pair success and total counts, dropping validators with no attempts."""
    return {
        key: Attempts(successful=successful.get(key, 0.0), total=total)
        for key, total in totals.items()
        if total > 0
    }


def rank_success_rates(attempts: Mapping[str, Attempts], limit: int) -> List[RankedEntry]:
    """Highest success percentage first; zero-attempt validators never rank."""
    scored = [
        RankedEntry(key=key, value=entry.rate, formatted_rate=format_rate(entry.rate))
        for key, entry in attempts.items()
        if entry.total > 0
    ]
    scored.sort(key=lambda entry: entry.value, reverse=True)
    return scored[:limit]


def prefer_narrow(narrow: Mapping[str, V], wide: Mapping[str, V]) -> Dict[str, V]:
    merged = dict(wide)
    merged.update(narrow)
    return merged


def should_widen(window: TimeWindow, qualifying: int, limit: int) -> bool:
    """Only default windows are widened; an explicit range is honoured as given."""
    return not window.explicit and qualifying < limit


def enrich(entries: Iterable[RankedEntry], roster: Iterable[Any], key_field: str) -> List[RankedEntry]:
    """Attach roster identity fields to each entry by its grouping key.

    ``key_field`` names the record attribute the entries were grouped by
    (``address`` or ``public_key``). Entries with no roster match keep
    ``None`` identity fields.
    """
    index = {}
    for record in roster:
        key = getattr(record, key_field, "")
        if key:
            index.setdefault(key.lower(), record)

    enriched = []
    for entry in entries:
        record = index.get(entry.key.lower())
        if record is not None:
            entry.name = record.name
            entry.public_key = record.public_key
            entry.address = record.address
            entry.zil_address = record.zil_address or None
        else:
            setattr(entry, key_field, entry.key)
        enriched.append(entry)
    return enriched
