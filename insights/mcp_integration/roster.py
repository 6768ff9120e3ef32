"""
Validator directory.

A roster is the set of known validator identities. Tools receive a roster
provider instead of reading a global list, so the same resolution logic runs
against the compiled-in list, the live validators metric, or test fixtures.
"""

import logging
from datetime import datetime
from typing import Any, AsyncContextManager, Callable, Iterable, List, Optional, Protocol, Sequence

from pydantic import BaseModel, ConfigDict

from ..metrics.queries import roster_query
from ..metrics.timeseries import series_label
from ..metrics.windows import snapshot_window, utc_now
from ..config import DEFAULT_WINDOW

logger = logging.getLogger(__name__)

IDENTIFIER_FIELDS = ("name", "public_key", "address", "zil_address")


class ValidatorRecord(BaseModel):
    """Identity of one validator. Any of the four fields identifies it."""

    model_config = ConfigDict(frozen=True)

    name: str
    public_key: str
    address: str
    zil_address: str = ""


class RosterProvider(Protocol):
    async def get_validators(self) -> List[ValidatorRecord]: ...


def resolve(identifier: str, roster: Iterable[ValidatorRecord]) -> Optional[ValidatorRecord]:
    """Find a validator by name, public key, address or zil address.

    Matching is exact but case-insensitive. Returns None when nothing matches.
    """
    needle = (identifier or "").strip().lower()
    if not needle:
        return None
    for record in roster:
        for field in IDENTIFIER_FIELDS:
            value = getattr(record, field)
            if value and value.lower() == needle:
                return record
    return None


class StaticRoster:
    """Fixed list of validators."""

    def __init__(self, records: Sequence[ValidatorRecord]):
        self._records = list(records)

    async def get_validators(self) -> List[ValidatorRecord]:
        return list(self._records)


def records_from_series(series: Iterable[dict]) -> List[ValidatorRecord]:
    """One record per distinct public key; the first series for a key wins."""
    records: List[ValidatorRecord] = []
    seen = set()
    for item in series:
        public_key = series_label(item, "public_key")
        if not public_key or public_key.lower() in seen:
            continue
        seen.add(public_key.lower())
        records.append(
            ValidatorRecord(
                name=series_label(item, "name") or public_key,
                public_key=public_key,
                address=series_label(item, "address") or "",
                zil_address=series_label(item, "zil_address") or "",
            )
        )
    return records


class MetricRoster:
    """Roster read from the validators custom metric.

    Each series of that metric carries a validator's identity in its labels.
    If the query fails or comes back empty, the fallback roster is used.
    """

    def __init__(
        self,
        client_factory: Callable[[], AsyncContextManager[Any]],
        clock: Callable[[], datetime] = utc_now,
        fallback: Optional[RosterProvider] = None,
    ):
        self._client_factory = client_factory
        self._clock = clock
        self._fallback = fallback

    async def get_validators(self) -> List[ValidatorRecord]:
        query = roster_query(snapshot_window(self._clock(), DEFAULT_WINDOW))
        try:
            async with self._client_factory() as client:
                records = records_from_series(await client.list_time_series(query))
        except Exception as e:
            logger.error("Failed to fetch validator roster: %s", e)
            records = []

        if records:
            logger.debug("Fetched %d validators from roster metric", len(records))
            return records
        if self._fallback is not None:
            logger.warning("Validator roster metric returned nothing, using fallback roster")
            return await self._fallback.get_validators()
        return []
