"""
Validator insight operations.

Every operation resolves to a JSON-serialisable envelope, either
``{"status": "success", "data": ...}`` or ``{"status": "failed", "reason": ...}``.
Nothing here raises to the MCP layer: unknown validators, bad time input and
downstream failures all come back as failed envelopes.

Each call that needs metrics opens its own connection to the downstream
monitoring server and closes it before returning.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, AsyncContextManager, Awaitable, Callable, Dict, List, Optional

from .. import config
from ..metrics.queries import cosignatures_query, earnings_query, proposals_query, stake_query
from ..metrics.ranking import (
    Attempts,
    count_attempts,
    enrich,
    format_rate,
    prefer_narrow,
    rank_success_rates,
    rank_totals,
    should_widen,
)
from ..metrics.timeseries import extract_latest, extract_value, group_latest, group_sum
from ..metrics.windows import TimeWindow, resolve_window, snapshot_window, utc_now
from .downstream import MonitoringClient, open_monitoring_client
from .roster import RosterProvider, ValidatorRecord, resolve

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], AsyncContextManager[MonitoringClient]]
Envelope = Dict[str, Any]

# Proposal statuses that count as a successful proposal
SUCCESSFUL_PROPOSAL_STATUSES = ("proposed", "missed_next_missed")


def success(data: Any) -> Envelope:
    return {"status": "success", "data": data}


def failed(reason: str) -> Envelope:
    return {"status": "failed", "reason": reason}


def _sum_counts(*counts: Dict[str, float]) -> Dict[str, float]:
    merged: Dict[str, float] = {}
    for mapping in counts:
        for key, value in mapping.items():
            merged[key] = merged.get(key, 0.0) + value
    return merged


class ValidatorInsights:
    """Implements every tool the server exposes.

    Args:
        roster: where validator identities come from.
        client_factory: returns an async context manager yielding a
            connected ``MonitoringClient``.
        clock: returns the current UTC time.
    """

    def __init__(
        self,
        roster: RosterProvider,
        client_factory: ClientFactory = open_monitoring_client,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._roster = roster
        self._client_factory = client_factory
        self._clock = clock

    # ── Helpers ────────────────────────────────────────────────────────

    async def _with_client(
        self, action: Callable[[MonitoringClient], Awaitable[Envelope]]
    ) -> Envelope:
        try:
            async with self._client_factory() as client:
                return await action(client)
        except Exception as e:
            logger.error("Error during downstream MCP communication: %s", e, exc_info=True)
            return failed(f"Error calling downstream MCP: {e}")

    async def _find(self, identifier: str) -> Optional[ValidatorRecord]:
        return resolve(identifier, await self._roster.get_validators())

    def _window(self, start_time: Optional[str], end_time: Optional[str]) -> TimeWindow:
        return resolve_window(start_time, end_time, now=self._clock())

    @staticmethod
    def _not_found(identifier: str) -> Envelope:
        return failed(f"Validator '{identifier}' not found.")

    @staticmethod
    def _check_limit(limit: int) -> Optional[Envelope]:
        if limit < 1 or limit > config.MAX_TOP_LIMIT:
            return failed(f"limit must be between 1 and {config.MAX_TOP_LIMIT}.")
        return None

    # ── Directory ──────────────────────────────────────────────────────

    async def get_validator_info(self, validator: str) -> Envelope:
        record = await self._find(validator)
        if record is None:
            return self._not_found(validator)
        return success(record.model_dump())

    async def list_validators(self) -> Envelope:
        records = await self._roster.get_validators()
        return success({
            "count": len(records),
            "validators": [record.model_dump() for record in records],
        })

    # ── Earnings ───────────────────────────────────────────────────────

    async def get_total_validator_earnings(
        self, validator: str, start_time: Optional[str] = None, end_time: Optional[str] = None
    ) -> Envelope:
        record = await self._find(validator)
        if record is None:
            return self._not_found(validator)
        try:
            window = self._window(start_time, end_time)
        except ValueError as e:
            return failed(f"Invalid time range: {e}")

        async def action(client: MonitoringClient) -> Envelope:
            series = await client.list_time_series(earnings_query(window, address=record.address))
            total = extract_value(series)
            return success({
                "total_earnings_zil": total,
                "message": (
                    f"The total ZIL rewards for validator {record.name} ({record.address}) "
                    f"were {total:.2f}{window.describe()}."
                ),
            })

        return await self._with_client(action)

    async def get_validator_earnings_breakdown(
        self, validator: str, start_time: Optional[str] = None, end_time: Optional[str] = None
    ) -> Envelope:
        record = await self._find(validator)
        if record is None:
            return self._not_found(validator)
        try:
            window = self._window(start_time, end_time)
        except ValueError as e:
            return failed(f"Invalid time range: {e}")

        async def action(client: MonitoringClient) -> Envelope:
            async def earnings_for(role: str) -> float:
                query = earnings_query(window, address=record.address, role=role)
                return extract_value(await client.list_time_series(query))

            proposal, cosigning = await asyncio.gather(
                earnings_for("proposer"), earnings_for("cosigner")
            )
            return success({
                "proposal_earnings_zil": proposal,
                "cosigning_earnings_zil": cosigning,
                "message": (
                    f"Earnings breakdown for validator {record.name} ({record.address})"
                    f"{window.describe()}: Proposal Rewards: {proposal:.2f} ZIL, "
                    f"Cosigning Rewards: {cosigning:.2f} ZIL."
                ),
            })

        return await self._with_client(action)

    # ── Stake ──────────────────────────────────────────────────────────

    async def get_validator_stake(self, validator: str) -> Envelope:
        record = await self._find(validator)
        if record is None:
            return self._not_found(validator)
        window = snapshot_window(self._clock())

        async def action(client: MonitoringClient) -> Envelope:
            series = await client.list_time_series(stake_query(window, record.public_key))
            return success({"total_stake_zil": extract_latest(series)})

        return await self._with_client(action)

    # ── Success rates ──────────────────────────────────────────────────

    async def _proposal_attempts(
        self, client: MonitoringClient, window: TimeWindow
    ) -> Dict[str, Attempts]:
        queries = [proposals_query(window)] + [
            proposals_query(window, status=status)
            for status in SUCCESSFUL_PROPOSAL_STATUSES
        ]
        results = await asyncio.gather(*(client.list_time_series(q) for q in queries))
        totals, *successful = [group_sum(series, "validator") for series in results]
        return count_attempts(_sum_counts(*successful), totals)

    async def _cosignature_attempts(
        self, client: MonitoringClient, window: TimeWindow
    ) -> Dict[str, Attempts]:
        total_series, cosigned_series = await asyncio.gather(
            client.list_time_series(cosignatures_query(window)),
            client.list_time_series(cosignatures_query(window, cosigned_only=True)),
        )
        return count_attempts(
            group_sum(cosigned_series, "validator"), group_sum(total_series, "validator")
        )

    async def get_proposer_success_rate(
        self, validator: str, start_time: Optional[str] = None, end_time: Optional[str] = None
    ) -> Envelope:
        record = await self._find(validator)
        if record is None:
            return self._not_found(validator)
        try:
            window = self._window(start_time, end_time)
        except ValueError as e:
            return failed(f"Invalid time range: {e}")

        async def action(client: MonitoringClient) -> Envelope:
            queries = [proposals_query(window, record.public_key)] + [
                proposals_query(window, record.public_key, status)
                for status in SUCCESSFUL_PROPOSAL_STATUSES
            ]
            results = await asyncio.gather(*(client.list_time_series(q) for q in queries))
            total, *successful = [extract_value(series) for series in results]

            if total > 0:
                rate = format_rate(sum(successful) / total * 100)
            else:
                rate = "N/A (0 proposals attempted)"
            return success({
                "proposer_success_rate": rate,
                "message": (
                    f"Proposer success rate for validator {record.name} was {rate}"
                    f"{window.describe()}."
                ),
            })

        return await self._with_client(action)

    async def get_cosigner_success_rate(
        self, validator: str, start_time: Optional[str] = None, end_time: Optional[str] = None
    ) -> Envelope:
        record = await self._find(validator)
        if record is None:
            return self._not_found(validator)
        try:
            window = self._window(start_time, end_time)
        except ValueError as e:
            return failed(f"Invalid time range: {e}")

        async def action(client: MonitoringClient) -> Envelope:
            total_series, cosigned_series = await asyncio.gather(
                client.list_time_series(cosignatures_query(window, record.public_key)),
                client.list_time_series(
                    cosignatures_query(window, record.public_key, cosigned_only=True)
                ),
            )
            total = extract_value(total_series)
            cosigned = extract_value(cosigned_series)

            if total > 0:
                rate = format_rate(cosigned / total * 100)
            else:
                rate = "N/A (0 cosignatures attempted)"
            return success({
                "cosigner_success_rate": rate,
                "message": (
                    f"Cosigner success rate for validator {record.name} was {rate}"
                    f"{window.describe()}."
                ),
            })

        return await self._with_client(action)

    # ── Rankings ───────────────────────────────────────────────────────

    async def get_top_validators_by_stake(self, limit: int = config.DEFAULT_TOP_LIMIT) -> Envelope:
        invalid = self._check_limit(limit)
        if invalid:
            return invalid
        window = snapshot_window(self._clock())
        roster = await self._roster.get_validators()

        async def action(client: MonitoringClient) -> Envelope:
            stakes = group_latest(await client.list_time_series(stake_query(window)), "validator")
            widened = should_widen(window, len(stakes), limit)
            if widened:
                wide = group_latest(
                    await client.list_time_series(stake_query(window.widened())), "validator"
                )
                stakes = prefer_narrow(stakes, wide)
            if len(stakes) < limit:
                stakes.update(await self._stake_per_validator(client, window.widened(), roster, stakes))

            ranked = enrich(rank_totals(stakes, limit), roster, "public_key")
            return success({
                "validators": [
                    entry.to_dict(rank, "total_stake_zil")
                    for rank, entry in enumerate(ranked, start=1)
                ],
                "window_widened": widened,
                "message": f"Top {len(ranked)} validators by current stake.",
            })

        return await self._with_client(action)

    async def _stake_per_validator(
        self,
        client: MonitoringClient,
        window: TimeWindow,
        roster: List[ValidatorRecord],
        known: Dict[str, float],
    ) -> Dict[str, float]:
        """Query each validator still missing a stake reading on its own.

        Batched gauge queries can miss sparse series. Queries run one after
        another, and a failure drops only that validator.
        """
        known_keys = {key.lower() for key in known}
        found: Dict[str, float] = {}
        for record in roster:
            if record.public_key.lower() in known_keys:
                continue
            try:
                series = await client.list_time_series(stake_query(window, record.public_key))
            except Exception as e:
                logger.warning("Stake lookup failed for %s: %s", record.name, e)
                continue
            if series:
                found[record.public_key] = extract_latest(series)
        return found

    async def get_top_validators_by_earnings(
        self,
        limit: int = config.DEFAULT_TOP_LIMIT,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> Envelope:
        invalid = self._check_limit(limit)
        if invalid:
            return invalid
        try:
            window = self._window(start_time, end_time)
        except ValueError as e:
            return failed(f"Invalid time range: {e}")
        roster = await self._roster.get_validators()

        async def action(client: MonitoringClient) -> Envelope:
            totals = group_sum(await client.list_time_series(earnings_query(window)), "address")
            widened = should_widen(window, len(totals), limit)
            if widened:
                wide = group_sum(
                    await client.list_time_series(earnings_query(window.widened())), "address"
                )
                totals = prefer_narrow(totals, wide)

            ranked = enrich(rank_totals(totals, limit), roster, "address")
            return success({
                "validators": [
                    entry.to_dict(rank, "total_earnings_zil")
                    for rank, entry in enumerate(ranked, start=1)
                ],
                "window_widened": widened,
                "message": f"Top {len(ranked)} validators by earnings{window.describe()}.",
            })

        return await self._with_client(action)

    async def _top_rates(
        self,
        limit: int,
        start_time: Optional[str],
        end_time: Optional[str],
        fetch: Callable[[MonitoringClient, TimeWindow], Awaitable[Dict[str, Attempts]]],
        value_field: str,
        duty: str,
    ) -> Envelope:
        invalid = self._check_limit(limit)
        if invalid:
            return invalid
        try:
            window = self._window(start_time, end_time)
        except ValueError as e:
            return failed(f"Invalid time range: {e}")
        roster = await self._roster.get_validators()

        async def action(client: MonitoringClient) -> Envelope:
            attempts = await fetch(client, window)
            widened = should_widen(window, len(attempts), limit)
            if widened:
                attempts = prefer_narrow(attempts, await fetch(client, window.widened()))

            ranked = enrich(rank_success_rates(attempts, limit), roster, "public_key")
            return success({
                "validators": [
                    entry.to_dict(rank, value_field)
                    for rank, entry in enumerate(ranked, start=1)
                ],
                "window_widened": widened,
                "message": (
                    f"Top {len(ranked)} validators by {duty} success rate{window.describe()}."
                ),
            })

        return await self._with_client(action)

    async def get_top_proposer_success_rate(
        self,
        limit: int = config.DEFAULT_TOP_LIMIT,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> Envelope:
        return await self._top_rates(
            limit, start_time, end_time,
            self._proposal_attempts, "proposer_success_rate", "proposer",
        )

    async def get_top_cosigner_success_rate(
        self,
        limit: int = config.DEFAULT_TOP_LIMIT,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> Envelope:
        return await self._top_rates(
            limit, start_time, end_time,
            self._cosignature_attempts, "cosigner_success_rate", "cosigner",
        )
