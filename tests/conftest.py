"""Shared test fixtures.

Provides a fake downstream monitoring client, a fixed clock and a small
validator roster.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest

from insights.mcp_integration.roster import StaticRoster, ValidatorRecord
from insights.mcp_integration.tools import ValidatorInsights

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_series(label_key, label, value, int64=False, **extra_labels):
    """One time series with a single point."""
    labels = {label_key: label, **extra_labels} if label_key else dict(extra_labels)
    point_value = {"int64Value": str(value)} if int64 else {"doubleValue": value}
    return {"metric": {"labels": labels}, "points": [{"value": point_value}]}


class FakeMonitoringClient:
    """Answers list_time_series through a responder callable.

    The responder receives the MetricQuery; returning an exception instance
    makes the call raise it.
    """

    def __init__(self, responder=None):
        self._responder = responder or (lambda query: [])
        self.queries = []

    async def list_time_series(self, query):
        self.queries.append(query)
        result = self._responder(query)
        if isinstance(result, Exception):
            raise result
        return result


class FakeClientFactory:
    def __init__(self, client):
        self.client = client
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def __call__(self):
        self.opened += 1
        try:
            yield self.client
        finally:
            self.closed += 1


ALPHA = ValidatorRecord(
    name="Alpha",
    public_key="0xaaa1",
    address="0xa11ce",
    zil_address="zil1alpha",
)
BRAVO = ValidatorRecord(name="Bravo", public_key="0xbbb2", address="0xb0b")
CHARLIE = ValidatorRecord(name="Charlie", public_key="0xccc3", address="0xc4a")
DELTA = ValidatorRecord(name="Delta", public_key="0xddd4", address="0xd31")
TORCH = ValidatorRecord(
    name="TorchWallet.io",
    public_key="0xa7bb1acf64dc1ecb1419c7e091e815a9ac84dc64603a01d69947e5e0f7c3b9268593e260cfd91ca8b84d9ebb56cc8b9a",
    address="0xbb2cb8b573ec1ec4f77953128df7f1d08d9c34df",
)


@pytest.fixture
def roster_records():
    return [ALPHA, BRAVO, CHARLIE, DELTA, TORCH]


@pytest.fixture
def roster(roster_records):
    return StaticRoster(roster_records)


@pytest.fixture
def make_insights(roster):
    """Build ValidatorInsights around a responder; returns (insights, client, factory)."""

    def _make(responder=None):
        client = FakeMonitoringClient(responder)
        factory = FakeClientFactory(client)
        insights = ValidatorInsights(roster, client_factory=factory, clock=lambda: NOW)
        return insights, client, factory

    return _make
