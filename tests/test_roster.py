"""Tests for validator resolution and roster providers."""

import asyncio

from insights import config
from insights.mcp_integration.roster import (
    MetricRoster,
    StaticRoster,
    ValidatorRecord,
    records_from_series,
    resolve,
)
from insights.mcp_integration.server import roster_from_config
from insights.mcp_integration.validators import STATIC_VALIDATORS

from conftest import ALPHA, NOW, TORCH, FakeClientFactory, FakeMonitoringClient, make_series


def test_lookup_ignores_case():
    roster = [ALPHA, TORCH]
    assert resolve("TORCHWALLET.IO", roster) == resolve("TorchWallet.io", roster) == TORCH


def test_lookup_by_every_identifier(roster_records):
    assert resolve(ALPHA.public_key.upper(), roster_records) == ALPHA
    assert resolve(ALPHA.address, roster_records) == ALPHA
    assert resolve("ZIL1ALPHA", roster_records) == ALPHA


def test_lookup_misses_return_none(roster_records):
    assert resolve("nobody", roster_records) is None
    assert resolve("TorchWallet.io", []) is None
    # Blank zil_address fields must not match a blank identifier
    assert resolve("", roster_records) is None


def test_static_roster_contains_known_validators():
    assert resolve("torchwallet.io", STATIC_VALIDATORS).address == (
        "0xbb2cb8b573ec1ec4f77953128df7f1d08d9c34df"
    )
    assert asyncio.run(StaticRoster(STATIC_VALIDATORS).get_validators()) == STATIC_VALIDATORS


def _roster_series(name, public_key, address, zil_address=""):
    return make_series(
        "public_key", public_key, 1.0, name=name, address=address, zil_address=zil_address
    )


def test_records_from_series_dedupes_by_public_key():
    records = records_from_series([
        _roster_series("Alpha", "0xAAA", "0x1", "zil1a"),
        _roster_series("Alpha again", "0xaaa", "0x1"),
        make_series("name", "No key", 1.0),
        _roster_series("Bravo", "0xbbb", "0x2"),
    ])
    assert records == [
        ValidatorRecord(name="Alpha", public_key="0xAAA", address="0x1", zil_address="zil1a"),
        ValidatorRecord(name="Bravo", public_key="0xbbb", address="0x2"),
    ]


def test_metric_roster_queries_validators_metric():
    client = FakeMonitoringClient(lambda query: [_roster_series("Alpha", "0xaaa", "0x1")])
    roster = MetricRoster(FakeClientFactory(client), clock=lambda: NOW)

    records = asyncio.run(roster.get_validators())

    assert [record.name for record in records] == ["Alpha"]
    query = client.queries[0]
    assert config.VALIDATORS_METRIC_TYPE in query.filter
    assert query.aggregation.per_series_aligner == "ALIGN_MEAN"


def test_metric_roster_failure_uses_fallback():
    client = FakeMonitoringClient(lambda query: RuntimeError("unreachable"))
    fallback = StaticRoster([ALPHA])

    with_fallback = MetricRoster(FakeClientFactory(client), clock=lambda: NOW, fallback=fallback)
    without = MetricRoster(FakeClientFactory(client), clock=lambda: NOW)

    assert asyncio.run(with_fallback.get_validators()) == [ALPHA]
    assert asyncio.run(without.get_validators()) == []


def test_roster_from_config():
    assert isinstance(roster_from_config("static"), StaticRoster)
    assert isinstance(roster_from_config("metrics"), MetricRoster)
    assert isinstance(roster_from_config("bogus"), StaticRoster)
