"""
Tests for connector construction and signal resolution in the live data provider.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from datasources.data_config import DataSourceSettings
from datasources.factory import DataSourceFactory
from datasources.provider import SignalDataProvider


def _settings(**overrides) -> DataSourceSettings:
    values = dict(fred_api_key="key", fred_url="http://fred", giss_url="http://giss", noaa_url="http://noaa")
    values.update(overrides)
    return DataSourceSettings(**values)


def test_factory_passes_connector_timeout_to_all_connectors():
    cfg = SimpleNamespace(
        fred_url="http://fred",
        fred_api_key="k",
        fred_limit=12,
        giss_url="http://giss",
        noaa_url="http://noaa",
        connector_timeout=42,
    )

    fred = DataSourceFactory.create_fred(cfg)
    assert (fred.timeout, fred.limit, fred.api_key) == (42, 12, "k")
    assert DataSourceFactory.create_giss(cfg).timeout == 42
    assert DataSourceFactory.create_noaa(cfg).timeout == 42


def test_live_sources():
    provider = SignalDataProvider(_settings())
    for signal_id in ("gdp-growth", "inflation-cpi", "unemployment", "consumer-sentiment", "temp-anomaly", "co2-level"):
        assert provider.has_live_source(signal_id)
    assert not provider.has_live_source("arctic-ice")


@pytest.mark.asyncio
async def test_fetch_signal_routes_to_fred_default_series(monkeypatch, make_series):
    provider = SignalDataProvider(_settings())
    requested = []

    async def observations(series_id, limit=None):
        requested.append(series_id)
        return make_series([1, 2, 3])

    monkeypatch.setattr(provider.fred, "observations", observations)
    points = await provider.fetch_signal("unemployment")
    assert requested == ["UNRATE"]
    assert len(points) == 3

    await provider.fetch_signal("gdp-growth")
    assert requested[-1] == "GDP"


@pytest.mark.asyncio
async def test_fetch_signal_csv_sources(monkeypatch, make_series):
    provider = SignalDataProvider(_settings())

    async def giss():
        return make_series([0.9, 1.1])

    async def noaa():
        return []

    monkeypatch.setattr(provider.giss, "fetch", giss)
    monkeypatch.setattr(provider.noaa, "fetch", noaa)

    assert [p.value for p in await provider.fetch_signal("temp-anomaly")] == [0.9, 1.1]
    assert await provider.fetch_signal("co2-level") is None


@pytest.mark.asyncio
async def test_fetch_signal_unknown():
    assert await SignalDataProvider(_settings()).fetch_signal("remote-work") is None


@pytest.mark.asyncio
async def test_fetch_signal_for_country(monkeypatch, make_series, caplog):
    provider = SignalDataProvider(_settings())
    requested = []

    async def observations(series_id, limit=None):
        requested.append(series_id)
        return make_series([5.1, 5.0]) if series_id == "LRUNTTTTGBM156S" else []

    monkeypatch.setattr(provider.fred, "observations", observations)

    assert len(await provider.fetch_signal_for_country("unemployment", "GB")) == 2
    assert requested == ["LRUNTTTTGBM156S"]

    with caplog.at_level("WARNING"):
        assert await provider.fetch_signal_for_country("consumer-sentiment", "BR") is None
        assert await provider.fetch_signal_for_country("unemployment", "FR") is None
    assert "No series id found" in caplog.text
    assert "No observations" in caplog.text


@pytest.mark.asyncio
async def test_unconfigured_fred_yields_no_data():
    provider = SignalDataProvider(_settings(fred_api_key=""))
    assert await provider.fetch_signal("inflation-cpi") is None
    assert await provider.fetch_signal_for_country("inflation-cpi", "US") is None
