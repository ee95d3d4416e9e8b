"""
Tests for the statistics, forecast, analysis, catalog and health routes.
"""

from __future__ import annotations

import json

import pytest
from fastapi import HTTPException

from api.requests import SeriesRequest
from api.routes import analyze as analyze_route
from api.routes import forecast as forecast_route
from api.routes import health as health_route
from api.routes import signals as signals_route
from api.routes import statistics as statistics_route
from api.routes.common import get_provider, reset_provider, safe_call
from datasources.exceptions import DataSourceUnavailable, QueryTimeout


def _request(values, **kwargs):
    points = [{"date": f"20{10 + i // 12:02d}-{i % 12 + 1:02d}-01T00:00:00Z", "value": v} for i, v in enumerate(values)]
    return SeriesRequest(points=points, **kwargs)


class DummyProvider:
    def __init__(self, series=None, error=None, fred_configured=True, live=True):
        self.series = series
        self.live = live
        self.error = error
        self.calls = []
        self.settings = type("S", (), {"fred_configured": fred_configured})()

    def has_live_source(self, signal_id):
        return self.live

    async def fetch_signal(self, signal_id):
        self.calls.append((signal_id, None))
        if self.error:
            raise self.error
        return self.series

    async def fetch_signal_for_country(self, signal_id, country_code):
        self.calls.append((signal_id, country_code))
        if self.error:
            raise self.error
        return self.series


@pytest.mark.asyncio
async def test_statistics_route():
    resp = await statistics_route.series_statistics(_request([100 + 2 * i for i in range(12)]))
    assert resp.yoy_change == pytest.approx(22.0)
    assert resp.trend == "accelerating"
    assert resp.percentile_rank == pytest.approx(11 / 12 * 100)


@pytest.mark.asyncio
async def test_statistics_route_empty_series():
    resp = await statistics_route.series_statistics(SeriesRequest())
    assert resp.percentile_rank == 50.0
    assert resp.volatility_index == "moderate"


@pytest.mark.asyncio
async def test_forecast_route_uses_explicit_current_value():
    resp = await forecast_route.series_forecast(_request([100 + i for i in range(10)], current_value=200.0))
    assert resp.short_term.value == pytest.approx(203.0)
    assert resp.trend_strength == "strong"


@pytest.mark.asyncio
async def test_analyze_route():
    resp = await analyze_route.analyze(_request([3.3, 3.1, 3.6, 3.2, 3.9, 4.1, 3.8]))
    assert resp.points == 7
    assert resp.current_value == 3.8
    assert resp.signal_id is None
    assert resp.statistics.max.value == 4.1
    assert resp.forecast.short_term.confidence >= resp.forecast.long_term.confidence


@pytest.mark.asyncio
async def test_signal_source_and_countries():
    src = await signals_route.signal_source("unemployment")
    assert src.name == "FRED (Federal Reserve)"
    assert src.countries_enabled is True

    listing = await signals_route.signal_countries("unemployment")
    us = next(c for c in listing.countries if c.code == "US")
    assert us.fred_series == "UNRATE"
    assert us.is_default is True

    assert (await signals_route.signal_countries("co2-level")).countries == []
    assert len((await signals_route.list_countries()).countries) == len(listing.countries)


@pytest.mark.asyncio
async def test_signal_analysis_default_series(monkeypatch, make_series):
    provider = DummyProvider(series=make_series([5, 6, 7, 8, 9, 10]))
    monkeypatch.setattr(signals_route, "get_provider", lambda: provider)

    resp = await signals_route.signal_analysis("unemployment")
    assert provider.calls == [("unemployment", None)]
    assert resp.country is None
    assert resp.current_value == 10.0
    assert resp.forecast.short_term.value == pytest.approx(13.0)


@pytest.mark.asyncio
async def test_signal_analysis_for_country(monkeypatch, make_series):
    provider = DummyProvider(series=make_series([4.0, 4.1, 4.2]))
    monkeypatch.setattr(signals_route, "get_provider", lambda: provider)

    resp = await signals_route.signal_analysis("unemployment", country="gb")
    assert provider.calls == [("unemployment", "GB")]
    assert resp.country == "GB"


@pytest.mark.asyncio
async def test_signal_analysis_unknown_country(monkeypatch):
    monkeypatch.setattr(signals_route, "get_provider", lambda: DummyProvider())
    with pytest.raises(HTTPException) as exc:
        await signals_route.signal_analysis("unemployment", country="XX")
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_signal_analysis_no_data(monkeypatch):
    monkeypatch.setattr(signals_route, "get_provider", lambda: DummyProvider(series=[]))
    with pytest.raises(HTTPException) as exc:
        await signals_route.signal_analysis("co2-level")
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_signal_analysis_without_live_source_skips_fetch(monkeypatch):
    provider = DummyProvider(live=False)
    monkeypatch.setattr(signals_route, "get_provider", lambda: provider)
    with pytest.raises(HTTPException) as exc:
        await signals_route.signal_analysis("remote-work")
    assert exc.value.status_code == 404
    assert "no live source" in exc.value.detail
    assert provider.calls == []


@pytest.mark.asyncio
async def test_signal_analysis_upstream_failure(monkeypatch):
    provider = DummyProvider(error=DataSourceUnavailable("Cannot reach FRED at http://fred"))
    monkeypatch.setattr(signals_route, "get_provider", lambda: provider)
    with pytest.raises(HTTPException) as exc:
        await signals_route.signal_analysis("gdp-growth")
    assert exc.value.status_code == 502
    assert "Cannot reach FRED" in exc.value.detail


@pytest.mark.asyncio
async def test_health(monkeypatch):
    monkeypatch.setattr(health_route, "get_provider", lambda: DummyProvider(fred_configured=False))
    assert await health_route.health() == {"status": "ok", "fred_configured": False}


@pytest.mark.asyncio
async def test_safe_call_maps_data_source_errors():
    async def boom():
        raise QueryTimeout("FRED query timed out")

    with pytest.raises(HTTPException) as exc:
        await safe_call(boom())
    assert exc.value.status_code == 502

    async def ok():
        return 1

    assert await safe_call(ok()) == 1


def test_provider_is_cached_until_reset():
    first = get_provider()
    assert get_provider() is first
    reset_provider()
    assert get_provider() is not first


@pytest.mark.asyncio
async def test_list_signals_by_category():
    climate = await signals_route.list_signals(category="climate")
    assert climate.category == "climate"
    assert [s.signal_id for s in climate.signals] == ["temp-anomaly", "arctic-ice", "co2-level"]
    assert climate.signals[0].title == "Global Temperature Anomaly"

    everything = await signals_route.list_signals()
    assert everything.category is None
    assert len(everything.signals) == 13


@pytest.mark.asyncio
async def test_signal_export_csv(monkeypatch, make_series):
    provider = DummyProvider(series=make_series([421.5, 422.0]))
    monkeypatch.setattr(signals_route, "get_provider", lambda: provider)

    resp = await signals_route.signal_export("co2-level", format="csv")
    assert resp.media_type == "text/csv"
    assert resp.body.decode("utf-8") == "Date,Value\n2020-01-01,421.5\n2020-01-31,422"
    assert 'filename="co2-level-data.csv"' in resp.headers["content-disposition"]


@pytest.mark.asyncio
async def test_signal_export_json_for_country(monkeypatch, make_series):
    provider = DummyProvider(series=make_series([4.2, 4.3]))
    monkeypatch.setattr(signals_route, "get_provider", lambda: provider)

    resp = await signals_route.signal_export("unemployment", format="json", country="de")
    payload = json.loads(resp.body.decode("utf-8"))
    assert provider.calls == [("unemployment", "DE")]
    assert resp.media_type == "application/json"
    assert payload["signal"] == "unemployment"
    assert payload["title"] == "Unemployment Rate"
    assert payload["dataPoints"] == [{"date": "2020-01-01", "value": 4.2}, {"date": "2020-01-31", "value": 4.3}]
    assert payload["exportedAt"].endswith("Z")
    assert 'filename="unemployment-de-data.json"' in resp.headers["content-disposition"]


@pytest.mark.asyncio
async def test_signal_export_without_data(monkeypatch):
    monkeypatch.setattr(signals_route, "get_provider", lambda: DummyProvider(series=None))
    with pytest.raises(HTTPException) as exc:
        await signals_route.signal_export("gdp-growth", format="json")
    assert exc.value.status_code == 404
