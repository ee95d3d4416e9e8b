"""
Signal catalog routes, live analysis of upstream series optionally scoped to a country, and CSV / JSON export of those series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import List, Literal, Optional, Tuple

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from api.responses import (
    AnalysisResponse,
    CountryListResponse,
    CountryOut,
    SignalListResponse,
    SourceResponse,
)
from api.routes.common import analyze_series, get_provider, safe_call
from api.routes.exception import handle_exceptions
from catalog import (
    COUNTRIES,
    COUNTRY_ENABLED_SIGNALS,
    SOURCES,
    country_by_code,
    countries_for_signal,
    fred_series_for_country,
    signals_in_category,
    source_info,
)
from engine.enums import SignalCategory
from engine.export import to_csv, to_json
from engine.series import DataPoint

log = logging.getLogger(__name__)

router = APIRouter(tags=["Signals"])

EXPORT_MEDIA_TYPES = {"csv": "text/csv", "json": "application/json"}


def _source(signal_id: str) -> SourceResponse:
    return SourceResponse.from_info(
        signal_id,
        source_info(signal_id),
        countries_enabled=signal_id in COUNTRY_ENABLED_SIGNALS,
    )


async def _live_series(signal_id: str, country: Optional[str]) -> Tuple[List[DataPoint], Optional[str]]:
    """Fetch the live series for a signal, raising 404 when there is nothing to serve."""
    provider = get_provider()

    if country:
        if country_by_code(country) is None:
            raise HTTPException(status_code=404, detail=f"unknown country {country!r}")
        code = country.upper()
        series = await safe_call(provider.fetch_signal_for_country(signal_id, code))
    else:
        if not provider.has_live_source(signal_id):
            raise HTTPException(status_code=404, detail=f"signal {signal_id!r} has no live source")
        code = None
        series = await safe_call(provider.fetch_signal(signal_id))

    if not series:
        raise HTTPException(status_code=404, detail=f"no live data for signal {signal_id!r}")
    return series, code


@router.get("/signals", summary="Catalog of signals, optionally filtered by category")
@handle_exceptions
async def list_signals(category: Optional[SignalCategory] = None) -> SignalListResponse:
    signal_ids = signals_in_category(category) if category else list(SOURCES)
    return SignalListResponse(category=category, signals=[_source(sid) for sid in signal_ids])


@router.get("/countries", summary="All countries known to the catalog")
@handle_exceptions
async def list_countries() -> CountryListResponse:
    return CountryListResponse(signal_id="*", countries=[CountryOut.from_country(c) for c in COUNTRIES])


@router.get("/signals/{signal_id}/source", summary="Upstream source metadata for a signal")
@handle_exceptions
async def signal_source(signal_id: str) -> SourceResponse:
    return _source(signal_id)


@router.get("/signals/{signal_id}/countries", summary="Countries selectable for a signal")
@handle_exceptions
async def signal_countries(signal_id: str) -> CountryListResponse:
    return CountryListResponse(
        signal_id=signal_id,
        countries=[
            CountryOut.from_country(c, fred_series=fred_series_for_country(signal_id, c.code))
            for c in countries_for_signal(signal_id)
        ],
    )


@router.get("/signals/{signal_id}/analysis", summary="Statistics and forecast over the live upstream series")
@handle_exceptions
async def signal_analysis(signal_id: str, country: Optional[str] = None) -> AnalysisResponse:
    series, code = await _live_series(signal_id, country)
    current = series[-1].value
    log.info("analyzing %s (%s): %d points", signal_id, code or "default", len(series))
    return analyze_series(series, current, signal_id=signal_id, country=code)


@router.get("/signals/{signal_id}/export", summary="Download the live upstream series as CSV or JSON")
@handle_exceptions
async def signal_export(
    signal_id: str,
    format: Literal["csv", "json"] = "csv",
    country: Optional[str] = None,
) -> Response:
    series, code = await _live_series(signal_id, country)

    if format == "json":
        content = to_json(signal_id, source_info(signal_id).title, series)
    else:
        content = to_csv(series)

    filename = f"{signal_id}-{code.lower()}-data.{format}" if code else f"{signal_id}-data.{format}"
    return Response(
        content=content,
        media_type=EXPORT_MEDIA_TYPES[format],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
