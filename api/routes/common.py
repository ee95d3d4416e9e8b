"""
Shared utilities and dependencies for API route modules.

Provides the process-wide live data provider, translation of upstream
failures to HTTP responses, and the shared "run both engines" helper so
individual route files stay thin.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Awaitable, List, Optional, Sequence, TypeVar

from fastapi import HTTPException

from api.responses import AnalysisResponse, ForecastResponse, StatisticsResponse
from datasources.data_config import DataSourceSettings
from datasources.exceptions import DataSourceError
from datasources.provider import SignalDataProvider
from engine.forecast import compute_forecast
from engine.series import DataPoint
from engine.statistics import compute_statistics


_T = TypeVar("_T")
_providers: List[SignalDataProvider] = []


def get_provider() -> SignalDataProvider:
    if not _providers:
        _providers.append(SignalDataProvider(settings=DataSourceSettings()))
    return _providers[0]


def reset_provider() -> None:
    _providers.clear()


async def safe_call(coro: Awaitable[_T], status_code: int = 502) -> _T:
    try:
        return await coro
    except DataSourceError as exc:
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc


def analyze_series(
    series: Sequence[DataPoint],
    current_value: float,
    signal_id: Optional[str] = None,
    country: Optional[str] = None,
) -> AnalysisResponse:
    return AnalysisResponse(
        signal_id=signal_id,
        country=country,
        points=len(series),
        current_value=current_value,
        statistics=StatisticsResponse.from_result(compute_statistics(series, current_value)),
        forecast=ForecastResponse.from_result(compute_forecast(series, current_value)),
    )
