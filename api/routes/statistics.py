"""
Descriptive statistics route for a caller-supplied series.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import SeriesRequest
from api.responses import StatisticsResponse
from api.routes.exception import handle_exceptions
from engine.statistics import compute_statistics

router = APIRouter(tags=["Statistics"])


@router.post("/statistics", summary="Extrema, dispersion, moving averages, YoY change, trend and volatility")
@handle_exceptions
async def series_statistics(req: SeriesRequest) -> StatisticsResponse:
    series = req.to_series()
    current = req.resolve_current_value(series)
    return StatisticsResponse.from_result(compute_statistics(series, current))
