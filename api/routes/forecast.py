"""
Forecast routes projecting a caller-supplied series over short, medium and long horizons.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import SeriesRequest
from api.responses import ForecastResponse
from api.routes.exception import handle_exceptions
from engine.forecast import compute_forecast

router = APIRouter(tags=["Forecast"])


@router.post("/forecast", summary="Linear trend projection with per-horizon confidence and direction")
@handle_exceptions
async def series_forecast(req: SeriesRequest) -> ForecastResponse:
    series = req.to_series()
    current = req.resolve_current_value(series)
    return ForecastResponse.from_result(compute_forecast(series, current))
