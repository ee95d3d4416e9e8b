"""
Combined analysis route returning statistics and forecast for one series in a single payload.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

from fastapi import APIRouter

from api.requests import SeriesRequest
from api.responses import AnalysisResponse
from api.routes.common import analyze_series
from api.routes.exception import handle_exceptions

log = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


@router.post("/analyze", summary="Statistics and forecast for a series")
@handle_exceptions
async def analyze(req: SeriesRequest) -> AnalysisResponse:
    series = req.to_series()
    current = req.resolve_current_value(series)
    log.debug("analyzing %d points against current value %s", len(series), current)
    return analyze_series(series, current)
