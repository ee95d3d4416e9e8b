"""
Routes initialization for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.statistics import router as statistics_router
from api.routes.forecast import router as forecast_router
from api.routes.analyze import router as analyze_router
from api.routes.signals import router as signals_router

router = APIRouter()

router.include_router(health_router)
router.include_router(statistics_router)
router.include_router(forecast_router)
router.include_router(analyze_router)
router.include_router(signals_router)

__all__ = ["router"]
