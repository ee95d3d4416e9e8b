"""
Entry point for the Signal Analytics Engine API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from api.routes import router
from api.routes.common import get_provider, reset_provider

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    provider = get_provider()
    if not provider.settings.fred_configured:
        log.warning("SIGNAL_FRED_API_KEY not set; FRED-backed signals will report no live data")
    log.info("Signal Analytics Engine ready")
    try:
        yield
    finally:
        reset_provider()


app = FastAPI(
    title="Signal Analytics Engine",
    description="Descriptive statistics and trend forecasts for economic, climate, technology and social indicators.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=4322,
        log_level="info",
        access_log=True,
    )
