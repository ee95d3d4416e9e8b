"""
Constants and configuration for the Signal Analytics Engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings


SIGNAL_FRED_API_KEY: str = os.getenv("SIGNAL_FRED_API_KEY", "")
SIGNAL_FRED_URL: str = os.getenv("SIGNAL_FRED_URL", "https://api.stlouisfed.org/fred").rstrip("/")
SIGNAL_FRED_LIMIT: int = int(os.getenv("SIGNAL_FRED_LIMIT", "30"))
SIGNAL_GISS_URL: str = os.getenv(
    "SIGNAL_GISS_URL", "https://data.giss.nasa.gov/gistemp/tabledata_v4/GLB.Ts+dSST.csv"
)
SIGNAL_NOAA_URL: str = os.getenv(
    "SIGNAL_NOAA_URL", "https://gml.noaa.gov/webdata/ccgg/trends/co2/co2_trend_gl.csv"
)
SIGNAL_CONNECTOR_TIMEOUT: int = int(os.getenv("SIGNAL_CONNECTOR_TIMEOUT", "30"))

# number of trailing rows kept from the climate CSV feeds
CSV_TAIL_ROWS = 30

# live signals served by FRED for the default (US) country
FRED_DEFAULT_SERIES: Dict[str, str] = {
    "gdp-growth": "GDP",
    "inflation-cpi": "CPIAUCSL",
    "unemployment": "UNRATE",
    "consumer-sentiment": "UMCSENT",
}


class Settings(BaseSettings):
    # connector retries
    retry_attempts: int = 3
    retry_delay_seconds: float = 0.5
    retry_backoff: float = 2.0

    # descriptive statistics
    stats_empty_percentile_rank: float = 50.0
    stats_ma_windows: Tuple[int, int, int] = (7, 30, 90)
    stats_yoy_lag: int = 12
    # trend compares the mean of the last `stats_trend_window` points with the
    # mean of the window immediately before it
    stats_trend_window: int = 3
    stats_trend_threshold_pct: float = 5.0
    # coefficient of variation cut-offs (percent): (upper bound, level)
    stats_volatility_cv_levels: List[Tuple[float, str]] = [
        (10.0, "low"),
        (25.0, "moderate"),
        (50.0, "high"),
    ]

    # forecast projection
    forecast_min_samples: int = 5
    forecast_horizons: Tuple[int, int, int] = (3, 12, 24)
    forecast_fallback_confidence: Tuple[float, float, float] = (0.3, 0.2, 0.1)
    forecast_r2_bonus: float = 0.1
    forecast_confidence_ceiling: float = 0.95
    forecast_volatility_penalty_factor: float = 0.5
    forecast_volatility_penalty_cap: float = 0.4
    forecast_confidence_floors: Tuple[float, float, float] = (0.2, 0.15, 0.1)
    forecast_confidence_decay: Tuple[float, float] = (0.15, 0.2)
    forecast_volatility_alert: float = 0.3
    forecast_direction_threshold_pct: float = 2.0
    forecast_strength_strong_r2: float = 0.7
    forecast_strength_moderate_r2: float = 0.4

    @field_validator("stats_volatility_cv_levels")
    @classmethod
    def known_increasing_levels(cls, v: List[Tuple[float, str]]) -> List[Tuple[float, str]]:
        from engine.enums import VolatilityLevel

        known = {level.value for level in VolatilityLevel}
        previous = None
        for upper, level in v:
            if level not in known:
                raise ValueError(f"unknown volatility level {level!r}, expected one of {sorted(known)}")
            if previous is not None and upper <= previous:
                raise ValueError(f"volatility cut-offs must increase, got {upper} after {previous}")
            previous = upper
        return v

    model_config = {
        "env_prefix": "SIGNAL_",
        "extra": "ignore",
    }


settings = Settings()
