"""
Descriptive statistics for a signal's history: extrema with their timestamps, central tendency, population dispersion, percentile rank of a current reading, trailing moving averages, year-over-year change, short-term trend and coefficient-of-variation volatility classification.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

import numpy as np

from config import settings
from engine.enums import Trend, VolatilityLevel
from engine.series import DataPoint, values_of

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extreme:
    value: float
    date: datetime


@dataclass(frozen=True)
class MovingAverages:
    ma7: Optional[float]
    ma30: Optional[float]
    ma90: Optional[float]


@dataclass(frozen=True)
class SeriesStatistics:
    min: Extreme
    max: Extreme
    mean: float
    median: float
    std_dev: float
    variance: float
    percentile_rank: float
    moving_averages: MovingAverages
    yoy_change: Optional[float]
    trend: Trend
    volatility_index: VolatilityLevel


def _default_statistics() -> SeriesStatistics:
    now = datetime.now(timezone.utc)
    return SeriesStatistics(
        min=Extreme(value=0.0, date=now),
        max=Extreme(value=0.0, date=now),
        mean=0.0,
        median=0.0,
        std_dev=0.0,
        variance=0.0,
        percentile_rank=settings.stats_empty_percentile_rank,
        moving_averages=MovingAverages(ma7=None, ma30=None, ma90=None),
        yoy_change=None,
        trend=Trend.stable,
        volatility_index=VolatilityLevel.moderate,
    )


def _extrema_indices(vals: np.ndarray) -> tuple[int, int]:
    # strict comparisons keep the first occurrence of a tied extreme
    min_idx = max_idx = 0
    for i in range(1, len(vals)):
        if vals[i] < vals[min_idx]:
            min_idx = i
        if vals[i] > vals[max_idx]:
            max_idx = i
    return min_idx, max_idx


def _trailing_mean(vals: np.ndarray, window: int) -> Optional[float]:
    if window <= 0 or len(vals) < window:
        return None
    return float(np.mean(vals[-window:]))


def _yoy_change(vals: np.ndarray, lag: int) -> Optional[float]:
    n = len(vals)
    if n < lag:
        return None
    year_ago = float(vals[n - lag])
    if year_ago == 0:
        return None
    return (float(vals[n - 1]) - year_ago) / abs(year_ago) * 100.0


def _trend(vals: np.ndarray) -> Trend:
    window = settings.stats_trend_window
    if len(vals) < window * 2:
        return Trend.stable

    recent_avg = float(np.mean(vals[-window:]))
    older_avg = float(np.mean(vals[-2 * window:-window]))

    if older_avg == 0:
        log.debug("trend baseline is zero, classifying by sign of recent mean %s", recent_avg)
        if recent_avg > 0:
            return Trend.accelerating
        if recent_avg < 0:
            return Trend.decelerating
        return Trend.stable

    pct_change = (recent_avg - older_avg) / abs(older_avg) * 100.0
    return Trend.from_change(pct_change, settings.stats_trend_threshold_pct)


def _volatility(std_dev: float, mean: float) -> VolatilityLevel:
    if mean == 0:
        return VolatilityLevel.moderate
    cv = std_dev / abs(mean) * 100.0
    return VolatilityLevel.from_cv(cv)


def compute(series: Sequence[DataPoint], current_value: float) -> SeriesStatistics:
    if not series:
        return _default_statistics()

    vals = values_of(series)
    n = len(vals)

    min_idx, max_idx = _extrema_indices(vals)

    mean = float(np.mean(vals))
    median = float(np.median(np.sort(vals)))
    variance = float(np.mean((vals - mean) ** 2))
    std_dev = math.sqrt(variance)

    below = int(np.count_nonzero(vals < current_value))
    percentile_rank = below / n * 100.0

    short_w, medium_w, long_w = settings.stats_ma_windows
    moving_averages = MovingAverages(
        ma7=_trailing_mean(vals, short_w),
        ma30=_trailing_mean(vals, medium_w),
        ma90=_trailing_mean(vals, long_w),
    )

    return SeriesStatistics(
        min=Extreme(value=float(vals[min_idx]), date=series[min_idx].date),
        max=Extreme(value=float(vals[max_idx]), date=series[max_idx].date),
        mean=mean,
        median=median,
        std_dev=std_dev,
        variance=variance,
        percentile_rank=percentile_rank,
        moving_averages=moving_averages,
        yoy_change=_yoy_change(vals, settings.stats_yoy_lag),
        trend=_trend(vals),
        volatility_index=_volatility(std_dev, mean),
    )
