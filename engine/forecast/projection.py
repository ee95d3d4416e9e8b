"""
Short, medium and long horizon projections from a linear trend fitted over a signal's history, with confidence scores that decay with horizon and are penalised by volatility, a per-horizon direction and an overall trend strength.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from config import settings
from engine.enums import Direction, TrendStrength
from engine.forecast.regression import linear_regression
from engine.series import DataPoint, values_of

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HorizonForecast:
    value: float
    confidence: float
    direction: Direction


@dataclass(frozen=True)
class ForecastResult:
    short_term: HorizonForecast
    medium_term: HorizonForecast
    long_term: HorizonForecast
    volatility_alert: bool
    trend_strength: TrendStrength


def _fallback(current_value: float) -> ForecastResult:
    short_c, medium_c, long_c = settings.forecast_fallback_confidence
    return ForecastResult(
        short_term=HorizonForecast(value=current_value, confidence=short_c, direction=Direction.stable),
        medium_term=HorizonForecast(value=current_value, confidence=medium_c, direction=Direction.stable),
        long_term=HorizonForecast(value=current_value, confidence=long_c, direction=Direction.stable),
        volatility_alert=False,
        trend_strength=TrendStrength.weak,
    )


def _volatility(vals: np.ndarray) -> float:
    mean = float(np.mean(vals))
    variance = float(np.mean((vals - mean) ** 2))
    if mean == 0:
        # zero-mean series: any spread counts as unbounded volatility
        log.debug("forecast volatility undefined for zero mean (variance=%s)", variance)
        return math.inf if variance > 0 else 0.0
    return math.sqrt(variance) / abs(mean)


def _direction(current: float, projected: float) -> Direction:
    if current == 0:
        if projected > 0:
            return Direction.up
        if projected < 0:
            return Direction.down
        return Direction.stable

    pct_change = (projected - current) / abs(current) * 100.0
    threshold = settings.forecast_direction_threshold_pct
    if pct_change > threshold:
        return Direction.up
    if pct_change < -threshold:
        return Direction.down
    return Direction.stable


def _confidences(r2: float, volatility: float) -> tuple[float, float, float]:
    base = min(r2 + settings.forecast_r2_bonus, settings.forecast_confidence_ceiling)
    penalty = min(
        volatility * settings.forecast_volatility_penalty_factor,
        settings.forecast_volatility_penalty_cap,
    )
    short_floor, medium_floor, long_floor = settings.forecast_confidence_floors
    medium_decay, long_decay = settings.forecast_confidence_decay

    short_c = max(base - penalty, short_floor)
    medium_c = max(short_c - medium_decay, medium_floor)
    long_c = max(medium_c - long_decay, long_floor)
    return short_c, medium_c, long_c


def forecast(series: Sequence[DataPoint], current_value: float) -> ForecastResult:
    if len(series) < settings.forecast_min_samples:
        return _fallback(current_value)

    vals = values_of(series)
    fit = linear_regression(vals)
    volatility = _volatility(vals)

    short_h, medium_h, long_h = settings.forecast_horizons
    short_v = current_value + fit.slope * short_h
    medium_v = current_value + fit.slope * medium_h
    long_v = current_value + fit.slope * long_h

    short_c, medium_c, long_c = _confidences(fit.r2, volatility)

    return ForecastResult(
        short_term=HorizonForecast(value=short_v, confidence=short_c, direction=_direction(current_value, short_v)),
        medium_term=HorizonForecast(value=medium_v, confidence=medium_c, direction=_direction(current_value, medium_v)),
        long_term=HorizonForecast(value=long_v, confidence=long_c, direction=_direction(current_value, long_v)),
        volatility_alert=volatility > settings.forecast_volatility_alert,
        trend_strength=TrendStrength.from_r2(fit.r2),
    )
