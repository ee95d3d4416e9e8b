"""
Response models for API endpoints, built from the engine and catalog result dataclasses.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from catalog import Country, DataSourceInfo
from engine.enums import Direction, SignalCategory, Trend, TrendStrength, VolatilityLevel
from engine.forecast import ForecastResult
from engine.formatting import format_percentile, trend_arrow
from engine.statistics import SeriesStatistics


class ExtremeOut(BaseModel):

    value: float
    date: datetime


class MovingAveragesOut(BaseModel):

    ma7: Optional[float] = None
    ma30: Optional[float] = None
    ma90: Optional[float] = None


class StatisticsResponse(BaseModel):

    min: ExtremeOut
    max: ExtremeOut
    mean: float
    median: float
    std_dev: float
    variance: float
    percentile_rank: float
    percentile_label: str
    moving_averages: MovingAveragesOut
    yoy_change: Optional[float] = None
    trend: Trend
    trend_arrow: str
    volatility_index: VolatilityLevel

    @classmethod
    def from_result(cls, stats: SeriesStatistics) -> StatisticsResponse:
        return cls(
            **asdict(stats),
            percentile_label=format_percentile(stats.percentile_rank),
            trend_arrow=trend_arrow(stats.trend),
        )


class HorizonOut(BaseModel):

    value: float
    confidence: float
    direction: Direction


class ForecastResponse(BaseModel):

    short_term: HorizonOut
    medium_term: HorizonOut
    long_term: HorizonOut
    volatility_alert: bool
    trend_strength: TrendStrength

    @classmethod
    def from_result(cls, result: ForecastResult) -> ForecastResponse:
        return cls(**asdict(result))


class AnalysisResponse(BaseModel):

    signal_id: Optional[str] = None
    country: Optional[str] = None
    points: int
    current_value: float
    statistics: StatisticsResponse
    forecast: ForecastResponse


class CountryOut(BaseModel):

    code: str
    name: str
    flag: str
    fred_suffix: Optional[str] = None
    is_default: bool = False
    fred_series: Optional[str] = None

    @classmethod
    def from_country(cls, country: Country, fred_series: Optional[str] = None) -> CountryOut:
        return cls(**asdict(country), fred_series=fred_series)


class SourceResponse(BaseModel):

    signal_id: str
    title: str
    category: Optional[SignalCategory] = None
    name: str
    frequency: str
    has_realtime_api: bool
    countries_enabled: bool

    @classmethod
    def from_info(cls, signal_id: str, info: DataSourceInfo, countries_enabled: bool) -> SourceResponse:
        return cls(signal_id=signal_id, countries_enabled=countries_enabled, **asdict(info))


class CountryListResponse(BaseModel):

    signal_id: str
    countries: List[CountryOut]


class SignalListResponse(BaseModel):

    category: Optional[SignalCategory] = None
    signals: List[SourceResponse]
