"""
Enumerations for trend, volatility, forecast direction, trend strength and signal categories.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Trend(str, Enum):
    accelerating = "accelerating"
    decelerating = "decelerating"
    stable = "stable"

    @classmethod
    def from_change(cls, pct_change: float, threshold: float) -> Trend:
        if pct_change > threshold:
            return cls.accelerating
        if pct_change < -threshold:
            return cls.decelerating
        return cls.stable


class VolatilityLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"
    extreme = "extreme"

    @classmethod
    def from_cv(cls, cv: float) -> VolatilityLevel:
        # cut-offs validated in config.Settings
        from config import settings

        for upper, level in settings.stats_volatility_cv_levels:
            if cv < upper:
                return cls(level)
        return cls.extreme


class Direction(str, Enum):
    up = "up"
    down = "down"
    stable = "stable"


class TrendStrength(str, Enum):
    weak = "weak"
    moderate = "moderate"
    strong = "strong"

    @classmethod
    def from_r2(cls, r2: float) -> TrendStrength:
        from config import settings

        if r2 > settings.forecast_strength_strong_r2:
            return cls.strong
        if r2 > settings.forecast_strength_moderate_r2:
            return cls.moderate
        return cls.weak


class SignalCategory(str, Enum):
    economic = "economic"
    climate = "climate"
    tech = "tech"
    social = "social"
