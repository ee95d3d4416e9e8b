"""
Display helpers for statistics: fixed-point values, ordinal percentile labels and trend arrows.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math

from engine.enums import Trend

_TREND_ARROWS = {
    Trend.accelerating: "↗",
    Trend.decelerating: "↘",
    Trend.stable: "→",
}


def format_stat_value(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}"


def format_percentile(percentile: float) -> str:
    # half-up rounding; only 1, 2 and 3 take a non-"th" suffix
    p = int(math.floor(percentile + 0.5))
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(p, "th")
    return f"{p}{suffix}"


def trend_arrow(trend: Trend) -> str:
    return _TREND_ARROWS[Trend(trend)]
