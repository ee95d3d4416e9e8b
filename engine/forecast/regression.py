"""
Ordinary least squares fit of value against sample index, with the coefficient of determination, used as the trend primitive for forecast projection.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r2: float


def linear_regression(values: Union[Sequence[float], np.ndarray]) -> RegressionResult:
    y = np.asarray(values, dtype=float)
    n = len(y)
    if n == 0:
        return RegressionResult(slope=0.0, intercept=0.0, r2=0.0)

    x = np.arange(n, dtype=float)
    x_mean = (n - 1) / 2.0
    y_mean = float(np.mean(y))

    dx = x - x_mean
    dy = y - y_mean
    ss_xy = float(np.sum(dx * dy))
    ss_xx = float(np.sum(dx * dx))
    ss_yy = float(np.sum(dy * dy))

    slope = ss_xy / ss_xx if ss_xx != 0 else 0.0
    intercept = y_mean - slope * x_mean
    r2 = (ss_xy * ss_xy) / (ss_xx * ss_yy) if ss_xx != 0 and ss_yy != 0 else 0.0

    return RegressionResult(slope=slope, intercept=intercept, r2=r2)
