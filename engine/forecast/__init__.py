"""
Forecasting logic for signal histories: an index-vs-value least squares primitive and multi-horizon linear projections with confidence, direction and trend strength.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.regression import RegressionResult, linear_regression
from engine.forecast.projection import ForecastResult, HorizonForecast, forecast as compute_forecast

__all__ = ["RegressionResult", "linear_regression", "ForecastResult", "HorizonForecast", "compute_forecast"]
