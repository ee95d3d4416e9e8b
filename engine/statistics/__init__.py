"""
Descriptive statistics over a signal's history, exposed as ``compute_statistics``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.statistics.compute import (
    Extreme,
    MovingAverages,
    SeriesStatistics,
    compute as compute_statistics,
)

__all__ = ["Extreme", "MovingAverages", "SeriesStatistics", "compute_statistics"]
