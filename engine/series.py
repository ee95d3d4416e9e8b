"""
Time series data model shared by the statistics and forecast engines, with helpers to extract values and normalise caller-supplied observations into chronological order.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Sequence

import numpy as np


@dataclass(frozen=True)
class DataPoint:
    date: datetime
    value: float


def values_of(series: Sequence[DataPoint]) -> np.ndarray:
    return np.array([p.value for p in series], dtype=float)


def _sort_key(point: DataPoint) -> datetime:
    # naive timestamps are taken to be UTC so mixed inputs stay comparable
    if point.date.tzinfo is None:
        return point.date.replace(tzinfo=timezone.utc)
    return point.date


def normalize(points: Iterable[DataPoint]) -> List[DataPoint]:
    """Return a new list ordered by ``date``; ties keep their input order."""
    return sorted(points, key=_sort_key)
