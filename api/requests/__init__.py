from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from engine.series import DataPoint, normalize as normalize_points


class DataPointIn(BaseModel):
    date: datetime
    value: float


class SeriesRequest(BaseModel):
    points: List[DataPointIn] = Field(default_factory=list, max_length=100_000)
    current_value: Optional[float] = None
    normalize: bool = True

    def to_series(self) -> List[DataPoint]:
        series = [DataPoint(date=p.date, value=p.value) for p in self.points]
        return normalize_points(series) if self.normalize else series

    def resolve_current_value(self, series: List[DataPoint]) -> float:
        if self.current_value is not None:
            return self.current_value
        return series[-1].value if series else 0.0
