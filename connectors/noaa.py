# connectors/noaa.py

import logging
from typing import List

from config import CSV_TAIL_ROWS
from datasources.base import CsvSeriesConnector
from datasources.helpers import fetch_text, parse_number, utc_date
from datasources.retry import retry
from engine.series import DataPoint

log = logging.getLogger(__name__)

VALUE_COLUMN = 3


def parse_co2_trend(text: str, tail: int = CSV_TAIL_ROWS) -> List[DataPoint]:
    lines = [line for line in text.splitlines() if line.strip() and not line.startswith("#")]
    points: List[DataPoint] = []
    for line in lines[-tail:]:
        parts = line.split(",")
        if len(parts) <= VALUE_COLUMN:
            continue
        try:
            year = int(parts[0].strip())
            month = int(parts[1].strip())
            date = utc_date(year, month)
        except ValueError:
            continue
        value = parse_number(parts[VALUE_COLUMN])
        if value is None:
            continue
        points.append(DataPoint(date=date, value=value))
    return points


class NoaaConnector(CsvSeriesConnector):
    """NOAA GML global monthly CO2 trend."""

    name = "noaa"

    @retry()
    async def fetch(self) -> List[DataPoint]:
        text = await fetch_text(
            self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="NOAA request failed",
            timeout_msg="NOAA request timed out",
            unavailable_msg="Cannot reach NOAA at",
        )
        points = parse_co2_trend(text)
        if not points:
            log.warning("NOAA CO2 feed yielded no rows")
        return points
