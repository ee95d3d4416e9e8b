# connectors/giss.py

import logging
from typing import List

from config import CSV_TAIL_ROWS
from datasources.base import CsvSeriesConnector
from datasources.helpers import fetch_text, parse_number, utc_date
from datasources.retry import retry
from engine.series import DataPoint

log = logging.getLogger(__name__)

HEADER_LINES = 2
# "J-D" column: January to December annual mean
ANNUAL_MEAN_COLUMN = 13


def parse_gistemp(text: str, tail: int = CSV_TAIL_ROWS) -> List[DataPoint]:
    lines = [line for line in text.splitlines()[HEADER_LINES:] if line.strip()]
    points: List[DataPoint] = []
    for line in lines[-tail:]:
        parts = line.split(",")
        if len(parts) <= ANNUAL_MEAN_COLUMN or not parts[0].strip():
            continue
        try:
            year = int(parts[0].strip())
        except ValueError:
            continue
        value = parse_number(parts[ANNUAL_MEAN_COLUMN])
        if value is None:
            log.debug("GISTEMP row for %d has no annual mean", year)
            continue
        points.append(DataPoint(date=utc_date(year), value=value))
    return points


class GissConnector(CsvSeriesConnector):
    """NASA GISS global surface temperature anomaly (GISTEMP v4)."""

    name = "nasa-giss"

    @retry()
    async def fetch(self) -> List[DataPoint]:
        text = await fetch_text(
            self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="NASA GISS request failed",
            timeout_msg="NASA GISS request timed out",
            unavailable_msg="Cannot reach NASA GISS at",
        )
        return parse_gistemp(text)
