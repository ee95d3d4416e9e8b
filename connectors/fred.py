# connectors/fred.py

import logging
from typing import Any, Dict, List, Optional

from datasources.base import SeriesConnector
from datasources.exceptions import MalformedPayload
from datasources.helpers import fetch_json, parse_iso_date, parse_number
from datasources.retry import retry
from engine.series import DataPoint

log = logging.getLogger(__name__)

MISSING_VALUE = "."


def parse_observations(payload: Dict[str, Any]) -> List[DataPoint]:
    """Turn a FRED observations payload (newest first) into chronological points."""
    observations = payload.get("observations") if isinstance(payload, dict) else None
    if not isinstance(observations, list):
        raise MalformedPayload("FRED response has no observations list")

    points: List[DataPoint] = []
    for obs in observations:
        if not isinstance(obs, dict):
            continue
        raw = obs.get("value")
        if raw == MISSING_VALUE:
            continue
        value = parse_number(raw)
        date = parse_iso_date(obs.get("date", ""))
        if value is None or date is None:
            log.debug("skipping unparsable FRED observation %r", obs)
            continue
        points.append(DataPoint(date=date, value=value))
    points.reverse()
    return points


class FredConnector(SeriesConnector):
    name = "fred"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 30,
        limit: int = 30,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(base_url, timeout=timeout, headers=headers)
        self.api_key = api_key
        self.limit = limit

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @retry()
    async def observations(self, series_id: str, limit: Optional[int] = None) -> List[DataPoint]:
        if not self.configured:
            log.warning("FRED API key not configured, no live data for %s", series_id)
            return []

        url = f"{self.base_url}/series/observations"
        params: Dict[str, Any] = {
            "series_id": series_id,
            "api_key": self.api_key,
            "file_type": "json",
            "sort_order": "desc",
            "limit": limit or self.limit,
        }
        payload = await fetch_json(
            url,
            params=params,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg=f"FRED query for {series_id} failed",
            timeout_msg=f"FRED query for {series_id} timed out",
            unavailable_msg="Cannot reach FRED at",
        )
        return parse_observations(payload)
