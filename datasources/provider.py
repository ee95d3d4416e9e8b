"""
Provider resolving signal ids, optionally scoped to a country, to live series from the configured upstream connectors.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Awaitable, Callable, Dict, List, Optional

from catalog import fred_series_for_country
from config import FRED_DEFAULT_SERIES
from engine.series import DataPoint
from .data_config import DataSourceSettings
from .factory import DataSourceFactory

log = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[List[DataPoint]]]


class SignalDataProvider:
    def __init__(self, settings: DataSourceSettings):
        self.settings = settings
        self.fred = DataSourceFactory.create_fred(settings)
        self.giss = DataSourceFactory.create_giss(settings)
        self.noaa = DataSourceFactory.create_noaa(settings)

    def _fetchers(self) -> Dict[str, Fetcher]:
        fetchers: Dict[str, Fetcher] = {
            signal_id: (lambda sid=series_id: self.fred.observations(sid))
            for signal_id, series_id in FRED_DEFAULT_SERIES.items()
        }
        fetchers["temp-anomaly"] = self.giss.fetch
        fetchers["co2-level"] = self.noaa.fetch
        return fetchers

    def has_live_source(self, signal_id: str) -> bool:
        return signal_id in self._fetchers()

    async def fetch_signal(self, signal_id: str) -> Optional[List[DataPoint]]:
        fetcher = self._fetchers().get(signal_id)
        if fetcher is None:
            return None
        points = await fetcher()
        return points or None

    async def fetch_signal_for_country(self, signal_id: str, country_code: str) -> Optional[List[DataPoint]]:
        series_id = fred_series_for_country(signal_id, country_code)
        if not series_id:
            log.warning("No series id found for signal %s and country %s", signal_id, country_code)
            return None
        points = await self.fred.observations(series_id)
        if not points:
            log.warning("No observations for %s (%s/%s)", series_id, signal_id, country_code)
            return None
        return points
