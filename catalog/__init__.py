"""
Static catalog of countries, FRED series identifiers and data source metadata for signals.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from catalog.countries import (
    COUNTRIES,
    COUNTRY_ENABLED_SIGNALS,
    FRED_SERIES_MAP,
    Country,
    country_by_code,
    countries_for_signal,
    default_country,
    fred_series_for_country,
)
from catalog.sources import SOURCES, DataSourceInfo, signals_in_category, source_info

__all__ = [
    "COUNTRIES",
    "COUNTRY_ENABLED_SIGNALS",
    "FRED_SERIES_MAP",
    "SOURCES",
    "Country",
    "DataSourceInfo",
    "country_by_code",
    "countries_for_signal",
    "default_country",
    "fred_series_for_country",
    "signals_in_category",
    "source_info",
]
