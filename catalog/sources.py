"""
Per-signal catalog metadata: display title, category, upstream publisher, publication frequency and whether a live API backs it.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from engine.enums import SignalCategory


@dataclass(frozen=True)
class DataSourceInfo:
    name: str
    frequency: str
    has_realtime_api: bool
    title: str = "Unknown"
    category: Optional[SignalCategory] = None


UNKNOWN_SOURCE = DataSourceInfo(name="Unknown", frequency="Unknown", has_realtime_api=False)

_ECONOMIC = SignalCategory.economic
_CLIMATE = SignalCategory.climate
_TECH = SignalCategory.tech
_SOCIAL = SignalCategory.social

SOURCES: Dict[str, DataSourceInfo] = {
    "gdp-growth": DataSourceInfo("FRED (Federal Reserve)", "Quarterly", True, "GDP Growth Rate", _ECONOMIC),
    "inflation-cpi": DataSourceInfo("FRED (Federal Reserve)", "Monthly", True, "Inflation Rate", _ECONOMIC),
    "unemployment": DataSourceInfo("FRED (Federal Reserve)", "Monthly", True, "Unemployment Rate", _ECONOMIC),
    "consumer-sentiment": DataSourceInfo("University of Michigan", "Monthly", True, "Consumer Sentiment", _ECONOMIC),
    "temp-anomaly": DataSourceInfo("NASA GISS", "Monthly", True, "Global Temperature Anomaly", _CLIMATE),
    "arctic-ice": DataSourceInfo("NSIDC", "Daily", False, "Arctic Sea Ice Extent", _CLIMATE),
    "co2-level": DataSourceInfo("NOAA", "Weekly", True, "Atmospheric CO₂", _CLIMATE),
    "ai-adoption": DataSourceInfo("Stack Overflow Trends", "Annual", False, "AI/ML Adoption Index", _TECH),
    "rust-growth": DataSourceInfo("GitHub", "Annual", False, "Rust Language Growth", _TECH),
    "cloud-native": DataSourceInfo("CNCF Survey", "Annual", False, "Cloud-Native Adoption", _TECH),
    "remote-work": DataSourceInfo("Google Trends", "Weekly", False, "Remote Work Interest", _SOCIAL),
    "mental-health": DataSourceInfo("Google Trends", "Weekly", False, "Mental Health Awareness", _SOCIAL),
    "climate-action": DataSourceInfo("Google Trends", "Weekly", False, "Climate Action Interest", _SOCIAL),
}


def source_info(signal_id: str) -> DataSourceInfo:
    return SOURCES.get(signal_id, UNKNOWN_SOURCE)


def signals_in_category(category: SignalCategory) -> List[str]:
    return [signal_id for signal_id, info in SOURCES.items() if info.category == SignalCategory(category)]
