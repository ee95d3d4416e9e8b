"""
Base connector and shared attributes for upstream series data sources

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from engine.series import DataPoint


class SeriesConnector(ABC):
    name: str = ""

    def __init__(self, base_url: str, timeout: int = 30, headers: Optional[Dict[str, str]] = None):
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self.headers = headers or {}

    def _headers(self) -> Dict[str, str]:
        """Basic header set applied to every outbound request."""
        return {"Accept": "application/json, text/csv;q=0.9, */*;q=0.5", **self.headers}


class CsvSeriesConnector(SeriesConnector):
    """Connector for a single published CSV file yielding one series."""

    @abstractmethod
    async def fetch(self) -> List[DataPoint]: ...
