"""
Factory for creating series connectors based on configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from connectors.fred import FredConnector
from connectors.giss import GissConnector
from connectors.noaa import NoaaConnector


class DataSourceFactory:

    @staticmethod
    def create_fred(config):
        return FredConnector(
            config.fred_url,
            config.fred_api_key,
            timeout=config.connector_timeout,
            limit=config.fred_limit,
        )

    @staticmethod
    def create_giss(config):
        return GissConnector(config.giss_url, timeout=config.connector_timeout)

    @staticmethod
    def create_noaa(config):
        return NoaaConnector(config.noaa_url, timeout=config.connector_timeout)
