"""
Settings for the upstream series connectors: FRED credentials and endpoints for FRED, NASA GISS and NOAA.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
from config import (
    SIGNAL_CONNECTOR_TIMEOUT,
    SIGNAL_FRED_API_KEY,
    SIGNAL_FRED_LIMIT,
    SIGNAL_FRED_URL,
    SIGNAL_GISS_URL,
    SIGNAL_NOAA_URL,
)

class DataSourceSettings(BaseSettings):
    fred_api_key: str = SIGNAL_FRED_API_KEY
    fred_url: str = SIGNAL_FRED_URL
    fred_limit: int = SIGNAL_FRED_LIMIT
    giss_url: str = SIGNAL_GISS_URL
    noaa_url: str = SIGNAL_NOAA_URL
    connector_timeout: int = SIGNAL_CONNECTOR_TIMEOUT

    @field_validator("fred_url", "giss_url", "noaa_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return str(v).rstrip("/")

    @field_validator("fred_api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return str(v or "").strip()

    @field_validator("fred_limit", "connector_timeout")
    @classmethod
    def positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be a positive integer, got {v!r}")
        return v

    @property
    def fred_configured(self) -> bool:
        return bool(self.fred_api_key)

    model_config = {"env_prefix": "SIGNAL_", "extra": "ignore"}
