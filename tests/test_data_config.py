import pytest
from pydantic import ValidationError

from datasources.data_config import DataSourceSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SIGNAL_FRED_API_KEY", raising=False)
    cfg = DataSourceSettings(fred_api_key="")
    assert cfg.fred_configured is False
    assert cfg.fred_limit == 30
    assert cfg.connector_timeout == 30
    assert not cfg.fred_url.endswith("/")


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("SIGNAL_FRED_API_KEY", "  abc123  ")
    monkeypatch.setenv("SIGNAL_FRED_LIMIT", "60")
    monkeypatch.setenv("SIGNAL_NOAA_URL", "http://mirror.example/co2.csv/")
    cfg = DataSourceSettings()
    assert cfg.fred_api_key == "abc123"
    assert cfg.fred_configured is True
    assert cfg.fred_limit == 60
    assert cfg.noaa_url == "http://mirror.example/co2.csv"


@pytest.mark.parametrize("field", ["fred_limit", "connector_timeout"])
def test_positive_ints(field):
    with pytest.raises(ValidationError):
        DataSourceSettings(**{field: 0})
