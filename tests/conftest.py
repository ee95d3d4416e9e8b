import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from api.routes.common import reset_provider
from engine.series import DataPoint

START = datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fresh_provider():
    """Drop the cached live-data provider so settings changes take effect per test."""
    reset_provider()
    yield
    reset_provider()


@pytest.fixture
def make_series():
    """Build a chronologically ordered series, one point every 30 days."""

    def _make(values):
        return [DataPoint(date=START + timedelta(days=30 * i), value=float(v)) for i, v in enumerate(values)]

    return _make
