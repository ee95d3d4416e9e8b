import pytest

from engine.enums import Trend
from engine.formatting import format_percentile, format_stat_value, trend_arrow


@pytest.mark.parametrize(
    "value,decimals,expected",
    [(3.14159, 2, "3.14"), (2.0, 2, "2.00"), (-0.005, 1, "-0.0"), (1234.5, 0, "1234")],
)
def test_format_stat_value(value, decimals, expected):
    assert format_stat_value(value, decimals) == expected


@pytest.mark.parametrize(
    "p,expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (0, "0th"), (11, "11th"), (21, "21th"), (100, "100th")],
)
def test_format_percentile_suffixes(p, expected):
    assert format_percentile(p) == expected


def test_format_percentile_rounds_half_up():
    assert format_percentile(2.5) == "3rd"
    assert format_percentile(1.49) == "1st"
    assert format_percentile(91.666) == "92th"


def test_trend_arrow():
    assert trend_arrow(Trend.accelerating) == "↗"
    assert trend_arrow(Trend.decelerating) == "↘"
    assert trend_arrow(Trend.stable) == "→"
    assert trend_arrow("stable") == "→"
