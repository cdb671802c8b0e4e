"""Tests for up / down / stable trend classification."""

import math

import pytest

from crm_metrics.schemas.analytics import Trend
from crm_metrics.services.trends import classify_trend


class TestClassifyTrend:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (105, Trend.up),
            (95, Trend.down),
            (100, Trend.stable),
            (94.99, Trend.down),
            (95.01, Trend.stable),
            (104.99, Trend.stable),
            (120, Trend.up),
        ],
    )
    def test_five_percent_band(self, value, expected):
        assert classify_trend(value, 100) == expected

    def test_team_example(self):
        # 50 against a 60 average: 50 <= 57
        assert classify_trend(50.0, 60.0) == Trend.down
        assert classify_trend(70.0, 60.0) == Trend.up

    def test_custom_threshold(self):
        assert classify_trend(108, 100, threshold_pct=10) == Trend.stable
        assert classify_trend(110, 100, threshold_pct=10) == Trend.up


class TestZeroBaseline:
    def test_positive_is_up(self):
        assert classify_trend(3, 0) == Trend.up

    def test_negative_is_down(self):
        assert classify_trend(-1, 0) == Trend.down

    def test_zero_is_stable(self):
        assert classify_trend(0, 0) == Trend.stable


class TestInvertedTrend:
    def test_faster_than_team_is_up(self):
        assert classify_trend(1.0, 1.5, invert=True) == Trend.up

    def test_slower_than_team_is_down(self):
        assert classify_trend(2.0, 1.5, invert=True) == Trend.down

    def test_close_to_team_is_stable(self):
        assert classify_trend(1.5, 1.52, invert=True) == Trend.stable

    def test_matches_argument_swap(self):
        for person, team in ((1.0, 1.5), (2.0, 1.5), (1.5, 1.5), (0.0, 1.5), (3.0, 0.0)):
            assert classify_trend(person, team, invert=True) == classify_trend(team, person)

    def test_instant_responder_is_up(self):
        assert classify_trend(0.0, 1.5, invert=True) == Trend.up


class TestNonFinite:
    @pytest.mark.parametrize(
        "value,average",
        [(math.nan, 100), (100, math.nan), (math.inf, 100), (100, -math.inf)],
    )
    def test_non_finite_is_stable(self, value, average):
        assert classify_trend(value, average) == Trend.stable
