"""
tests/test_risk.py
───────────────────
Tests for the heuristic failure-risk scorer.
"""
import numpy as np
import pytest

from config.alerts import RiskStatus
from pdm.analytics.risk import classify, failure_probability, predict
from pdm.data.simulator import next_reading


class TestFailureProbability:
    def test_documented_example(self, hot_reading):
        # 110/120*0.4 + 1/10*0.35 + 5/12*0.15 + 1500/3000*0.1 ≈ 0.514
        assert failure_probability(hot_reading) == 0.51

    def test_maximum_reading_saturates(self, max_reading):
        assert failure_probability(max_reading) == 1.0

    def test_minimum_reading(self, min_reading):
        # 20/120*0.4 + 0.1/10*0.35 + 0.5/12*0.15 + 200/3000*0.1
        assert failure_probability(min_reading) == 0.08

    def test_always_in_unit_interval(self, rng):
        reading = None
        for _ in range(1000):
            reading = next_reading("EQ-001", reading, rng)
            assert 0.0 <= failure_probability(reading) <= 1.0

    def test_rounded_to_two_decimals(self, healthy_reading):
        p = failure_probability(healthy_reading)
        assert round(p, 2) == p


class TestClassify:
    @pytest.mark.parametrize(
        "probability, expected",
        [
            (0.0, RiskStatus.HEALTHY),
            (0.5, RiskStatus.HEALTHY),
            (0.51, RiskStatus.WARNING),
            (0.75, RiskStatus.WARNING),
            (0.76, RiskStatus.CRITICAL),
            (1.0, RiskStatus.CRITICAL),
        ],
    )
    def test_thresholds(self, probability, expected):
        assert classify(probability) == expected


class TestPredict:
    def test_hot_reading_is_warning(self, hot_reading):
        prediction = predict(hot_reading)
        assert prediction.failure_probability == 0.51
        assert prediction.status == RiskStatus.WARNING

    def test_healthy_reading(self, healthy_reading):
        assert predict(healthy_reading).status == RiskStatus.HEALTHY

    def test_max_reading_is_critical(self, max_reading):
        assert predict(max_reading).status == RiskStatus.CRITICAL

    def test_deterministic(self, hot_reading):
        assert predict(hot_reading) == predict(hot_reading)

    def test_status_consistent_with_probability(self):
        rng = np.random.default_rng(3)
        reading = None
        for _ in range(500):
            reading = next_reading("EQ-002", reading, rng)
            prediction = predict(reading)
            p = prediction.failure_probability
            if p > 0.75:
                assert prediction.status == RiskStatus.CRITICAL
            elif p > 0.5:
                assert prediction.status == RiskStatus.WARNING
            else:
                assert prediction.status == RiskStatus.HEALTHY
