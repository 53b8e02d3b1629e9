"""
tests/test_alerting.py
───────────────────────
Tests for the alert trigger rules.
"""
from config.alerts import AlertLevel, RiskStatus
from pdm.analytics.alerting import alert_level, dashboard_alert, evaluate, should_alert
from pdm.analytics.risk import predict
from pdm.data.models import Prediction, Reading


def _reading(now_ms, **overrides) -> Reading:
    values = {"temperature": 20.0, "vibration": 0.1, "pressure": 0.5, "rpm": 200}
    values.update(overrides)
    return Reading(equipment_id="EQ-001", timestamp=now_ms, **values)


class TestShouldAlert:
    def test_calm_reading_does_not_fire(self, healthy_reading):
        assert not should_alert(healthy_reading, predict(healthy_reading))

    def test_temperature_rule(self, hot_reading):
        assert should_alert(hot_reading, predict(hot_reading))

    def test_temperature_boundary_is_exclusive(self, now_ms):
        reading = _reading(now_ms, temperature=105.0)
        assert not should_alert(reading, predict(reading))

    def test_vibration_rule(self, now_ms):
        reading = _reading(now_ms, vibration=5.01)
        assert should_alert(reading, predict(reading))

    def test_vibration_boundary_is_exclusive(self, now_ms):
        reading = _reading(now_ms, vibration=5.0)
        assert not should_alert(reading, predict(reading))

    def test_probability_rule_is_inclusive(self, now_ms):
        reading = _reading(now_ms)
        prediction = Prediction(failure_probability=0.75, status=RiskStatus.WARNING)
        assert should_alert(reading, prediction)


class TestAlertLevel:
    def test_critical_at_075(self):
        assert alert_level(Prediction(failure_probability=0.75, status=RiskStatus.WARNING)) == AlertLevel.CRITICAL

    def test_high_below_075(self):
        assert alert_level(Prediction(failure_probability=0.74, status=RiskStatus.WARNING)) == AlertLevel.HIGH


class TestEvaluate:
    def test_documented_example_emits_high(self, hot_reading):
        alert = evaluate("EQ-001", hot_reading, predict(hot_reading))
        assert alert is not None
        assert alert.level == AlertLevel.HIGH
        assert alert.equipment_id == "EQ-001"
        assert alert.acknowledged is False

    def test_message_summarizes_temperature_and_vibration(self, hot_reading):
        alert = evaluate("EQ-001", hot_reading, predict(hot_reading))
        assert alert.message == "Detected High condition: temp=110°C vib=1 mm/s"

    def test_critical_reading(self, max_reading):
        alert = evaluate("EQ-002", max_reading, predict(max_reading))
        assert alert.level == AlertLevel.CRITICAL

    def test_none_when_calm(self, healthy_reading):
        assert evaluate("EQ-001", healthy_reading, predict(healthy_reading)) is None

    def test_fresh_alert_each_call(self, hot_reading):
        prediction = predict(hot_reading)
        a1 = evaluate("EQ-001", hot_reading, prediction)
        a2 = evaluate("EQ-001", hot_reading, prediction)
        assert a1.id != a2.id


class TestDashboardAlert:
    def test_calm_reading(self, healthy_reading):
        assert dashboard_alert("EQ-001", healthy_reading) is None

    def test_fires_on_lower_temperature_than_emitter(self, now_ms):
        reading = _reading(now_ms, temperature=76.0)
        payload = dashboard_alert("EQ-001", reading)
        assert payload is not None
        assert payload.level == AlertLevel.CRITICAL
        assert payload.message.endswith("Temp: 76°C, Vib: 0.1 mm/s")

    def test_fires_on_vibration(self, now_ms):
        assert dashboard_alert("EQ-001", _reading(now_ms, vibration=2.6)) is not None

    def test_boundaries_exclusive(self, now_ms):
        assert dashboard_alert("EQ-001", _reading(now_ms, temperature=75.0, vibration=2.5)) is None

    def test_message_keeps_fractional_values(self, now_ms):
        reading = _reading(now_ms, temperature=106.25, vibration=3.4)
        payload = dashboard_alert("EQ-003", reading)
        assert payload.message.endswith("Temp: 106.25°C, Vib: 3.4 mm/s")
