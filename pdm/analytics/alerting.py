"""
pdm/analytics/alerting.py
──────────────────────────
Alert trigger rules.

Server-side emitter (runs every tick):
  fires when probability ≥ 0.75 OR vibration > 5 OR temperature > 105
  level Critical when probability ≥ 0.75, else High

No deduplication: a unit that stays over threshold emits one alert per tick.

Dashboard maintenance check (runs on every dashboard poll):
  fires when temperature > 75 OR vibration > 2.5, always Critical.
  It overlaps the server-side rule and therefore double-counts.
"""
from __future__ import annotations

from config.alerts import (
    ALERT_PROBABILITY_MIN,
    ALERT_TEMPERATURE_ABOVE,
    ALERT_VIBRATION_ABOVE,
    DASHBOARD_TEMPERATURE_ABOVE,
    DASHBOARD_VIBRATION_ABOVE,
    AlertLevel,
)
from pdm.data.models import Alert, AlertCreate, Prediction, Reading


def should_alert(reading: Reading, prediction: Prediction) -> bool:
    return (
        prediction.failure_probability >= ALERT_PROBABILITY_MIN
        or reading.vibration > ALERT_VIBRATION_ABOVE
        or reading.temperature > ALERT_TEMPERATURE_ABOVE
    )


def alert_level(prediction: Prediction) -> AlertLevel:
    if prediction.failure_probability >= ALERT_PROBABILITY_MIN:
        return AlertLevel.CRITICAL
    return AlertLevel.HIGH


def evaluate(equipment_id: str, reading: Reading, prediction: Prediction) -> Alert | None:
    """Build the alert for a (reading, prediction) pair, or None if nothing fires."""
    if not should_alert(reading, prediction):
        return None
    level = alert_level(prediction)
    return Alert(
        equipment_id=equipment_id,
        level=level,
        message=(
            f"Detected {level.value} condition: "
            f"temp={reading.temperature:g}°C vib={reading.vibration:g} mm/s"
        ),
    )


def dashboard_alert(equipment_id: str, reading: Reading) -> AlertCreate | None:
    """Payload the dashboard posts back when its own maintenance check trips."""
    if reading.temperature <= DASHBOARD_TEMPERATURE_ABOVE and reading.vibration <= DASHBOARD_VIBRATION_ABOVE:
        return None
    return AlertCreate(
        equipment_id=equipment_id,
        level=AlertLevel.CRITICAL,
        message=(
            f"⚠️ Maintenance Alert: {equipment_id} — "
            f"Temp: {reading.temperature:g}°C, Vib: {reading.vibration:g} mm/s"
        ),
    )
