"""
config/equipment.py
───────────────────
Equipment seed list and sensor simulation envelopes.

Every sensor field has:
  - a hard clamp range the random walk can never leave
  - a per-tick uniform delta range (asymmetric, slight upward drift)
  - a cold-start range used for the first reading of an equipment
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class SensorEnvelope:
    """Simulation bounds for one sensor field."""
    low: float           # clamp floor
    high: float          # clamp ceiling
    delta_low: float     # walk step lower bound
    delta_high: float    # walk step upper bound
    start_low: float     # cold-start draw lower bound
    start_high: float    # cold-start draw upper bound
    unit: str = ""


# ── Sensor envelopes ──────────────────────────────────────────────────────────
SENSOR_ENVELOPES: dict[str, SensorEnvelope] = {
    "temperature": SensorEnvelope(20.0, 130.0, -2.5, 3.5, 60.0, 110.0, "°C"),
    "vibration": SensorEnvelope(0.1, 12.0, -0.5, 0.6, 0.5, 6.5, "mm/s"),
    "pressure": SensorEnvelope(0.5, 15.0, -0.4, 0.5, 1.0, 10.0, "bar"),
    "rpm": SensorEnvelope(200.0, 4000.0, -80.0, 120.0, 800.0, 2400.0, "rpm"),
}

SENSOR_FIELDS = list(SENSOR_ENVELOPES.keys())

# ── Equipment registry (fixed at process start) ───────────────────────────────
EQUIPMENT_SEED: list[dict] = [
    {
        "id": "EQ-001",
        "name": "Pump A1",
        "type": "Pump",
        "location": "Plant 1",
        "model": "P100",
        "warranty_date": "2026-06-30",
    },
    {
        "id": "EQ-002",
        "name": "Compressor B2",
        "type": "Compressor",
        "location": "Plant 2",
        "model": "C200",
        "warranty_date": "2027-01-12",
    },
    {
        "id": "EQ-003",
        "name": "Motor M3",
        "type": "Motor",
        "location": "Plant 1",
        "model": "M300",
        "warranty_date": "2025-11-02",
    },
]

EQUIPMENT_IDS = [eq["id"] for eq in EQUIPMENT_SEED]
