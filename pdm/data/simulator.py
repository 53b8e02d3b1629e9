"""
pdm/data/simulator.py
─────────────────────
Synthetic sensor reading generator.

Generates:
  - A cold-start reading per equipment (wide independent uniform draws)
  - Subsequent readings as a bounded random walk from the previous one

Design:
  - Every draw comes from the caller's np.random.Generator, so a seeded
    generator reproduces a whole run
  - Walk steps are rounded first, then clamped to the envelope, so values
    can never leave their hard range regardless of the delta drawn
  - No storage side effects; the caller stores the returned reading
"""
from __future__ import annotations

import numpy as np

from config.equipment import SENSOR_ENVELOPES
from pdm.data.models import Reading, now_ms


def _finish(field: str, value: float) -> float | int:
    if field == "rpm":
        return int(round(value))
    return round(float(value), 2)


def cold_start_reading(
    equipment_id: str,
    rng: np.random.Generator,
    timestamp: int | None = None,
) -> Reading:
    """First reading for an equipment with no history."""
    values = {
        field: _finish(field, rng.uniform(env.start_low, env.start_high))
        for field, env in SENSOR_ENVELOPES.items()
    }
    return Reading(
        equipment_id=equipment_id,
        timestamp=timestamp if timestamp is not None else now_ms(),
        **values,
    )


def step_reading(
    previous: Reading,
    rng: np.random.Generator,
    timestamp: int | None = None,
) -> Reading:
    """
    One random-walk step: previous value + uniform delta, rounded, clamped.
    """
    values = {}
    for field, env in SENSOR_ENVELOPES.items():
        stepped = _finish(field, getattr(previous, field) + rng.uniform(env.delta_low, env.delta_high))
        clamped = np.clip(stepped, env.low, env.high)
        values[field] = int(clamped) if field == "rpm" else float(clamped)

    return Reading(
        equipment_id=previous.equipment_id,
        timestamp=timestamp if timestamp is not None else now_ms(),
        **values,
    )


def next_reading(
    equipment_id: str,
    previous: Reading | None,
    rng: np.random.Generator,
) -> Reading:
    if previous is None:
        return cold_start_reading(equipment_id, rng)
    return step_reading(previous, rng)
