"""
pdm/analytics/risk.py
──────────────────────
Heuristic failure-risk scorer.

failure_probability ∈ [0, 1] is a fixed weighted sum of normalized sensor
values. It is a proxy, not a calibrated model:

  temperature / 120   40%
  vibration   / 10    35%
  pressure    / 12    15%
  rpm         / 3000  10%

Status: > 0.75 Critical, > 0.5 Warning, else Healthy.
"""
from __future__ import annotations

import numpy as np

from config.alerts import (
    RISK_CEILINGS,
    RISK_WEIGHTS,
    STATUS_CRITICAL_ABOVE,
    STATUS_WARNING_ABOVE,
    RiskStatus,
)
from pdm.data.models import Prediction, Reading


def _normalized(reading: Reading, field: str) -> float:
    return float(np.clip(getattr(reading, field) / RISK_CEILINGS[field], 0.0, 1.0))


def failure_probability(reading: Reading) -> float:
    score = sum(RISK_WEIGHTS[field] * _normalized(reading, field) for field in RISK_WEIGHTS)
    return round(float(np.clip(score, 0.0, 1.0)), 2)


def classify(probability: float) -> RiskStatus:
    if probability > STATUS_CRITICAL_ABOVE:
        return RiskStatus.CRITICAL
    if probability > STATUS_WARNING_ABOVE:
        return RiskStatus.WARNING
    return RiskStatus.HEALTHY


def predict(reading: Reading) -> Prediction:
    """Score one reading. Deterministic, no hidden state."""
    probability = failure_probability(reading)
    return Prediction(failure_probability=probability, status=classify(probability))
