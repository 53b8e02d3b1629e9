"""
config/alerts.py
────────────────
Risk scoring constants, alert trigger thresholds and display configuration.
"""

from enum import Enum


class AlertLevel(str, Enum):
    HIGH = "High"
    CRITICAL = "Critical"


class RiskStatus(str, Enum):
    HEALTHY = "Healthy"
    WARNING = "Warning"
    CRITICAL = "Critical"


class WorkOrderStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"


# ── Risk scorer ───────────────────────────────────────────────────────────────
# Normalization ceilings: value / ceiling, clamped to [0, 1]
RISK_CEILINGS: dict[str, float] = {
    "temperature": 120.0,
    "vibration": 10.0,
    "pressure": 12.0,
    "rpm": 3000.0,
}

RISK_WEIGHTS: dict[str, float] = {
    "temperature": 0.40,
    "vibration": 0.35,
    "pressure": 0.15,
    "rpm": 0.10,
}

# Strictly greater-than
STATUS_CRITICAL_ABOVE = 0.75
STATUS_WARNING_ABOVE = 0.5

# ── Server-side alert emitter ─────────────────────────────────────────────────
ALERT_PROBABILITY_MIN = 0.75    # ≥ → alert, and level Critical
ALERT_VIBRATION_ABOVE = 5.0     # mm/s
ALERT_TEMPERATURE_ABOVE = 105.0  # °C

# ── Dashboard maintenance check (independent of the emitter) ─────────────────
DASHBOARD_TEMPERATURE_ABOVE = 75.0
DASHBOARD_VIBRATION_ABOVE = 2.5

# ── Display ───────────────────────────────────────────────────────────────────
LEVEL_COLORS: dict[str, str] = {
    AlertLevel.HIGH: "#f0883e",
    AlertLevel.CRITICAL: "#da3633",
}

STATUS_COLORS: dict[str, str] = {
    RiskStatus.HEALTHY: "#10b981",
    RiskStatus.WARNING: "#f59e0b",
    RiskStatus.CRITICAL: "#ef4444",
}

MAX_ALERTS_DISPLAY = 100
