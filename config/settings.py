"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    PORT: int = int(os.getenv("PORT", "5000"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Simulation tick (backend) and dashboard polling (client), unsynchronized
    TICK_INTERVAL_S: float = float(os.getenv("TICK_INTERVAL_S", "2.0"))
    UPDATE_INTERVAL_MS: int = int(os.getenv("UPDATE_INTERVAL_MS", "2000"))

    # Simulation (unset → nondeterministic)
    SIMULATION_SEED: int | None = _optional_int("SIMULATION_SEED")

    # Alerts
    ALERT_LOG_CAP: int = int(os.getenv("ALERT_LOG_CAP", "200"))
    DASHBOARD_ALERT_ECHO: bool = os.getenv("DASHBOARD_ALERT_ECHO", "true").lower() == "true"

    # Dashboard rolling chart
    CHART_WINDOW: int = int(os.getenv("CHART_WINDOW", "20"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
