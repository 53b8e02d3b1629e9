"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the PdM Monitor test suite.
"""
import os

import numpy as np
import pytest

os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("ALERT_LOG_CAP", "200")
os.environ.setdefault("LOG_LEVEL", "WARNING")

NOW_MS = 1_717_243_200_000  # 2024-06-01 12:00:00 UTC


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def now_ms() -> int:
    return NOW_MS


@pytest.fixture
def healthy_reading(now_ms):
    from pdm.data.models import Reading
    return Reading(
        equipment_id="EQ-001",
        timestamp=now_ms,
        temperature=60.0,
        vibration=1.0,
        pressure=3.0,
        rpm=1000,
    )


@pytest.fixture
def hot_reading(now_ms):
    """Over the 105 °C rule but only a Warning-level probability (≈0.51)."""
    from pdm.data.models import Reading
    return Reading(
        equipment_id="EQ-001",
        timestamp=now_ms,
        temperature=110.0,
        vibration=1.0,
        pressure=5.0,
        rpm=1500,
    )


@pytest.fixture
def max_reading(now_ms):
    """Every field at its clamp ceiling."""
    from pdm.data.models import Reading
    return Reading(
        equipment_id="EQ-002",
        timestamp=now_ms,
        temperature=130.0,
        vibration=12.0,
        pressure=15.0,
        rpm=4000,
    )


@pytest.fixture
def min_reading(now_ms):
    """Every field at its clamp floor."""
    from pdm.data.models import Reading
    return Reading(
        equipment_id="EQ-003",
        timestamp=now_ms,
        temperature=20.0,
        vibration=0.1,
        pressure=0.5,
        rpm=200,
    )


@pytest.fixture
def store():
    from pdm.data.store import MonitorStore
    return MonitorStore()


@pytest.fixture
def seeded_store(store, rng):
    store.seed_readings(rng)
    return store


@pytest.fixture
def client(seeded_store):
    from flask import Flask

    from pdm.api import routes

    server = Flask(__name__)
    routes.register(server, seeded_store)
    server.config["TESTING"] = True
    return server.test_client()
