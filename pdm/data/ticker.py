"""
pdm/data/ticker.py
──────────────────
Periodic simulation driver.

Each tick, for every equipment:
  next reading → store → risk score → alert rule → alert log

The ticker runs on its own daemon thread, independent of dashboard or API
polling; readers may see data up to one tick old.
"""
from __future__ import annotations

import logging
import threading

import numpy as np

from config.settings import settings
from pdm.analytics.alerting import evaluate
from pdm.analytics.risk import predict
from pdm.data.models import Alert
from pdm.data.simulator import next_reading
from pdm.data.store import MonitorStore

logger = logging.getLogger(__name__)


class SimulationTicker:
    def __init__(
        self,
        store: MonitorStore,
        interval_s: float = settings.TICK_INTERVAL_S,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.store = store
        self.interval_s = interval_s
        self.rng = rng if rng is not None else np.random.default_rng(settings.SIMULATION_SEED)
        self.ticks = 0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def tick(self) -> list[Alert]:
        """Advance every equipment by one step. Returns the alerts emitted."""
        emitted: list[Alert] = []
        for equipment in self.store.list_equipment():
            reading = next_reading(equipment.id, self.store.peek_reading(equipment.id), self.rng)
            self.store.set_reading(reading)

            prediction = predict(reading)
            alert = evaluate(equipment.id, reading, prediction)
            if alert is not None:
                emitted.append(self.store.add_alert(alert))
                logger.warning("%s alert for %s: %s", alert.level.value, equipment.id, alert.message)

        self.ticks += 1
        logger.debug("Tick %d: %d alert(s)", self.ticks, len(emitted))
        return emitted

    # ── Thread lifecycle ──────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="simulation-ticker", daemon=True)
        self._thread.start()
        logger.info("Simulation ticker started (every %.1fs)", self.interval_s)

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Simulation ticker stopped after %d tick(s)", self.ticks)

    def _run(self) -> None:
        while not self._stop.wait(self.interval_s):
            try:
                self.tick()
            except Exception:
                logger.exception("Simulation tick failed")
