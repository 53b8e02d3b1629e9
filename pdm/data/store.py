"""
pdm/data/store.py
─────────────────
In-memory state container for the monitor process.

Holds:
  - the fixed equipment list
  - the current reading per equipment (overwritten every tick)
  - the alert log (newest first, bounded)
  - the work-order log (newest first)

One MonitorStore is created at startup and handed to the simulation ticker,
the REST routes and the dashboard callbacks.

Thread safety: every read and every read-modify-write runs under a single
instance-level lock. Records handed out are copies.
"""
from __future__ import annotations

import logging
import threading

import numpy as np
from pydantic import ValidationError

from config.alerts import WorkOrderStatus
from config.equipment import EQUIPMENT_SEED
from config.settings import settings
from pdm.analytics.risk import predict
from pdm.data.models import (
    Alert,
    AlertCreate,
    Equipment,
    Prediction,
    Reading,
    WorkOrder,
    WorkOrderCreate,
)
from pdm.data.simulator import cold_start_reading

logger = logging.getLogger(__name__)


class NotFoundError(KeyError):
    """Unknown equipment, alert or work-order id."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Not found"


class BadRequestError(ValueError):
    """Missing or invalid field on a create request."""


def validation_message(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class MonitorStore:
    def __init__(
        self,
        equipment: list[Equipment] | None = None,
        alert_cap: int = settings.ALERT_LOG_CAP,
    ) -> None:
        self._lock = threading.RLock()
        if equipment is None:
            equipment = [Equipment(**eq) for eq in EQUIPMENT_SEED]
        self._equipment: dict[str, Equipment] = {eq.id: eq for eq in equipment}
        self._readings: dict[str, Reading] = {}
        self._alerts: list[Alert] = []
        self._work_orders: list[WorkOrder] = []
        self.alert_cap = alert_cap

    # ── Equipment ─────────────────────────────────────────────────────────────

    def list_equipment(self) -> list[Equipment]:
        return list(self._equipment.values())

    def get_equipment(self, equipment_id: str) -> Equipment:
        try:
            return self._equipment[equipment_id]
        except KeyError:
            raise NotFoundError("Equipment not found") from None

    # ── Readings ──────────────────────────────────────────────────────────────

    def seed_readings(self, rng: np.random.Generator) -> None:
        """Cold-start reading for every equipment."""
        with self._lock:
            for equipment_id in self._equipment:
                self._readings[equipment_id] = cold_start_reading(equipment_id, rng)

    def get_reading(self, equipment_id: str) -> Reading:
        with self._lock:
            reading = self._readings.get(equipment_id)
        if reading is None:
            raise NotFoundError("Equipment not found")
        return reading.model_copy()

    def peek_reading(self, equipment_id: str) -> Reading | None:
        with self._lock:
            reading = self._readings.get(equipment_id)
        return reading.model_copy() if reading else None

    def set_reading(self, reading: Reading) -> None:
        with self._lock:
            self._readings[reading.equipment_id] = reading

    def list_readings(self) -> list[Reading]:
        """All current readings, newest timestamp first."""
        with self._lock:
            readings = [r.model_copy() for r in self._readings.values()]
        return sorted(readings, key=lambda r: r.timestamp, reverse=True)

    def predict(self, equipment_id: str) -> tuple[Prediction, Reading]:
        """Score the stored reading. Does not advance the simulation."""
        reading = self.get_reading(equipment_id)
        return predict(reading), reading

    # ── Alerts ────────────────────────────────────────────────────────────────

    def list_alerts(self) -> list[Alert]:
        with self._lock:
            return [a.model_copy() for a in self._alerts]

    def add_alert(self, alert: Alert) -> Alert:
        """Prepend (newest first); drop the oldest entries beyond the cap."""
        with self._lock:
            self._alerts.insert(0, alert)
            if len(self._alerts) > self.alert_cap:
                del self._alerts[self.alert_cap:]
        return alert.model_copy()

    def create_alert(self, payload: AlertCreate | dict) -> Alert:
        """Client-supplied alert. Equipment existence is not checked."""
        if isinstance(payload, dict):
            try:
                payload = AlertCreate.model_validate(payload)
            except ValidationError as exc:
                raise BadRequestError(validation_message(exc)) from None
        alert = Alert(
            equipment_id=payload.equipment_id,
            level=payload.level,
            message=payload.message,
        )
        logger.info("Client alert %s (%s) for %s", alert.id, alert.level.value, alert.equipment_id)
        return self.add_alert(alert)

    def acknowledge_alert(self, alert_id: str) -> Alert:
        with self._lock:
            for alert in self._alerts:
                if alert.id == alert_id:
                    alert.acknowledged = True
                    logger.info("Alert %s acknowledged", alert_id)
                    return alert.model_copy()
        raise NotFoundError("Alert not found")

    def active_alert_count(self, equipment_id: str | None = None) -> int:
        """Count unacknowledged alerts."""
        with self._lock:
            return sum(
                1
                for a in self._alerts
                if not a.acknowledged and (equipment_id is None or a.equipment_id == equipment_id)
            )

    # ── Work orders ───────────────────────────────────────────────────────────

    def list_work_orders(self, equipment_id: str | None = None) -> list[WorkOrder]:
        with self._lock:
            return [
                w.model_copy()
                for w in self._work_orders
                if equipment_id is None or w.equipment_id == equipment_id
            ]

    def create_work_order(self, payload: WorkOrderCreate | dict) -> WorkOrder:
        if isinstance(payload, dict):
            try:
                payload = WorkOrderCreate.model_validate(payload)
            except ValidationError as exc:
                raise BadRequestError(validation_message(exc)) from None
        order = WorkOrder(
            equipment_id=payload.equipment_id,
            title=payload.title,
            notes=payload.notes,
        )
        with self._lock:
            self._work_orders.insert(0, order)
        logger.info("Work order %s opened for %s: %s", order.id, order.equipment_id, order.title)
        return order.model_copy()

    def close_work_order(self, work_order_id: str) -> WorkOrder:
        with self._lock:
            for order in self._work_orders:
                if order.id == work_order_id:
                    order.status = WorkOrderStatus.CLOSED
                    logger.info("Work order %s closed", work_order_id)
                    return order.model_copy()
        raise NotFoundError("Work order not found")
