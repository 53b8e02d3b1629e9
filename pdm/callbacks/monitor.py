"""
pdm/callbacks/monitor.py
─────────────────────────
Live monitor callbacks.

poll_selected runs on every dashboard interval (any page): it extends the
rolling chart window and runs the dashboard's own maintenance check.
render_monitor draws the monitor page from the stored reading and a fresh
prediction.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime

import dash_bootstrap_components as dbc
from dash import Input, Output, State, html

from config.alerts import STATUS_COLORS
from config.settings import settings
from pdm.analytics.alerting import dashboard_alert
from pdm.data.store import MonitorStore, NotFoundError
from pdm.layout.components.kpi_card import kpi_card
from pdm.layout.components.risk_gauge import risk_gauge
from pdm.layout.components.trend_chart import empty_window, push_point, trend_figure

logger = logging.getLogger(__name__)

MUTED = "#8b949e"


def register(app, store: MonitorStore) -> None:

    @app.callback(
        [
            Output("store-chart", "data"),
            Output("maintenance-toast", "children"),
            Output("maintenance-toast", "is_open"),
        ],
        Input("interval-live", "n_intervals"),
        Input("store-equipment", "data"),
        State("store-chart", "data"),
    )
    def poll_selected(n_intervals: int, equipment_id: str | None, window: dict | None):
        window = window or empty_window()
        if window.get("equipment_id") != equipment_id:
            window = empty_window(equipment_id)
        if not equipment_id:
            return window, "", False

        reading = store.peek_reading(equipment_id)
        if reading is None:
            return window, "", False

        window = push_point(
            window,
            datetime.now().strftime("%H:%M:%S"),
            reading.temperature,
            reading.vibration,
            settings.CHART_WINDOW,
        )

        if not settings.DASHBOARD_ALERT_ECHO:
            return window, "", False
        payload = dashboard_alert(equipment_id, reading)
        if payload is None:
            return window, "", False

        # Overlaps the server-side emitter; see DASHBOARD_ALERT_ECHO
        store.create_alert(payload)
        logger.info("Dashboard maintenance alert for %s", equipment_id)
        return window, payload.message, True

    @app.callback(
        [
            Output("monitor-title", "children"),
            Output("monitor-kpis", "children"),
            Output("monitor-gauge", "children"),
            Output("monitor-sensor-json", "children"),
            Output("monitor-trend", "figure"),
        ],
        Input("store-chart", "data"),
        Input("store-equipment", "data"),
    )
    def render_monitor(window: dict | None, equipment_id: str | None):
        figure = trend_figure(window or empty_window())

        if not equipment_id:
            overview = [r.to_wire() for r in store.list_readings()[:3]]
            return (
                "Select equipment",
                _kpi_row("--", "--", MUTED),
                risk_gauge(None, "No selection"),
                json.dumps(overview, indent=2, ensure_ascii=False),
                figure,
            )

        try:
            equipment = store.get_equipment(equipment_id)
            prediction, reading = store.predict(equipment_id)
        except NotFoundError:
            return equipment_id, _kpi_row("--", "--", MUTED), risk_gauge(None, equipment_id), "{}", figure

        color = STATUS_COLORS[prediction.status]
        active = store.active_alert_count(equipment_id)
        return (
            f"{equipment.name} — {equipment.id}",
            _kpi_row(prediction.status.value, f"{prediction.failure_probability:.2f}", color, active),
            risk_gauge(prediction.failure_probability, equipment.name),
            json.dumps(reading.to_wire(), indent=2, ensure_ascii=False),
            figure,
        )


def _kpi_row(status: str, probability: str, color: str, active_alerts: int | None = None) -> dbc.Row:
    alerts_value = "--" if active_alerts is None else str(active_alerts)
    alerts_color = "#e8a020" if active_alerts else "#2ea44f"
    return dbc.Row(
        [
            dbc.Col(kpi_card("Status", status, color, value_background=color if status != "--" else None), xs=6, md=4),
            dbc.Col(kpi_card("Failure Probability", probability, color, border_color=color), xs=6, md=4),
            dbc.Col(kpi_card("Unacknowledged Alerts", alerts_value, alerts_color), xs=12, md=4),
        ],
        className="g-3",
    )
