"""
pdm/pages/alerts.py
────────────────────
Alert log page with filters and acknowledgement.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.alerts import AlertLevel
from pdm.data.store import MonitorStore

MUTED = "#8b949e"

_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}


def _filter(label: str, component_id: str, options: list[dict]) -> dbc.Col:
    return dbc.Col(
        [
            html.Label(label, style=_LABEL_STYLE),
            dcc.Dropdown(
                id=component_id,
                options=options,
                value="all",
                clearable=False,
                style={"fontSize": ".85rem"},
                className="dark-dropdown",
            ),
        ],
        md=3,
    )


def layout(store: MonitorStore) -> html.Div:
    level_options = [{"label": "All", "value": "all"}] + [
        {"label": level.value, "value": level.value} for level in AlertLevel
    ]
    equipment_options = [{"label": "All", "value": "all"}] + [
        {"label": f"{eq.name} ({eq.id})", "value": eq.id} for eq in store.list_equipment()
    ]
    status_options = [
        {"label": "All", "value": "all"},
        {"label": "Unacknowledged", "value": "unacked"},
        {"label": "Acknowledged", "value": "acked"},
    ]

    return html.Div(
        [
            html.Div(
                [
                    html.H2("Alerts", className="page-title"),
                    html.P(
                        "Threshold exceedances raised by the simulator and the dashboard",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),
            # ── Summary badges ─────────────────────────────────────────────────
            html.Div(id="alerts-summary-badges", className="mb-3"),
            # ── Filter row ─────────────────────────────────────────────────────
            dbc.Row(
                [
                    _filter("Level", "alerts-filter-level", level_options),
                    _filter("Equipment", "alerts-filter-equipment", equipment_options),
                    _filter("Status", "alerts-filter-status", status_options),
                ],
                className="g-3 mb-3",
            ),
            dcc.Store(id="alerts-ack-version", data=0),
            # ── Alert table ────────────────────────────────────────────────────
            html.Div(
                html.Div(id="alerts-table"),
                className="chart-card",
            ),
        ],
        style={"padding": "1.5rem"},
    )
