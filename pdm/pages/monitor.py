"""
pdm/pages/monitor.py
─────────────────────
Live equipment monitor page.

Static structure; reading, prediction and chart data injected via callbacks.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from pdm.data.store import MonitorStore

MUTED = "#8b949e"


def _equipment_list(store: MonitorStore) -> dbc.ListGroup:
    return dbc.ListGroup(
        [
            dbc.ListGroupItem(
                [
                    html.Div(eq.name, style={"fontWeight": "600", "fontSize": ".9rem"}),
                    html.Div(f"{eq.id} · {eq.type} · {eq.location}", style={"fontSize": ".68rem", "color": MUTED}),
                ],
                id={"type": "equipment-item", "index": eq.id},
                action=True,
                n_clicks=0,
            )
            for eq in store.list_equipment()
        ],
    )


def layout(store: MonitorStore) -> html.Div:
    return html.Div(
        [
            # ── Page header ───────────────────────────────────────────────────
            html.Div(
                [
                    html.H2("Select equipment", id="monitor-title", className="page-title"),
                    html.P(
                        "Live telemetry and heuristic failure risk",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),
            dbc.Row(
                [
                    # ── Equipment selector ────────────────────────────────────
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Equipment", className="chart-title"),
                                _equipment_list(store),
                            ],
                            className="chart-card",
                        ),
                        md=3,
                    ),
                    # ── Prediction + chart ────────────────────────────────────
                    dbc.Col(
                        [
                            html.Div(id="monitor-kpis", className="mb-3"),
                            dbc.Row(
                                [
                                    dbc.Col(
                                        html.Div(
                                            [
                                                html.Div("Failure Risk", className="chart-title"),
                                                html.Div(id="monitor-gauge"),
                                            ],
                                            className="chart-card",
                                        ),
                                        md=5,
                                    ),
                                    dbc.Col(
                                        html.Div(
                                            [
                                                html.Div("Latest Reading", className="chart-title"),
                                                html.Pre(
                                                    id="monitor-sensor-json",
                                                    style={"fontSize": ".75rem", "color": "#c9d1d9", "margin": 0},
                                                ),
                                            ],
                                            className="chart-card",
                                        ),
                                        md=7,
                                    ),
                                ],
                                className="g-3 mb-3",
                            ),
                            html.Div(
                                [
                                    html.Div("Temperature / Vibration", className="chart-title"),
                                    dcc.Graph(id="monitor-trend", config={"displayModeBar": False}),
                                ],
                                className="chart-card",
                            ),
                        ],
                        md=9,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
