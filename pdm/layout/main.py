"""
pdm/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing
  - dcc.Store for shared client-side state (selected equipment, chart window)
  - dcc.Interval for polling (unsynchronized with the backend tick)
  - Navbar, page content container and the maintenance-alert toast
"""
import dash_bootstrap_components as dbc
from dash import dcc, html

from config.settings import settings
from pdm.layout.components.trend_chart import empty_window
from pdm.layout.navbar import create_navbar


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Client-side state stores ──────────────────────────────────────
            dcc.Store(id="store-equipment", data=None),
            dcc.Store(id="store-chart", data=empty_window()),

            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Polling interval ──────────────────────────────────────────────
            dcc.Interval(
                id="interval-live",
                interval=settings.UPDATE_INTERVAL_MS,
                n_intervals=0,
            ),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Maintenance alert toast ───────────────────────────────────────
            dbc.Toast(
                id="maintenance-toast",
                header="Maintenance Alert",
                icon="danger",
                is_open=False,
                dismissable=True,
                duration=4000,
                style={"position": "fixed", "bottom": 10, "right": 10, "zIndex": 9999, "width": 360},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                [
                    html.Span("Predictive Maintenance Monitor"),
                    html.Span(" · "),
                    html.Span("Simulated telemetry · heuristic risk score"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
