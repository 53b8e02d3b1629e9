"""
pdm/pages/maintenance.py
─────────────────────────
Work-order page for the selected equipment.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

MUTED = "#8b949e"


def layout() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Maintenance", className="page-title"),
                    html.P(id="maintenance-subtitle", className="page-subtitle"),
                ],
                className="page-header",
            ),
            dbc.Row(
                [
                    # ── Create form ───────────────────────────────────────────
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("New Work Order", className="chart-title"),
                                dcc.Input(
                                    id="wo-title",
                                    type="text",
                                    placeholder="Title",
                                    value="",
                                    className="form-control mb-2",
                                ),
                                dcc.Textarea(
                                    id="wo-notes",
                                    placeholder="Notes (optional)",
                                    value="",
                                    className="form-control mb-2",
                                    style={"height": "90px"},
                                ),
                                html.Div(
                                    [
                                        dbc.Button("Create", id="wo-create-btn", color="primary", size="sm", n_clicks=0),
                                        dbc.Button(
                                            "Suggest inspection",
                                            id="wo-suggest-btn",
                                            color="secondary",
                                            size="sm",
                                            outline=True,
                                            n_clicks=0,
                                            className="ms-2",
                                        ),
                                    ],
                                ),
                                html.Div(id="wo-feedback", style={"fontSize": ".75rem", "color": MUTED, "marginTop": "8px"}),
                            ],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                    # ── Work-order list ───────────────────────────────────────
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Work Orders", className="chart-title"),
                                html.Div(id="wo-list"),
                            ],
                            className="chart-card",
                        ),
                        md=8,
                    ),
                ],
                className="g-3",
            ),
            dcc.Store(id="store-wo-version", data=0),
            dcc.Store(id="store-wo-closed", data=0),
        ],
        style={"padding": "1.5rem"},
    )
