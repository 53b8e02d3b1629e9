"""
pdm/layout/navbar.py
─────────────────────
Navigation bar with page links and the selected-equipment indicator.
"""

import dash_bootstrap_components as dbc
from dash import get_relative_path, html

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"
MUTED = "#8b949e"


def create_navbar() -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                # Brand
                dbc.NavbarBrand(
                    [
                        html.Span("⚙", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(
                            "PdM Monitor", style={"fontWeight": "700", "letterSpacing": ".04em"}
                        ),
                    ],
                    href=get_relative_path("/"),
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [
                            dbc.NavItem(
                                dbc.NavLink(
                                    "Monitor", href=get_relative_path("/"), id="nav-monitor", active="exact"
                                )
                            ),
                            dbc.NavItem(
                                dbc.NavLink(
                                    "Alerts", href=get_relative_path("/alerts"), id="nav-alerts", active="exact"
                                )
                            ),
                            dbc.NavItem(
                                dbc.NavLink(
                                    "Maintenance",
                                    href=get_relative_path("/maintenance"),
                                    id="nav-maintenance",
                                    active="exact",
                                )
                            ),
                            dbc.NavItem(
                                html.Span(
                                    id="navbar-selected",
                                    style={"fontSize": ".75rem", "color": MUTED, "marginLeft": "12px"},
                                ),
                                className="d-flex align-items-center",
                            ),
                        ],
                        className="ms-auto",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
