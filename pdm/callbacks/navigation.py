"""
pdm/callbacks/navigation.py — Page routing and equipment selection callbacks.
"""
from __future__ import annotations

from dash import ALL, Input, Output, State, ctx, no_update, strip_relative_path

from pdm.data.store import MonitorStore, NotFoundError
from pdm.pages import alerts, maintenance, monitor


def register(app, store: MonitorStore) -> None:
    """Register routing, navbar and equipment-selection callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def display_page(pathname: str | None):
        if not pathname:
            return monitor.layout(store)
        page = strip_relative_path(pathname) or ""
        if page == "alerts":
            return alerts.layout(store)
        if page == "maintenance":
            return maintenance.layout()
        return monitor.layout(store)

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open

    # ── Equipment selection ───────────────────────────────────────────────────
    @app.callback(
        Output("store-equipment", "data"),
        Input({"type": "equipment-item", "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def select_equipment(n_clicks_list: list):
        # Re-rendered items report n_clicks=0; only real clicks select
        if not ctx.triggered_id or not ctx.triggered[0]["value"]:
            return no_update
        return ctx.triggered_id["index"]

    @app.callback(
        Output({"type": "equipment-item", "index": ALL}, "active"),
        Input("store-equipment", "data"),
    )
    def highlight_selected(selected: str | None) -> list[bool]:
        return [item["id"]["index"] == selected for item in ctx.outputs_list]

    @app.callback(
        Output("navbar-selected", "children"),
        Input("store-equipment", "data"),
    )
    def show_selected(selected: str | None) -> str:
        if not selected:
            return "No equipment selected"
        try:
            eq = store.get_equipment(selected)
        except NotFoundError:
            return selected
        return f"{eq.name} — {eq.id}"
