"""
pdm/callbacks/maintenance.py
─────────────────────────────
Work-order page callbacks: create, suggest, list, close.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import pandas as pd
from dash import ALL, Input, Output, State, ctx, html, no_update

from config.alerts import WorkOrderStatus
from pdm.data.models import WorkOrder
from pdm.data.store import BadRequestError, MonitorStore, NotFoundError
from pdm.layout.components.alert_badge import alert_badge

BORDER = "#30363d"
MUTED = "#8b949e"

_STATUS_COLORS = {WorkOrderStatus.OPEN: "#58a6ff", WorkOrderStatus.CLOSED: "#2ea44f"}


def _work_order_item(order: WorkOrder) -> html.Div:
    created = pd.to_datetime(order.created_at, unit="ms", utc=True).strftime("%Y-%m-%d %H:%M:%S")
    actions = [alert_badge(order.status.value, _STATUS_COLORS[order.status])]
    if order.status == WorkOrderStatus.OPEN:
        actions.append(
            dbc.Button(
                "Close",
                id={"type": "wo-close-btn", "index": order.id},
                n_clicks=0,
                size="sm",
                color="success",
                outline=True,
                className="ms-2",
            )
        )
    return html.Div(
        [
            html.Div(
                [
                    html.Strong(order.title),
                    html.Div(f"{created} UTC", style={"fontSize": ".7rem", "color": "#9fbcd8"}),
                    html.Div(order.notes, style={"fontSize": ".75rem", "color": MUTED}) if order.notes else None,
                ],
            ),
            html.Div(actions, className="d-flex align-items-center"),
        ],
        className="d-flex justify-content-between align-items-center",
        style={"borderBottom": f"1px solid {BORDER}", "padding": "8px 0"},
    )


def register(app, store: MonitorStore) -> None:

    @app.callback(
        Output("maintenance-subtitle", "children"),
        Input("store-equipment", "data"),
    )
    def update_subtitle(equipment_id: str | None) -> str:
        if not equipment_id:
            return "Select equipment on the Monitor page first"
        return f"Work orders for {equipment_id}"

    @app.callback(
        [
            Output("wo-title", "value"),
            Output("wo-notes", "value"),
            Output("wo-feedback", "children"),
            Output("store-wo-version", "data"),
        ],
        Input("wo-create-btn", "n_clicks"),
        Input("wo-suggest-btn", "n_clicks"),
        State("wo-title", "value"),
        State("wo-notes", "value"),
        State("store-equipment", "data"),
        State("store-wo-version", "data"),
        prevent_initial_call=True,
    )
    def create_or_suggest(n_create: int, n_suggest: int, title: str, notes: str, equipment_id: str | None, version: int):
        if not ctx.triggered[0]["value"]:
            return no_update, no_update, no_update, no_update
        if not equipment_id:
            return no_update, no_update, "Select equipment first", no_update

        if ctx.triggered_id == "wo-suggest-btn":
            return f"Inspect {equipment_id}", "Auto-created from dashboard", "", no_update

        try:
            order = store.create_work_order(
                {"equipmentId": equipment_id, "title": (title or "").strip(), "notes": (notes or "").strip()}
            )
        except BadRequestError:
            return no_update, no_update, "Title required", no_update
        return "", "", f"Created work order {order.id[:8]}", (version or 0) + 1

    @app.callback(
        Output("store-wo-closed", "data"),
        Input({"type": "wo-close-btn", "index": ALL}, "n_clicks"),
        State("store-wo-closed", "data"),
        prevent_initial_call=True,
    )
    def close_work_order(n_clicks_list: list, closed: int | None):
        if not ctx.triggered_id or not ctx.triggered[0]["value"]:
            return no_update
        try:
            store.close_work_order(ctx.triggered_id["index"])
        except NotFoundError:
            return no_update
        return (closed or 0) + 1

    @app.callback(
        Output("wo-list", "children"),
        Input("interval-live", "n_intervals"),
        Input("store-equipment", "data"),
        Input("store-wo-version", "data"),
        Input("store-wo-closed", "data"),
    )
    def update_work_orders(n_intervals: int, equipment_id: str | None, version: int, closed: int):
        if not equipment_id:
            return html.Div("No equipment selected.", style={"color": MUTED, "padding": "12px"})
        orders = store.list_work_orders(equipment_id)
        if not orders:
            return html.Div("No work orders yet.", style={"color": MUTED, "padding": "12px"})
        return [_work_order_item(order) for order in orders]
