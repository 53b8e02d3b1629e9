"""
pdm/callbacks/alerts.py
────────────────────────
Alert log page callbacks.
"""
from __future__ import annotations

import logging

import dash_bootstrap_components as dbc
import pandas as pd
from dash import ALL, Input, Output, State, ctx, html, no_update

from config.alerts import LEVEL_COLORS, MAX_ALERTS_DISPLAY, AlertLevel
from pdm.data.store import MonitorStore, NotFoundError
from pdm.layout.components.alert_badge import alert_badge

logger = logging.getLogger(__name__)

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"


def alerts_frame(store: MonitorStore) -> pd.DataFrame:
    """Alert log as a DataFrame (newest first) with a parsed `created` column."""
    df = pd.DataFrame([a.to_wire() for a in store.list_alerts()])
    if df.empty:
        return df
    df["created"] = pd.to_datetime(df["createdAt"], unit="ms", utc=True)
    return df


def filter_alerts(df: pd.DataFrame, level: str, equipment_id: str, status: str) -> pd.DataFrame:
    if df.empty:
        return df
    if level != "all":
        df = df[df["level"] == level]
    if equipment_id != "all":
        df = df[df["equipmentId"] == equipment_id]
    if status == "unacked":
        df = df[~df["acknowledged"]]
    elif status == "acked":
        df = df[df["acknowledged"]]
    return df


def _build_table(df: pd.DataFrame) -> html.Div:
    if df.empty:
        return html.Div(
            "No alerts for the selected filters.",
            style={"color": MUTED, "padding": "20px", "textAlign": "center"},
        )

    rows = []
    for _, row in df.head(MAX_ALERTS_DISPLAY).iterrows():
        is_acked = bool(row["acknowledged"])
        rows.append(
            html.Tr(
                [
                    html.Td(row["created"].strftime("%d/%m %H:%M:%S"), style={"color": MUTED, "fontSize": ".78rem"}),
                    html.Td(
                        html.Span(row["equipmentId"], style={"color": "#58a6ff", "fontSize": ".82rem", "fontWeight": "600"}),
                    ),
                    html.Td(alert_badge(row["level"])),
                    html.Td(
                        row["message"],
                        style={"fontSize": ".72rem", "color": MUTED, "maxWidth": "420px", "overflow": "hidden", "textOverflow": "ellipsis"},
                    ),
                    html.Td(
                        html.Button(
                            "✓ Acknowledged" if is_acked else "Acknowledge",
                            id={"type": "ack-btn", "index": row["id"]},
                            n_clicks=0,
                            disabled=is_acked,
                            style={
                                "fontSize": ".68rem",
                                "fontWeight": "600",
                                "color": "#2ea44f" if is_acked else "#58a6ff",
                                "background": "transparent",
                                "border": f"1px solid {'#2ea44f' if is_acked else '#58a6ff'}",
                                "borderRadius": "4px",
                                "padding": "2px 8px",
                                "cursor": "default" if is_acked else "pointer",
                                "opacity": "0.6" if is_acked else "1",
                            },
                        )
                    ),
                ],
                style={"borderBottom": f"1px solid {BORDER}"},
            )
        )

    return html.Div(
        html.Table(
            [
                html.Thead(
                    html.Tr(
                        [html.Th(h) for h in ["Time (UTC)", "Equipment", "Level", "Message", "Status"]],
                        style={"color": MUTED, "fontSize": ".68rem", "textTransform": "uppercase"},
                    )
                ),
                html.Tbody(rows),
            ],
            style={"width": "100%", "borderCollapse": "collapse", "fontSize": ".82rem"},
        ),
        style={"overflowX": "auto"},
    )


def _summary_badges(df: pd.DataFrame) -> dbc.Row:
    counts = df.groupby("level").size() if not df.empty else pd.Series(dtype=int)
    unacked = int((~df["acknowledged"]).sum()) if not df.empty else 0
    tiles = [(level.value, int(counts.get(level.value, 0)), LEVEL_COLORS[level]) for level in AlertLevel]
    tiles.append(("Unacknowledged", unacked, "#e8a020" if unacked else "#2ea44f"))
    return dbc.Row(
        [
            dbc.Col(
                html.Div(
                    [
                        html.Div(str(count), style={"fontSize": "1.4rem", "fontWeight": "700", "color": color}),
                        html.Div(label, style={"fontSize": ".65rem", "color": MUTED, "textTransform": "uppercase"}),
                    ],
                    style={"backgroundColor": CARD_BG, "border": f"1px solid {BORDER}", "borderRadius": "8px", "padding": "10px 16px"},
                ),
                xs=6, md=3,
            )
            for label, count, color in tiles
        ],
        className="g-2",
    )


def register(app, store: MonitorStore) -> None:

    @app.callback(
        [
            Output("alerts-table", "children"),
            Output("alerts-summary-badges", "children"),
        ],
        [
            Input("interval-live", "n_intervals"),
            Input("alerts-filter-level", "value"),
            Input("alerts-filter-equipment", "value"),
            Input("alerts-filter-status", "value"),
            Input("alerts-ack-version", "data"),
        ],
    )
    def update_alerts_table(
        n_intervals: int,
        level_filter: str,
        equipment_filter: str,
        status_filter: str,
        ack_version: int,
    ):
        df = alerts_frame(store)
        filtered = filter_alerts(df, level_filter, equipment_filter, status_filter)
        return _build_table(filtered), _summary_badges(df)

    @app.callback(
        Output("alerts-ack-version", "data"),
        Input({"type": "ack-btn", "index": ALL}, "n_clicks"),
        State("alerts-ack-version", "data"),
        prevent_initial_call=True,
    )
    def acknowledge_alert(n_clicks_list: list, version: int | None):
        if not ctx.triggered_id or not ctx.triggered[0]["value"]:
            return no_update
        try:
            store.acknowledge_alert(ctx.triggered_id["index"])
        except NotFoundError:
            # Evicted from the log between render and click
            logger.info("Alert %s no longer in the log", ctx.triggered_id["index"])
            return no_update
        return (version or 0) + 1
