"""
pdm/layout/components/trend_chart.py
─────────────────────────────────────
Rolling temperature / vibration line chart.

The window lives client-side in a dcc.Store as
  {"equipment_id": str | None, "labels": [...], "temperature": [...], "vibration": [...]}
and is never persisted server-side.
"""
from __future__ import annotations

import plotly.graph_objects as go

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
PLOTLY_TMPL = "plotly_dark"


def empty_window(equipment_id: str | None = None) -> dict:
    return {"equipment_id": equipment_id, "labels": [], "temperature": [], "vibration": []}


def push_point(window: dict, label: str, temperature: float, vibration: float, size: int) -> dict:
    """Append one point and keep only the last `size` points."""
    window = {
        "equipment_id": window.get("equipment_id"),
        "labels": [*window.get("labels", []), label][-size:],
        "temperature": [*window.get("temperature", []), temperature][-size:],
        "vibration": [*window.get("vibration", []), vibration][-size:],
    }
    return window


def trend_figure(window: dict, height: int = 300) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=window.get("labels", []),
        y=window.get("temperature", []),
        name="Temperature (°C)",
        mode="lines+markers",
        line={"color": "#3b82f6", "width": 2},
        marker={"size": 4},
    ))
    fig.add_trace(go.Scatter(
        x=window.get("labels", []),
        y=window.get("vibration", []),
        name="Vibration (mm/s)",
        mode="lines+markers",
        line={"color": "#f59e0b", "width": 2},
        marker={"size": 4},
        yaxis="y2",
    ))
    fig.update_layout(
        template=PLOTLY_TMPL,
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        font={"color": "#c9d1d9", "size": 11},
        xaxis={"gridcolor": GRID_CLR},
        yaxis={"gridcolor": GRID_CLR, "title": "°C"},
        yaxis2={"overlaying": "y", "side": "right", "title": "mm/s", "showgrid": False},
        legend={"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}, "orientation": "h", "y": 1.1},
        height=height,
        uirevision="trend",
    )
    return fig
