"""
pdm/layout/components/risk_gauge.py
────────────────────────────────────
Failure-probability gauge using Plotly indicator chart.
"""
from __future__ import annotations

import plotly.graph_objects as go
from dash import dcc

from config.alerts import STATUS_COLORS
from pdm.analytics.risk import classify

CARD_BG = "#161b22"


def risk_gauge(
    probability: float | None,
    label: str,
    height: int = 200,
) -> dcc.Graph:
    """
    Plotly gauge indicator for failure probability.

    Args:
        probability: 0–1 value, or None when no reading is available
        label: Title shown above the gauge
        height: Figure height in px
    """
    pct = round((probability or 0.0) * 100.0, 1)
    color = STATUS_COLORS[classify(probability)] if probability is not None else "#8b949e"

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=pct,
        number={"suffix": "%", "font": {"color": color, "size": 28}},
        title={"text": label, "font": {"color": "#8b949e", "size": 12}},
        gauge={
            "axis": {
                "range": [0, 100],
                "tickwidth": 1,
                "tickcolor": "#30363d",
                "tickfont": {"color": "#8b949e", "size": 9},
            },
            "bar": {"color": color, "thickness": 0.25},
            "bgcolor": "rgba(0,0,0,0)",
            "borderwidth": 0,
            "steps": [
                {"range": [0, 50], "color": "rgba(16,185,129,0.10)"},
                {"range": [50, 75], "color": "rgba(245,158,11,0.12)"},
                {"range": [75, 100], "color": "rgba(239,68,68,0.15)"},
            ],
            "threshold": {
                "line": {"color": "#da3633", "width": 2},
                "thickness": 0.75,
                "value": 75,
            },
        },
    ))

    fig.update_layout(
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin=dict(l=20, r=20, t=40, b=20),
        height=height,
        font=dict(color="#c9d1d9"),
    )

    return dcc.Graph(
        figure=fig,
        config={"displayModeBar": False},
        style={"height": f"{height}px"},
    )
