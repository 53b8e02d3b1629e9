"""
pdm/layout/components/alert_badge.py
──────────────────────────────────────
Alert level / work-order status badge component.
"""

from dash import html

from config.alerts import LEVEL_COLORS

MUTED = "#8b949e"


def alert_badge(label: str, color: str | None = None) -> html.Span:
    """Inline badge with color-coded border. Level labels pick their own color."""
    color = color or LEVEL_COLORS.get(label, MUTED)
    return html.Span(
        label,
        style={
            "fontSize": ".65rem",
            "fontWeight": "700",
            "color": color,
            "border": f"1px solid {color}",
            "borderRadius": "4px",
            "padding": "1px 7px",
            "whiteSpace": "nowrap",
        },
    )
