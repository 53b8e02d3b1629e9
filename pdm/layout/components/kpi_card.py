"""
pdm/layout/components/kpi_card.py
──────────────────────────────────
Reusable KPI indicator card component.
"""
from dash import html

CARD_BG = "#161b22"
MUTED = "#8b949e"


def kpi_card(
    label: str,
    value: str,
    color: str = "#c9d1d9",
    sub_label: str = "",
    border_color: str = "#30363d",
    value_background: str | None = None,
) -> html.Div:
    """
    Compact KPI metric card.

    Args:
        label: Metric name (shown above value)
        value: Formatted value string
        color: Value text color (reflects status)
        sub_label: Small secondary label below value
        border_color: Card border color (can reflect severity)
        value_background: Optional pill background behind the value
    """
    value_style = {
        "fontSize": "1.4rem",
        "fontWeight": "700",
        "color": color,
        "lineHeight": "1.2",
        "marginTop": "2px",
    }
    if value_background:
        value_style.update({
            "display": "inline-block",
            "background": value_background,
            "color": "#ffffff",
            "borderRadius": "6px",
            "padding": "2px 10px",
        })

    children = [
        html.Div(label, style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}),
        html.Div(value, style=value_style),
    ]
    if sub_label:
        children.append(
            html.Div(sub_label, style={"fontSize": ".68rem", "color": MUTED, "marginTop": "2px"})
        )

    return html.Div(
        children,
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {border_color}",
            "borderRadius": "8px",
            "padding": "14px 16px",
            "minWidth": "120px",
        },
    )
