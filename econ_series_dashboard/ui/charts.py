"""Plotly figure for overlaid series with recession shading."""

from collections.abc import Iterable

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from econ_series_dashboard.alignment import recession_bands
from econ_series_dashboard.data.recessions import NBER_RECESSIONS
from econ_series_dashboard.models import MergedBundle, RecessionInterval


SERIES_COLORS = ["#2563eb", "#10b981", "#f97316"]  # blue, emerald, orange
RECESSION_FILL = "rgba(148, 163, 184, 0.18)"


def add_recession_shading(
    fig: go.Figure, dates: list[str], recessions: Iterable[RecessionInterval]
) -> int:
    """
    Shade every recession that overlaps the category axis.

    Bands are placed in category coordinates, so plotly keeps them aligned
    with the labels when the figure is resized.

    Returns:
        Number of bands drawn
    """
    bands = recession_bands(dates, recessions)
    for _, _, edges in bands:
        fig.add_shape(
            type="rect",
            xref="x",
            yref="paper",
            x0=edges.x0,
            x1=edges.x1,
            y0=0,
            y1=1,
            fillcolor=RECESSION_FILL,
            line_width=0,
            layer="below",
        )
    return len(bands)


def build_overlay_figure(
    view: MergedBundle,
    dual_axis: bool = False,
    recessions: Iterable[RecessionInterval] = NBER_RECESSIONS,
    note: str | None = None,
    height: int = 320,
) -> go.Figure:
    """
    Build the overlay chart for a clipped bundle.

    With ``dual_axis`` the second series is drawn against a right-hand axis.
    A ``note`` is printed under the plot area.
    """
    fig = make_subplots(specs=[[{"secondary_y": True}]])

    for idx, series in enumerate(view.series):
        color = SERIES_COLORS[idx % len(SERIES_COLORS)]
        fig.add_trace(go.Scatter(
            x=view.dates, y=series.values,
            mode="lines", connectgaps=True,
            line=dict(color=color, width=1.6),
            name=series.title,
            hovertemplate=f"{series.id}: %{{y:,.2f}}<extra></extra>",
        ), secondary_y=dual_axis and idx == 1)

    add_recession_shading(fig, view.dates, recessions)

    fig.update_layout(
        height=height, margin=dict(l=0, r=60 if dual_axis else 10, t=30, b=0),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        showlegend=True,
        legend=dict(
            orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0,
            font=dict(size=11),
        ),
        hovermode="x unified",
    )
    fig.update_xaxes(type="category", nticks=8, showgrid=False, tickangle=0)

    primary_units = view.series[0].units if view.series else None
    fig.update_yaxes(
        title_text=primary_units or "", showgrid=True,
        gridcolor="rgba(148, 163, 184, 0.2)", nticks=6,
        secondary_y=False,
    )

    secondary_units = view.series[1].units if dual_axis and len(view.series) > 1 else None
    fig.update_yaxes(
        title_text=secondary_units or "", showgrid=False, nticks=6,
        visible=dual_axis and len(view.series) > 1,
        secondary_y=True,
    )

    if note:
        fig.add_annotation(
            text=f"<b>Note:</b> {note}",
            xref="paper", yref="paper", x=0, y=-0.12,
            xanchor="left", yanchor="top", showarrow=False,
            font=dict(size=11, color="#475569"),
        )
        fig.update_layout(margin=dict(b=60))
    return fig
