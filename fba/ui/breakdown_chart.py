"""Proportional breakdown of the selling price (Plotly donut)."""

from __future__ import annotations
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from fba.calculators import (
    ProfitMetrics,
    UnitInputs,
    build_chart_series,
    is_chart_renderable,
    series_to_frame,
)
from .theme import plotly_template

SLICE_COLORS = {
    "Landed Cost": "#6366f1",
    "Amazon Fees": "#f59e0b",
    "Marketing": "#ec4899",
    "Other Costs": "#94a3b8",
    "Profit": "#10b981",
}


def build_breakdown_figure(frame: pd.DataFrame, theme: str = "light") -> go.Figure:
    """Donut chart with one slice per row of the series frame, labelled by share."""
    fig = go.Figure(
        data=[
            go.Pie(
                labels=list(frame["label"]),
                values=list(frame["value"]),
                text=[f"{share:.1f}%" for share in frame["share"]],
                hole=0.45,
                sort=False,
                marker=dict(colors=[SLICE_COLORS.get(lbl, "#cbd5e1") for lbl in frame["label"]]),
                textinfo="label+text",
            )
        ]
    )
    fig.update_layout(
        template=plotly_template(theme),
        margin=dict(l=10, r=10, t=30, b=10),
        showlegend=True,
    )
    return fig


def render_breakdown_chart(inputs: UnitInputs, metrics: ProfitMetrics, theme: str = "light") -> None:
    """Render the chart, or a notice when the split cannot be shown."""
    st.subheader("Price Breakdown")

    if not is_chart_renderable(metrics):
        st.info("No breakdown chart: the product is not profitable with these inputs.")
        return

    frame = series_to_frame(build_chart_series(inputs, metrics))
    if frame.empty:
        st.info("Enter a selling price and costs to see the breakdown.")
        return

    st.plotly_chart(
        build_breakdown_figure(frame, theme),
        use_container_width=True,
        config={"displayModeBar": False},
    )
