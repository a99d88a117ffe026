"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
TREND_COLOR = "#7c5cff"
RANKING_COLOR = "#4cc3d9"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    hovermode: str = "x unified",
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        hovermode=hovermode,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, width="stretch", config={"displaylogo": False, "responsive": True})


def line_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    color: str = TREND_COLOR,
    markers: bool = True,
) -> go.Figure:
    fig = px.line(df, x=x, y=y, markers=markers)
    fig.update_traces(line=dict(color=color))
    fig = _configure_layout(fig, title, xaxis_title, yaxis_title)
    # Month keys are strings; keep them categorical so plotly does not re-parse dates.
    fig.update_xaxes(type="category", showgrid=False)
    fig.update_yaxes(rangemode="tozero", showgrid=True)
    return fig


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    orientation: str = "h",
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    color: str = RANKING_COLOR,
) -> go.Figure:
    fig = px.bar(df, x=x, y=y, orientation=orientation)
    fig.update_traces(marker_color=color)
    fig = _configure_layout(fig, title, xaxis_title, yaxis_title, hovermode="closest")
    if orientation == "h":
        # Keep the row order of `df` from bottom to top.
        fig.update_yaxes(type="category", categoryorder="array", categoryarray=list(df[y]))
    return fig
