from __future__ import annotations

import pandas as pd
import streamlit as st

from ma_dashboard.ui.components.charts import bar_chart, line_chart, render_plotly
from ma_dashboard.ui.components.kpi import enrollment_kpi_cards, render_kpi_cards
from ma_dashboard.ui.pages.context import PageContext


def _location_label(context: PageContext) -> str:
    filters = context.filters
    return f"{filters.state or ''}, {filters.county or ''}"


def render(df: pd.DataFrame, context: PageContext) -> None:
    result = context.result
    render_kpi_cards(enrollment_kpi_cards(result.kpis), columns=3)

    location = _location_label(context)
    trend_fig = line_chart(
        result.series,
        x="month",
        y="enrollment",
        title=f"Enrollment Trend — {location}",
        xaxis_title="Month",
        yaxis_title="Enrollment",
    )
    render_plotly(trend_fig)

    # Ranking is descending; reversed so the largest bar sits at the top.
    ranking = result.top_organizations.iloc[::-1].reset_index(drop=True)
    ranking_fig = bar_chart(
        ranking,
        x="enrollment",
        y="organization",
        orientation="h",
        title=f"Top Parent Organizations — {location} — {result.latest_month or ''}",
        xaxis_title="Enrollment",
        yaxis_title="Parent Org",
    )
    render_plotly(ranking_fig)

    if result.is_empty:
        st.info("No enrollment rows match the current filters.")
