from __future__ import annotations

import pandas as pd
import streamlit as st

from ma_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from ma_dashboard.ui.pages.context import PageContext


def _compute_quality_metrics(diagnostics: dict) -> list[KpiCard]:
    return [
        KpiCard(label="Enrollment Rows", value=diagnostics.get("main_row_count")),
        KpiCard(label="County KPI Rows", value=diagnostics.get("kpi_row_count")),
        KpiCard(
            label="Unparsed Enrollment",
            value=diagnostics.get("unparsed_enrollment_rows"),
            help_text="Counted as 0 in every total.",
        ),
        KpiCard(
            label="Blank Parent Org",
            value=diagnostics.get("blank_parent_org_rows"),
            help_text="Ranked under org_name, or (Unknown).",
        ),
    ]


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Data Quality & Definitions")
    diagnostics = context.data.diagnostics
    if not diagnostics:
        st.info("No diagnostics available yet.")
        return

    render_kpi_cards(_compute_quality_metrics(diagnostics), columns=4)

    st.markdown("#### Diagnostics Summary")
    for key, value in diagnostics.items():
        st.write(f"- **{key.replace('_', ' ').title()}**: {value}")

    applied = df.attrs.get("applied_filters")
    if applied:
        st.markdown("#### Applied Filters")
        st.json(applied)

    st.markdown("#### Metric Definitions")
    st.write(
        """
        - **Month**: first seven characters of `report_period` (YYYY-MM).
        - **Current Enrollment**: summed enrollment of the latest month for the selection.
        - **MoM Change**: latest month minus the previous month in the series, with % of the previous month.
        - **YoY Change**: latest month minus the value 13 positions back in the series
          (or, in calendar mode, the same month one year earlier).
        - **Top Parent Organizations**: latest month only, grouped by parent organization
          (falling back to organization name), top entries by enrollment.
        """
    )

    st.markdown("#### Current Assumptions")
    st.write(
        f"""
        - Year-over-year mode: `{context.config.yoy_mode}`.
        - Ranking size: top {context.config.top_n}.
        - Blank or non-numeric enrollment values count as zero.
        - Input files are produced by the upstream ETL; this dashboard never writes them.
        """
    )
