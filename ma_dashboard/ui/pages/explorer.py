from __future__ import annotations

import pandas as pd
import streamlit as st

from ma_dashboard.ui.components.tables import render_table
from ma_dashboard.ui.pages.context import PageContext


DEFAULT_COLUMNS = [
    "report_period",
    "state",
    "county",
    "parent_org",
    "org_name",
    "enrollment",
]


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Explorer")
    if df.empty:
        st.info("No enrollment rows to explore.")
        return

    search = st.text_input("Search by parent or organization name", key="ma_explorer_search").strip().lower()
    filtered = df
    if search:
        mask = pd.Series(False, index=df.index)
        for col in ("parent_org", "org_name"):
            if col in df:
                mask |= df[col].astype(str).str.lower().str.contains(search, regex=False, na=False)
        filtered = df[mask]

    columns = [col for col in DEFAULT_COLUMNS if col in filtered.columns]
    extra = [col for col in filtered.columns if col not in columns]
    st.caption(f"{len(filtered):,} rows")
    render_table(
        filtered[columns + extra],
        height=500,
        export_file_name="ma_enrollment_filtered.csv",
    )
