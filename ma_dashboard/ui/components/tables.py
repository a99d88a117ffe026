"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from ma_dashboard.ui.components.formatting import format_number


def render_table(
    df: pd.DataFrame,
    number_columns: Optional[List[str]] = None,
    height: int = 400,
    export_file_name: str = "export.csv",
) -> None:
    if df.empty:
        st.info("No rows to display.")
        return

    formatted_df = df.copy()
    for column in number_columns or []:
        if column in formatted_df.columns:
            formatted_df[column] = formatted_df[column].apply(format_number)

    st.dataframe(
        formatted_df,
        width="stretch",
        height=height,
        hide_index=True,
    )

    csv_bytes = df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
