import ma_dashboard.bootstrap_env  # must be first to set env/secrets and logging
import logging

import streamlit as st

from ma_dashboard.config import TABS, load_config
from ma_dashboard.data.aggregation import aggregate
from ma_dashboard.data.filters import FilterState, apply_filters
from ma_dashboard.data.loader import DataLoadError, clear_cache, load_data
from ma_dashboard.ui.layout import setup_page, sidebar_filters_ui
from ma_dashboard.ui.pages import data_quality, explorer, trend
from ma_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "trend": trend.render,
    "explorer": explorer.render,
    "data_quality": data_quality.render,
}


def _active_filter_summary(filters: FilterState, total_rows: int) -> None:
    badges = []
    if filters.state:
        badges.append(f"State: {filters.state}")
    if filters.county:
        badges.append(f"County: {filters.county}")
    if filters.parents:
        shown = ", ".join(filters.parents[:5]) + ("…" if len(filters.parents) > 5 else "")
        badges.append(f"Parents: {shown}")
    else:
        badges.append("Parents: All")

    st.markdown("**Active Filters: " + " | ".join(badges) + "**")
    st.caption(f"Showing {total_rows:,} enrollment rows after filters.")


def main() -> None:
    setup_page()
    config = load_config()
    st.title("Medicare Advantage Enrollment Dashboard")

    if st.sidebar.button("🔄 Refresh Data"):
        clear_cache()

    try:
        data = load_data(config)
    except DataLoadError:
        logger.exception("Failed to load dashboard CSVs from %s", config.data_dir)
        st.error(
            f"Failed to load CSVs from {config.data_dir}/. "
            "Run the ETL and commit the outputs."
        )
        st.stop()
        return

    filters = sidebar_filters_ui(data.main_rows, config)
    result = aggregate(
        data.main_rows,
        filters,
        top_n=config.top_n,
        yoy_mode=config.yoy_mode,
    )
    filtered_df = apply_filters(data.main_rows, filters)
    _active_filter_summary(filters, len(filtered_df))

    context = PageContext(
        data=data,
        filters=filters,
        result=result,
        config=config,
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered_df, context)


if __name__ == "__main__":
    main()
