"""
Layout helpers for the Streamlit application (page setup and sidebar filters).

The sidebar is a thin adapter over `ma_dashboard.data.filters`: option lists
come from `derive_options`, and widget callbacks only clear the dependent
selections so the next run re-derives them.
"""

from __future__ import annotations

from typing import Iterable, List

import pandas as pd
import streamlit as st

from ma_dashboard.config import DashboardConfig
from ma_dashboard.data.filters import (
    FilterState,
    default_county,
    default_state,
    derive_options,
    resolve_filters,
)

STATE_KEY = "ma_state"
COUNTY_KEY = "ma_county"
PARENTS_KEY = "ma_parents"
FILTER_KEYS: List[str] = [STATE_KEY, COUNTY_KEY, PARENTS_KEY]


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Medicare Advantage Enrollment",
        layout="wide",
        page_icon=":bar_chart:",
    )


def _clear_state(keys: Iterable[str]) -> None:
    for key in keys:
        st.session_state.pop(key, None)


def _on_state_change() -> None:
    # New state: counties and parents are re-derived and reset to defaults.
    _clear_state([COUNTY_KEY, PARENTS_KEY])


def _on_county_change() -> None:
    _clear_state([PARENTS_KEY])


def sidebar_filters_ui(rows: pd.DataFrame, config: DashboardConfig) -> FilterState:
    """
    Render the cascading state -> county -> parent controls and return the
    resolved selection.
    """
    st.sidebar.header("Filters")

    if st.sidebar.button("Reset Filters", key="ma_reset_filters", type="primary"):
        _clear_state(FILTER_KEYS)

    states = derive_options(rows).states
    if not states:
        st.sidebar.info("No states found in the enrollment data.")
        return resolve_filters(rows, preferred_state=config.default_state)

    if st.session_state.get(STATE_KEY) not in states:
        st.session_state[STATE_KEY] = default_state(states, config.default_state)
    state = st.sidebar.selectbox(
        "State",
        options=states,
        key=STATE_KEY,
        on_change=_on_state_change,
    )

    counties = derive_options(rows, state).counties
    if counties and st.session_state.get(COUNTY_KEY) not in counties:
        st.session_state[COUNTY_KEY] = default_county(counties)
    elif not counties:
        _clear_state([COUNTY_KEY])
    county = st.sidebar.selectbox(
        "County",
        options=counties,
        key=COUNTY_KEY,
        on_change=_on_county_change,
    )

    parents = derive_options(rows, state, county).parents
    st.session_state[PARENTS_KEY] = [
        p for p in st.session_state.get(PARENTS_KEY, []) if p in parents
    ]
    selected_parents = st.sidebar.multiselect(
        "Parent Organization",
        options=parents,
        key=PARENTS_KEY,
        help="Leave empty to include all parent organizations.",
    )

    return resolve_filters(
        rows,
        state=state,
        county=county,
        parents=selected_parents,
        preferred_state=config.default_state,
    )
