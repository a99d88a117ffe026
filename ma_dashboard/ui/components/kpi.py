from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from ma_dashboard.data.aggregation import KpiSummary
from ma_dashboard.ui.components.formatting import format_delta, format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    return format_number(card.value)


def enrollment_kpi_cards(kpis: KpiSummary) -> List[KpiCard]:
    return [
        KpiCard(
            label="Current Enrollment",
            value=kpis.current,
            help_text="Total enrollment in the latest month.",
        ),
        KpiCard(
            label="MoM Change",
            value_display=format_delta(kpis.current, kpis.prior),
            help_text="Change versus the previous month in the series.",
        ),
        KpiCard(
            label="YoY Change",
            value_display=format_delta(kpis.current, kpis.year_ago),
            help_text="Change versus the same month one year earlier.",
        ),
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No KPIs available for the current filters.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=_format_value(card))
                if card.help_text:
                    st.caption(card.help_text)
