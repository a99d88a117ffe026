"""
Aggregation of filtered enrollment rows into the monthly time series, the
KPI summary, and the latest-month parent organization ranking.

Everything here is pure: inputs are DataFrames and a FilterState, outputs are
new DataFrames/dataclasses. Rendering lives in `ma_dashboard.ui`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from ma_dashboard.data.enrichment import enrich_enrollment, organization_label
from ma_dashboard.data.filters import FilterState, apply_filters

logger = logging.getLogger(__name__)

SERIES_COLUMNS = ["month", "enrollment"]
RANKING_COLUMNS = ["organization", "enrollment"]

MOM_OFFSET = 2
# Positional year-over-year: the 13th value from the end of the series.
YOY_OFFSET = 13
DEFAULT_TOP_N = 10


@dataclass(frozen=True)
class KpiSummary:
    current: Optional[float]
    prior: Optional[float]
    year_ago: Optional[float]


@dataclass
class AggregationResult:
    filters: FilterState
    series: pd.DataFrame
    kpis: KpiSummary
    top_organizations: pd.DataFrame
    latest_month: Optional[str]

    @property
    def is_empty(self) -> bool:
        return self.series.empty


def monthly_series(rows: pd.DataFrame) -> pd.DataFrame:
    """Total enrollment per month key, ascending by month key."""
    if rows.empty:
        return pd.DataFrame(columns=SERIES_COLUMNS)
    enriched = enrich_enrollment(rows)
    ts = (
        enriched.groupby("month_key", sort=True)["enrollment_num"]
        .sum()
        .reset_index()
        .rename(columns={"month_key": "month", "enrollment_num": "enrollment"})
    )
    return ts[SERIES_COLUMNS]


def _value_from_end(totals: list, offset: int) -> Optional[float]:
    if len(totals) < offset:
        return None
    return float(totals[-offset])


def _shift_month(key: str, months: int) -> Optional[str]:
    try:
        period = pd.Period(key, freq="M")
    except (ValueError, TypeError):
        return None
    if pd.isna(period):
        return None
    return (period + months).strftime("%Y-%m")


def compute_kpis(series: pd.DataFrame, yoy_mode: str = "positional") -> KpiSummary:
    """Current, prior-month and year-ago totals from a monthly series.

    `yoy_mode="positional"` takes the value 13 positions back, which assumes
    the series has no gaps. `yoy_mode="calendar"` looks up the month exactly
    12 months before the latest month key instead.
    """
    if series.empty:
        return KpiSummary(current=None, prior=None, year_ago=None)

    totals = series["enrollment"].tolist()
    current = _value_from_end(totals, 1)
    prior = _value_from_end(totals, MOM_OFFSET)

    if yoy_mode == "calendar":
        by_month = dict(zip(series["month"], series["enrollment"]))
        target = _shift_month(str(series["month"].iloc[-1]), -12)
        year_ago = float(by_month[target]) if target in by_month else None
    else:
        year_ago = _value_from_end(totals, YOY_OFFSET)

    return KpiSummary(current=current, prior=prior, year_ago=year_ago)


def top_organizations(
    rows: pd.DataFrame,
    latest_month: Optional[str],
    limit: int = DEFAULT_TOP_N,
) -> pd.DataFrame:
    """Largest organizations by enrollment within `latest_month`, descending.

    Rows are labelled by `parent_org`, then `org_name`, then "(Unknown)".
    Ties keep the order in which organizations first appear.
    """
    if rows.empty or latest_month is None:
        return pd.DataFrame(columns=RANKING_COLUMNS)

    enriched = enrich_enrollment(rows)
    working = enriched[enriched["month_key"] == latest_month].copy()
    if working.empty:
        return pd.DataFrame(columns=RANKING_COLUMNS)

    working["organization"] = [
        organization_label(parent, org)
        for parent, org in zip(working["parent_org"], working["org_name"])
    ]

    grouped = (
        working.groupby("organization", sort=False)["enrollment_num"]
        .sum()
        .reset_index(name="enrollment")
        .sort_values("enrollment", ascending=False, kind="mergesort")
        .head(limit)
        .reset_index(drop=True)
    )
    return grouped[RANKING_COLUMNS]


def aggregate(
    rows: pd.DataFrame,
    filters: FilterState,
    top_n: int = DEFAULT_TOP_N,
    yoy_mode: str = "positional",
) -> AggregationResult:
    filtered = apply_filters(rows, filters)
    series = monthly_series(filtered)
    latest_month = str(series["month"].iloc[-1]) if not series.empty else None
    ranking = top_organizations(filtered, latest_month, limit=top_n)
    logger.debug(
        "Aggregated %d rows for %s/%s (%d parents): %d months, latest=%s",
        len(filtered),
        filters.state,
        filters.county,
        len(filters.parents),
        len(series),
        latest_month,
    )
    return AggregationResult(
        filters=filters,
        series=series,
        kpis=compute_kpis(series, yoy_mode=yoy_mode),
        top_organizations=ranking,
        latest_month=latest_month,
    )
