"""
Filter utilities: option derivation for the state -> county -> parent cascade
and application of the resolved selection to the enrollment rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ma_dashboard.data.enrichment import is_missing


@dataclass(frozen=True)
class FilterState:
    state: Optional[str]
    county: Optional[str]
    parents: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterOptions:
    states: List[str]
    counties: List[str]
    parents: List[str]


EMPTY_FILTERS = FilterState(state=None, county=None, parents=())


def unique_sorted(values: Iterable[Any]) -> List[str]:
    """Distinct non-blank values, sorted alphabetically (case-insensitive)."""
    distinct = {
        str(v) for v in values
        if not is_missing(v) and str(v).strip()
    }
    return sorted(distinct, key=lambda v: (v.casefold(), v))


def _column(rows: pd.DataFrame, name: str) -> pd.Series:
    if name in rows.columns:
        return rows[name]
    return pd.Series([None] * len(rows), index=rows.index, dtype=object)


def derive_options(
    rows: pd.DataFrame,
    state: Optional[str] = None,
    county: Optional[str] = None,
) -> FilterOptions:
    """Compute the selectable values for each level of the cascade.

    Counties only come from rows of `state`; parents only from rows of
    `state` and `county`. A level with no selection above it is empty.
    """
    if rows.empty:
        return FilterOptions(states=[], counties=[], parents=[])

    states = unique_sorted(_column(rows, "state"))

    in_state = _column(rows, "state") == state
    counties = unique_sorted(_column(rows, "county")[in_state]) if state is not None else []

    parents: List[str] = []
    if state is not None and county is not None:
        in_county = in_state & (_column(rows, "county") == county)
        parents = unique_sorted(_column(rows, "parent_org")[in_county])

    return FilterOptions(states=states, counties=counties, parents=parents)


def default_state(states: Sequence[str], preferred: Optional[str] = "Arizona") -> Optional[str]:
    if not states:
        return None
    if preferred and preferred in states:
        return preferred
    return states[0]


def default_county(counties: Sequence[str]) -> Optional[str]:
    return counties[0] if counties else None


def resolve_filters(
    rows: pd.DataFrame,
    state: Optional[str] = None,
    county: Optional[str] = None,
    parents: Iterable[str] = (),
    preferred_state: Optional[str] = "Arizona",
) -> FilterState:
    """Clamp a requested selection to the options the rows actually offer."""
    states = derive_options(rows).states
    if state not in states:
        state = default_state(states, preferred_state)

    counties = derive_options(rows, state).counties
    if county not in counties:
        county = default_county(counties)

    offered = set(derive_options(rows, state, county).parents)
    kept = tuple(p for p in parents if p in offered)
    return FilterState(state=state, county=county, parents=kept)


def apply_filters(rows: pd.DataFrame, filters: FilterState) -> pd.DataFrame:
    """Rows of the selected state and county, restricted to the selected
    parent organizations when any are selected."""
    if rows.empty:
        return rows
    mask = (_column(rows, "state") == filters.state) & (_column(rows, "county") == filters.county)
    filtered = rows[mask]
    if filters.parents:
        filtered = filtered[_column(filtered, "parent_org").isin(filters.parents)]
    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def serialize_filters(filters: FilterState) -> Dict[str, Any]:
    """
    Convert the FilterState dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "state": filters.state,
        "county": filters.county,
        "parents": list(filters.parents),
    }
