"""
Parsing helpers that turn raw CSV strings into the derived columns used by
filtering and aggregation.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

import pandas as pd

MONTH_KEY_LENGTH = 7
UNKNOWN_ORG_LABEL = "(Unknown)"
TEXT_COLUMNS = ["state", "county", "parent_org", "org_name", "report_period", "enrollment"]

# Leading decimal literal, so "1234 members" reads as 1234 and "n/a" as nothing.
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is pd.NA


def parse_number(value: Any) -> Optional[float]:
    """Parse an enrollment-like value, tolerating thousands separators.

    Returns None for missing, blank or non-numeric input.
    """
    if is_missing(value):
        return None
    text = str(value).replace(",", "").strip()
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return None
    number = float(match.group(0))
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def month_key(report_period: Any) -> str:
    if is_missing(report_period):
        return ""
    return str(report_period)[:MONTH_KEY_LENGTH]


def organization_label(parent_org: Any, org_name: Any) -> str:
    for candidate in (parent_org, org_name):
        if not is_missing(candidate) and str(candidate) != "":
            return str(candidate)
    return UNKNOWN_ORG_LABEL


def enrich_enrollment(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with blank-filled text columns plus `month_key` and
    `enrollment_num` (unparseable enrollment counts as 0)."""
    enriched = df.copy()
    for col in TEXT_COLUMNS:
        if col not in enriched.columns:
            enriched[col] = ""
        enriched[col] = enriched[col].fillna("").astype(str)

    enriched["month_key"] = enriched["report_period"].map(month_key)
    enriched["enrollment_num"] = (
        enriched["enrollment"].map(parse_number).fillna(0.0).astype(float)
    )
    return enriched


def count_unparsed_enrollment(df: pd.DataFrame) -> int:
    if df.empty or "enrollment" not in df.columns:
        return 0
    return int(df["enrollment"].map(parse_number).isna().sum())
