import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
import streamlit as st

from ma_dashboard.config import CACHE_TTL_SECONDS, DashboardConfig, load_config
from ma_dashboard.data.enrichment import count_unparsed_enrollment

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: List[str] = [
    "state",
    "county",
    "parent_org",
    "org_name",
    "report_period",
    "enrollment",
]


class DataLoadError(RuntimeError):
    """A CSV source could not be read, parsed, or lacks required columns."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{message}: {source}")
        self.source = source


@dataclass
class DashboardData:
    main_rows: pd.DataFrame
    kpi_rows: pd.DataFrame
    diagnostics: Dict[str, Any] = field(default_factory=dict)


def _describe(source: Any) -> str:
    return getattr(source, "name", None) or str(source)


def parse_csv(source: Any) -> pd.DataFrame:
    """Read a CSV (path, URL, or file-like) keeping every value as a raw string.

    Header names map columns, empty lines are skipped, and short rows are
    padded with empty strings.
    """
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except FileNotFoundError as exc:
        raise DataLoadError(_describe(source), "CSV file not found") from exc
    except (OSError, ValueError) as exc:
        # pandas parser and empty-file errors are ValueError subclasses
        raise DataLoadError(_describe(source), f"Failed to read CSV ({exc})") from exc
    return df.fillna("")


def missing_columns(df: pd.DataFrame, required: Sequence[str] = REQUIRED_COLUMNS) -> List[str]:
    return [col for col in required if col not in df.columns]


def read_sources(main_source: str, kpi_source: str) -> DashboardData:
    """Load both CSVs concurrently; both must succeed."""
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="csv-load") as pool:
        main_future = pool.submit(parse_csv, main_source)
        kpi_future = pool.submit(parse_csv, kpi_source)
        main_rows = main_future.result()
        kpi_rows = kpi_future.result()

    missing = missing_columns(main_rows)
    if missing:
        raise DataLoadError(main_source, f"Missing required columns {missing}")

    diagnostics = {
        "main_source": main_source,
        "kpi_source": kpi_source,
        "main_row_count": int(len(main_rows)),
        "kpi_row_count": int(len(kpi_rows)),
        "main_columns": list(main_rows.columns),
        "kpi_columns": list(kpi_rows.columns),
        "unparsed_enrollment_rows": count_unparsed_enrollment(main_rows),
        "blank_parent_org_rows": int((main_rows["parent_org"].str.strip() == "").sum()),
    }
    logger.info(
        "Loaded %d enrollment rows from %s and %d KPI rows from %s",
        diagnostics["main_row_count"],
        main_source,
        diagnostics["kpi_row_count"],
        kpi_source,
    )
    return DashboardData(main_rows=main_rows, kpi_rows=kpi_rows, diagnostics=diagnostics)


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_data_impl(main_source: str, kpi_source: str) -> DashboardData:
    """Cached by the resolved source locations."""
    return read_sources(main_source, kpi_source)


def load_data(config: Optional[DashboardConfig] = None) -> DashboardData:
    """Wrapper that resolves config and calls the cached implementation."""
    config = config or load_config()
    return _load_data_impl(config.main_source, config.kpi_source)


def clear_cache() -> None:
    _load_data_impl.clear()  # type: ignore[attr-defined]
