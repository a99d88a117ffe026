"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import streamlit as st

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

YOY_MODES = ("positional", "calendar")

# Cache lifetime for loaded CSVs; st.cache_data needs it at decoration time.
CACHE_TTL_SECONDS = 600


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("trend", "Enrollment Trend"),
    TabConfig("explorer", "Explorer"),
    TabConfig("data_quality", "Data Quality & Definitions"),
]


@dataclass(frozen=True)
class DashboardConfig:
    data_dir: str = "data/processed"
    main_file: str = "ma_scc_latest.csv"
    kpi_file: str = "ma_scc_kpis_county.csv"
    default_state: str = "Arizona"
    top_n: int = 10
    yoy_mode: str = "positional"

    @property
    def main_source(self) -> str:
        return resolve_source(self.data_dir, self.main_file)

    @property
    def kpi_source(self) -> str:
        return resolve_source(self.data_dir, self.kpi_file)


def resolve_source(data_dir: str, file_name: str) -> str:
    """Join a data directory (local path or URL prefix) with a file name.

    Relative local directories are anchored at the project root so the app
    reads the same files regardless of the working directory.
    """
    if "://" in data_dir:
        return f"{data_dir.rstrip('/')}/{file_name}"
    base = Path(data_dir)
    if not base.is_absolute():
        base = PROJECT_ROOT / base
    return str(base / file_name)


def _get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        pass
    return default


def _get_int_setting(name: str, default: int, minimum: int = 1) -> int:
    raw = _get_setting(name)
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d below %d, using %d", name, value, minimum, default)
        return default
    return value


def load_config() -> DashboardConfig:
    defaults = DashboardConfig()

    yoy_mode = (_get_setting("MA_DASHBOARD_YOY_MODE", defaults.yoy_mode) or defaults.yoy_mode).strip().lower()
    if yoy_mode not in YOY_MODES:
        logger.warning("Unknown MA_DASHBOARD_YOY_MODE=%r, using %s", yoy_mode, defaults.yoy_mode)
        yoy_mode = defaults.yoy_mode

    return DashboardConfig(
        data_dir=_get_setting("MA_DASHBOARD_DATA_DIR", defaults.data_dir) or defaults.data_dir,
        main_file=_get_setting("MA_DASHBOARD_MAIN_FILE", defaults.main_file) or defaults.main_file,
        kpi_file=_get_setting("MA_DASHBOARD_KPI_FILE", defaults.kpi_file) or defaults.kpi_file,
        default_state=_get_setting("MA_DASHBOARD_DEFAULT_STATE", defaults.default_state) or defaults.default_state,
        top_n=_get_int_setting("MA_DASHBOARD_TOP_N", defaults.top_n),
        yoy_mode=yoy_mode,
    )
