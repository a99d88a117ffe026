from __future__ import annotations

from dataclasses import dataclass

from ma_dashboard.config import DashboardConfig
from ma_dashboard.data.aggregation import AggregationResult
from ma_dashboard.data.filters import FilterState
from ma_dashboard.data.loader import DashboardData


@dataclass
class PageContext:
    data: DashboardData
    filters: FilterState
    result: AggregationResult
    config: DashboardConfig
