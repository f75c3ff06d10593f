# ============================================================================
# Analytics Building Blocks - Public API
# ============================================================================
"""
Pure computation and data access shared by the admin analytics services.

Main Components:
- time_windows: Lookback windows, month-year parsing, date-range filters
- timeline: Dense per-day / per-hour count series
- growth: Period-over-period growth and recency ratios
- ranking: Top-K ranking with a deterministic tie-break
- facets: "all" vs "ongoing" summaries over flattened sub-records
- rollup: Batch/department cross-tabulation over a fixed domain
- trends: Timeline + growth for one lookback period
- fanout: Concurrent, fail-fast section composition
- repository: Read-only data access
"""

from app.services.analytics.time_windows import (
    Period,
    TimeWindow,
    get_time_window,
    parse_month_year,
    month_bounds,
    resolve_date_range,
)
from app.services.analytics.timeline import Granularity, build_timeline, group_by_bucket
from app.services.analytics.growth import calculate_growth, recency_rate
from app.services.analytics.ranking import top_k, rank_counts
from app.services.analytics.facets import FacetSpec, summarize_facets
from app.services.analytics.rollup import rollup_by_partition, batch_domain, DEPARTMENTS
from app.services.analytics.fanout import gather_sections
from app.services.analytics.repository import AnalyticsRepository

__all__ = [
    "Period",
    "TimeWindow",
    "get_time_window",
    "parse_month_year",
    "month_bounds",
    "resolve_date_range",
    "Granularity",
    "build_timeline",
    "group_by_bucket",
    "calculate_growth",
    "recency_rate",
    "top_k",
    "rank_counts",
    "FacetSpec",
    "summarize_facets",
    "rollup_by_partition",
    "batch_domain",
    "DEPARTMENTS",
    "gather_sections",
    "AnalyticsRepository",
]
