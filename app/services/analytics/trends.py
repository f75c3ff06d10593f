# ============================================================================
# Period Trends
# ============================================================================
from datetime import datetime
from typing import Any, Dict, Union
import asyncio

from app.core.timeutils import to_utc_naive
from app.services.analytics.growth import calculate_growth
from app.services.analytics.repository import AnalyticsRepository
from app.services.analytics.time_windows import Period, get_time_window, to_period
from app.services.analytics.timeline import (
    Granularity, build_timeline, group_by_bucket, timeline_total
)


async def period_trend(
    repo: AnalyticsRepository,
    column,
    period: Union[str, Period],
    now: datetime,
    *criteria
) -> Dict[str, Any]:
    """
    Dense timeline of the current window plus growth against the previous one.

    Args:
        repo: Data access
        column: Timestamp column that places rows in time (e.g. User.created_at)
        period: '1d' (hourly buckets), '7d' or '30d' (daily buckets)
        now: The request's captured instant
        criteria: Extra filters applied to both windows

    Returns:
        {"timeline": [{"date", "count"}], "growth": {"count", "rate"}}
    """
    period = to_period(period)
    window = get_time_window(period, now)
    granularity = Granularity.HOURLY if period.is_hourly else Granularity.DAILY

    current, previous = await asyncio.gather(
        repo.timestamps_between(column, window.start, window.end, *criteria),
        repo.count(
            column.class_,
            column >= window.previous_start,
            column < window.previous_end,
            *criteria
        ),
    )

    counts = group_by_bucket((to_utc_naive(ts) for ts in current), granularity)
    timeline = build_timeline(counts, window.start, window.end, granularity)
    return {
        "timeline": timeline,
        "growth": calculate_growth(timeline_total(timeline), previous),
    }
