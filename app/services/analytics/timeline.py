# ============================================================================
# Timeline Builder
# ============================================================================
"""
Dense, gap-filled count series from sparse per-bucket counts.
"""
from collections import Counter
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Mapping

from app.core.exceptions import InvalidArgument


class Granularity(str, Enum):
    DAILY = "daily"
    HOURLY = "hourly"


_FORMATS = {
    Granularity.DAILY: "%Y-%m-%d",
    Granularity.HOURLY: "%Y-%m-%d-%H",
}

_STEPS = {
    Granularity.DAILY: timedelta(days=1),
    Granularity.HOURLY: timedelta(hours=1),
}


def truncate(value: datetime, granularity: Granularity) -> datetime:
    if granularity == Granularity.HOURLY:
        return value.replace(minute=0, second=0, microsecond=0)
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def bucket_key(value: datetime, granularity: Granularity = Granularity.DAILY) -> str:
    """'YYYY-MM-DD' for daily buckets, 'YYYY-MM-DD-HH' for hourly ones"""
    return value.strftime(_FORMATS[granularity])


def group_by_bucket(
    timestamps: Iterable[datetime],
    granularity: Granularity = Granularity.DAILY
) -> Dict[str, int]:
    """Sparse bucket -> count mapping for a set of timestamps"""
    return dict(Counter(bucket_key(ts, granularity) for ts in timestamps if ts is not None))


def build_timeline(
    counts: Mapping[str, int],
    start: datetime,
    end: datetime,
    granularity: Granularity = Granularity.DAILY
) -> List[Dict]:
    """
    Fill every bucket between start and end (inclusive) with its count.

    Args:
        counts: Sparse mapping from bucket key to count
        start: First instant covered; its bucket is the first entry
        end: Last instant covered; its bucket is the last entry
        granularity: Daily or hourly buckets

    Returns:
        Chronological list of {"date": bucket_key, "count": n}
    """
    if end < start:
        raise InvalidArgument(f"Timeline end {end.isoformat()} is before start {start.isoformat()}")

    step = _STEPS[granularity]
    current = truncate(start, granularity)
    last = truncate(end, granularity)

    timeline = []
    while current <= last:
        key = bucket_key(current, granularity)
        timeline.append({"date": key, "count": counts.get(key, 0)})
        current += step
    return timeline


def timeline_total(timeline: Iterable[Mapping]) -> int:
    return sum(point["count"] for point in timeline)
