# ============================================================================
# Event Analytics Service
# ============================================================================
from typing import Dict, List, Optional, Any, Tuple
from collections import defaultdict
from datetime import datetime

from app.config import Settings, get_settings
from app.core.timeutils import to_utc_naive
from app.models.event import Event
from app.services.analytics.fanout import gather_sections
from app.services.analytics.ranking import normalize_key
from app.services.analytics.repository import AnalyticsRepository
from app.services.analytics.time_windows import format_month_year


class EventAnalyticsService:
    """Upcoming/past split, type breakdown and monthly series for events"""

    def __init__(self, repo: AnalyticsRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or get_settings()

    async def get_event_summary(self, now: datetime) -> Dict[str, Any]:
        """Dashboard card: counts plus the next few upcoming events"""
        sections = await gather_sections({
            "total": self.repo.count(Event),
            "upcoming": self.repo.count(Event, Event.date_time > now),
            "past": self.repo.count(Event, Event.date_time <= now),
            "nextEvents": self.repo.find(
                Event.name, Event.date_time, Event.venue, Event.type,
                where=[Event.date_time > now],
                order_by=[Event.date_time.asc()],
                limit=self.settings.UPCOMING_EVENTS_LIMIT,
            ),
        })
        sections["nextEvents"] = [
            {
                "name": row["name"],
                "dateTime": row["date_time"].isoformat(),
                "venue": row["venue"],
                "type": normalize_key(row["type"]),
            }
            for row in sections["nextEvents"]
        ]
        return sections

    async def get_event_analytics(
        self,
        now: datetime,
        date_range: Optional[Tuple[datetime, datetime]] = None
    ) -> Dict[str, Any]:
        """
        Detailed event breakdown.

        Args:
            now: The request's captured instant
            date_range: Optional inclusive (start, end) on the event start time

        Returns:
            total, future, past, typeStats and a per-month timeseries sorted
            chronologically ({"monthYear": "Mar-2024", "total", "typeStats"})
        """
        criteria = []
        if date_range:
            criteria = [Event.date_time >= date_range[0], Event.date_time <= date_range[1]]
        rows = await self.repo.find(Event.date_time, Event.type, where=criteria)

        future = 0
        type_stats: Dict[str, int] = defaultdict(int)
        months: Dict[Tuple[int, int], Dict[str, Any]] = {}

        for row in rows:
            starts_at = to_utc_naive(row["date_time"])
            event_type = normalize_key(row["type"])
            if starts_at > now:
                future += 1
            type_stats[event_type] += 1

            month = months.setdefault(
                (starts_at.year, starts_at.month),
                {"monthYear": format_month_year(starts_at), "total": 0, "typeStats": defaultdict(int)},
            )
            month["total"] += 1
            month["typeStats"][event_type] += 1

        timeseries: List[Dict[str, Any]] = [
            {**months[key], "typeStats": dict(months[key]["typeStats"])}
            for key in sorted(months)
        ]

        return {
            "total": len(rows),
            "future": future,
            "past": len(rows) - future,
            "typeStats": dict(type_stats),
            "timeseries": timeseries,
        }
