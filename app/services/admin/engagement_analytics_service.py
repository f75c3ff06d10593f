# ============================================================================
# Engagement Analytics Service
# ============================================================================
"""
Contact-form and login activity analytics.
"""
from typing import Dict, Optional, Any
from datetime import datetime, timedelta

from app.config import Settings, get_settings
from app.core.timeutils import to_utc_naive
from app.models.contact import ContactUs
from app.models.user import LoginEvent
from app.services.analytics.fanout import gather_sections
from app.services.analytics.repository import AnalyticsRepository
from app.services.analytics.rollup import role_distribution
from app.services.analytics.time_windows import Period
from app.services.analytics.timeline import Granularity, build_timeline, group_by_bucket
from app.services.analytics.trends import period_trend

CONTACT_TIMELINE_DAYS = (7, 30)


class ContactAnalyticsService:
    """Resolution status and daily volume of contact-form submissions"""

    def __init__(self, repo: AnalyticsRepository):
        self.repo = repo

    async def _daily_timeline(self, days: int, now: datetime):
        start = now - timedelta(days=days)
        timestamps = await self.repo.timestamps_between(ContactUs.created_at, start, now)
        counts = group_by_bucket((to_utc_naive(ts) for ts in timestamps), Granularity.DAILY)
        return build_timeline(counts, start, now, Granularity.DAILY)

    async def get_contact_analytics(self, now: datetime) -> Dict[str, Any]:
        sections = await gather_sections({
            "total": self.repo.count(ContactUs),
            "resolved": self.repo.count(ContactUs, ContactUs.resolved.is_(True)),
            "unresolved": self.repo.count(ContactUs, ContactUs.resolved.is_(False)),
            **{
                f"{days}d": self._daily_timeline(days, now)
                for days in CONTACT_TIMELINE_DAYS
            },
        })
        return {
            "total": sections["total"],
            "resolved": sections["resolved"],
            "unresolved": sections["unresolved"],
            "timeline": {f"{days}d": sections[f"{days}d"] for days in CONTACT_TIMELINE_DAYS},
        }


class LoginAnalyticsService:
    """Login volume, reach and growth"""

    def __init__(self, repo: AnalyticsRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or get_settings()

    async def get_login_analytics(self, now: datetime) -> Dict[str, Any]:
        """
        Login summary for the dashboard.

        Returns:
            total logins, unique users and role split over the recency
            window, plus 1d/7d/30d growth and timelines
        """
        since = now - timedelta(days=self.settings.RECENCY_WINDOW_DAYS)
        sections = await gather_sections({
            "total": self.repo.count(LoginEvent),
            "uniqueUsers": self.repo.count_distinct(LoginEvent.user_id, LoginEvent.timestamp >= since),
            "byRole": self.repo.group_count(LoginEvent.user_role, LoginEvent.timestamp >= since),
            **{
                period.value: period_trend(self.repo, LoginEvent.timestamp, period, now)
                for period in Period
            },
        })
        return {
            "total": sections["total"],
            "uniqueUsers": sections["uniqueUsers"],
            "byRole": role_distribution(sections["byRole"]),
            "growth": {period.value: sections[period.value]["growth"] for period in Period},
            "timeline": {period.value: sections[period.value]["timeline"] for period in Period},
        }
