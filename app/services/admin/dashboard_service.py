# ============================================================================
# Admin Dashboard Service
# ============================================================================
"""
Composes the admin analytics payloads.

Each public method captures "now" once (unless the caller passes one) and
threads it through every section, so a payload never mixes instants. The
sections of a payload run concurrently and the payload fails as a whole if
any section fails.
"""
from typing import Dict, Optional, Any, Tuple
from datetime import datetime
import logging

from app.config import Settings, get_settings
from app.core.timeutils import utc_now
from app.models.user import UserRole
from app.services.admin.alumni_analytics_service import AlumniAnalyticsService
from app.services.admin.engagement_analytics_service import (
    ContactAnalyticsService, LoginAnalyticsService
)
from app.services.admin.event_analytics_service import EventAnalyticsService
from app.services.admin.job_analytics_service import JobAnalyticsService, ReferralAnalyticsService
from app.services.admin.user_analytics_service import UserAnalyticsService
from app.services.analytics.fanout import gather_sections
from app.services.analytics.repository import AnalyticsRepository

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Dashboard analytics composer.

    Provides one payload per admin analytics endpoint:
    - Main dashboard (users, events, referrals, jobs, logins)
    - Users, alumni, events, jobs, referrals and contacts analytics
    """

    def __init__(self, repo: AnalyticsRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or get_settings()
        self.users = UserAnalyticsService(repo, self.settings)
        self.alumni = AlumniAnalyticsService(repo, self.settings)
        self.events = EventAnalyticsService(repo, self.settings)
        self.jobs = JobAnalyticsService(repo, self.settings)
        self.referrals = ReferralAnalyticsService(repo, self.settings)
        self.contacts = ContactAnalyticsService(repo)
        self.logins = LoginAnalyticsService(repo, self.settings)

    # =========================================================================
    # Main Dashboard
    # =========================================================================
    async def get_dashboard(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Retrieve the summary cards for the main admin dashboard.

        Returns:
            Dictionary keyed by users, events, referrals, jobs and logins
        """
        now = now or utc_now()
        logger.debug(f"Composing dashboard analytics at {now.isoformat()}")
        return await gather_sections({
            "users": self.users.get_user_analytics(now),
            "events": self.events.get_event_summary(now),
            "referrals": self.referrals.get_referral_summary(now),
            "jobs": self.jobs.get_job_summary(now),
            "logins": self.logins.get_login_analytics(now),
        })

    # =========================================================================
    # Detailed Analytics
    # =========================================================================
    async def get_users_analytics(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return await self.users.get_detailed_user_analytics(now or utc_now())

    async def get_alumni_analytics(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Alumni batches/departments plus career, education and location facets"""
        now = now or utc_now()
        return await gather_sections({
            "batches": self.users.get_batch_analytics(now, role=UserRole.ALUMNI),
            "departments": self.users.get_department_analytics(now, role=UserRole.ALUMNI),
            "jobs": self.alumni.get_job_position_analytics(now),
            "education": self.alumni.get_education_analytics(now),
            "locations": self.alumni.get_location_analytics(),
        })

    async def get_events_analytics(
        self,
        now: Optional[datetime] = None,
        date_range: Optional[Tuple[datetime, datetime]] = None
    ) -> Dict[str, Any]:
        return await self.events.get_event_analytics(now or utc_now(), date_range)

    async def get_jobs_analytics(
        self,
        now: Optional[datetime] = None,
        date_range: Optional[Tuple[datetime, datetime]] = None
    ) -> Dict[str, Any]:
        return await self.jobs.get_job_analytics(now or utc_now(), date_range)

    async def get_referrals_analytics(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return await self.referrals.get_referral_analytics(now or utc_now())

    async def get_contacts_analytics(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return await self.contacts.get_contact_analytics(now or utc_now())
