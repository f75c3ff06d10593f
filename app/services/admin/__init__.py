# ============================================================================
# Admin Services Module
# ============================================================================
"""
Admin analytics services.

Services:
- DashboardService: Composes every admin analytics payload
- UserAnalyticsService: User growth, role split, batch/department rollups
- AlumniAnalyticsService: Faceted career/education analytics, locations
- EventAnalyticsService: Upcoming/past events, type and monthly breakdowns
- JobAnalyticsService: Job postings, top companies/roles/posters
- ReferralAnalyticsService: Referral volume and top posters
- ContactAnalyticsService: Contact-form resolution and daily volume
- LoginAnalyticsService: Login volume, reach and growth
"""

from app.services.admin.dashboard_service import DashboardService
from app.services.admin.user_analytics_service import UserAnalyticsService
from app.services.admin.alumni_analytics_service import AlumniAnalyticsService
from app.services.admin.event_analytics_service import EventAnalyticsService
from app.services.admin.job_analytics_service import JobAnalyticsService, ReferralAnalyticsService
from app.services.admin.engagement_analytics_service import (
    ContactAnalyticsService,
    LoginAnalyticsService,
)

__all__ = [
    "DashboardService",
    "UserAnalyticsService",
    "AlumniAnalyticsService",
    "EventAnalyticsService",
    "JobAnalyticsService",
    "ReferralAnalyticsService",
    "ContactAnalyticsService",
    "LoginAnalyticsService",
]
