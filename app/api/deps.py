# ============================================================================
# API Dependencies
# ============================================================================
from app.core.database import get_session_factory
from app.config import get_settings
from app.services.admin.dashboard_service import DashboardService
from app.services.analytics.repository import AnalyticsRepository


def get_analytics_repository() -> AnalyticsRepository:
    """Read-only repository over the application's session factory"""
    return AnalyticsRepository(get_session_factory())


def get_dashboard_service() -> DashboardService:
    """
    Build the analytics composer for a request.

    Tests override this dependency to point the service at another database.
    """
    return DashboardService(get_analytics_repository(), get_settings())
