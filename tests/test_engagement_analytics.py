# ============================================================================
# Contact & Login Analytics Service Tests
# ============================================================================
import pytest
from datetime import timedelta

from app.models.user import UserRole
from app.services.admin.engagement_analytics_service import (
    ContactAnalyticsService, LoginAnalyticsService
)
from conftest import make_contact, make_login, make_user


class TestContactAnalytics:
    """Tests for contact-form analytics"""

    @pytest.mark.asyncio
    async def test_resolution_and_timelines(self, repo, seed, now):
        await seed(
            make_contact(now - timedelta(days=1), resolved=True),
            make_contact(now - timedelta(days=1), resolved=False),
            make_contact(now - timedelta(days=20), resolved=True),
            make_contact(now - timedelta(days=90), resolved=False),
        )

        result = await ContactAnalyticsService(repo).get_contact_analytics(now)

        assert result["total"] == 4
        assert result["resolved"] == 2
        assert result["unresolved"] == 2
        assert len(result["timeline"]["7d"]) == 8
        assert len(result["timeline"]["30d"]) == 31
        assert sum(p["count"] for p in result["timeline"]["7d"]) == 2
        assert sum(p["count"] for p in result["timeline"]["30d"]) == 3
        assert {"date": "2024-06-14", "count": 2} in result["timeline"]["7d"]


class TestLoginAnalytics:
    """Tests for login analytics"""

    @pytest.mark.asyncio
    async def test_reach_and_growth(self, repo, seed, settings, now):
        student = make_user(role=UserRole.STUDENT)
        alumni = make_user(role=UserRole.ALUMNI)
        await seed(
            student, alumni,
            make_login(student, now - timedelta(hours=2)),
            make_login(student, now - timedelta(days=2, hours=1)),
            make_login(alumni, now - timedelta(days=3)),
            make_login(alumni, now - timedelta(days=45)),
        )

        result = await LoginAnalyticsService(repo, settings).get_login_analytics(now)

        assert result["total"] == 4
        assert result["uniqueUsers"] == 2
        assert result["byRole"] == {"admin": 0, "alumni": 1, "student": 2}
        assert result["growth"]["1d"] == {"count": 1, "rate": 100}
        assert result["growth"]["7d"] == {"count": 3, "rate": 100}
        assert result["growth"]["30d"] == {"count": 3, "rate": 200.0}
        assert len(result["timeline"]["1d"]) == 25
