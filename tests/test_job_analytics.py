# ============================================================================
# Job & Referral Analytics Service Tests
# ============================================================================
import pytest
from datetime import timedelta

from app.models.job import JobType, WorkType
from app.models.user import UserRole
from app.services.admin.job_analytics_service import JobAnalyticsService, ReferralAnalyticsService
from app.services.analytics.time_windows import month_bounds
from conftest import make_job, make_referral, make_user


class TestJobSummary:
    """Tests for the dashboard job card"""

    @pytest.mark.asyncio
    async def test_active_and_top_lists(self, repo, seed, settings, now):
        posted = now - timedelta(days=20)
        await seed(
            make_job(posted, now + timedelta(days=5), company="Acme", role="Engineer"),
            make_job(posted, now + timedelta(days=5), company="Acme", role="Analyst"),
            make_job(posted, now - timedelta(days=1), company="Beta", role="Engineer"),
        )

        result = await JobAnalyticsService(repo, settings).get_job_summary(now)

        assert result["total"] == 3
        assert result["active"] == 2
        assert result["topCompanies"] == [{"name": "Acme", "count": 2}, {"name": "Beta", "count": 1}]
        assert result["topRoles"] == [{"name": "Engineer", "count": 2}, {"name": "Analyst", "count": 1}]


class TestJobAnalytics:
    """Tests for the detailed job breakdown"""

    @pytest.mark.asyncio
    async def test_split_stats_and_posters(self, repo, seed, settings, now):
        alice = make_user(name="Alice", role=UserRole.ALUMNI, batch=2019)
        bob = make_user(name="Bob", role=UserRole.ALUMNI, batch=2020)
        posted = now - timedelta(days=10)
        await seed(
            alice, bob,
            make_job(posted, now + timedelta(days=3), posted_by=alice.id,
                     type=JobType.INTERNSHIP, work_type=WorkType.REMOTE),
            make_job(posted, now - timedelta(days=1), posted_by=alice.id, company="Beta"),
            make_job(posted, now + timedelta(days=3), posted_by=bob.id, role="Analyst"),
            make_job(posted, now + timedelta(days=3)),
        )

        result = await JobAnalyticsService(repo, settings).get_job_analytics(now)

        assert result["total"] == 4
        assert result["future"] == 3
        assert result["past"] == 1
        assert result["typeStats"]["total"] == {"internship": 1, "fulltime": 3}
        assert result["typeStats"]["past"] == {"fulltime": 1}
        assert result["workTypeStats"]["future"] == {"remote": 1, "onsite": 2}
        assert result["uniqueCompanies"] == 2
        assert result["uniqueRoles"] == 2
        assert result["topPosters"][0] == {
            "id": str(alice.id), "name": "Alice", "batch": 2019, "role": "alumni", "count": 2
        }
        assert result["topPosters"][1]["name"] == "Bob"
        assert len(result["topPosters"]) == 2

    @pytest.mark.asyncio
    async def test_posting_date_filter(self, repo, seed, settings, now):
        await seed(
            make_job(now - timedelta(days=40), now + timedelta(days=1)),
            make_job(now - timedelta(days=2), now + timedelta(days=1)),
        )

        result = await JobAnalyticsService(repo, settings).get_job_analytics(
            now, month_bounds(now.year, now.month)
        )

        assert result["total"] == 1

    @pytest.mark.asyncio
    async def test_empty(self, repo, settings, now):
        result = await JobAnalyticsService(repo, settings).get_job_analytics(now)

        assert result["total"] == 0
        assert result["typeStats"] == {"future": {}, "past": {}, "total": {}}
        assert result["topPosters"] == []


class TestReferralAnalytics:
    """Tests for referral analytics"""

    @pytest.mark.asyncio
    async def test_summary(self, repo, seed, settings, now):
        posted = now - timedelta(days=5)
        await seed(
            make_referral(posted, now + timedelta(days=5), company="Acme"),
            make_referral(posted, now + timedelta(days=5), company="Acme", is_active=False),
        )

        result = await ReferralAnalyticsService(repo, settings).get_referral_summary(now)

        assert result["total"] == 2
        assert result["active"] == 1
        assert result["topCompanies"] == [{"name": "Acme", "count": 2}]

    @pytest.mark.asyncio
    async def test_posters_ranked_by_average(self, repo, seed, settings, now):
        alice = make_user(name="Alice", role=UserRole.ALUMNI)
        bob = make_user(name="Bob", role=UserRole.ALUMNI)
        posted = now - timedelta(days=5)
        await seed(
            alice, bob,
            make_referral(posted, now + timedelta(days=5), posted_by=alice.id, number_of_referrals=2),
            make_referral(posted, now - timedelta(days=1), posted_by=alice.id, number_of_referrals=4),
            make_referral(posted, now + timedelta(days=5), posted_by=bob.id, number_of_referrals=5,
                          company="Beta", role="Analyst"),
        )

        result = await ReferralAnalyticsService(repo, settings).get_referral_analytics(now)

        assert result["totalPosts"] == 3
        assert result["futurePosts"] == 2
        assert result["pastPosts"] == 1
        assert result["totalReferrals"] == 11
        assert result["uniqueCompanies"] == 2
        assert [poster["name"] for poster in result["topPosters"]] == ["Bob", "Alice"]
        assert result["topPosters"][0]["avgReferrals"] == 5.0
        assert result["topPosters"][1]["postCount"] == 2
        assert result["topPosters"][1]["totalReferrals"] == 6
        assert result["topPosters"][1]["avgReferrals"] == 3.0
