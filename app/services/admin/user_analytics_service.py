# ============================================================================
# User Analytics Service
# ============================================================================
"""
User growth, role distribution and batch/department rollups for the admin
dashboards.
"""
from typing import Dict, List, Optional, Any, Union
from datetime import datetime, timedelta

from app.config import Settings, get_settings
from app.core.exceptions import InvalidArgument
from app.models.user import User, UserRole
from app.services.analytics.fanout import gather_sections
from app.services.analytics.ranking import normalize_key
from app.services.analytics.repository import AnalyticsRepository
from app.services.analytics.rollup import (
    DEPARTMENTS, batch_domain, role_distribution, rollup_by_partition
)
from app.services.analytics.time_windows import Period
from app.services.analytics.trends import period_trend


class UserAnalyticsService:
    """
    User-centric analytics.

    Provides:
    - Overview: totals, role split, 1d/7d/30d growth and timelines
    - Batch and department rollups with recency growth
    - Unverified user listing
    """

    def __init__(self, repo: AnalyticsRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or get_settings()

    # =========================================================================
    # Overview
    # =========================================================================
    async def get_user_analytics(self, now: datetime) -> Dict[str, Any]:
        """
        Dashboard user summary.

        Returns:
            total, byRole, growth per period, current-window timeline per
            period, and the most recently created users
        """
        sections = await gather_sections({
            "total": self.repo.count(User),
            "byRole": self.repo.group_count(User.role),
            **{
                period.value: period_trend(self.repo, User.created_at, period, now)
                for period in Period
            },
            "recentUsers": self._get_recent_users(),
        })

        return {
            "total": sections["total"],
            "byRole": role_distribution(sections["byRole"]),
            "growth": {period.value: sections[period.value]["growth"] for period in Period},
            "timeline": {period.value: sections[period.value]["timeline"] for period in Period},
            "recentUsers": sections["recentUsers"],
        }

    async def _get_recent_users(self) -> List[Dict[str, Any]]:
        rows = await self.repo.find(
            User.name, User.college_email, User.batch, User.department, User.role,
            order_by=[User.created_at.desc()],
            limit=self.settings.RECENT_USERS_LIMIT,
        )
        return [
            {
                "name": row["name"],
                "collegeEmail": row["college_email"],
                "batch": row["batch"],
                "department": normalize_key(row["department"]),
                "role": normalize_key(row["role"]),
            }
            for row in rows
        ]

    # =========================================================================
    # Rollups
    # =========================================================================
    def _role_criteria(self, role: Optional[Union[str, UserRole]]) -> list:
        if role is None:
            return []
        try:
            return [User.role == UserRole(role)]
        except ValueError:
            raise InvalidArgument(f"Unknown role '{role}'")

    def _recency_cutoff(self, now: datetime) -> datetime:
        return now - timedelta(days=self.settings.RECENCY_WINDOW_DAYS)

    async def get_batch_analytics(
        self,
        now: datetime,
        role: Optional[Union[str, UserRole]] = None
    ) -> List[Dict[str, Any]]:
        """One entry per batch year in the configured range, ascending"""
        rows = await self.repo.find(
            User.batch, User.role, User.created_at,
            where=self._role_criteria(role),
        )
        domain = batch_domain(
            now,
            start_year=self.settings.BATCH_START_YEAR,
            years_ahead=self.settings.BATCH_YEARS_AHEAD,
        )
        return rollup_by_partition(rows, "batch", domain, self._recency_cutoff(now))

    async def get_department_analytics(
        self,
        now: datetime,
        role: Optional[Union[str, UserRole]] = None
    ) -> List[Dict[str, Any]]:
        """One entry per department, alphabetical"""
        rows = await self.repo.find(
            User.department, User.role, User.created_at,
            where=self._role_criteria(role),
        )
        return rollup_by_partition(rows, "department", DEPARTMENTS, self._recency_cutoff(now))

    # =========================================================================
    # Verification Queue
    # =========================================================================
    async def get_unverified_users(self) -> Dict[str, Any]:
        rows = await self.repo.find(
            User.name, User.college_email, User.batch, User.department,
            User.role, User.created_at,
            where=[User.verified.is_(False)],
            order_by=[User.created_at.desc()],
        )
        return {
            "total": len(rows),
            "users": [
                {
                    "name": row["name"] or "",
                    "collegeEmail": row["college_email"] or "",
                    "batch": str(row["batch"] or ""),
                    "department": normalize_key(row["department"]) or "",
                    "role": normalize_key(row["role"]) or "",
                    "createdAt": row["created_at"].isoformat() if row["created_at"] else None,
                }
                for row in rows
            ],
        }

    # =========================================================================
    # Detailed View
    # =========================================================================
    async def get_detailed_user_analytics(self, now: datetime) -> Dict[str, Any]:
        """Overview (without recent users) plus rollups and unverified users"""
        sections = await gather_sections({
            "overview": self.get_user_analytics(now),
            "byBatch": self.get_batch_analytics(now),
            "byDepartment": self.get_department_analytics(now),
            "unverified": self.get_unverified_users(),
        })
        overview = dict(sections["overview"])
        overview.pop("recentUsers", None)
        sections["overview"] = overview
        return sections
