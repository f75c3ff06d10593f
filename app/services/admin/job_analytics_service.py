# ============================================================================
# Job & Referral Analytics Service
# ============================================================================
"""
Job posting and referral analytics: active/expired split, categorical
breakdowns, top companies/roles and the most prolific posters.
"""
from typing import Dict, List, Optional, Any, Iterable, Tuple
from collections import Counter, defaultdict
from datetime import datetime

from app.config import Settings, get_settings
from app.core.timeutils import to_utc_naive
from app.models.job import JobPosting, Referral
from app.models.user import User
from app.services.analytics.fanout import gather_sections
from app.services.analytics.ranking import count_values, normalize_key, rank_counts
from app.services.analytics.repository import AnalyticsRepository


def _split_stats() -> Dict[str, Dict[str, int]]:
    return {"future": defaultdict(int), "past": defaultdict(int), "total": defaultdict(int)}


def _plain(stats: Dict[str, Dict[str, int]]) -> Dict[str, Dict[str, int]]:
    return {bucket: dict(counts) for bucket, counts in stats.items()}


class _PosterLookup:
    """Resolve poster ids to name/batch/role, with blanks for unknown users"""

    def __init__(self, repo: AnalyticsRepository, settings: Settings):
        self.repo = repo
        self.settings = settings

    async def resolve(self, poster_ids: Iterable[Any]) -> Dict[str, Dict[str, Any]]:
        ids = [poster_id for poster_id in poster_ids if poster_id is not None]
        if not ids:
            return {}
        rows = await self.repo.find(
            User.id, User.name, User.batch, User.role,
            where=[User.id.in_(ids)],
        )
        return {
            str(row["id"]): {
                "name": row["name"] or "",
                "batch": row["batch"],
                "role": normalize_key(row["role"]) or "",
            }
            for row in rows
        }

    def describe(self, poster_id: str, users: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
        user = users.get(poster_id)
        if user is None:
            return {"id": poster_id, "name": "", "batch": self.settings.BATCH_START_YEAR, "role": ""}
        return {"id": poster_id, **user}


class JobAnalyticsService:
    """Analytics over job postings"""

    def __init__(self, repo: AnalyticsRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or get_settings()
        self.posters = _PosterLookup(repo, self.settings)

    async def get_job_summary(self, now: datetime) -> Dict[str, Any]:
        """Dashboard card: total, still-open postings, top companies and roles"""
        top_n = self.settings.ANALYTICS_TOP_N
        sections = await gather_sections({
            "total": self.repo.count(JobPosting),
            "active": self.repo.count(JobPosting, JobPosting.last_apply_date > now),
            "topCompanies": self.repo.group_count(JobPosting.company),
            "topRoles": self.repo.group_count(JobPosting.role),
        })
        sections["topCompanies"] = rank_counts(sections["topCompanies"], top_n)
        sections["topRoles"] = rank_counts(sections["topRoles"], top_n)
        return sections

    async def get_job_analytics(
        self,
        now: datetime,
        date_range: Optional[Tuple[datetime, datetime]] = None
    ) -> Dict[str, Any]:
        """
        Detailed job posting analytics.

        Args:
            now: The request's captured instant; postings whose last apply
                date is after it are "future"
            date_range: Optional inclusive (start, end) on the posting date

        Returns:
            total/future/past, typeStats and workTypeStats split by
            future/past/total, unique and top companies/roles, top posters
        """
        top_n = self.settings.ANALYTICS_TOP_N
        criteria = []
        if date_range:
            criteria = [JobPosting.posted_on >= date_range[0], JobPosting.posted_on <= date_range[1]]

        rows = await self.repo.find(
            JobPosting.type, JobPosting.work_type, JobPosting.company,
            JobPosting.role, JobPosting.posted_by, JobPosting.last_apply_date,
            where=criteria,
        )

        future = 0
        type_stats = _split_stats()
        work_type_stats = _split_stats()
        poster_counts = Counter()
        poster_ids: Dict[str, Any] = {}

        for row in rows:
            bucket = "future" if to_utc_naive(row["last_apply_date"]) > now else "past"
            if bucket == "future":
                future += 1

            job_type = normalize_key(row["type"])
            work_type = normalize_key(row["work_type"])
            type_stats["total"][job_type] += 1
            type_stats[bucket][job_type] += 1
            work_type_stats["total"][work_type] += 1
            work_type_stats[bucket][work_type] += 1

            if row["posted_by"] is not None:
                poster_counts[str(row["posted_by"])] += 1
                poster_ids[str(row["posted_by"])] = row["posted_by"]

        company_counts = count_values(row["company"] for row in rows)
        role_counts = count_values(row["role"] for row in rows)

        top_posters = rank_counts(poster_counts, top_n)
        users = await self.posters.resolve(poster_ids[p["name"]] for p in top_posters)

        return {
            "total": len(rows),
            "future": future,
            "past": len(rows) - future,
            "typeStats": _plain(type_stats),
            "workTypeStats": _plain(work_type_stats),
            "uniqueCompanies": len(company_counts),
            "topCompanies": rank_counts(company_counts, top_n),
            "uniqueRoles": len(role_counts),
            "topRoles": rank_counts(role_counts, top_n),
            "topPosters": [
                {**self.posters.describe(poster["name"], users), "count": poster["count"]}
                for poster in top_posters
            ],
        }


class ReferralAnalyticsService:
    """Analytics over referral posts"""

    def __init__(self, repo: AnalyticsRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or get_settings()
        self.posters = _PosterLookup(repo, self.settings)

    async def get_referral_summary(self, now: datetime) -> Dict[str, Any]:
        """Dashboard card: total, active posts, top companies and roles"""
        top_n = self.settings.ANALYTICS_TOP_N
        sections = await gather_sections({
            "total": self.repo.count(Referral),
            "active": self.repo.count(Referral, Referral.is_active.is_(True)),
            "topCompanies": self.repo.group_count(Referral.company),
            "topRoles": self.repo.group_count(Referral.role),
        })
        sections["topCompanies"] = rank_counts(sections["topCompanies"], top_n)
        sections["topRoles"] = rank_counts(sections["topRoles"], top_n)
        return sections

    async def get_referral_analytics(self, now: datetime) -> Dict[str, Any]:
        """
        Detailed referral analytics.

        Top posters are ranked by average referrals per post, then by post
        count, then by id.
        """
        top_n = self.settings.ANALYTICS_TOP_N
        rows = await self.repo.find(
            Referral.company, Referral.role, Referral.posted_by,
            Referral.last_apply_date, Referral.number_of_referrals,
        )

        future = 0
        total_referrals = 0
        poster_stats: Dict[str, Dict[str, Any]] = {}

        for row in rows:
            if to_utc_naive(row["last_apply_date"]) > now:
                future += 1
            referrals = row["number_of_referrals"] or 0
            total_referrals += referrals

            if row["posted_by"] is None:
                continue
            stats = poster_stats.setdefault(
                str(row["posted_by"]),
                {"raw_id": row["posted_by"], "postCount": 0, "totalReferrals": 0},
            )
            stats["postCount"] += 1
            stats["totalReferrals"] += referrals

        ranked: List[Tuple[str, Dict[str, Any]]] = sorted(
            poster_stats.items(),
            key=lambda item: (
                -(item[1]["totalReferrals"] / item[1]["postCount"]),
                -item[1]["postCount"],
                item[0],
            ),
        )[:top_n]
        users = await self.posters.resolve(stats["raw_id"] for _, stats in ranked)

        company_counts = count_values(row["company"] for row in rows)
        role_counts = count_values(row["role"] for row in rows)

        return {
            "totalPosts": len(rows),
            "futurePosts": future,
            "pastPosts": len(rows) - future,
            "totalReferrals": total_referrals,
            "uniqueCompanies": len(company_counts),
            "topCompanies": rank_counts(company_counts, top_n),
            "uniqueRoles": len(role_counts),
            "topRoles": rank_counts(role_counts, top_n),
            "topPosters": [
                {
                    **self.posters.describe(poster_id, users),
                    "postCount": stats["postCount"],
                    "totalReferrals": stats["totalReferrals"],
                    "avgReferrals": round(stats["totalReferrals"] / stats["postCount"], 2),
                }
                for poster_id, stats in ranked
            ],
        }
