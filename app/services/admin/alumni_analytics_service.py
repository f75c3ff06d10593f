# ============================================================================
# Alumni Analytics Service
# ============================================================================
"""
Career and education analytics over verified alumni profiles.

Job positions and education entries are flattened to one row per entry
(joined to their profile) and summarized twice: all entries, and only the
ones still ongoing.
"""
from typing import Dict, Optional, Any
from datetime import datetime

from sqlalchemy import select

from app.config import Settings, get_settings
from app.models.alumni import AlumniDetails, AlumniJobPosition, AlumniEducation
from app.services.analytics.facets import EDUCATION_FACETS, JOB_POSITION_FACETS, summarize_facets
from app.services.analytics.ranking import top_k
from app.services.analytics.repository import AnalyticsRepository


class AlumniAnalyticsService:
    """Faceted job/education analytics and location rankings for alumni"""

    def __init__(self, repo: AnalyticsRepository, settings: Optional[Settings] = None):
        self.repo = repo
        self.settings = settings or get_settings()

    async def get_job_position_analytics(self, now: datetime) -> Dict[str, Any]:
        stmt = (
            select(
                AlumniJobPosition.title,
                AlumniJobPosition.type,
                AlumniJobPosition.job_type,
                AlumniJobPosition.company,
                AlumniJobPosition.location,
                AlumniJobPosition.end,
                AlumniJobPosition.ongoing,
            )
            .join(AlumniDetails, AlumniJobPosition.alumni_id == AlumniDetails.id)
            .where(AlumniDetails.verified.is_(True))
            .order_by(AlumniDetails.id, AlumniJobPosition.position)
        )
        rows = await self.repo.fetch(stmt)
        return summarize_facets(rows, JOB_POSITION_FACETS, now, self.settings.ANALYTICS_TOP_N)

    async def get_education_analytics(self, now: datetime) -> Dict[str, Any]:
        stmt = (
            select(
                AlumniEducation.school,
                AlumniEducation.degree,
                AlumniEducation.field_of_study,
                AlumniEducation.location,
                AlumniEducation.end,
                AlumniEducation.ongoing,
            )
            .join(AlumniDetails, AlumniEducation.alumni_id == AlumniDetails.id)
            .where(AlumniDetails.verified.is_(True))
            .order_by(AlumniDetails.id, AlumniEducation.position)
        )
        rows = await self.repo.fetch(stmt)
        return summarize_facets(rows, EDUCATION_FACETS, now, self.settings.ANALYTICS_TOP_N)

    async def get_location_analytics(self) -> Dict[str, Any]:
        rows = await self.repo.find(
            AlumniDetails.city, AlumniDetails.country,
            where=[AlumniDetails.verified.is_(True)],
        )
        top_n = self.settings.ANALYTICS_TOP_N
        return {
            "topCities": top_k((row["city"] for row in rows), top_n),
            "topCountries": top_k((row["country"] for row in rows), top_n),
        }
