# ============================================================================
# Faceted Aggregation Tests
# ============================================================================
from datetime import datetime, timedelta

from app.models.alumni import EmploymentType, JobLocationType
from app.services.analytics.facets import (
    EDUCATION_FACETS, JOB_POSITION_FACETS, is_ongoing, summarize_facets
)

NOW = datetime(2024, 6, 15, 12, 30)


def job_row(title, company="Acme", location="Chennai", end=None, ongoing=False,
            type=EmploymentType.FULL_TIME, job_type=JobLocationType.ON_SITE):
    return {
        "title": title, "company": company, "location": location,
        "type": type, "job_type": job_type, "end": end, "ongoing": ongoing,
    }


class TestIsOngoing:
    """Tests for the ongoing predicate"""

    def test_no_end_date(self):
        assert is_ongoing({"end": None, "ongoing": False}, NOW)

    def test_flagged(self):
        assert is_ongoing({"end": NOW - timedelta(days=10), "ongoing": True}, NOW)

    def test_future_end(self):
        assert is_ongoing({"end": NOW + timedelta(days=1), "ongoing": False}, NOW)

    def test_ended(self):
        assert not is_ongoing({"end": NOW - timedelta(days=1), "ongoing": False}, NOW)


class TestSummarizeFacets:
    """Tests for the all/ongoing summaries"""

    def test_empty_input_keeps_shape(self):
        result = summarize_facets([], JOB_POSITION_FACETS, NOW)

        for view in ("all", "ongoing"):
            assert result[view] == {
                "total": 0,
                "byEmploymentType": {},
                "byJobType": {},
                "topTitles": [],
                "topLocations": [],
                "topCompanies": [],
            }

    def test_all_and_ongoing_views(self):
        rows = [
            job_row("Engineer", company="Acme"),
            job_row("Engineer", company="Beta", end=NOW - timedelta(days=30)),
            job_row("Intern", company="Acme", type=EmploymentType.INTERN,
                    job_type=JobLocationType.REMOTE, end=NOW - timedelta(days=400)),
        ]

        result = summarize_facets(rows, JOB_POSITION_FACETS, NOW)

        assert result["all"]["total"] == 3
        assert result["all"]["byEmploymentType"] == {"full-time": 2, "intern": 1}
        assert result["all"]["byJobType"] == {"on-site": 2, "remote": 1}
        assert result["all"]["topTitles"][0] == {"name": "Engineer", "count": 2}
        assert result["all"]["topCompanies"] == [
            {"name": "Acme", "count": 2},
            {"name": "Beta", "count": 1},
        ]

        assert result["ongoing"]["total"] == 1
        assert result["ongoing"]["topCompanies"] == [{"name": "Acme", "count": 1}]

    def test_ongoing_is_subset_of_all(self):
        rows = [job_row(f"Role {i}", end=NOW + timedelta(days=i - 2)) for i in range(5)]

        result = summarize_facets(rows, JOB_POSITION_FACETS, NOW)

        assert result["ongoing"]["total"] <= result["all"]["total"]
        assert result["ongoing"]["total"] == 2

    def test_rankings_capped(self):
        rows = [job_row(f"Title {i}") for i in range(15)]

        result = summarize_facets(rows, JOB_POSITION_FACETS, NOW, top_n=10)

        assert len(result["all"]["topTitles"]) == 10
        assert result["all"]["total"] == 15

    def test_education_facets(self):
        rows = [
            {"degree": "B.E", "field_of_study": "CSE", "school": "State", "location": "Chennai",
             "end": datetime(2020, 5, 1), "ongoing": False},
            {"degree": "M.S", "field_of_study": "CSE", "school": "Tech", "location": None,
             "end": None, "ongoing": True},
        ]

        result = summarize_facets(rows, EDUCATION_FACETS, NOW)

        assert result["all"]["byDegree"] == {"B.E": 1, "M.S": 1}
        assert result["all"]["topFields"] == [{"name": "CSE", "count": 2}]
        assert result["all"]["topLocations"] == [{"name": "Chennai", "count": 1}]
        assert result["ongoing"]["topDegrees"] == [{"name": "M.S", "count": 1}]
