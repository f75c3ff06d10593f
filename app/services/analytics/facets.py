# ============================================================================
# Faceted Aggregation
# ============================================================================
"""
Two parallel summaries over flattened sub-records (one row per job
position or education entry): every row, and only the ongoing ones.
"""
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping

from app.core.timeutils import to_utc_naive
from app.services.analytics.ranking import normalize_key, is_blank, rank_counts


@dataclass(frozen=True)
class FacetSpec:
    """Output key -> row field, for categorical breakdowns and top-N lists"""
    breakdowns: Dict[str, str] = field(default_factory=dict)
    rankings: Dict[str, str] = field(default_factory=dict)


JOB_POSITION_FACETS = FacetSpec(
    breakdowns={
        "byEmploymentType": "type",
        "byJobType": "job_type",
    },
    rankings={
        "topTitles": "title",
        "topLocations": "location",
        "topCompanies": "company",
    },
)

EDUCATION_FACETS = FacetSpec(
    breakdowns={
        "byDegree": "degree",
    },
    rankings={
        "topDegrees": "degree",
        "topFields": "field_of_study",
        "topSchools": "school",
        "topLocations": "location",
    },
)


def is_ongoing(row: Mapping[str, Any], now: datetime) -> bool:
    """No end date, flagged ongoing, or ending after now"""
    if row.get("ongoing"):
        return True
    end = to_utc_naive(row.get("end"))
    return end is None or end > now


class _FacetAccumulator:
    def __init__(self, spec: FacetSpec):
        self.spec = spec
        self.total = 0
        self.counters = {
            key: Counter()
            for key in list(spec.breakdowns) + list(spec.rankings)
        }

    def add(self, row: Mapping[str, Any]) -> None:
        self.total += 1
        for key, row_field in {**self.spec.breakdowns, **self.spec.rankings}.items():
            value = normalize_key(row.get(row_field))
            if not is_blank(value):
                self.counters[key][value] += 1

    def result(self, top_n: int) -> Dict[str, Any]:
        summary: Dict[str, Any] = {"total": self.total}
        for key in self.spec.breakdowns:
            summary[key] = dict(self.counters[key])
        for key in self.spec.rankings:
            summary[key] = rank_counts(self.counters[key], top_n)
        return summary


def summarize_facets(
    rows: Iterable[Mapping[str, Any]],
    spec: FacetSpec,
    now: datetime,
    top_n: int = 10
) -> Dict[str, Dict[str, Any]]:
    """
    Build the "all" and "ongoing" views in a single pass.

    Args:
        rows: Flattened sub-records of eligible parents; each row needs the
            faceted fields plus "end" and "ongoing"
        spec: Facet definition; which fields to break down and which to rank
        now: The request's captured instant
        top_n: Length cap for ranked lists

    Returns:
        {"all": view, "ongoing": view}; each view always carries "total",
        every breakdown (dict) and every ranking (list), even when empty
    """
    all_rows = _FacetAccumulator(spec)
    ongoing_rows = _FacetAccumulator(spec)

    for row in rows:
        all_rows.add(row)
        if is_ongoing(row, now):
            ongoing_rows.add(row)

    return {
        "all": all_rows.result(top_n),
        "ongoing": ongoing_rows.result(top_n),
    }
