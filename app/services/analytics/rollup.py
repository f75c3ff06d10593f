# ============================================================================
# Batch / Department Rollups
# ============================================================================
"""
Cross-tabulate users by a categorical key and role, over a domain that is
enumerated up front so empty partitions still show up.
"""
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from app.core.timeutils import to_utc_naive
from app.models.user import Department, UserRole
from app.services.analytics.growth import recency_rate
from app.services.analytics.ranking import normalize_key

DEPARTMENTS: List[str] = sorted(d.value for d in Department)


def empty_role_distribution() -> Dict[str, int]:
    return {role.value: 0 for role in UserRole}


def role_distribution(counts: Mapping[Any, int]) -> Dict[str, int]:
    """Fixed-shape {admin, alumni, student} mapping, zero-filled"""
    distribution = empty_role_distribution()
    for role, count in counts.items():
        key = normalize_key(role)
        if key in distribution:
            distribution[key] += count
    return distribution


def batch_domain(now: datetime, start_year: int = 2014, years_ahead: int = 5) -> List[int]:
    """Every batch year from start_year through now.year + years_ahead"""
    return list(range(start_year, now.year + years_ahead + 1))


def rollup_by_partition(
    records: Iterable[Mapping[str, Any]],
    key: str,
    domain: Sequence[Any],
    since: datetime
) -> List[Dict[str, Any]]:
    """
    Per-partition totals, role split and recency growth.

    Args:
        records: Rows with `key`, "role" and "created_at"
        key: Partition field, also used as the output label ("batch", "department")
        domain: Every partition value to report, in output order
        since: Records created at or after this instant count as recent

    Returns:
        One entry per domain value:
        {key: value, "total", "byRole", "growth": {"count", "rate"}}
    """
    totals: Dict[Any, int] = defaultdict(int)
    recent: Dict[Any, int] = defaultdict(int)
    by_role: Dict[Any, Dict[str, int]] = defaultdict(empty_role_distribution)

    for record in records:
        partition = normalize_key(record.get(key))
        role = normalize_key(record.get("role"))
        totals[partition] += 1
        if role in by_role[partition]:
            by_role[partition][role] += 1
        created_at = to_utc_naive(record.get("created_at"))
        if created_at is not None and created_at >= since:
            recent[partition] += 1

    rollup = []
    for value in domain:
        total = totals.get(value, 0)
        recent_count = recent.get(value, 0)
        rollup.append({
            key: value,
            "total": total,
            "byRole": dict(by_role[value]) if value in by_role else empty_role_distribution(),
            "growth": {
                "count": recent_count,
                "rate": recency_rate(recent_count, total),
            },
        })
    return rollup
