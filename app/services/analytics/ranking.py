# ============================================================================
# Top-K Ranking
# ============================================================================
"""
Count occurrences, order by count descending and keep the first K.

Ties are broken by the string form of the name, ascending, so the result
does not depend on row order.
"""
from collections import Counter
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping


def normalize_key(value: Any) -> Any:
    """Plain value for enum members, stripped text for strings"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str):
        return value.strip()
    return value


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def count_values(values: Iterable[Any]) -> Counter:
    """Occurrences per value, skipping null and empty values"""
    counts = Counter()
    for value in values:
        key = normalize_key(value)
        if not is_blank(key):
            counts[key] += 1
    return counts


def rank_counts(counts: Mapping[Any, int], k: int = 10) -> List[Dict[str, Any]]:
    """Top `k` entries of an already grouped count mapping"""
    if k <= 0:
        return []
    merged = Counter()
    for name, count in counts.items():
        key = normalize_key(name)
        if not is_blank(key):
            merged[key] += count
    items = list(merged.items())
    items.sort(key=lambda item: (-item[1], str(item[0])))
    return [{"name": name, "count": count} for name, count in items[:k]]


def top_k(values: Iterable[Any], k: int = 10) -> List[Dict[str, Any]]:
    """Top `k` most frequent values as [{"name", "count"}]"""
    return rank_counts(count_values(values), k)
