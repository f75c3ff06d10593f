# ============================================================================
# Growth Calculations
# ============================================================================
from typing import Dict, Union

Number = Union[int, float]


def calculate_growth(current: Number, previous: Number) -> Dict[str, Number]:
    """
    Period-over-period growth.

    Returns:
        {"count": current, "rate": percentage change rounded to 2 places}.
        A previous value of 0 yields 100 when current > 0 and 0 otherwise;
        growth from nothing is capped at 100 rather than treated as infinite.
    """
    if previous > 0:
        rate = round(((current - previous) / previous) * 100, 2)
    elif current > 0:
        rate = 100
    else:
        rate = 0
    return {"count": current, "rate": rate}


def recency_rate(recent: Number, total: Number) -> float:
    """Share of a partition's total created recently, as a percentage"""
    if total == 0 or recent == 0:
        return 0
    return round((recent / total) * 100, 2)
