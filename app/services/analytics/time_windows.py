# ============================================================================
# Time Windows
# ============================================================================
"""
Lookback windows for period-over-period comparison and month/year
date-range parsing.

All instants are naive UTC. Month names are matched against a fixed
English table, never the process locale.
"""
from calendar import monthrange
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Tuple, Union
import re

from app.core.exceptions import InvalidArgument


class Period(str, Enum):
    DAY = "1d"
    WEEK = "7d"
    MONTH = "30d"

    @property
    def days(self) -> int:
        return {"1d": 1, "7d": 7, "30d": 30}[self.value]

    @property
    def is_hourly(self) -> bool:
        return self is Period.DAY


@dataclass(frozen=True)
class TimeWindow:
    """Two contiguous, equal-length windows ending at `end`"""
    start: datetime
    end: datetime
    previous_start: datetime
    previous_end: datetime


MONTHS = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

_MONTH_YEAR_PATTERN = re.compile(r"^\s*([A-Za-z]+|\S+?)\s*[\s\-/]\s*(\S+)\s*$")
_ASCII_DIGITS = re.compile(r"[0-9]+")


def to_period(value: Union[str, Period]) -> Period:
    try:
        return Period(value)
    except ValueError:
        raise InvalidArgument(
            f"Unknown period '{value}'; expected one of {', '.join(p.value for p in Period)}"
        )


def get_time_window(period: Union[str, Period], now: datetime) -> TimeWindow:
    """
    Current and previous windows for a lookback period.

    Args:
        period: '1d', '7d' or '30d'
        now: The request's captured instant

    Returns:
        TimeWindow with start = now - period, previous_start = now - 2 * period
    """
    length = timedelta(days=to_period(period).days)
    return TimeWindow(
        start=now - length,
        end=now,
        previous_start=now - 2 * length,
        previous_end=now - length,
    )


def _parse_year(raw: Union[str, int]) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        year = raw
    elif isinstance(raw, str) and _ASCII_DIGITS.fullmatch(raw.strip()):
        year = int(raw.strip())
    else:
        raise InvalidArgument(f"Invalid year '{raw}'")
    if year < 1 or year > 9999:
        raise InvalidArgument(f"Year out of range: {year}")
    return year


def _parse_month(raw: Union[str, int]) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        month = raw
    elif isinstance(raw, str) and _ASCII_DIGITS.fullmatch(raw.strip()):
        month = int(raw.strip())
    elif isinstance(raw, str) and raw.strip().lower() in MONTHS:
        return MONTHS[raw.strip().lower()]
    else:
        raise InvalidArgument(f"Invalid month '{raw}'")
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Month must be between 1 and 12, got {month}")
    return month


def month_bounds(year: Union[str, int], month: Union[str, int]) -> Tuple[datetime, datetime]:
    """First instant and last second (23:59:59) of a calendar month"""
    y = _parse_year(year)
    m = _parse_month(month)
    last_day = monthrange(y, m)[1]
    return datetime(y, m, 1), datetime(y, m, last_day, 23, 59, 59)


def year_bounds(year: Union[str, int]) -> Tuple[datetime, datetime]:
    y = _parse_year(year)
    return datetime(y, 1, 1), datetime(y, 12, 31, 23, 59, 59)


def parse_month_year(value: str, end: bool = False) -> datetime:
    """
    Resolve 'March 2024', 'Mar-2024' or '03-2024' to the start of that month,
    or to its last second when `end` is True.

    Raises:
        InvalidArgument: On unknown month names, non-numeric years or
            months outside 1-12
    """
    if not isinstance(value, str):
        raise InvalidArgument(f"Invalid month-year value: {value!r}")
    match = _MONTH_YEAR_PATTERN.match(value)
    if not match:
        raise InvalidArgument(f"Invalid month-year '{value}'; expected e.g. 'Mar-2024'")
    start, last = month_bounds(match.group(2), match.group(1))
    return last if end else start


def format_month_year(value: datetime) -> str:
    """'Mon-YYYY' label, e.g. 'Mar-2024'"""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]}-{value.year:04d}"


def resolve_date_range(
    year: Optional[Union[str, int]] = None,
    month: Optional[Union[str, int]] = None,
    start_month_year: Optional[str] = None,
    end_month_year: Optional[str] = None,
) -> Optional[Tuple[datetime, datetime]]:
    """
    Turn list-filter inputs into an inclusive (start, end) range.

    A month-year pair wins over year/month. A lone start or end month-year
    is open on the other side. A month without a year is rejected.

    Returns:
        (start, end) tuple, or None when no filter was supplied
    """
    if start_month_year or end_month_year:
        start = parse_month_year(start_month_year) if start_month_year else datetime.min
        end = parse_month_year(end_month_year, end=True) if end_month_year else datetime.max
        if start > end:
            raise InvalidArgument(
                f"Start month '{start_month_year}' is after end month '{end_month_year}'"
            )
        return start, end

    if year is not None and month is not None:
        return month_bounds(year, month)
    if year is not None:
        return year_bounds(year)
    if month is not None:
        raise InvalidArgument("A month filter requires a year")
    return None
