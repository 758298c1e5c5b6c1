"""Calendar arithmetic for ellenplanner.

Pure date-level helpers. Dates are local civil dates; no timezone handling.
"""

from datetime import date, timedelta
from typing import Iterator, List

from ellenplanner.models.constants import BUSINESS_DAYS_PER_WEEK, DAY_NAMES


def week_start(d: date) -> date:
    """Return the Monday of the week containing d.

    Sunday belongs to the week that started on the preceding Monday.
    """
    return d - timedelta(days=d.weekday())


def weekday_index(d: date) -> int:
    """General weekday index: Monday=0 ... Sunday=6."""
    return d.weekday()


def is_weekend(d: date) -> bool:
    return d.weekday() >= BUSINESS_DAYS_PER_WEEK


def business_index(d: date) -> int:
    """Business day index used for scheduling: Monday=0 ... Friday=4.

    Raises:
        ValueError: if d falls on a Saturday or Sunday
    """
    if is_weekend(d):
        raise ValueError(f"{d.isoformat()} is a weekend day and has no business index")
    return d.weekday()


def date_for(week_start_date: date, day_index: int) -> date:
    """Inverse of (week_start, business_index)."""
    return week_start_date + timedelta(days=day_index)


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def next_business_day(d: date) -> date:
    """First non-weekend day strictly after d."""
    nxt = d + timedelta(days=1)
    while is_weekend(nxt):
        nxt = nxt + timedelta(days=1)
    return nxt


def skip_weekend(d: date) -> date:
    """Return d, or the Monday after it if d is a weekend day."""
    while is_weekend(d):
        d = d + timedelta(days=1)
    return d


def is_date_in_range(d: date, start: date, end: date) -> bool:
    return start <= d <= end


def _daterange(start: date, end_inclusive: date) -> Iterator[date]:
    cur = start
    while cur <= end_inclusive:
        yield cur
        cur = cur + timedelta(days=1)


def enumerate_days(start: date, end: date) -> List[date]:
    """All calendar days from start to end, inclusive. Empty if end < start."""
    return list(_daterange(start, end))


def enumerate_business_days(start: date, end: date) -> List[date]:
    """Like enumerate_days, without Saturdays and Sundays."""
    return [d for d in _daterange(start, end) if not is_weekend(d)]


def day_name(day_index: int) -> str:
    """Dutch weekday name for a business index, or an empty string."""
    if 0 <= day_index < len(DAY_NAMES):
        return DAY_NAMES[day_index]
    return ""
