"""
Year-month date resolution for timeline entries.

Entry dates are "YYYY-MM" strings or one of two open-ended sentinels:

- "present": ongoing as of the evaluation moment
- "future":  ongoing with a projected end; for bounds purposes it reaches
             FUTURE_HORIZON_MONTHS past the evaluation moment

All resolved values are first-of-month dates. Unparseable strings resolve to
None; callers decide what to substitute.
"""

import re
from datetime import date
from typing import Optional

from vitae.contexts.timeline.config import get_timeline_settings
from vitae.utils.timestamp import today

PRESENT = "present"
FUTURE = "future"
SENTINELS = (PRESENT, FUTURE)

YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_year_month(date_str: str) -> Optional[date]:
    """
    Parse a concrete "YYYY-MM" string to the first day of that month.

    Returns None for sentinels, empty values, and anything malformed
    (including out-of-range values such as "2023-13" or "0000-05").
    """
    if not isinstance(date_str, str):
        return None

    match = YEAR_MONTH_PATTERN.match(date_str.strip())
    if not match:
        return None

    year, month = int(match.group(1)), int(match.group(2))
    if year < 1 or not 1 <= month <= 12:
        return None
    return date(year, month, 1)


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_index(day: date) -> int:
    """Absolute month number (year * 12 + zero-based month)."""
    return day.year * 12 + day.month - 1


def add_months(day: date, months: int) -> date:
    """First day of the month `months` after `day`'s month (negative moves back)."""
    year, month_zero = divmod(month_index(day) + months, 12)
    return date(year, month_zero + 1, 1)


def months_between(start: date, end: date) -> int:
    """Signed number of whole calendar months from start's month to end's month."""
    return month_index(end) - month_index(start)


def inclusive_months(start: date, end: date) -> int:
    """Calendar months covered by start..end, counting both ends, floored at one."""
    return max(1, months_between(start, end) + 1)


def resolve_for_ordering(date_str: str, now: Optional[date] = None) -> Optional[date]:
    """
    Resolve a date string for sorting and start positions.

    Both sentinels resolve to the current month. Used for start dates always.
    """
    if date_str in SENTINELS:
        return month_start(now or today())
    return parse_year_month(date_str)


def resolve_for_bounds(
    date_str: str, now: Optional[date] = None, horizon_months: Optional[int] = None
) -> Optional[date]:
    """
    Resolve a date string where it determines visual extent (end dates).

    "future" resolves to the current month plus the configured horizon so
    projected entries are fully shown.
    """
    now = now or today()
    if date_str == PRESENT:
        return month_start(now)
    if date_str == FUTURE:
        if horizon_months is None:
            horizon_months = get_timeline_settings().future_horizon_months
        return add_months(now, horizon_months)
    return parse_year_month(date_str)


def is_projected(date_str: str, now: Optional[date] = None) -> bool:
    """
    True for the "future" sentinel or a concrete month that starts after `now`.

    A rendering hint only (dashed border, "(Expected)" label); never used in
    geometry.
    """
    if date_str == FUTURE:
        return True
    if date_str == PRESENT:
        return False

    resolved = parse_year_month(date_str)
    if resolved is None:
        return False
    return resolved > (now or today())


def months_duration(
    start_str: str,
    end_str: str,
    now: Optional[date] = None,
    horizon_months: Optional[int] = None,
) -> int:
    """
    Inclusive calendar-month count of an entry, floored at one month.

    A 2023-01 to 2023-04 entry spans 4 months. Malformed or reversed ranges
    count as a single month.
    """
    start = resolve_for_ordering(start_str, now)
    end = resolve_for_bounds(end_str, now, horizon_months)
    if start is None or end is None:
        return 1
    return inclusive_months(start, end)
