"""Business ("financial") day arithmetic.

Saturday and Sunday are non-business days; every other day is a business
day. Both operations step one calendar day at a time, so their cost grows
linearly with the span covered.
"""

from datetime import datetime, timedelta

from dtext.calendar import BusinessCalendar, is_weekend
from dtext.config import get_scan_warning_days
from dtext.logging import get_logger

_log = get_logger(__name__)
_BUSINESS_CALENDAR = BusinessCalendar()


def _warn_if_large(operation: str, days: int) -> None:
    threshold = get_scan_warning_days()
    if abs(days) > threshold:
        _log.warning(
            "financial_day_scan_large",
            operation=operation,
            days=days,
            threshold=threshold,
        )


def add_financial_days(dt: datetime, days: int) -> datetime:
    """Add a number of business days to ``dt``.

    Negative values step backward. Each step moves at least one calendar
    day and keeps moving past weekend days, so the result is always a
    business day unless ``days`` is 0, in which case ``dt`` is returned
    unchanged.
    """
    _warn_if_large("add_financial_days", days)
    return _BUSINESS_CALENDAR.dt_offset(dt, days)


def count_financial_days(start: datetime, other: datetime) -> int:
    """Count the business days between two datetimes.

    The whole-day distance between the two (truncated toward zero) is
    walked one day at a time from ``start`` toward ``other``. The start day
    is excluded and the end day is included. The count is never negative.
    """
    days = int((other - start) / timedelta(days=1))
    _warn_if_large("count_financial_days", days)
    direction = 1 if days > 0 else -1
    step = timedelta(days=direction)
    current = start
    business_days = 0
    for _ in range(abs(days)):
        current += step
        if not is_weekend(current):
            business_days += 1
    return business_days
