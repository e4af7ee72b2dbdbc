"""Locate weekday occurrences relative to a month or a date."""

from datetime import datetime, timedelta

from dtext.calendar import DayOfWeek, day_of_week, days_in_month, is_weekend


def _first_of_month(dt: datetime) -> datetime:
    return datetime(dt.year, dt.month, 1)


def _last_of_month(dt: datetime) -> datetime:
    return datetime(dt.year, dt.month, days_in_month(dt.year, dt.month))


def _forward_offset(current: DayOfWeek, target: DayOfWeek) -> int:
    """Days from ``current`` forward to ``target``, in [1, 7]."""
    offset = (target - current) % 7
    return offset or 7


def first_day_of_week_in_month(dt: datetime, dow: DayOfWeek) -> datetime:
    """Return the first ``dow`` in the month of ``dt`` (at midnight)."""
    first_day = _first_of_month(dt)
    offset = day_of_week(first_day) - dow
    if offset > 0:
        offset -= 7
    return first_day - timedelta(days=offset)


def last_day_of_week_in_month(dt: datetime, dow: DayOfWeek) -> datetime:
    """Return the last ``dow`` in the month of ``dt`` (at midnight)."""
    last_day = _last_of_month(dt)
    offset = dow - day_of_week(last_day)
    if offset > 0:
        offset -= 7
    return last_day + timedelta(days=offset)


def first_weekday_of_month(dt: datetime) -> datetime:
    """Return the first business day (Mon-Fri) of the month of ``dt``."""
    first_day = _first_of_month(dt)
    for i in range(7):
        candidate = first_day + timedelta(days=i)
        if not is_weekend(candidate):
            return candidate
    return first_day


def last_weekday_of_month(dt: datetime) -> datetime:
    """Return the last business day (Mon-Fri) of the month of ``dt``."""
    last_day = _last_of_month(dt)
    for i in range(7):
        candidate = last_day - timedelta(days=i)
        if not is_weekend(candidate):
            return candidate
    return last_day


def find_closest_weekday(dt: datetime) -> datetime:
    """Move a weekend date to the nearest business day.

    Saturday moves back to Friday, Sunday forward to Monday. Weekdays are
    returned unchanged.
    """
    dow = day_of_week(dt)
    if dow == DayOfWeek.SATURDAY:
        return dt - timedelta(days=1)
    if dow == DayOfWeek.SUNDAY:
        return dt + timedelta(days=1)
    return dt


def next_day_of_week(dt: datetime, dow: DayOfWeek) -> datetime:
    """Return the next ``dow`` strictly after ``dt``.

    If ``dt`` already falls on ``dow`` the result is one week later.
    """
    return dt + timedelta(days=_forward_offset(day_of_week(dt), dow))


def previous_day_of_week(dt: datetime, dow: DayOfWeek) -> datetime:
    """Return the previous ``dow`` strictly before ``dt``.

    If ``dt`` already falls on ``dow`` the result is one week earlier.
    """
    return dt - timedelta(days=_forward_offset(dow, day_of_week(dt)))


def get_date_by_week(dt: datetime, week: int, dow: DayOfWeek) -> datetime:
    """Return the ``dow`` of week number ``week`` in the year of ``dt``.

    Week 1 is the week holding the first ``dow`` on or after January 1
    (not the ISO-8601 week). Week numbers outside 1-53 return ``dt``
    unchanged.
    """
    if not 0 < week < 54:
        return dt
    first_day_of_year = datetime(dt.year, 1, 1)
    days_to_first = (dow - day_of_week(first_day_of_year) + 7) % 7
    return first_day_of_year + timedelta(days=7 * (week - 1) + days_to_first)


def beginning_of_month(dt: datetime) -> datetime:
    """Return the first millisecond of the month of ``dt``."""
    return _first_of_month(dt)


def end_of_month(dt: datetime) -> datetime:
    """Return the last millisecond of the month of ``dt``."""
    return _last_of_month(dt).replace(
        hour=23, minute=59, second=59, microsecond=999000
    )
