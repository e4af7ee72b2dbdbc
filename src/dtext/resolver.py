"""Date component resolver: build a datetime from a base plus field overrides."""

from datetime import datetime, timedelta

from dtext.calendar import MAX_YEAR, MIN_YEAR, add_months
from dtext.logging import get_logger

_log = get_logger(__name__)


def _keep_date_field(value: int | None) -> bool:
    # 0 means "use base" for year/month/day only
    return value is None or value == 0


def _resolve_year(year: int) -> int:
    """Map an out-of-range year into the representable range.

    Years above MAX_YEAR resolve to MIN_YEAR and years below MIN_YEAR
    resolve to MAX_YEAR.
    """
    if year > MAX_YEAR:
        resolved = MIN_YEAR
    elif year < MIN_YEAR:
        resolved = MAX_YEAR
    else:
        return year
    _log.debug("year_clamped", requested=year, resolved=resolved)
    return resolved


def resolve(
    base: datetime,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    second: int | None = None,
    millisecond: int | None = None,
) -> datetime:
    """Return a new datetime with the given fields replaced.

    Fields left as None are copied from ``base``. For ``year``, ``month``
    and ``day`` a value of 0 also keeps the base value; for time fields 0 is
    a real value.

    The result is composed by rollover rather than assignment: start at
    January 1 of the resolved year, add ``month - 1`` months, ``day - 1``
    days, then hours, minutes, seconds and milliseconds in that order. A day
    past the end of the month therefore carries into the next month, and
    negative values step backward.

    Args:
        base: Datetime supplying every omitted field.
        year: Calendar year. Out-of-range years are clamped (see
            ``_resolve_year``).
        month: Month offset from January, 1-based.
        day: Day offset from the first of the month, 1-based.
        hour: Hours added after the date is resolved.
        minute: Minutes added after hours.
        second: Seconds added after minutes.
        millisecond: Milliseconds added last.

    Returns:
        A new datetime. Sub-millisecond precision of ``base`` is dropped.
    """
    if _keep_date_field(year):
        year = base.year
    else:
        year = _resolve_year(year)
    if _keep_date_field(month):
        month = base.month
    if _keep_date_field(day):
        day = base.day
    if hour is None:
        hour = base.hour
    if minute is None:
        minute = base.minute
    if second is None:
        second = base.second
    if millisecond is None:
        millisecond = base.microsecond // 1000

    result = datetime(year, 1, 1)
    result = add_months(result, month - 1)
    result += timedelta(days=day - 1)
    result += timedelta(hours=hour)
    result += timedelta(minutes=minute)
    result += timedelta(seconds=second)
    result += timedelta(milliseconds=millisecond)
    return result


def set_time(
    dt: datetime,
    hour: int,
    minute: int | None = None,
    second: int | None = None,
    millisecond: int | None = None,
) -> datetime:
    """Return ``dt`` with its time fields replaced.

    Omitted trailing fields keep their value from ``dt``.
    """
    return resolve(
        dt, hour=hour, minute=minute, second=second, millisecond=millisecond
    )


def set_date(dt: datetime, year: int, month: int = 0, day: int = 0) -> datetime:
    """Return ``dt`` with its date fields replaced.

    ``month`` and ``day`` default to 0, which keeps the value from ``dt``.
    Setting a year where the base day does not exist rolls forward, e.g.
    2024-02-29 with year 2023 resolves to 2023-03-01.
    """
    return resolve(dt, year=year, month=month, day=day)


def beginning_of_day(dt: datetime) -> datetime:
    """Return the first millisecond of the given day."""
    return set_time(dt, 0, 0, 0, 0)


def end_of_day(dt: datetime) -> datetime:
    """Return the last millisecond of the given day."""
    return set_time(dt, 23, 59, 59, 999)
