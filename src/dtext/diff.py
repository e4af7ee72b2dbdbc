"""SQL-style DATEDIFF between two datetimes."""

from datetime import datetime, timedelta
from enum import Enum

from dtext.calendar import Calendar
from dtext.config import get_default_calendar
from dtext.logging import get_logger

_log = get_logger(__name__)


class UnsupportedDatePart(ValueError):
    """Raised when a date part string is not recognized."""

    def __init__(self, date_part: object) -> None:
        self.date_part = date_part
        super().__init__(f'DatePart "{date_part}" is unknown')


class DatePart(Enum):
    """Units supported by date_diff."""

    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    DAY = "day"
    WEEK = "week"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"


_ABBREVIATIONS: dict[str, DatePart] = {
    "year": DatePart.YEAR,
    "yy": DatePart.YEAR,
    "yyyy": DatePart.YEAR,
    "quarter": DatePart.QUARTER,
    "qq": DatePart.QUARTER,
    "q": DatePart.QUARTER,
    "month": DatePart.MONTH,
    "mm": DatePart.MONTH,
    "m": DatePart.MONTH,
    "day": DatePart.DAY,
    "d": DatePart.DAY,
    "dd": DatePart.DAY,
    "week": DatePart.WEEK,
    "wk": DatePart.WEEK,
    "ww": DatePart.WEEK,
    "hour": DatePart.HOUR,
    "hh": DatePart.HOUR,
    "minute": DatePart.MINUTE,
    "mi": DatePart.MINUTE,
    "n": DatePart.MINUTE,
    "second": DatePart.SECOND,
    "ss": DatePart.SECOND,
    "s": DatePart.SECOND,
    "millisecond": DatePart.MILLISECOND,
    "ms": DatePart.MILLISECOND,
}

# Length of each elapsed-duration unit
_UNIT_LENGTHS: dict[DatePart, timedelta] = {
    DatePart.DAY: timedelta(days=1),
    DatePart.WEEK: timedelta(weeks=1),
    DatePart.HOUR: timedelta(hours=1),
    DatePart.MINUTE: timedelta(minutes=1),
    DatePart.SECOND: timedelta(seconds=1),
    DatePart.MILLISECOND: timedelta(milliseconds=1),
}

_MICROSECOND = timedelta(microseconds=1)


def parse_date_part(value: str | DatePart) -> DatePart:
    """Map a unit name or SQL abbreviation onto a DatePart.

    Matching ignores case and surrounding whitespace.

    Raises:
        UnsupportedDatePart: If the name is not recognized.
    """
    if isinstance(value, DatePart):
        return value
    if not isinstance(value, str):
        raise UnsupportedDatePart(value)
    part = _ABBREVIATIONS.get(value.strip().lower())
    if part is None:
        _log.debug("unsupported_date_part", date_part=value)
        raise UnsupportedDatePart(value)
    return part


def _truncate(delta: timedelta, unit: timedelta) -> int:
    """Whole units in ``delta``, truncated toward zero."""
    micros = delta // _MICROSECOND
    unit_micros = unit // _MICROSECOND
    whole = abs(micros) // unit_micros
    return whole if micros >= 0 else -whole


def date_diff(
    date_part: str | DatePart,
    start: datetime,
    end: datetime,
    calendar: Calendar | None = None,
) -> int:
    """Return the signed difference ``end - start`` in the given unit.

    Year, quarter and month are counted from calendar fields and ignore the
    day and time of day, so two dates in the same month differ by 0 months.
    Day, week, hour, minute, second and millisecond are whole units of the
    elapsed time, truncated toward zero.

    Args:
        date_part: Unit name or SQL abbreviation ("yy", "qq", "mm", "dd",
            "wk", "hh", "mi", "ss", "ms", ...), or a DatePart.
        start: Start of the interval.
        end: End of the interval.
        calendar: Calendar supplying year/month fields. Defaults to the
            configured default calendar.

    Raises:
        UnsupportedDatePart: If ``date_part`` is not recognized.

    Example:
        >>> date_diff("month", datetime(2024, 1, 15), datetime(2024, 3, 1))
        2
    """
    part = parse_date_part(date_part)
    if part in _UNIT_LENGTHS:
        return _truncate(end - start, _UNIT_LENGTHS[part])

    cal = calendar or get_default_calendar()
    year_diff = cal.get_year(end) - cal.get_year(start)
    if part is DatePart.YEAR:
        return year_diff
    end_month = cal.get_month(end)
    start_month = cal.get_month(start)
    if part is DatePart.QUARTER:
        return (year_diff * 4 + (end_month - 1) // 3) - (start_month - 1) // 3
    return year_diff * 12 + end_month - start_month
