"""Small date predicates and conversions."""

from datetime import date, datetime

_MICROSOFT_EPOCH = datetime(1972, 1, 1)


def is_future(dt: datetime, reference: datetime | None = None) -> bool:
    """True if the date of ``dt`` is after the date of ``reference`` (default: now)."""
    reference = reference or datetime.now()
    return dt.date() > reference.date()


def is_past(dt: datetime, reference: datetime | None = None) -> bool:
    """True if the date of ``dt`` is before the date of ``reference`` (default: now)."""
    reference = reference or datetime.now()
    return dt.date() < reference.date()


def quarter(dt: datetime) -> int:
    """Quarter of the year, 1 to 4."""
    return (dt.month - 1) // 3 + 1


def intersects(
    start: datetime,
    end: datetime,
    other_start: datetime,
    other_end: datetime,
) -> bool:
    """True if the closed ranges [start, end] and [other_start, other_end] overlap."""
    return other_end >= start and other_start <= end


def age(date_of_birth: date, today: date | None = None) -> int:
    """Completed years between ``date_of_birth`` and ``today``."""
    today = today or date.today()
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years


def to_microsoft_number(dt: datetime) -> float:
    """Seconds elapsed since 1972-01-01 00:00:00."""
    return (dt - _MICROSOFT_EPOCH).total_seconds()


def to_oracle_sql_date(dt: datetime) -> str:
    """Render ``dt`` as an Oracle ``to_date(...)`` literal."""
    return "to_date('{0}','dd.mm.yyyy hh24.mi.ss')".format(
        dt.strftime("%d.%m.%Y %H:%M:%S")
    )
