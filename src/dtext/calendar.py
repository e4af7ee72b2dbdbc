"""Calendar primitives and injectable calendar implementations."""

from abc import ABC, abstractmethod
from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, datetime, timedelta
from enum import IntEnum
from typing import Iterator

MIN_YEAR = MINYEAR
MAX_YEAR = MAXYEAR


class DayOfWeek(IntEnum):
    """Day of week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def day_of_week(dt: datetime) -> DayOfWeek:
    """Return the Sunday-based day of week for a date."""
    # datetime.weekday() is Monday-based (Mon=0 .. Sun=6)
    return DayOfWeek((dt.weekday() + 1) % 7)


def is_weekday(day: DayOfWeek) -> bool:
    """Return True for Monday through Friday."""
    return day not in (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


def is_weekend(dt: datetime) -> bool:
    """Return True if the date falls on Saturday or Sunday."""
    return not is_weekday(day_of_week(dt))


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def add_months(dt: datetime, months: int) -> datetime:
    """Shift a datetime by whole calendar months.

    The day of month is clamped to the length of the target month, so
    Jan 31 + 1 month is the last day of February. Time of day is kept.

    Raises:
        ValueError: If the result falls outside the representable years.
    """
    total = dt.year * 12 + (dt.month - 1) + months
    year, month0 = divmod(total, 12)
    month = month0 + 1
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValueError(f"Month offset {months} moves {dt} out of range")
    day = min(dt.day, days_in_month(year, month))
    return dt.replace(year=year, month=month, day=day)


class Calendar(ABC):
    """Abstract base class for calendars.

    A calendar supplies the field extraction used by calendar-unit
    arithmetic and decides which days it includes.
    """

    def get_year(self, dt: datetime) -> int:
        return dt.year

    def get_month(self, dt: datetime) -> int:
        return dt.month

    def day_of_week(self, dt: datetime) -> DayOfWeek:
        return day_of_week(dt)

    @abstractmethod
    def is_business_day(self, dt: datetime) -> bool:
        """Return True if the calendar includes this day."""
        pass

    def dt_range(self, start_dt: datetime, end_dt: datetime) -> Iterator[datetime]:
        """Generate included dates in range [start_dt, end_dt]."""
        current = start_dt
        while current <= end_dt:
            if self.is_business_day(current):
                yield current
            current += timedelta(days=1)

    def dt_offset(self, dt: datetime, periods: int) -> datetime:
        """Shift datetime by N included days.

        Steps one calendar day at a time in the direction of ``periods`` and
        counts only days the calendar includes.
        """
        if periods == 0:
            return dt
        direction = 1 if periods > 0 else -1
        remaining = abs(periods)
        current = dt
        while remaining > 0:
            current += timedelta(days=direction)
            if self.is_business_day(current):
                remaining -= 1
        return current


class GregorianCalendar(Calendar):
    """Proleptic Gregorian calendar that includes all dates."""

    def is_business_day(self, dt: datetime) -> bool:
        return True

    def dt_offset(self, dt: datetime, periods: int) -> datetime:
        return dt + timedelta(days=periods)


class BusinessCalendar(Calendar):
    """Business date calendar - excludes weekends (Sat/Sun)."""

    def is_business_day(self, dt: datetime) -> bool:
        return not is_weekend(dt)
