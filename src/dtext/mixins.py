"""Mixin classes for shared backend functionality."""

from typing import TYPE_CHECKING, Any

from dtext.business import add_financial_days, count_financial_days
from dtext.diff import date_diff, parse_date_part
from dtext.navigator import (
    find_closest_weekday,
    next_day_of_week,
    previous_day_of_week,
)
from dtext.resolver import set_date, set_time

if TYPE_CHECKING:
    from dtext.calendar import Calendar, DayOfWeek
    from dtext.diff import DatePart


class CalendarOpsMixin:
    """Mixin providing column-wise calendar operations for a backend.

    Subclasses implement ``map_dates`` and ``map_pairs``; every method here
    is expressed through those two.
    """

    def map_dates(self, series: Any, func: Any, *args: Any) -> Any:
        raise NotImplementedError

    def map_pairs(self, start: Any, end: Any, func: Any, *args: Any) -> Any:
        raise NotImplementedError

    def set_time(
        self,
        series: Any,
        hour: int,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> Any:
        """Replace the time fields of every value in the column."""
        return self.map_dates(series, set_time, hour, minute, second, millisecond)

    def set_date(self, series: Any, year: int, month: int = 0, day: int = 0) -> Any:
        """Replace the date fields of every value in the column."""
        return self.map_dates(series, set_date, year, month, day)

    def find_closest_weekday(self, series: Any) -> Any:
        return self.map_dates(series, find_closest_weekday)

    def next_day_of_week(self, series: Any, dow: "DayOfWeek") -> Any:
        return self.map_dates(series, next_day_of_week, dow)

    def previous_day_of_week(self, series: Any, dow: "DayOfWeek") -> Any:
        return self.map_dates(series, previous_day_of_week, dow)

    def add_financial_days(self, series: Any, days: int) -> Any:
        """Add ``days`` business days to every value in the column."""
        return self.map_dates(series, add_financial_days, days)

    def count_financial_days(self, start: Any, end: Any) -> Any:
        """Count business days row by row between two columns."""
        return self.map_pairs(start, end, count_financial_days)

    def date_diff(
        self,
        date_part: "str | DatePart",
        start: Any,
        end: Any,
        calendar: "Calendar | None" = None,
    ) -> Any:
        """Row-wise ``date_diff`` between two columns.

        The date part is parsed once up front, so an unknown unit raises
        before any row is processed.
        """
        part = parse_date_part(date_part)
        return self.map_pairs(
            start, end, lambda s, e: date_diff(part, s, e, calendar)
        )
