"""dtext - Calendar arithmetic and small extension helpers for datetimes."""

from dtext.backends import Backend, PandasBackend, PolarsBackend, get_backend
from dtext.business import add_financial_days, count_financial_days
from dtext.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    BusinessCalendar,
    Calendar,
    DayOfWeek,
    GregorianCalendar,
    add_months,
    day_of_week,
    is_weekday,
    is_weekend,
)
from dtext.config import (
    configure_dtext,
    get_default_calendar,
    reset_dtext_config,
)
from dtext.dates import (
    age,
    intersects,
    is_future,
    is_past,
    quarter,
    to_microsoft_number,
    to_oracle_sql_date,
)
from dtext.diff import DatePart, UnsupportedDatePart, date_diff, parse_date_part
from dtext.logging import configure_logging, get_logger
from dtext.navigator import (
    beginning_of_month,
    end_of_month,
    find_closest_weekday,
    first_day_of_week_in_month,
    first_weekday_of_month,
    get_date_by_week,
    last_day_of_week_in_month,
    last_weekday_of_month,
    next_day_of_week,
    previous_day_of_week,
)
from dtext.resolver import (
    beginning_of_day,
    end_of_day,
    resolve,
    set_date,
    set_time,
)
from dtext.validation import ValidationError

__all__ = [
    # Calendar primitives
    "Calendar",
    "BusinessCalendar",
    "GregorianCalendar",
    "DayOfWeek",
    "MIN_YEAR",
    "MAX_YEAR",
    "add_months",
    "day_of_week",
    "is_weekday",
    "is_weekend",
    # Resolver
    "resolve",
    "set_date",
    "set_time",
    "beginning_of_day",
    "end_of_day",
    # Navigator
    "beginning_of_month",
    "end_of_month",
    "find_closest_weekday",
    "first_day_of_week_in_month",
    "first_weekday_of_month",
    "get_date_by_week",
    "last_day_of_week_in_month",
    "last_weekday_of_month",
    "next_day_of_week",
    "previous_day_of_week",
    # Business days
    "add_financial_days",
    "count_financial_days",
    # Diff
    "DatePart",
    "UnsupportedDatePart",
    "date_diff",
    "parse_date_part",
    # Date helpers
    "age",
    "intersects",
    "is_future",
    "is_past",
    "quarter",
    "to_microsoft_number",
    "to_oracle_sql_date",
    # Backends
    "Backend",
    "PandasBackend",
    "PolarsBackend",
    "ValidationError",
    "get_backend",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "configure_dtext",
    "get_default_calendar",
    "reset_dtext_config",
]
__version__ = "0.1.0"
