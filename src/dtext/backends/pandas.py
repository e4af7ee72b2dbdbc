"""Pandas backend implementation."""

from datetime import datetime
from typing import Any, Callable

import pandas as pd

from dtext.logging import get_logger, timed_block
from dtext.mixins import CalendarOpsMixin
from dtext.validation import validate_datetime_series, validate_same_length

_log = get_logger(__name__)


class PandasBackend(CalendarOpsMixin):
    """Backend implementation for pandas Series."""

    def map_dates(
        self, series: pd.Series, func: Callable[..., datetime], *args: Any
    ) -> pd.Series:
        """Apply ``func`` to each value of a datetime Series.

        Values are passed as plain ``datetime`` objects. NaT stays NaT.
        """
        validate_datetime_series(series)
        func_name = getattr(func, "__name__", repr(func))
        with timed_block(_log, "map_dates", rows=len(series), func=func_name):
            values = [
                pd.NaT if pd.isna(value) else func(value.to_pydatetime(), *args)
                for value in series
            ]
        return pd.Series(
            pd.to_datetime(values), index=series.index, name=series.name
        )

    def map_pairs(
        self,
        start: pd.Series,
        end: pd.Series,
        func: Callable[..., int],
        *args: Any,
    ) -> pd.Series:
        """Apply ``func`` row by row over two datetime Series.

        Returns a nullable ``Int64`` Series indexed like ``start``.
        """
        validate_datetime_series(start)
        validate_datetime_series(end)
        validate_same_length(start, end)
        with timed_block(_log, "map_pairs", rows=len(start)):
            values = [
                pd.NA
                if pd.isna(s) or pd.isna(e)
                else func(s.to_pydatetime(), e.to_pydatetime(), *args)
                for s, e in zip(start, end)
            ]
        return pd.Series(values, index=start.index, name=end.name, dtype="Int64")
