"""Polars backend implementation."""

from datetime import datetime
from typing import Any, Callable

import polars as pl

from dtext.logging import get_logger, timed_block
from dtext.mixins import CalendarOpsMixin
from dtext.validation import validate_datetime_series, validate_same_length

_log = get_logger(__name__)


class PolarsBackend(CalendarOpsMixin):
    """Backend implementation for polars Series."""

    def map_dates(
        self, series: pl.Series, func: Callable[..., datetime], *args: Any
    ) -> pl.Series:
        """Apply ``func`` to each value of a Datetime Series.

        The result keeps the input's time unit. Nulls stay null.
        """
        validate_datetime_series(series)
        func_name = getattr(func, "__name__", repr(func))
        with timed_block(_log, "map_dates", rows=len(series), func=func_name):
            values = [
                None if value is None else func(value, *args)
                for value in series.to_list()
            ]
        return pl.Series(series.name, values, dtype=series.dtype)

    def map_pairs(
        self,
        start: pl.Series,
        end: pl.Series,
        func: Callable[..., int],
        *args: Any,
    ) -> pl.Series:
        """Apply ``func`` row by row over two Datetime Series.

        Returns an ``Int64`` Series.
        """
        validate_datetime_series(start)
        validate_datetime_series(end)
        validate_same_length(start, end)
        with timed_block(_log, "map_pairs", rows=len(start)):
            values = [
                None if s is None or e is None else func(s, e, *args)
                for s, e in zip(start.to_list(), end.to_list())
            ]
        return pl.Series(end.name, values, dtype=pl.Int64)
