"""Series validation utilities."""

from typing import Any

import pandas as pd

from dtext.utils import _is_pandas, _is_polars


class ValidationError(Exception):
    """Raised when a date column cannot be processed."""
    pass


def validate_datetime_series(series: Any) -> None:
    """Validate that a column holds datetimes.

    Raises:
        ValidationError: If the series type is unknown or not datetime.
    """
    if _is_polars(series):
        _validate_polars(series)
    elif _is_pandas(series):
        _validate_pandas(series)
    else:
        raise ValidationError(f"Unknown series type: {type(series)}")


def validate_same_length(start: Any, end: Any) -> None:
    """Validate that paired columns line up row for row."""
    if len(start) != len(end):
        raise ValidationError(
            f"Series lengths differ: {len(start)} != {len(end)}"
        )


def _validate_pandas(series: pd.Series) -> None:
    """Validate pandas Series."""
    if not pd.api.types.is_datetime64_any_dtype(series):
        raise ValidationError(
            f"Series {series.name!r} has dtype {series.dtype}, expected datetime"
        )


def _validate_polars(series: Any) -> None:
    """Validate polars Series."""
    import polars as pl

    if series.dtype != pl.Datetime:
        raise ValidationError(
            f"Series {series.name!r} has dtype {series.dtype}, expected Datetime"
        )
