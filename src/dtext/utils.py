"""Common utility functions for dtext."""

from typing import Any

import pandas as pd


def _is_polars(series: Any) -> bool:
    """Check if series is a polars Series."""
    try:
        import polars as pl
        return isinstance(series, pl.Series)
    except ImportError:
        return False


def _is_pandas(series: Any) -> bool:
    """Check if series is a pandas Series."""
    return isinstance(series, pd.Series)
