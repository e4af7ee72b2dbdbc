"""Backend implementations for dtext."""

from typing import Any

from dtext.backends.base import Backend
from dtext.backends.pandas import PandasBackend
from dtext.backends.polars import PolarsBackend
from dtext.utils import _is_pandas, _is_polars
from dtext.validation import ValidationError


def get_backend(series: Any) -> PandasBackend | PolarsBackend:
    """Return the backend that handles ``series``.

    Raises:
        ValidationError: If the series is neither pandas nor polars.
    """
    if _is_polars(series):
        return PolarsBackend()
    if _is_pandas(series):
        return PandasBackend()
    raise ValidationError(f"Unknown series type: {type(series)}")


__all__ = ["Backend", "PandasBackend", "PolarsBackend", "get_backend"]
