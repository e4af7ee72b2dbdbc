"""Abstract backend protocol for column-wise date operations."""

from datetime import datetime
from typing import Any, Callable, Protocol, TypeVar

S = TypeVar("S")


class Backend(Protocol[S]):
    """Protocol defining the primitives a series backend must provide."""

    def map_dates(
        self, series: S, func: Callable[..., datetime], *args: Any
    ) -> S:
        """Apply ``func(value, *args)`` to every non-null datetime.

        Returns a datetime series aligned with the input. Nulls stay null.
        """
        ...

    def map_pairs(
        self, start: S, end: S, func: Callable[..., int], *args: Any
    ) -> S:
        """Apply ``func(start_value, end_value, *args)`` row by row.

        Returns an integer series. Rows where either side is null are null.
        """
        ...
