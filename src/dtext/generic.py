"""Generic value helpers."""

from typing import Any, Callable, TypeVar

T = TypeVar("T")


def is_in(value: Any, *candidates: Any) -> bool:
    """True if ``value`` equals any of ``candidates``.

    Raises:
        TypeError: If ``value`` is None.
    """
    if value is None:
        raise TypeError("value must not be None")
    return value in candidates


def with_(value: T, action: Callable[[T], Any]) -> T:
    """Call ``action`` with ``value`` and return ``value``."""
    action(value)
    return value
