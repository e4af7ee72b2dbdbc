"""Byte-size unit helpers (binary, powers of 1024)."""

_KIB = 1024


def kb(value: int) -> int:
    """Kilobytes to bytes."""
    return value * _KIB


def mb(value: int) -> int:
    """Megabytes to bytes."""
    return kb(value) * _KIB


def gb(value: int) -> int:
    """Gigabytes to bytes."""
    return mb(value) * _KIB


def tb(value: int) -> int:
    """Terabytes to bytes."""
    return gb(value) * _KIB
