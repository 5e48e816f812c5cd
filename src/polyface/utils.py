"""Numeric tolerance policy shared by every geometric comparison."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

DP_TOL = 1e-6

_tolerance = DP_TOL


def get_tolerance() -> float:
    return _tolerance


def set_tolerance(value: float) -> float:
    """Set the process-wide tolerance and return the previous one."""
    global _tolerance
    if value <= 0:
        raise ValueError("tolerance must be > 0")
    previous = _tolerance
    _tolerance = float(value)
    return previous


@contextmanager
def tolerance(value: float) -> Iterator[float]:
    """Temporarily use *value* as the tolerance.

    >>> with tolerance(1e-3):
    ...     eq(1.0, 1.0005)
    True
    """
    previous = set_tolerance(value)
    try:
        yield value
    finally:
        set_tolerance(previous)


def eq_0(x: float) -> bool:
    return -_tolerance < x < _tolerance


def eq(x: float, y: float) -> bool:
    return abs(x - y) < _tolerance


def lt(x: float, y: float) -> bool:
    return x - y < -_tolerance


def le(x: float, y: float) -> bool:
    return x - y < _tolerance


def gt(x: float, y: float) -> bool:
    return x - y > _tolerance


def ge(x: float, y: float) -> bool:
    return x - y > -_tolerance


def format_number(value: float) -> str:
    """Compact coordinate text for path strings (``0.0`` → ``0``)."""
    return "%.12g" % value
