"""Inclusive random ranges for floats and integers."""

from __future__ import annotations

import random

_generator = random.SystemRandom()


def range_float(start: float, end: float) -> float:
    """Return a random float between ``start`` and ``end``, both included."""
    if start == end:
        return start
    if start > end:
        raise ValueError(f"empty range: start {start} is greater than end {end}")
    return _generator.uniform(start, end)


def range_int(start: int, end: int) -> int:
    """Return a random integer between ``start`` and ``end``, both included."""
    if start == end:
        return start
    if start > end:
        raise ValueError(f"empty range: start {start} is greater than end {end}")
    return _generator.randint(start, end)