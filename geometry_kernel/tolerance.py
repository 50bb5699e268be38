"""Epsilon comparison primitives shared by every predicate."""

from __future__ import annotations

from typing import Tuple

EPS = 1e-6


def near_zero(value: float) -> bool:
    """Return ``True`` when ``value`` lies strictly inside ``(-EPS, EPS)``."""

    return -EPS < value < EPS


def near_equal(a: float, b: float) -> bool:
    return near_zero(a - b)


def compare_coord(a: float, b: float) -> int:
    """Three-way comparison of two coordinates under the EPS tolerance.

    Returns 0 exactly when :func:`near_equal` holds, so ordering agrees with
    point equality at the ``EPS`` boundary.
    """

    diff = a - b
    if near_zero(diff):
        return 0
    return -1 if diff < 0 else 1


def compare_pairs(a: Tuple[float, float], b: Tuple[float, float]) -> int:
    """Lexicographic three-way comparison of two ``(x, y)`` pairs."""

    result = compare_coord(a[0], b[0])
    if result:
        return result
    return compare_coord(a[1], b[1])


__all__ = ["EPS", "near_zero", "near_equal", "compare_coord", "compare_pairs"]
