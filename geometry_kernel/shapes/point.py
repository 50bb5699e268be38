"""Point primitive with epsilon equality and ordering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from ..errors import UnsupportedOperationError
from ..tolerance import EPS, compare_pairs, near_zero
from .base import Shape

if TYPE_CHECKING:  # pragma: no cover
    from .rectangle import Rectangle


@dataclass(frozen=True, eq=False)
class Point(Shape):
    """Immutable coordinate pair.

    Equality and ordering are tolerance based (``EPS``), which makes equality
    non-transitive; points are therefore unhashable.
    """

    x: float
    y: float

    kind = "point"

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return near_zero(self.x - other.x) and near_zero(self.y - other.y)

    __hash__ = None  # type: ignore[assignment]

    def compare(self, other: "Point") -> int:
        """Three-way lexicographic comparison on ``(x, y)`` under ``EPS``."""

        return compare_pairs((self.x, self.y), (other.x, other.y))

    def __lt__(self, other: "Point") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Point") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Point") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Point") -> bool:
        return self.compare(other) >= 0

    def is_gte(self, other: "Point") -> bool:
        x_diff = self.x - other.x
        y_diff = self.y - other.y
        if x_diff >= EPS:
            return True
        return x_diff >= -EPS and y_diff >= -EPS

    def is_gt(self, other: "Point") -> bool:
        x_diff = self.x - other.x
        y_diff = self.y - other.y
        if x_diff >= EPS:
            return True
        return x_diff >= -EPS and y_diff >= EPS

    def is_ste(self, other: "Point") -> bool:
        x_diff = self.x - other.x
        y_diff = self.y - other.y
        if x_diff <= -EPS:
            return True
        return x_diff <= EPS and y_diff <= EPS

    def is_st(self, other: "Point") -> bool:
        x_diff = self.x - other.x
        y_diff = self.y - other.y
        if x_diff <= -EPS:
            return True
        return x_diff <= EPS and y_diff <= -EPS

    def distance_to(self, point: "Point") -> float:
        return math.hypot(point.x - self.x, point.y - self.y)

    def bounding_box(self) -> "Rectangle":
        from .rectangle import Rectangle

        return Rectangle(Point(self.x, self.y), Point(self.x, self.y))

    def center(self) -> "Point":
        return self

    def intersects(self, other: Shape) -> bool:
        if isinstance(other, Point):
            return self == other
        if isinstance(other, Shape):
            return other.intersects(self)
        raise UnsupportedOperationError("intersects", self, other)

    def is_edge_intersection(self, other: Shape) -> bool:
        from .rectangle import Rectangle

        if isinstance(other, Rectangle):
            return other.is_edge_intersection(self)
        raise UnsupportedOperationError("is_edge_intersection", self, other)

    def translate(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


__all__ = ["Point"]
