"""Axis-aligned rectangle defined by its min and max corners."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ..errors import UninitializedShapeError, UnsupportedOperationError
from ..tolerance import EPS, compare_pairs, near_zero
from .base import Shape
from .point import Point
from .segment import LineSegment

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Rectangle(Shape):
    """Rectangle between ``min_point`` and ``max_point``.

    Keeping ``min_point <= max_point`` componentwise is the caller's job.
    Both corners may be ``None`` for a rectangle that has not been set up
    yet; every geometric operation calls :meth:`validate` first.

    :meth:`expand` mutates the rectangle in place, so an instance used as a
    bounding-box accumulator must not be shared between threads.
    """

    min_point: Optional[Point]
    max_point: Optional[Point]

    kind = "rectangle"

    @classmethod
    def from_coords(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rectangle":
        return cls(Point(min_x, min_y), Point(max_x, max_y))

    @classmethod
    def empty(cls) -> "Rectangle":
        """Return an inverted rectangle that the first :meth:`expand` collapses."""

        return cls(Point(math.inf, math.inf), Point(-math.inf, -math.inf))

    @classmethod
    def unset(cls) -> "Rectangle":
        return cls(None, None)

    def validate(self) -> None:
        if self.min_point is None or self.max_point is None:
            raise UninitializedShapeError("Bottom-left and upper-right points are not initialized")

    # -- derived measures -------------------------------------------------

    @property
    def width(self) -> float:
        self.validate()
        return self.max_point.x - self.min_point.x

    @property
    def height(self) -> float:
        self.validate()
        return self.max_point.y - self.min_point.y

    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Return the corners counter-clockwise from ``min_point``."""

        self.validate()
        bottom_right = Point(self.max_point.x, self.min_point.y)
        upper_left = Point(self.min_point.x, self.max_point.y)
        return self.min_point, bottom_right, self.max_point, upper_left

    def edges(self) -> List[LineSegment]:
        corners = self.corners()
        return [LineSegment(corners[i], corners[(i + 1) % 4]) for i in range(4)]

    def center(self) -> Point:
        self.validate()
        return Point(
            (self.min_point.x + self.max_point.x) / 2,
            (self.min_point.y + self.max_point.y) / 2,
        )

    def bounding_box(self) -> "Rectangle":
        return self.copy()

    def copy(self) -> "Rectangle":
        self.validate()
        return Rectangle(self.min_point, self.max_point)

    # -- ordering and equality -------------------------------------------

    def compare(self, other: "Rectangle") -> int:
        """Order by ``min_point`` then ``max_point``, lexicographically."""

        self.validate()
        other.validate()
        result = compare_pairs(self.min_point.as_tuple(), other.min_point.as_tuple())
        if result:
            return result
        return compare_pairs(self.max_point.as_tuple(), other.max_point.as_tuple())

    def __lt__(self, other: "Rectangle") -> bool:
        return self.compare(other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        self.validate()
        other.validate()
        return self.min_point == other.min_point and self.max_point == other.max_point

    __hash__ = None  # type: ignore[assignment]

    # -- predicates ---------------------------------------------------------

    def contains_point(self, point: Point) -> bool:
        """Closed containment: points on the border count as inside."""

        self.validate()
        if self.min_point.x - point.x >= EPS:
            return False
        if self.min_point.y - point.y >= EPS:
            return False
        if self.max_point.x - point.x <= -EPS:
            return False
        return not self.max_point.y - point.y <= -EPS

    def _contains_points(self, points: Iterable[Point]) -> bool:
        return all(self.contains_point(point) for point in points)

    def intersects(self, other: Shape) -> bool:
        from .. import predicates
        from .polygon import Polygon

        self.validate()
        if isinstance(other, Point):
            return self.contains_point(other)
        if isinstance(other, Rectangle):
            other.validate()
            return (
                self.max_point.x + EPS > other.min_point.x
                and self.max_point.y + EPS > other.min_point.y
                and other.max_point.x + EPS > self.min_point.x
                and other.max_point.y + EPS > self.min_point.y
            )
        if isinstance(other, LineSegment):
            return predicates.rectangle_segment_intersection(other, self)
        if isinstance(other, Polygon):
            return predicates.polygon_rectangle_intersection(self, other)
        raise UnsupportedOperationError("intersects", self, other)

    def contains(self, other: Shape) -> bool:
        from .polygon import Polygon

        self.validate()
        if isinstance(other, Point):
            return self.contains_point(other)
        if isinstance(other, Rectangle):
            other.validate()
            return self._contains_points((other.min_point, other.max_point))
        if isinstance(other, LineSegment):
            return self._contains_points((other.start, other.end))
        if isinstance(other, Polygon):
            return self._contains_points(other.vertices)
        raise UnsupportedOperationError("contains", self, other)

    def is_edge_intersection(self, other: Shape) -> bool:
        """Return ``True`` when a corner of either rectangle lies on/in the other.

        Used after :meth:`intersects` to tell a boundary touch from full
        containment.
        """

        self.validate()
        if isinstance(other, Point):
            return self.contains_point(other)
        if isinstance(other, Rectangle):
            other.validate()
            return (
                other.contains_point(self.max_point)
                or self.contains_point(other.min_point)
                or other.contains_point(self.min_point)
                or self.contains_point(other.max_point)
            )
        raise UnsupportedOperationError("is_edge_intersection", self, other)

    def upper_open_bounded_contains(self, point: Point) -> bool:
        """Half-open containment for partitioning the plane into grid cells.

        Inclusive on the left and bottom edges, exclusive on the right and top
        edges. The min corner is included; the max corner is not.
        """

        self.validate()
        min_diff_x = self.min_point.x - point.x
        min_diff_y = self.min_point.y - point.y
        max_diff_x = self.max_point.x - point.x
        max_diff_y = self.max_point.y - point.y

        if min_diff_x >= EPS or min_diff_y >= EPS:
            return False
        if max_diff_x <= -EPS or max_diff_y <= -EPS:
            return False

        # strictly left of and below the max corner
        if max_diff_x >= EPS and max_diff_y >= EPS:
            return True

        if self.min_point == point:
            return True

        # bottom border
        if near_zero(min_diff_y):
            return min_diff_x <= -EPS and max_diff_x >= EPS

        # left border
        if near_zero(min_diff_x):
            return min_diff_y <= -EPS and max_diff_y >= EPS

        return False

    def distance_to(self, point: Point) -> float:
        """Zero inside, otherwise the distance to the nearest edge."""

        if self.contains_point(point):
            return 0.0
        distance = math.inf
        for edge in self.edges():
            if edge.is_degenerate():
                distance = min(distance, edge.start.distance_to(point))
            else:
                distance = min(distance, edge.distance_to(point))
        return distance

    # -- accumulation -------------------------------------------------------

    def expand(self, item: Union[Point, Shape]) -> "Rectangle":
        """Grow this rectangle in place to cover ``item``; returns ``self``."""

        self.validate()
        if isinstance(item, Point):
            low = high = item
        else:
            box = item.bounding_box()
            low, high = box.min_point, box.max_point

        min_x = min(self.min_point.x, low.x)
        min_y = min(self.min_point.y, low.y)
        max_x = max(self.max_point.x, high.x)
        max_y = max(self.max_point.y, high.y)

        if (min_x, min_y) != (self.min_point.x, self.min_point.y):
            self.min_point = Point(min_x, min_y)
        if (max_x, max_y) != (self.max_point.x, self.max_point.y):
            self.max_point = Point(max_x, max_y)
        return self

    def __repr__(self) -> str:
        if self.min_point is None or self.max_point is None:
            return "Rectangle(unset)"
        return (
            f"Rectangle(({self.min_point.x!r}, {self.min_point.y!r}), "
            f"({self.max_point.x!r}, {self.max_point.y!r}))"
        )


def bounding_box_of(items: Iterable[Union[Point, Shape]]) -> Rectangle:
    """Accumulate the bounding box of ``items`` with :meth:`Rectangle.expand`."""

    box = Rectangle.empty()
    count = 0
    for item in items:
        box.expand(item)
        count += 1
    logger.debug("Accumulated bounding box over %d shapes: %r", count, box)
    return box


__all__ = ["Rectangle", "bounding_box_of"]
