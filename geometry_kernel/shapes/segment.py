"""Directed line segment with a derived implicit line equation."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from ..config import current_config
from ..errors import DegenerateGeometryError, UnsupportedOperationError
from ..tolerance import EPS, near_zero
from .base import Shape
from .point import Point

if TYPE_CHECKING:  # pragma: no cover
    from .rectangle import Rectangle


class LineSegment(Shape):
    """Segment from ``start`` to ``end``.

    ``a``, ``b`` and ``c`` describe the supporting line ``a*x + b*y + c = 0``.
    Vertical segments use ``(1, 0, -x)``; every other segment fixes ``b`` to 1.
    The coefficients are read-only and re-derived whenever an endpoint is
    assigned or :meth:`reset` moves both endpoints.
    """

    kind = "segment"

    def __init__(self, start: Point, end: Point):
        self.reset(start, end)

    def reset(self, start: Point, end: Point) -> "LineSegment":
        """Move both endpoints and re-derive the line equation in place."""

        self._start = start
        self._end = end
        if near_zero(start.x - end.x):
            self._a = 1.0
            self._b = 0.0
            self._c = -start.x
        else:
            self._a = -((end.y - start.y) / (end.x - start.x))
            self._b = 1.0
            self._c = -(self._a * start.x) - start.y
        return self

    @property
    def start(self) -> Point:
        return self._start

    @start.setter
    def start(self, value: Point) -> None:
        self.reset(value, self._end)

    @property
    def end(self) -> Point:
        return self._end

    @end.setter
    def end(self, value: Point) -> None:
        self.reset(self._start, value)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def c(self) -> float:
        return self._c

    @property
    def is_vertical(self) -> bool:
        return self.b == 0.0

    def is_degenerate(self) -> bool:
        """Return ``True`` when both endpoints coincide within ``EPS``."""

        return self.start == self.end

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    __hash__ = None  # type: ignore[assignment]

    def bounding_box(self) -> "Rectangle":
        from .rectangle import Rectangle

        return Rectangle(
            Point(min(self.start.x, self.end.x), min(self.start.y, self.end.y)),
            Point(max(self.start.x, self.end.x), max(self.start.y, self.end.y)),
        )

    def center(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    def distance_to(self, point: Point) -> float:
        """Distance from ``point`` to the closest point of the segment.

        The projection parameter ``u`` of ``AP`` onto ``AB`` is measured in
        segment lengths; outside ``[0, 1]`` the nearer endpoint wins.
        """

        if self.is_degenerate():
            raise DegenerateGeometryError(f"distance to zero-length segment {self!r} is undefined")

        abx = self.end.x - self.start.x
        aby = self.end.y - self.start.y
        apx = point.x - self.start.x
        apy = point.y - self.start.y

        u = (apx * abx + apy * aby) / (abx * abx + aby * aby)
        if u < 0.0:
            return point.distance_to(self.start)
        if u > 1.0:
            return point.distance_to(self.end)
        return point.distance_to(Point(self.start.x + u * abx, self.start.y + u * aby))

    def contains_point(self, point: Point) -> bool:
        """Return ``True`` when ``point`` lies on the segment within ``EPS``."""

        if self.b != 0.0:
            y = -(self.a * point.x) - self.c
            if abs(y - point.y) > EPS:
                return False
        elif abs(point.x + self.c) > EPS:
            return False

        ab = self.start.distance_to(self.end)
        ap = self.start.distance_to(point)
        pb = point.distance_to(self.end)
        return abs(ab - (ap + pb)) < EPS

    def _shared_endpoint(self, other: "LineSegment") -> Optional[Point]:
        for mine in (self.start, self.end):
            if mine == other.start or mine == other.end:
                return mine
        return None

    def _solve_lines(self, other: "LineSegment") -> Optional[Point]:
        det = other.a * self.b - self.a * other.b
        if abs(det) <= current_config().parallel_tolerance:
            return None
        x = (other.b * self.c - self.b * other.c) / det
        if self.is_vertical:
            y = -(other.a * x) - other.c
        else:
            y = -(self.a * x) - self.c
        return Point(x, y)

    def is_parallel(self, other: "LineSegment") -> bool:
        return abs(other.a * self.b - self.a * other.b) <= current_config().parallel_tolerance

    def _overlaps_collinear(self, other: "LineSegment") -> bool:
        return (
            self.contains_point(other.start)
            or self.contains_point(other.end)
            or other.contains_point(self.start)
            or other.contains_point(self.end)
        )

    def segments_intersect(self, other: "LineSegment") -> bool:
        """Return ``True`` when the two segments share at least one point.

        Touching at an endpoint counts. Parallel segments intersect only when
        they are collinear and overlap.
        """

        if self._shared_endpoint(other) is not None:
            return True
        point = self._solve_lines(other)
        if point is None:
            return self._overlaps_collinear(other)
        return self.contains_point(point) and other.contains_point(point)

    def intersection_point(self, other: "LineSegment") -> Optional[Point]:
        """Return the single crossing point of two segments, if there is one.

        Parallel segments yield ``None`` even when they overlap, since the
        overlap is not a single point.
        """

        shared = self._shared_endpoint(other)
        if shared is not None:
            return shared
        point = self._solve_lines(other)
        if point is None:
            return None
        if self.contains_point(point) and other.contains_point(point):
            return point
        return None

    def intersects(self, other: Shape) -> bool:
        from .. import predicates
        from .polygon import Polygon
        from .rectangle import Rectangle

        if isinstance(other, Point):
            return self.contains_point(other)
        if isinstance(other, LineSegment):
            return self.segments_intersect(other)
        if isinstance(other, Rectangle):
            return predicates.rectangle_segment_intersection(self, other)
        if isinstance(other, Polygon):
            return predicates.polygon_line_intersection(self, other)
        raise UnsupportedOperationError("intersects", self, other)

    def contains(self, other: Shape) -> bool:
        if isinstance(other, Point):
            return self.contains_point(other)
        if isinstance(other, LineSegment):
            return self.contains_point(other.start) and self.contains_point(other.end)
        raise UnsupportedOperationError("contains", self, other)

    def copy(self) -> "LineSegment":
        return LineSegment(self.start, self.end)

    def __repr__(self) -> str:
        return f"LineSegment({self.start!r}, {self.end!r})"


__all__ = ["LineSegment"]
