"""Simple polygon stored as a closed counter-clockwise vertex ring."""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidShapeError, UnsupportedOperationError
from .base import Shape
from .point import Point
from .rectangle import Rectangle
from .segment import LineSegment

logger = logging.getLogger(__name__)

_MIN_RING_LENGTH = 4


class Polygon(Shape):
    """Closed ring of vertices, first vertex repeated as the last one.

    Vertices are held in an immutable tuple. The bounding box is computed on
    the first call to :meth:`bounding_box` and reused afterwards;
    :meth:`recompute_bounding_box` forces a fresh scan.
    """

    kind = "polygon"

    def __init__(self, vertices: Sequence[Point]):
        ring = tuple(vertices)
        if len(ring) < _MIN_RING_LENGTH:
            raise InvalidShapeError(
                f"polygon needs at least {_MIN_RING_LENGTH} ring entries (3 vertices + closing vertex), got {len(ring)}"
            )
        if ring[0] != ring[-1]:
            raise InvalidShapeError(f"polygon ring is not closed: {ring[0]!r} != {ring[-1]!r}")
        distinct = _count_distinct(ring[:-1], limit=3)
        if distinct < 3:
            raise InvalidShapeError(f"polygon needs at least 3 distinct vertices, got {distinct}")
        self._vertices: Tuple[Point, ...] = ring
        self._mbr: Optional[Rectangle] = None

    @classmethod
    def from_vertices(cls, vertices: Sequence[Point], *, close: bool = True) -> "Polygon":
        """Build a polygon, appending the first vertex when the ring is open."""

        ring = list(vertices)
        if close and ring and ring[0] != ring[-1]:
            ring.append(ring[0])
        return cls(ring)

    @classmethod
    def from_coords(cls, coords: Sequence[Tuple[float, float]], *, close: bool = True) -> "Polygon":
        return cls.from_vertices([Point(x, y) for x, y in coords], close=close)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Distinct vertices, without the closing repeat."""

        return self._vertices[:-1]

    @property
    def ring(self) -> Tuple[Point, ...]:
        return self._vertices

    def edges(self) -> Iterator[LineSegment]:
        """Yield a fresh segment for every edge of the ring."""

        for start, end in zip(self._vertices, self._vertices[1:]):
            yield LineSegment(start, end)

    def _coords(self) -> np.ndarray:
        return np.array([(p.x, p.y) for p in self.vertices], dtype=float)

    # -- bounding box -------------------------------------------------------

    def recompute_bounding_box(self) -> Rectangle:
        coords = self._coords()
        low = coords.min(axis=0)
        high = coords.max(axis=0)
        self._mbr = Rectangle(Point(low[0], low[1]), Point(high[0], high[1]))
        logger.debug("Computed polygon bounding box %r over %d vertices", self._mbr, len(coords))
        return self._mbr.copy()

    def bounding_box(self) -> Rectangle:
        if self._mbr is None:
            return self.recompute_bounding_box()
        return self._mbr.copy()

    @property
    def max_x(self) -> float:
        return self.bounding_box().max_point.x

    # -- measures -----------------------------------------------------------

    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise rings."""

        coords = self._coords()
        x = coords[:, 0]
        y = coords[:, 1]
        return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))

    def area(self) -> float:
        return abs(self.signed_area())

    def center(self) -> Point:
        """Area centroid; falls back to the vertex mean for zero-area rings."""

        coords = self._coords()
        area = self.signed_area()
        if math.isclose(area, 0.0, abs_tol=1e-12):
            mean = coords.mean(axis=0)
            return Point(mean[0], mean[1])
        x = coords[:, 0]
        y = coords[:, 1]
        x_next = np.roll(x, -1)
        y_next = np.roll(y, -1)
        cross = x * y_next - x_next * y
        cx = float(np.dot(x + x_next, cross)) / (6.0 * area)
        cy = float(np.dot(y + y_next, cross)) / (6.0 * area)
        return Point(cx, cy)

    def distance_to(self, point: Point) -> float:
        if self.contains_point(point):
            return 0.0
        distance = math.inf
        for edge in self.edges():
            if edge.is_degenerate():
                distance = min(distance, edge.start.distance_to(point))
            else:
                distance = min(distance, edge.distance_to(point))
        return distance

    # -- predicates ---------------------------------------------------------

    def contains_point(self, point: Point) -> bool:
        from .. import predicates

        return predicates.point_in_polygon(point, self)

    def contains_segment(self, segment: LineSegment) -> bool:
        """Return ``True`` when every point of ``segment`` is in the polygon.

        The segment is cut at each place it meets the boundary; it is contained
        when both endpoints and the midpoint of every piece are inside.
        """

        if not (self.contains_point(segment.start) and self.contains_point(segment.end)):
            return False

        cuts: List[float] = [0.0, 1.0]
        for edge in self.edges():
            if edge.is_degenerate():
                continue
            if segment.is_parallel(edge):
                candidates = [p for p in (edge.start, edge.end) if segment.contains_point(p)]
            else:
                hit = segment.intersection_point(edge)
                candidates = [hit] if hit is not None else []
            cuts.extend(_segment_parameter(segment, p) for p in candidates)

        cuts.sort()
        for low, high in zip(cuts, cuts[1:]):
            if high - low <= 1e-12:
                continue
            mid = (low + high) / 2
            probe = Point(
                segment.start.x + mid * (segment.end.x - segment.start.x),
                segment.start.y + mid * (segment.end.y - segment.start.y),
            )
            if not self.contains_point(probe):
                return False
        return True

    def intersects(self, other: Shape) -> bool:
        from .. import predicates

        if isinstance(other, Point):
            return predicates.point_in_polygon(other, self)
        if isinstance(other, LineSegment):
            return predicates.polygon_line_intersection(other, self)
        if isinstance(other, Rectangle):
            return predicates.polygon_rectangle_intersection(other, self)
        raise UnsupportedOperationError("intersects", self, other)

    def contains(self, other: Shape) -> bool:
        if isinstance(other, Point):
            return self.contains_point(other)
        if isinstance(other, LineSegment):
            return self.contains_segment(other)
        if isinstance(other, Rectangle):
            return all(self.contains_segment(edge) for edge in other.edges())
        raise UnsupportedOperationError("contains", self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return len(self._vertices) == len(other._vertices) and all(
            a == b for a, b in zip(self._vertices, other._vertices)
        )

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        inner = ", ".join(f"({p.x!r}, {p.y!r})" for p in self.vertices)
        return f"Polygon([{inner}])"


def _count_distinct(points: Sequence[Point], limit: int) -> int:
    """Count points that differ under ``EPS``, stopping once ``limit`` is reached."""

    seen: List[Point] = []
    for point in points:
        if all(point != other for other in seen):
            seen.append(point)
            if len(seen) >= limit:
                break
    return len(seen)


def _segment_parameter(segment: LineSegment, point: Point) -> float:
    dx = segment.end.x - segment.start.x
    dy = segment.end.y - segment.start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return 0.0
    t = ((point.x - segment.start.x) * dx + (point.y - segment.start.y) * dy) / length_sq
    return min(max(t, 0.0), 1.0)


__all__ = ["Polygon"]
