"""Cross-shape predicates that no single shape owns.

Compound shapes (rectangles, polygons) are decomposed into their edges and
vertices so every pair reduces to point/segment primitives.
"""

from __future__ import annotations

import logging

from .config import current_config
from .errors import UnsupportedOperationError
from .logging_utils import apply_debug_logging
from .shapes.base import Shape
from .shapes.point import Point
from .shapes.polygon import Polygon
from .shapes.rectangle import Rectangle
from .shapes.segment import LineSegment

logger = logging.getLogger(__name__)


def point_in_polygon(point: Point, polygon: Polygon) -> bool:
    """Ray-casting point-in-polygon test.

    A ray runs from ``point`` to just past the polygon's max x at the same y.
    A point on any edge is inside. Otherwise the point is inside when the ray
    crosses an odd number of edges; an edge only counts when exactly one of
    its endpoints is strictly above the ray, so a vertex on the ray is
    counted once and edges lying along the ray are ignored.
    """

    ray = LineSegment(point, Point(polygon.max_x + current_config().ray_margin, point.y))
    crossings = 0
    for edge in polygon.edges():
        if edge.contains_point(point):
            return True
        if (edge.start.y > point.y) == (edge.end.y > point.y):
            continue
        if edge.segments_intersect(ray):
            crossings += 1
    return crossings % 2 == 1


def segment_point_intersection(point: Point, segment: LineSegment) -> bool:
    return segment.contains_point(point)


def rectangle_point_intersection(point: Point, rect: Rectangle) -> bool:
    return rect.contains_point(point)


def rectangle_segment_intersection(segment: LineSegment, rect: Rectangle) -> bool:
    """A segment meets a rectangle when it crosses an edge or lies inside."""

    rect.validate()
    for edge in rect.edges():
        if edge.segments_intersect(segment):
            return True
    return rect.contains_point(segment.start) and rect.contains_point(segment.end)


def polygon_line_intersection(segment: LineSegment, polygon: Polygon) -> bool:
    """A segment meets a polygon on an edge, at a vertex, or by lying inside."""

    for edge in polygon.edges():
        if segment.segments_intersect(edge):
            return True
    for vertex in polygon.vertices:
        if segment.contains_point(vertex):
            return True
    return polygon.contains_segment(segment)


def polygon_rectangle_intersection(rect: Rectangle, polygon: Polygon) -> bool:
    """Edge crossings first, then full containment either way round."""

    rect.validate()
    for edge in rect.edges():
        if polygon_line_intersection(edge, polygon):
            return True
    for corner in rect.corners():
        if point_in_polygon(corner, polygon):
            return True
    for vertex in polygon.vertices:
        if rect.contains_point(vertex):
            return True
    return False


def intersects(shape: Shape, other: Shape) -> bool:
    return shape.intersects(other)


def contains(shape: Shape, other: Shape) -> bool:
    return shape.contains(other)


def is_edge_intersection(shape: Shape, other: Shape) -> bool:
    return shape.is_edge_intersection(other)


def distance(shape: Shape, point: Point) -> float:
    if not isinstance(point, Point):
        raise UnsupportedOperationError("distance", shape, point)
    return shape.distance_to(point)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "point_in_polygon",
    "segment_point_intersection",
    "rectangle_point_intersection",
    "rectangle_segment_intersection",
    "polygon_line_intersection",
    "polygon_rectangle_intersection",
    "intersects",
    "contains",
    "is_edge_intersection",
    "distance",
]
