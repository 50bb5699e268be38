"""Shape types of the geometry kernel."""

from .base import Shape
from .point import Point
from .segment import LineSegment
from .rectangle import Rectangle, bounding_box_of
from .polygon import Polygon

SHAPE_TYPES = {
    Point.kind: Point,
    LineSegment.kind: LineSegment,
    Rectangle.kind: Rectangle,
    Polygon.kind: Polygon,
}

__all__ = [
    "Shape",
    "Point",
    "LineSegment",
    "Rectangle",
    "Polygon",
    "SHAPE_TYPES",
    "bounding_box_of",
]
