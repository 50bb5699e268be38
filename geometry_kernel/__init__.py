from .tolerance import EPS, near_equal, near_zero
from .errors import (
    DegenerateGeometryError,
    GeometryError,
    InvalidShapeError,
    ShapeDecodeError,
    UninitializedShapeError,
    UnsupportedOperationError,
)
from .config import KernelConfig, get_kernel_config, set_kernel_config
from .shapes import LineSegment, Point, Polygon, Rectangle, Shape, bounding_box_of
from .predicates import (
    contains,
    distance,
    intersects,
    is_edge_intersection,
    point_in_polygon,
    polygon_line_intersection,
    polygon_rectangle_intersection,
    rectangle_point_intersection,
    rectangle_segment_intersection,
    segment_point_intersection,
)
from .codec import decode_binary, decode_text, encode_binary, encode_text, format_tagged, parse_tagged

__all__ = [
    'EPS',
    'near_equal',
    'near_zero',
    'GeometryError',
    'UnsupportedOperationError',
    'UninitializedShapeError',
    'DegenerateGeometryError',
    'InvalidShapeError',
    'ShapeDecodeError',
    'KernelConfig',
    'get_kernel_config',
    'set_kernel_config',
    'Shape',
    'Point',
    'LineSegment',
    'Rectangle',
    'Polygon',
    'bounding_box_of',
    'intersects',
    'contains',
    'is_edge_intersection',
    'distance',
    'point_in_polygon',
    'polygon_line_intersection',
    'polygon_rectangle_intersection',
    'rectangle_point_intersection',
    'rectangle_segment_intersection',
    'segment_point_intersection',
    'encode_binary',
    'decode_binary',
    'encode_text',
    'decode_text',
    'format_tagged',
    'parse_tagged',
]
