"""Fixed-width binary encoding: big-endian float64 fields.

Point       x, y                          16 bytes
Segment     start, end                    32 bytes
Rectangle   min corner, max corner        32 bytes
Polygon     int32 vertex count, vertices  4 + 16 * n bytes (ring without the
            closing repeat)
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from ..errors import ShapeDecodeError, UnsupportedOperationError
from ..shapes import LineSegment, Point, Polygon, Rectangle, Shape

logger = logging.getLogger(__name__)

_FLOAT = np.dtype(">f8")
_COUNT = np.dtype(">i4")

_FIXED_FIELDS = {
    Point.kind: 2,
    LineSegment.kind: 4,
    Rectangle.kind: 4,
}


def _shape_fields(shape: Shape) -> List[float]:
    if isinstance(shape, Point):
        return [shape.x, shape.y]
    if isinstance(shape, LineSegment):
        return [shape.start.x, shape.start.y, shape.end.x, shape.end.y]
    if isinstance(shape, Rectangle):
        shape.validate()
        return [shape.min_point.x, shape.min_point.y, shape.max_point.x, shape.max_point.y]
    if isinstance(shape, Polygon):
        return [coord for vertex in shape.vertices for coord in vertex.as_tuple()]
    raise UnsupportedOperationError("encode_binary", shape)


def encode_binary(shape: Shape) -> bytes:
    payload = np.asarray(_shape_fields(shape), dtype=_FLOAT).tobytes()
    if isinstance(shape, Polygon):
        payload = np.asarray([len(shape.vertices)], dtype=_COUNT).tobytes() + payload
    return payload


def _build(kind: str, values: np.ndarray) -> Shape:
    v = [float(item) for item in values]
    if kind == Point.kind:
        return Point(v[0], v[1])
    if kind == LineSegment.kind:
        return LineSegment(Point(v[0], v[1]), Point(v[2], v[3]))
    if kind == Rectangle.kind:
        return Rectangle(Point(v[0], v[1]), Point(v[2], v[3]))
    return Polygon.from_vertices([Point(v[i], v[i + 1]) for i in range(0, len(v), 2)])


def read_binary(kind: str, buffer: bytes, offset: int = 0) -> Tuple[Shape, int]:
    """Decode one ``kind`` record at ``offset``; return it and the next offset."""

    if kind == Polygon.kind:
        if len(buffer) - offset < _COUNT.itemsize:
            raise ShapeDecodeError(f"truncated polygon header at offset {offset}")
        count = int(np.frombuffer(buffer, dtype=_COUNT, count=1, offset=offset)[0])
        if count < 3:
            raise ShapeDecodeError(f"polygon record declares {count} vertices, need at least 3")
        offset += _COUNT.itemsize
        fields = 2 * count
    elif kind in _FIXED_FIELDS:
        fields = _FIXED_FIELDS[kind]
    else:
        raise ShapeDecodeError(f"unknown shape kind {kind!r}")

    size = fields * _FLOAT.itemsize
    if len(buffer) - offset < size:
        raise ShapeDecodeError(
            f"truncated {kind} record: need {size} bytes at offset {offset}, have {len(buffer) - offset}"
        )
    values = np.frombuffer(buffer, dtype=_FLOAT, count=fields, offset=offset)
    return _build(kind, values), offset + size


def decode_binary(kind: str, data: bytes) -> Shape:
    shape, end = read_binary(kind, data)
    if end != len(data):
        raise ShapeDecodeError(f"{len(data) - end} trailing bytes after {kind} record")
    logger.debug("Decoded %s from %d bytes", kind, len(data))
    return shape


__all__ = ["encode_binary", "decode_binary", "read_binary"]
