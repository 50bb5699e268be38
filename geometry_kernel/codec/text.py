"""Delimited text encoding.

Coordinates are written with ``repr(float)`` so they read back exactly,
separated by ``,``; each record ends with the ``;`` sentinel. Polygon records
start with their vertex count. Records can be concatenated and read back one
by one with :class:`TextCursor`.

    point       1.0,2.0;
    segment     0.0,0.0,10.0,0.0;
    rectangle   2.0,2.0,4.0,4.0;
    polygon     3,0.0,0.0,1.0,0.0,0.0,1.0;
"""

from __future__ import annotations

import re
from typing import List, Tuple

from ..errors import ShapeDecodeError, UnsupportedOperationError
from ..shapes import SHAPE_TYPES, LineSegment, Point, Polygon, Rectangle, Shape

FIELD_SEPARATOR = ","
RECORD_TERMINATOR = ";"
TAG_SEPARATOR = ":"

_num_re = re.compile(r"[+-]?(?:inf|nan|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_int_re = re.compile(r"\d+")
WS = " \t\r\n"


class TextCursor:
    """Consumes fields from a text buffer left to right."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WS:
            self.pos += 1

    def at_end(self) -> bool:
        self._skip_ws()
        return self.pos >= len(self.text)

    def _expect(self, separator: str) -> None:
        self._skip_ws()
        if self.pos >= len(self.text) or self.text[self.pos] != separator:
            found = self.text[self.pos] if self.pos < len(self.text) else "end of input"
            raise ShapeDecodeError(f"[col {self.pos + 1}] expected {separator!r}, found {found!r}")
        self.pos += 1

    def _consume(self, pattern: "re.Pattern[str]", what: str) -> str:
        self._skip_ws()
        m = pattern.match(self.text, self.pos)
        if not m:
            raise ShapeDecodeError(f"[col {self.pos + 1}] expected {what}")
        self.pos = m.end()
        return m.group(0)

    def consume_double(self, separator: str) -> float:
        value = float(self._consume(_num_re, "a number"))
        self._expect(separator)
        return value

    def consume_count(self, separator: str) -> int:
        value = int(self._consume(_int_re, "a vertex count"))
        self._expect(separator)
        return value

    def read_point(self, separator: str = FIELD_SEPARATOR) -> Point:
        x = self.consume_double(FIELD_SEPARATOR)
        y = self.consume_double(separator)
        return Point(x, y)

    def read_shape(self, kind: str) -> Shape:
        """Read one ``kind`` record, including its terminator."""

        if kind == Point.kind:
            return self.read_point(RECORD_TERMINATOR)
        if kind == LineSegment.kind:
            start = self.read_point()
            return LineSegment(start, self.read_point(RECORD_TERMINATOR))
        if kind == Rectangle.kind:
            low = self.read_point()
            return Rectangle(low, self.read_point(RECORD_TERMINATOR))
        if kind == Polygon.kind:
            count = self.consume_count(FIELD_SEPARATOR)
            if count < 3:
                raise ShapeDecodeError(f"polygon record declares {count} vertices, need at least 3")
            vertices = [self.read_point() for _ in range(count - 1)]
            vertices.append(self.read_point(RECORD_TERMINATOR))
            return Polygon.from_vertices(vertices)
        raise ShapeDecodeError(f"unknown shape kind {kind!r}")


def _fields(shape: Shape) -> List[str]:
    if isinstance(shape, Point):
        coords: Tuple[float, ...] = shape.as_tuple()
        return [repr(c) for c in coords]
    if isinstance(shape, LineSegment):
        return [repr(c) for c in shape.start.as_tuple() + shape.end.as_tuple()]
    if isinstance(shape, Rectangle):
        shape.validate()
        return [repr(c) for c in shape.min_point.as_tuple() + shape.max_point.as_tuple()]
    if isinstance(shape, Polygon):
        fields = [str(len(shape.vertices))]
        for vertex in shape.vertices:
            fields.extend(repr(c) for c in vertex.as_tuple())
        return fields
    raise UnsupportedOperationError("encode_text", shape)


def encode_text(shape: Shape) -> str:
    return FIELD_SEPARATOR.join(_fields(shape)) + RECORD_TERMINATOR


def decode_text(kind: str, text: str) -> Shape:
    cursor = TextCursor(text)
    shape = cursor.read_shape(kind)
    if not cursor.at_end():
        raise ShapeDecodeError(f"[col {cursor.pos + 1}] unexpected trailing text after {kind} record")
    return shape


def format_tagged(shape: Shape) -> str:
    return f"{shape.kind}{TAG_SEPARATOR}{encode_text(shape)}"


def parse_tagged(text: str) -> Shape:
    """Parse ``kind:payload``; a missing terminator is tolerated."""

    kind, sep, payload = text.strip().partition(TAG_SEPARATOR)
    kind = kind.strip().lower()
    if not sep or kind not in SHAPE_TYPES:
        raise ShapeDecodeError(f"expected one of {sorted(SHAPE_TYPES)} followed by ':', got {text!r}")
    payload = payload.strip()
    if not payload.endswith(RECORD_TERMINATOR):
        payload += RECORD_TERMINATOR
    return decode_text(kind, payload)


__all__ = [
    "FIELD_SEPARATOR",
    "RECORD_TERMINATOR",
    "TAG_SEPARATOR",
    "TextCursor",
    "encode_text",
    "decode_text",
    "format_tagged",
    "parse_tagged",
]
