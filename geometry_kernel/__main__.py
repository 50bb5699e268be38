import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from geometry_kernel import (
    GeometryError,
    Point,
    Rectangle,
    ShapeDecodeError,
    Shape,
    UnsupportedOperationError,
    bounding_box_of,
    encode_binary,
    encode_text,
    format_tagged,
    parse_tagged,
)

logger = logging.getLogger(__name__)

_RELATIONS: List[Tuple[str, Callable[[Shape, Shape], bool]]] = [
    ("intersects", lambda a, b: a.intersects(b)),
    ("contains", lambda a, b: a.contains(b)),
    ("is_edge_intersection", lambda a, b: a.is_edge_intersection(b)),
]


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _relation_value(func: Callable[[Shape, Shape], bool], a: Shape, b: Shape) -> str:
    try:
        return "true" if func(a, b) else "false"
    except UnsupportedOperationError as exc:
        logger.debug("%s", exc)
        return "unsupported"


def _cmd_relate(args: argparse.Namespace) -> None:
    a = parse_tagged(args.shape)
    b = parse_tagged(args.other)
    logger.info("Relating %r with %r", a, b)
    for name, func in _RELATIONS:
        print(f"{name}: {_relation_value(func, a, b)}")
    if args.both_ways:
        for name, func in _RELATIONS:
            print(f"reverse {name}: {_relation_value(func, b, a)}")


def _cmd_distance(args: argparse.Namespace) -> None:
    shape = parse_tagged(args.shape)
    point = parse_tagged(args.point)
    if not isinstance(point, Point):
        raise ShapeDecodeError(f"distance query must be a point, got {point.kind}")
    print(repr(shape.distance_to(point)))


def _cmd_bbox(args: argparse.Namespace) -> None:
    shapes = [parse_tagged(text) for text in args.shapes]
    box = bounding_box_of(shapes)
    logger.info("Bounding box over %d shapes: %r", len(shapes), box)
    print(format_tagged(box))
    print(f"center: {format_tagged(box.center())}")


def _cmd_encode(args: argparse.Namespace) -> None:
    shape = parse_tagged(args.shape)
    print(f"text: {encode_text(shape)}")
    print(f"binary: {encode_binary(shape).hex()}")


def _cmd_cell(args: argparse.Namespace) -> None:
    cell = parse_tagged(args.cell)
    point = parse_tagged(args.point)
    if not isinstance(cell, Rectangle) or not isinstance(point, Point):
        raise ShapeDecodeError("cell query needs a rectangle and a point")
    print("true" if cell.upper_open_bounded_contains(point) else "false")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geometry_kernel",
        description="Evaluate geometry predicates on shapes given as kind:x,y,... records",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    relate = sub.add_parser("relate", help="Print intersects/contains/edge-intersection of two shapes")
    relate.add_argument("shape")
    relate.add_argument("other")
    relate.add_argument("--both-ways", action="store_true", help="Also evaluate other against shape")
    relate.set_defaults(func=_cmd_relate)

    dist = sub.add_parser("distance", help="Distance from a shape to a point")
    dist.add_argument("shape")
    dist.add_argument("point")
    dist.set_defaults(func=_cmd_distance)

    bbox = sub.add_parser("bbox", help="Accumulated bounding box of one or more shapes")
    bbox.add_argument("shapes", nargs="+")
    bbox.set_defaults(func=_cmd_bbox)

    encode = sub.add_parser("encode", help="Show the text and binary encodings of a shape")
    encode.add_argument("shape")
    encode.set_defaults(func=_cmd_encode)

    cell = sub.add_parser("cell", help="Half-open grid cell membership of a point")
    cell.add_argument("cell")
    cell.add_argument("point")
    cell.set_defaults(func=_cmd_cell)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        args.func(args)
    except ShapeDecodeError as exc:
        logger.error("Could not read shape: %s", exc)
        raise SystemExit(2)
    except GeometryError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
