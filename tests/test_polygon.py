import pytest

from geometry_kernel import (
    InvalidShapeError,
    LineSegment,
    Point,
    Polygon,
    Rectangle,
    UnsupportedOperationError,
)


def seg(x1, y1, x2, y2):
    return LineSegment(Point(x1, y1), Point(x2, y2))


def unit_square():
    return Polygon([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)])


def u_shape():
    # two pillars joined by a bottom bar; the notch is 1 < x < 2, y > 1
    return Polygon.from_coords(
        [(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)]
    )


@pytest.mark.parametrize(
    'point, inside',
    [((0.5, 0.5), True), ((2, 2), False), ((0, 0.5), True), ((1, 1), True), ((-0.5, 0.5), False)],
)
def test_point_in_unit_square(point, inside):
    assert unit_square().contains(Point(*point)) is inside
    assert unit_square().intersects(Point(*point)) is inside


@pytest.mark.parametrize(
    'point, inside',
    [
        ((1.5, 2), False),
        ((0.5, 2), True),
        ((2.5, 1), True),
        ((0.5, 1), True),
        ((1.5, 1), True),
        ((1.5, 0.5), True),
        ((-1, 1), False),
        ((4, 1), False),
    ],
)
def test_point_in_concave_polygon(point, inside):
    assert u_shape().contains_point(Point(*point)) is inside


def test_ray_through_collinear_top_edge_is_not_counted():
    assert not unit_square().contains(Point(-1, 1))
    assert not unit_square().contains(Point(-1, 0))


def test_construction_requires_closed_ring():
    with pytest.raises(InvalidShapeError) as exc:
        Polygon([Point(0, 0), Point(1, 0), Point(0, 1)])
    assert 'at least 4' in str(exc.value)

    with pytest.raises(InvalidShapeError) as exc:
        Polygon([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
    assert 'not closed' in str(exc.value)


@pytest.mark.parametrize(
    'coords',
    [
        [(0, 0), (0, 0), (1, 1), (0, 0)],
        [(0, 0), (1, 1), (0, 0), (1, 1), (0, 0)],
        [(0, 0), (1e-7, 0), (1, 1), (0, 0)],
        [(2, 2), (2, 2), (2, 2), (2, 2)],
    ],
)
def test_construction_requires_three_distinct_vertices(coords):
    with pytest.raises(InvalidShapeError) as exc:
        Polygon([Point(x, y) for x, y in coords])
    assert 'distinct vertices' in str(exc.value)


def test_from_vertices_closes_open_ring():
    poly = Polygon.from_vertices([Point(0, 0), Point(1, 0), Point(0, 1)])
    assert len(poly.ring) == 4
    assert poly.ring[0] == poly.ring[-1]
    assert len(poly) == 3
    assert poly == Polygon.from_coords([(0, 0), (1, 0), (0, 1), (0, 0)])


def test_bounding_box_is_cached_until_recomputed():
    poly = u_shape()
    assert poly._mbr is None
    box = poly.bounding_box()
    assert box == Rectangle.from_coords(0, 0, 3, 3)
    cached = poly._mbr
    box.expand(Point(10, 10))
    assert poly.bounding_box() == Rectangle.from_coords(0, 0, 3, 3)
    assert poly._mbr is cached
    poly.recompute_bounding_box()
    assert poly._mbr is not cached
    assert poly.max_x == 3


def test_area_and_center():
    square = unit_square()
    assert square.signed_area() == pytest.approx(1.0)
    assert square.center() == Point(0.5, 0.5)
    clockwise = Polygon.from_coords([(0, 0), (0, 2), (2, 2), (2, 0)])
    assert clockwise.signed_area() == pytest.approx(-4.0)
    assert clockwise.area() == pytest.approx(4.0)
    assert clockwise.center() == Point(1, 1)


def test_center_of_zero_area_ring_is_vertex_mean():
    flat = Polygon.from_coords([(0, 0), (1, 0), (2, 0)])
    assert flat.center() == Point(1, 0)


def test_distance_to_point():
    poly = u_shape()
    assert poly.distance_to(Point(0.5, 2)) == 0.0
    assert poly.distance_to(Point(1.5, 2)) == pytest.approx(0.5)
    assert poly.distance_to(Point(5, 0)) == pytest.approx(2.0)


def test_contains_segment_in_concave_polygon():
    poly = u_shape()
    assert poly.contains(seg(0.5, 0.5, 2.5, 0.5))
    assert poly.contains(seg(0.5, 0.5, 0.5, 2.5))
    assert not poly.contains(seg(0.5, 2, 2.5, 2))
    assert not poly.contains(seg(0.5, 2, 5, 2))
    assert poly.contains(seg(0, 0, 3, 0))


def test_contains_rectangle():
    poly = u_shape()
    assert poly.contains(Rectangle.from_coords(0.2, 0.2, 0.8, 2.8))
    assert poly.contains(Rectangle.from_coords(0, 0, 3, 1))
    assert not poly.contains(Rectangle.from_coords(0.2, 0.2, 2.8, 2.8))


def test_polygon_pairs_are_unsupported():
    with pytest.raises(UnsupportedOperationError):
        unit_square().intersects(u_shape())
    with pytest.raises(UnsupportedOperationError):
        unit_square().contains(u_shape())
    with pytest.raises(UnsupportedOperationError):
        unit_square().is_edge_intersection(Rectangle.from_coords(0, 0, 1, 1))


def test_edges_are_fresh_segments():
    edges = list(unit_square().edges())
    assert len(edges) == 4
    assert len({id(edge) for edge in edges}) == 4
    assert edges[0] == seg(0, 0, 1, 0)
    assert edges[-1] == seg(0, 1, 0, 0)
