import pytest

from geometry_kernel import (
    DegenerateGeometryError,
    EPS,
    KernelConfig,
    LineSegment,
    Point,
    Rectangle,
    UnsupportedOperationError,
    get_kernel_config,
    set_kernel_config,
)


def seg(x1, y1, x2, y2):
    return LineSegment(Point(x1, y1), Point(x2, y2))


def test_line_equation_for_vertical_and_sloped_segments():
    vertical = seg(2, 0, 2, 5)
    assert (vertical.a, vertical.b, vertical.c) == (1.0, 0.0, -2.0)
    assert vertical.is_vertical

    sloped = seg(0, 1, 2, 5)
    assert sloped.b == 1.0
    assert sloped.a == pytest.approx(-2.0)
    assert sloped.c == pytest.approx(-1.0)


def test_reset_rederives_line_equation():
    s = seg(0, 0, 1, 1)
    same = s.reset(Point(3, 0), Point(3, 4))
    assert same is s
    assert (s.a, s.b, s.c) == (1.0, 0.0, -3.0)
    assert s.contains_point(Point(3, 2))
    assert not s.contains_point(Point(0.5, 0.5))


def test_assigning_an_endpoint_rederives_line_equation():
    s = seg(0, 0, 1, 1)
    s.start = Point(0, 5)
    assert s.start == Point(0, 5)
    assert (s.a, s.b, s.c) == (4.0, 1.0, -5.0)
    assert s.contains_point(Point(0, 5))
    assert s.contains_point(Point(1, 1))

    s.end = Point(0, 9)
    assert s.is_vertical
    assert (s.a, s.b) == (1.0, 0.0)
    assert s.c == 0.0
    assert s.contains_point(Point(0, 7))
    assert not s.contains_point(Point(1, 1))


@pytest.mark.parametrize('name', ['a', 'b', 'c'])
def test_line_coefficients_are_read_only(name):
    s = seg(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        setattr(s, name, 3.0)
    assert (s.a, s.b, s.c) == (-1.0, 1.0, 0.0)


@pytest.mark.parametrize(
    'point, on',
    [((1, 1), True), ((1, 1 + EPS / 10), True), ((1, 2), False), ((2, 1), False)],
)
def test_zero_length_segment_contains_only_its_point(point, on):
    assert seg(1, 1, 1, 1).contains_point(Point(*point)) is on


@pytest.mark.parametrize(
    'other, expected',
    [
        ((0, 0, 2, 2), True),
        ((1, 0, 1, 5), True),
        ((1, 1, 1, 1), True),
        ((0, 0, 2, 0), False),
        ((3, 3, 3, 3), False),
    ],
)
def test_zero_length_segment_intersection(other, expected):
    point_like = seg(1, 1, 1, 1)
    assert point_like.segments_intersect(seg(*other)) is expected
    assert seg(*other).segments_intersect(point_like) is expected


@pytest.mark.parametrize(
    'query, expected',
    [((5, 5), 5.0), ((-3, 0), 3.0), ((13, 4), 5.0), ((7, 0), 0.0), ((10, -2), 2.0)],
)
def test_distance_to_point(query, expected):
    assert seg(0, 0, 10, 0).distance_to(Point(*query)) == pytest.approx(expected)


def test_distance_on_sloped_segment():
    s = seg(0, 0, 4, 4)
    assert s.distance_to(Point(0, 4)) == pytest.approx(2 ** 1.5)


def test_zero_length_segment_distance_is_an_error():
    with pytest.raises(DegenerateGeometryError):
        seg(1, 1, 1, 1).distance_to(Point(0, 0))


@pytest.mark.parametrize(
    'point, on',
    [((5, 0), True), ((0, 0), True), ((10, 0), True), ((11, 0), False), ((5, 1e-3), False)],
)
def test_point_on_horizontal_segment(point, on):
    assert seg(0, 0, 10, 0).contains_point(Point(*point)) is on


def test_point_on_vertical_segment_requires_betweenness():
    s = seg(1, 0, 1, 2)
    assert s.contains_point(Point(1, 1))
    assert not s.contains_point(Point(1, 3))
    assert not s.contains_point(Point(1.1, 1))


def test_segments_sharing_one_endpoint_intersect():
    assert seg(0, 0, 1, 1).segments_intersect(seg(1, 1, 2, 0))
    assert seg(0, 0, 1, 1).segments_intersect(seg(3, 3, 0, 0))


def test_crossing_segments_intersect_both_ways():
    a = seg(0, 0, 4, 4)
    b = seg(0, 4, 4, 0)
    assert a.intersects(b) and b.intersects(a)
    assert a.intersection_point(b) == Point(2, 2)


def test_vertical_against_sloped():
    vertical = seg(2, -1, 2, 5)
    sloped = seg(0, 0, 4, 2)
    assert vertical.segments_intersect(sloped)
    assert sloped.segments_intersect(vertical)
    assert vertical.intersection_point(sloped) == Point(2, 1)


def test_disjoint_segments_do_not_intersect():
    a = seg(0, 0, 1, 1)
    b = seg(2, 0, 3, -1)
    assert not a.segments_intersect(b)
    assert a.intersection_point(b) is None


def test_parallel_segments_do_not_intersect():
    assert not seg(0, 0, 4, 0).segments_intersect(seg(0, 1, 4, 1))
    assert not seg(0, 0, 0, 4).segments_intersect(seg(1, 0, 1, 4))


def test_collinear_overlap_intersects():
    assert seg(0, 0, 4, 0).segments_intersect(seg(2, 0, 6, 0))
    assert seg(0, 0, 0, 4).segments_intersect(seg(0, 1, 0, 2))
    assert not seg(0, 0, 1, 0).segments_intersect(seg(2, 0, 3, 0))
    assert seg(0, 0, 4, 0).intersection_point(seg(2, 0, 6, 0)) is None


def test_parallel_tolerance_comes_from_config():
    original = get_kernel_config()
    try:
        set_kernel_config(KernelConfig(parallel_tolerance=10.0))
        # lines with a small angle now count as parallel and do not overlap
        assert not seg(0, 0, 4, 0).segments_intersect(seg(2, -1, 3, 1))
    finally:
        set_kernel_config(original)
    assert seg(0, 0, 4, 0).segments_intersect(seg(2, -1, 3, 1))


def test_contains_point_and_segment():
    s = seg(0, 0, 10, 10)
    assert s.contains(Point(3, 3))
    assert s.contains(seg(1, 1, 5, 5))
    assert not s.contains(seg(1, 1, 11, 11))
    assert s.contains(s)


@pytest.mark.parametrize('other', [Rectangle.from_coords(0, 0, 1, 1)])
def test_segment_cannot_contain_area_shapes(other):
    with pytest.raises(UnsupportedOperationError) as exc:
        seg(0, 0, 1, 1).contains(other)
    assert 'LineSegment and Rectangle' in str(exc.value)


def test_segment_edge_intersection_is_unsupported():
    with pytest.raises(UnsupportedOperationError):
        seg(0, 0, 1, 1).is_edge_intersection(seg(0, 0, 1, 1))


def test_bounding_box_and_center():
    s = seg(4, 1, 0, 3)
    box = s.bounding_box()
    assert box.min_point == Point(0, 1)
    assert box.max_point == Point(4, 3)
    assert s.center() == Point(2, 2)
    assert s.length() == pytest.approx(20 ** 0.5)


def test_equality_is_directional():
    assert seg(0, 0, 1, 1) == seg(0, EPS / 10, 1, 1)
    assert seg(0, 0, 1, 1) != seg(1, 1, 0, 0)
    copy = seg(0, 0, 1, 1).copy()
    assert copy == seg(0, 0, 1, 1)
