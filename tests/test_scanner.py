import math

import pytest

from edgesnap import BoundingBox, Point2D, Polygon, Shape, cast_probe, find_extreme_vertex, probe_with_retry


def _shape(points, *, edges=None, origin=(0.0, 0.0), bbox=None, closed=True):
    if edges is None:
        polygon = Polygon.from_points(points, closed=closed, origin=origin)
    else:
        polygon = Polygon(
            vertices=tuple(Point2D(x, y) for x, y in points),
            edges=tuple(edges),
            origin=Point2D(*origin),
        )
    if bbox is None:
        xs = [x + origin[0] for x, _ in points]
        ys = [y + origin[1] for _, y in points]
        bbox = BoundingBox(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
    return Shape(bounding_box=bbox, polygon=polygon)


def test_extreme_vertex_uses_absolute_coordinates():
    shape = _shape([(0, 0), (4, 2), (1, 5)], origin=(10, 20))

    assert find_extreme_vertex(shape, "horizontal", "max") == Point2D(14, 22)
    assert find_extreme_vertex(shape, "horizontal", "min") == Point2D(10, 20)
    assert find_extreme_vertex(shape, "vertical", "max") == Point2D(11, 25)
    assert find_extreme_vertex(shape, "vertical", "min") == Point2D(10, 20)


def test_extreme_vertex_tie_goes_to_first_vertex():
    square = Shape.rectangle(0, 0, 10, 10)

    assert find_extreme_vertex(square, "horizontal", "max") == Point2D(10, 0)
    assert find_extreme_vertex(square, "vertical", "max") == Point2D(10, 10)
    assert find_extreme_vertex(square, "horizontal", "min") == Point2D(0, 0)


def test_extreme_vertex_without_vertices_is_none():
    empty = Shape(BoundingBox(0, 0, 1, 1), Polygon())

    assert find_extreme_vertex(empty, "horizontal", "max") is None
    assert find_extreme_vertex(Shape(None, None), "vertical", "min") is None


def test_probe_hits_edge_perpendicular_to_probe():
    square = Shape.rectangle(20, 0, 10, 10)

    assert cast_probe(square, "horizontal", 5.0, "min") == 20.0
    assert cast_probe(square, "horizontal", 5.0, "max") == 30.0
    assert cast_probe(square, "vertical", 25.0, "min") == 0.0
    assert cast_probe(square, "vertical", 25.0, "max") == 10.0


def test_probe_on_edge_parallel_to_probe_uses_near_endpoint():
    segment = _shape([(3, 4), (9, 4)], closed=False)

    assert cast_probe(segment, "horizontal", 4.0, "min") == 3.0
    assert cast_probe(segment, "horizontal", 4.0, "max") == 9.0


def test_probe_interpolates_slanted_edges():
    triangle = _shape([(30, 0), (30, 10), (20, 5)])

    assert math.isclose(cast_probe(triangle, "horizontal", 0.0, "min"), 30.0)
    assert math.isclose(cast_probe(triangle, "horizontal", 2.5, "min"), 25.0)
    assert math.isclose(cast_probe(triangle, "horizontal", 5.0, "min"), 20.0)
    assert math.isclose(cast_probe(triangle, "vertical", 25.0, "min"), 2.5)
    assert math.isclose(cast_probe(triangle, "vertical", 25.0, "max"), 7.5)


def test_probe_outside_span_is_none():
    triangle = _shape([(0, 0), (10, 20), (0, 10)])

    assert cast_probe(triangle, "horizontal", 25.0, "min") is None
    assert cast_probe(triangle, "horizontal", -0.001, "max") is None


def test_open_polyline_missing_segments_contribute_nothing():
    # A square with its left side removed.
    open_square = _shape([(0, 10), (0, 0), (10, 0), (10, 10)], edges=[(1, 2), (2, 3), (3, 0)])

    assert cast_probe(open_square, "horizontal", 5.0, "min") == 10.0


def test_probe_without_edges_is_none():
    dots = _shape([(0, 0), (10, 10)], edges=[])

    assert cast_probe(dots, "horizontal", 5.0, "min") is None


def test_retry_clamps_to_bounding_box_when_outside():
    square = Shape.rectangle(20, 5, 10, 10)

    assert cast_probe(square, "horizontal", 0.0, "min") is None
    assert probe_with_retry(square, "horizontal", 0.0, "min") == 20.0
    assert probe_with_retry(square, "horizontal", 40.0, "max") == 30.0


def test_retry_clamps_on_vertical_axis():
    square = Shape.rectangle(0, 0, 10, 10)

    assert cast_probe(square, "vertical", -5.0, "max") is None
    assert probe_with_retry(square, "vertical", -5.0, "max") == 10.0
    assert probe_with_retry(square, "vertical", 15.0, "min") == 0.0


def test_retry_nudges_inside_span_on_vertical_axis():
    # Mirror of the horizontal near miss: the top edge ends just short of x=5.
    shape = _shape(
        [(0, 20), (4.9999, 20), (5.3, 22), (10, 22)],
        edges=[(0, 1), (2, 3)],
        bbox=BoundingBox(0, 20, 10, 2),
    )

    assert cast_probe(shape, "vertical", 5.0, "min") is None
    assert probe_with_retry(shape, "vertical", 5.0, "min") == 22.0
    assert probe_with_retry(shape, "vertical", 5.0, "min", epsilon=0.0) is None


def test_retry_nudges_inside_span():
    # The left edge stops short of y=5 by rounding; the nudge reaches the next edge.
    shape = _shape(
        [(20, 0), (20, 4.9999), (22, 5.3), (22, 10)],
        edges=[(0, 1), (2, 3)],
        bbox=BoundingBox(20, 0, 2, 10),
    )

    assert cast_probe(shape, "horizontal", 5.0, "min") is None
    assert probe_with_retry(shape, "horizontal", 5.0, "min") == 22.0
    assert probe_with_retry(shape, "horizontal", 5.0, "min", epsilon=0.0) is None


def test_retry_without_bounding_box_gives_up():
    shape = Shape(None, Polygon.from_points([(0, 0), (1, 0), (1, 1)]))

    assert probe_with_retry(shape, "horizontal", 5.0, "min") is None


@pytest.mark.parametrize("direction", ["min", "max"])
def test_probe_does_not_mutate_shape(direction):
    square = Shape.rectangle(0, 0, 10, 10)
    before = square.polygon.absolute_vertices().copy()

    cast_probe(square, "vertical", 5.0, direction)

    assert (square.polygon.absolute_vertices() == before).all()
