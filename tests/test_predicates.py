"""
Unit tests for the winding-number predicates.
"""

import math

import pytest

from tilequery_geometry import Point, Polygon, is_left, point_in_polygon


class TestIsLeft:
    """Tests for is_left() orientation sign."""

    def test_left_of_line(self):
        assert is_left(Point(0, 0), Point(1, 0), Point(0.5, 1)) > 0

    def test_right_of_line(self):
        assert is_left(Point(0, 0), Point(1, 0), Point(0.5, -1)) < 0

    def test_on_line(self):
        assert is_left(Point(0, 0), Point(1, 1), Point(3, 3)) == 0

    def test_magnitude_is_twice_triangle_area(self):
        assert is_left(Point(0, 0), Point(4, 0), Point(0, 3)) == pytest.approx(12.0)


class TestPointInPolygonSquare:
    """Square ring (0,0),(4,0),(4,4),(0,4),(0,0)."""

    def test_center_inside(self, square):
        assert point_in_polygon(Point(2, 2), square) is True

    def test_outside(self, square):
        assert point_in_polygon(Point(5, 5), square) is False

    def test_right_and_top_edges_are_outside(self, square):
        assert point_in_polygon(Point(4, 2), square) is False
        assert point_in_polygon(Point(2, 4), square) is False

    def test_left_and_bottom_edges_are_inside(self, square):
        # Half-open convention of the winding test, not a bug
        assert point_in_polygon(Point(0, 2), square) is True
        assert point_in_polygon(Point(2, 0), square) is True

    def test_clockwise_ring(self):
        clockwise = Polygon.of([[[0, 0], [0, 4], [4, 4], [4, 0], [0, 0]]])
        assert point_in_polygon(Point(2, 2), clockwise) is True
        assert point_in_polygon(Point(-1, 2), clockwise) is False


class TestPointInPolygonConvex:
    """Convex polygons: interior points inside, points beyond the bbox outside."""

    @pytest.fixture
    def hexagon(self):
        ring = [
            [math.cos(k * math.pi / 3) * 10, math.sin(k * math.pi / 3) * 10]
            for k in range(6)
        ]
        ring.append(ring[0])
        return Polygon.of([ring])

    def test_interior_grid(self, hexagon):
        for x in range(-5, 6):
            for y in range(-5, 6):
                assert point_in_polygon(Point(x * 0.8, y * 0.8), hexagon), (x, y)

    def test_outside_bounding_box(self, hexagon):
        for point in [Point(11, 0), Point(-11, 0), Point(0, 9.5), Point(0, -9.5), Point(20, 20)]:
            assert point_in_polygon(point, hexagon) is False, point

    def test_triangle(self):
        triangle = Polygon.of([[[0, 0], [6, 0], [3, 6], [0, 0]]])
        assert point_in_polygon(Point(3, 2), triangle) is True
        assert point_in_polygon(Point(0.5, 5), triangle) is False


class TestPointInPolygonRings:
    """Rings accumulate into one winding counter (union of areas)."""

    def test_point_in_second_ring(self):
        polygon = Polygon.of([
            [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]],
            [[10, 10], [12, 10], [12, 12], [10, 12], [10, 10]],
        ])
        assert point_in_polygon(Point(11, 11), polygon) is True
        assert point_in_polygon(Point(5, 5), polygon) is False

    def test_inner_ring_is_not_a_hole(self):
        polygon = Polygon.of([
            [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]],
            [[4, 4], [4, 6], [6, 6], [6, 4], [4, 4]],
        ])
        assert point_in_polygon(Point(5, 5), polygon) is True

    def test_degenerate_rings_contribute_nothing(self):
        polygon = Polygon(rings=((Point(1, 1),), ()))
        assert point_in_polygon(Point(1, 1), polygon) is False

    def test_empty_polygon(self):
        assert point_in_polygon(Point(0, 0), Polygon()) is False
