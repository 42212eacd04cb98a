"""Tests for geometric primitives."""

import math

import pytest

from strokeshape.geometry.primitives import (
    circularity, close_path, compute_bbox, is_closed, path_length,
    polygon_area, rectangularity,
)


class TestMeasures:
    """Tests for bounding box, length and area."""

    def test_bbox_of_square(self, square_stroke):
        """Test bounding box extents and derived sizes."""
        bbox = compute_bbox(square_stroke)

        assert tuple(bbox) == (0, 0, 100, 100)
        assert bbox.width == 100
        assert bbox.height == 100
        assert bbox.diagonal == pytest.approx(100 * math.sqrt(2))
        assert bbox.center == (50, 50)

    def test_bbox_of_single_point(self):
        """Test a single point gives a zero-size box."""
        bbox = compute_bbox([[3, 4]])

        assert bbox.width == 0
        assert bbox.height == 0
        assert bbox.center == (3, 4)

    def test_path_length(self, square_stroke):
        """Test polyline length sums every segment."""
        assert path_length(square_stroke) == pytest.approx(400)
        assert path_length([[1, 1]]) == 0.0

    def test_area_with_and_without_closing_point(self, square_stroke):
        """Test the shoelace area ignores an explicit closing point."""
        assert polygon_area(square_stroke) == pytest.approx(10000)
        assert polygon_area(square_stroke[:-1]) == pytest.approx(10000)

    def test_area_is_unsigned(self, square_stroke):
        """Test drawing direction does not change the area sign."""
        assert polygon_area(list(reversed(square_stroke))) == pytest.approx(10000)

    def test_triangle_area(self, triangle_stroke):
        """Test area of a triangle."""
        assert polygon_area(triangle_stroke) == pytest.approx(4500)

    def test_area_needs_three_points(self):
        """Test degenerate inputs have zero area."""
        assert polygon_area([[0, 0], [10, 10]]) == 0.0

    def test_ratios_guard_zero_divisors(self):
        """Test ratios stay finite for zero perimeter or bounds."""
        assert circularity(0.0, 0.0) == 0.0
        assert math.isfinite(rectangularity(5.0, compute_bbox([[0, 0]])))

    def test_circularity_of_square(self):
        """Test the isoperimetric quotient of a square is pi/4."""
        assert circularity(10000, 400) == pytest.approx(math.pi / 4)


class TestClosure:
    """Tests for closure detection and path closing."""

    def test_closed_square(self, square_stroke):
        """Test a stroke returning to its start is closed."""
        assert is_closed(square_stroke)

    def test_too_few_points(self):
        """Test fewer than three points are never closed."""
        assert not is_closed([[0, 0], [0, 0]])

    def test_open_line(self):
        """Test a straight line is open."""
        assert not is_closed([[0, 0], [100, 0], [200, 0]])

    def test_minimum_threshold_for_small_strokes(self):
        """Test small strokes get the fixed minimum tolerance."""
        points = [[0, 0], [30, 0], [30, 30], [0, 30], [0, 9]]

        assert is_closed(points)
        assert not is_closed(points, min_threshold=5)

    def test_threshold_grows_with_perimeter(self):
        """Test large strokes tolerate proportionally larger gaps."""
        points = [[0, 0], [300, 0], [300, 300], [0, 300], [0, 20]]

        assert is_closed(points)
        assert not is_closed(points, perimeter_ratio=0.01)

    def test_close_path_noop_when_near(self):
        """Test endpoints within tolerance are left as they are."""
        points = [[0, 0], [100, 0], [100, 100], [0, 100], [0, 5]]

        closed = close_path(points)

        assert closed == points
        assert closed is not points

    def test_close_path_appends_start(self):
        """Test a copy of the first point closes a wide gap."""
        points = [[0, 0], [100, 0], [100, 100]]

        closed = close_path(points)

        assert len(closed) == 4
        assert closed[-1] == [0, 0]
        assert len(points) == 3

    def test_close_path_single_point(self):
        """Test a single point is returned unchanged."""
        assert close_path([[7, 7]]) == [[7, 7]]

    def test_close_path_accepts_tuples(self):
        """Test tuple points are copied into float lists."""
        closed = close_path([(0, 0), (50, 0), (50, 50)])

        assert closed[0] == [0.0, 0.0]
        assert closed[-1] == [0.0, 0.0]
