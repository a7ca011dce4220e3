"""Unit tests for region shapes."""

import math

import pytest

from regionbox_geometry import (
    BoundedAxis,
    InvalidBound,
    Parallelepiped3D,
    Point2D,
    Point3D,
    Rectangle2D,
    RegionKind,
    build_region,
    format_number,
)


class TestPoints:
    """Tests for Point2D / Point3D."""

    def test_point2d_iteration(self):
        assert list(Point2D(3.0, 4.0)) == [3.0, 4.0]

    def test_point3d_to_tuple(self):
        assert Point3D(1.0, 2.0, 3.0).to_tuple() == (1.0, 2.0, 3.0)


class TestFormatNumber:
    """Tests for report number formatting."""

    @pytest.mark.parametrize("value,expected", [
        (10.0, "10"),
        (2.5, "2.5"),
        (-3.0, "-3"),
        (0.1, "0.1"),
        (1e300, "1e+300"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestRectangle2D:
    """Tests for Rectangle2D."""

    def test_scenario_a(self, rectangle):
        assert rectangle.contains([5, 2])
        assert not rectangle.contains([11, 2])

    def test_reversed_bounds_normalize(self, rectangle):
        reversed_rect = Rectangle2D.from_bounds(10, 0, 5, 0)
        assert reversed_rect == rectangle
        assert reversed_rect.axis1 == BoundedAxis(0.0, 10.0)
        assert reversed_rect.axis2 == BoundedAxis(0.0, 5.0)

    def test_boundaries_inclusive(self, rectangle):
        assert rectangle.contains([0, 0])
        assert rectangle.contains([10, 5])
        assert not rectangle.contains([10.0001, 5])
        assert not rectangle.contains([0, -0.0001])

    @pytest.mark.parametrize("coords", [[], [5], None])
    def test_arity_shortfall(self, rectangle, coords):
        assert rectangle.contains(coords) is False

    def test_extra_coordinates_ignored(self, rectangle):
        assert rectangle.contains([5, 2, 1000, -1000])

    def test_contains_point(self, rectangle):
        assert rectangle.contains_point(Point2D(5, 2))
        assert not rectangle.contains_point(Point2D(-1, 2))

    def test_contains_point_rejects_3d(self, rectangle):
        with pytest.raises(TypeError):
            rectangle.contains_point(Point3D(5, 2, 1))

    def test_report(self, rectangle):
        assert rectangle.format_report() == [
            "b1 <= x1 <= a1 : 0 <= x1 <= 10",
            "b2 <= x2 <= a2 : 0 <= x2 <= 5",
        ]

    def test_kind_and_dimensions(self, rectangle):
        assert rectangle.kind is RegionKind.RECTANGLE
        assert rectangle.dimensions == 2
        assert rectangle.title == "Rectangle"

    @pytest.mark.parametrize("position,name", [(0, "b1"), (1, "a1"), (2, "b2"), (3, "a2")])
    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite_in_every_position(self, position, name, bad):
        bounds = [0.0, 10.0, 0.0, 5.0]
        bounds[position] = bad
        with pytest.raises(InvalidBound) as exc:
            Rectangle2D.from_bounds(*bounds)
        assert exc.value.parameter == name
        assert exc.value.axis == position // 2 + 1

    def test_validation_order(self):
        with pytest.raises(InvalidBound) as exc:
            Rectangle2D.from_bounds(0, math.inf, math.nan, 1)
        assert exc.value.parameter == "a1"

    def test_set_bounds_replaces_axes(self, rectangle):
        rectangle.set_bounds(20, 30, -1, 1)
        assert rectangle.contains([25, 0])
        assert not rectangle.contains([5, 2])

    def test_set_bounds_failure_leaves_region_unchanged(self, rectangle):
        before = rectangle.axes
        with pytest.raises(InvalidBound):
            rectangle.set_bounds(20, 30, -1, math.nan)
        assert rectangle.axes == before


class TestParallelepiped3D:
    """Tests for Parallelepiped3D."""

    def test_scenario_c(self, parallelepiped):
        assert parallelepiped.contains([5, 2, 1])
        assert not parallelepiped.contains([5, 2, 3])
        assert parallelepiped.contains([5, 2])

    @pytest.mark.parametrize("x3", [0.0, 1.0, 2.0, -50.0, 50.0, math.nan])
    def test_projection_ignores_axis3(self, parallelepiped, x3):
        assert parallelepiped.contains([5, 2]) is True
        assert parallelepiped.contains([5, 2, x3]) == (0.0 <= x3 <= 2.0)

    def test_projection_matches_rectangle(self, parallelepiped, rectangle):
        for point in ([5, 2], [11, 2], [0, 5], [10, 5.5]):
            assert parallelepiped.contains(point) == rectangle.contains(point)

    @pytest.mark.parametrize("coords", [[], [5], None])
    def test_arity_shortfall(self, parallelepiped, coords):
        assert parallelepiped.contains(coords) is False

    def test_extra_coordinates_ignored(self, parallelepiped):
        assert parallelepiped.contains([5, 2, 1, 99])

    def test_contains_point_overloads(self, parallelepiped):
        assert parallelepiped.contains_point(Point3D(5, 2, 1))
        assert not parallelepiped.contains_point(Point3D(5, 2, 3))
        assert parallelepiped.contains_point(Point2D(5, 2))

    def test_axes_through_projection(self, parallelepiped):
        assert parallelepiped.axis1 is parallelepiped.base.axis1
        assert parallelepiped.axis2 is parallelepiped.base.axis2
        assert parallelepiped.axes == (
            BoundedAxis(0.0, 10.0),
            BoundedAxis(0.0, 5.0),
            BoundedAxis(0.0, 2.0),
        )

    def test_reversed_bounds_normalize(self, parallelepiped):
        assert Parallelepiped3D.from_bounds(10, 0, 5, 0, 2, 0) == parallelepiped

    def test_report(self, parallelepiped):
        report = parallelepiped.format_report()
        assert len(report) == 3
        assert report[2] == "b3 <= x3 <= a3 : 0 <= x3 <= 2"

    def test_kind_and_dimensions(self, parallelepiped):
        assert parallelepiped.kind is RegionKind.PARALLELEPIPED
        assert parallelepiped.dimensions == 3

    @pytest.mark.parametrize("position", range(6))
    def test_rejects_non_finite_in_every_position(self, position):
        bounds = [0.0, 10.0, 0.0, 5.0, 0.0, 2.0]
        bounds[position] = math.nan
        with pytest.raises(InvalidBound) as exc:
            Parallelepiped3D.from_bounds(*bounds)
        expected = f"{'ba'[position % 2]}{position // 2 + 1}"
        assert exc.value.parameter == expected

    def test_set_bounds_failure_on_axis3_is_atomic(self, parallelepiped):
        before = parallelepiped.axes
        with pytest.raises(InvalidBound) as exc:
            parallelepiped.set_bounds(1, 2, 3, 4, 5, math.inf)
        assert exc.value.parameter == "a3"
        assert parallelepiped.axes == before

    def test_set_bounds_replaces_all_axes(self, parallelepiped):
        parallelepiped.set_bounds(1, 2, 3, 4, 6, 5)
        assert parallelepiped.axes == (
            BoundedAxis(1.0, 2.0),
            BoundedAxis(3.0, 4.0),
            BoundedAxis(5.0, 6.0),
        )

    def test_not_equal_to_rectangle(self, parallelepiped, rectangle):
        assert parallelepiped != rectangle


class TestBuildRegion:
    """Tests for the build_region factory."""

    def test_rectangle_from_string(self):
        region = build_region("rectangle", [0, 10, 0, 5])
        assert isinstance(region, Rectangle2D)

    def test_parallelepiped_from_enum(self):
        region = build_region(RegionKind.PARALLELEPIPED, [0, 10, 0, 5, 0, 2])
        assert isinstance(region, Parallelepiped3D)

    def test_wrong_bound_count(self):
        with pytest.raises(ValueError, match="needs 6 bounds"):
            build_region("parallelepiped", [0, 10, 0, 5])

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            build_region("circle", [0, 1])

    def test_invalid_bound_propagates(self):
        with pytest.raises(InvalidBound):
            build_region("rectangle", [0, math.inf, 0, 5])
