"""Unit tests for analytic shape geometry."""

import math

import pytest
from fontTools.misc.transform import Transform

from paramshape.core.geometry import (
    contains_point,
    ellipse_radius_at,
    hit_test_stroke,
    shape_bounds,
    shape_size,
)
from paramshape.domain import (
    CircleParams,
    EllipseParams,
    Point,
    Rectangle,
    RoundedRectParams,
    Size,
)
from paramshape.exceptions import ShapeKindError

ANGLES = [i * math.pi / 12 for i in range(24)]


class TestShapeBounds:
    """Tests for shape_bounds function."""

    def test_circle_bounds(self) -> None:
        """Test that bounds are the size centered on the origin."""
        assert shape_bounds(CircleParams(30.0)) == Rectangle(-30, -30, 60, 60)

    def test_ellipse_bounds(self) -> None:
        """Test bounds of a wide ellipse."""
        assert shape_bounds(EllipseParams(Size(90, 30))) == Rectangle(-90, -30, 180, 60)

    def test_rounded_rect_bounds_ignore_corners(self) -> None:
        """Test that corner radii do not shrink the bounds."""
        params = RoundedRectParams(Size(60, 40), Size(10, 10))
        assert shape_bounds(params) == Rectangle(-30, -20, 60, 40)

    def test_stroke_expansion(self) -> None:
        """Test that the stroke width grows the bounds, half per side."""
        rect = shape_bounds(CircleParams(30.0), stroke_width=4.0)
        assert rect == Rectangle(-32, -32, 64, 64)

    def test_transformed_bounds(self) -> None:
        """Test bounds under a translation."""
        rect = shape_bounds(CircleParams(30.0), transform=Transform().translate(100, 50))
        assert rect == Rectangle(70, 20, 60, 60)

    def test_transform_applies_after_stroke(self) -> None:
        """Test that the stroke-expanded rectangle is what gets transformed."""
        rect = shape_bounds(
            RoundedRectParams(Size(60, 60)),
            stroke_width=4.0,
            transform=Transform().scale(2),
        )
        assert rect == Rectangle(-64, -64, 128, 128)


class TestContainsPoint:
    """Tests for contains_point function."""

    @pytest.mark.parametrize("angle", ANGLES)
    def test_circle_rotation_symmetric(self, angle: float) -> None:
        """Test that points inside the radius are contained at every angle."""
        params = CircleParams(50.0)
        assert contains_point(params, Point.from_polar(49.0, angle))
        assert contains_point(params, Point.from_polar(10.0, angle))
        assert not contains_point(params, Point.from_polar(51.0, angle))

    def test_ellipse_containment(self) -> None:
        """Test containment along both axes of an ellipse."""
        params = EllipseParams(Size(90, 30))
        assert contains_point(params, Point(0, 0))
        assert contains_point(params, Point(80, 0))
        assert contains_point(params, Point(0, 29))
        assert not contains_point(params, Point(0, 31))
        assert not contains_point(params, Point(80, 20))

    def test_ellipse_boundary_is_inside(self) -> None:
        """Test that boundary points count as contained."""
        assert contains_point(EllipseParams(Size(90, 30)), Point(90, 0))

    @pytest.mark.parametrize("angle", ANGLES)
    def test_ellipse_exact_near_boundary(self, angle: float) -> None:
        """Test containment just inside and outside the true ellipse."""
        size = Size(180, 60)
        params = EllipseParams(size / 2)
        radius = ellipse_radius_at(size, angle)
        assert contains_point(params, Point.from_polar(radius * 0.999, angle))
        assert not contains_point(params, Point.from_polar(radius * 1.001, angle))

    def test_rounded_rect_uses_outer_rectangle(self) -> None:
        """Test that rounded corners are ignored for containment."""
        params = RoundedRectParams(Size(60, 60), Size(20, 20))
        assert contains_point(params, Point(29, 29))
        assert contains_point(params, Point(30, 30))
        assert not contains_point(params, Point(31, 0))

    def test_zero_size_contains_nothing(self) -> None:
        """Test that a degenerate circle contains no points."""
        assert not contains_point(CircleParams(0.0), Point(0, 0))

    def test_unknown_kind_raises(self) -> None:
        """Test that unknown params fail fast."""
        with pytest.raises(ShapeKindError):
            contains_point(object(), Point(0, 0))  # type: ignore[arg-type]


class TestEllipseRadiusAt:
    """Tests for ellipse_radius_at function."""

    def test_axes(self) -> None:
        """Test radius along the principal axes."""
        size = Size(180, 60)
        assert ellipse_radius_at(size, 0.0) == pytest.approx(90)
        assert ellipse_radius_at(size, math.pi / 2) == pytest.approx(30)
        assert ellipse_radius_at(size, math.pi) == pytest.approx(90)

    @pytest.mark.parametrize("angle", ANGLES)
    def test_circle_is_constant(self, angle: float) -> None:
        """Test that a circle has the same radius at every angle."""
        assert ellipse_radius_at(Size(80, 80), angle) == pytest.approx(40)

    def test_flat_ellipse_along_axis_is_undefined(self) -> None:
        """Test that a zero-height ellipse has no radius along its axis."""
        assert math.isnan(ellipse_radius_at(Size(180, 0), 0.0))

    def test_point_lies_on_ellipse(self) -> None:
        """Test that the computed radius satisfies the ellipse equation."""
        angle = 0.7
        r = ellipse_radius_at(Size(180, 60), angle)
        p = Point.from_polar(r, angle)
        assert (p.x / 90) ** 2 + (p.y / 30) ** 2 == pytest.approx(1.0)


class TestHitTestStroke:
    """Tests for hit_test_stroke function."""

    def test_circle_stroke_boundary(self) -> None:
        """Test that R + s/2 is a hit and anything beyond is not."""
        params = CircleParams(30.0)
        assert hit_test_stroke(params, Point(32, 0), 4.0)
        assert not hit_test_stroke(params, Point(32 + 1e-9, 0), 4.0)

    def test_circle_inner_band(self) -> None:
        """Test that the inner half of the stroke is a hit."""
        params = CircleParams(30.0)
        assert hit_test_stroke(params, Point(0, -28), 4.0)
        assert not hit_test_stroke(params, Point(0, -27), 4.0)
        assert not hit_test_stroke(params, Point(0, 0), 4.0)

    @pytest.mark.parametrize("angle", ANGLES)
    def test_circle_stroke_any_angle(self, angle: float) -> None:
        """Test that points on the outline are hits at every angle."""
        assert hit_test_stroke(CircleParams(30.0), Point.from_polar(30.0, angle), 1.0)

    def test_ellipse_stroke(self) -> None:
        """Test hits along both ellipse axes."""
        params = EllipseParams(Size(90, 30))
        assert hit_test_stroke(params, Point(90, 0), 4.0)
        assert hit_test_stroke(params, Point(0, 31), 4.0)
        assert not hit_test_stroke(params, Point(0, 40), 4.0)
        assert not hit_test_stroke(params, Point(0, 0), 4.0)

    @pytest.mark.parametrize("angle", ANGLES)
    def test_ellipse_stroke_on_outline(self, angle: float) -> None:
        """Test that points on the true ellipse are hits at every angle."""
        size = Size(180, 60)
        point = Point.from_polar(ellipse_radius_at(size, angle), angle)
        assert hit_test_stroke(EllipseParams(size / 2), point, 0.5)

    def test_flat_ellipse_stroke_never_hits_on_axis(self) -> None:
        """Test that a flat ellipse reports no stroke hits along its axis."""
        params = EllipseParams(Size(90, 0))
        assert not hit_test_stroke(params, Point(0.5, 0), 4.0)
        assert not hit_test_stroke(params, Point(90, 0), 4.0)

    def test_rect_stroke(self) -> None:
        """Test the band between the grown and shrunk rectangle."""
        params = RoundedRectParams(Size(60, 60))
        assert hit_test_stroke(params, Point(30, 0), 4.0)
        assert hit_test_stroke(params, Point(31.5, 10), 4.0)
        assert not hit_test_stroke(params, Point(0, 0), 4.0)
        assert not hit_test_stroke(params, Point(33, 0), 4.0)

    def test_rounded_rect_stroke_ignores_corners(self) -> None:
        """Test that the sharp corner is a hit even with rounded corners."""
        params = RoundedRectParams(Size(60, 60), Size(20, 20))
        assert hit_test_stroke(params, Point(30, 30), 4.0)


class TestShapeSize:
    """Tests for shape_size function."""

    def test_sizes(self) -> None:
        """Test size for each kind."""
        assert shape_size(CircleParams(5.0)) == Size(10, 10)
        assert shape_size(EllipseParams(Size(2, 3))) == Size(4, 6)
        assert shape_size(RoundedRectParams(Size(7, 8))) == Size(7, 8)

    def test_unknown_kind_raises(self) -> None:
        """Test that unknown params fail fast."""
        with pytest.raises(ShapeKindError):
            shape_size(None)  # type: ignore[arg-type]
