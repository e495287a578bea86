"""Unit tests for outline generation."""

import math
from unittest.mock import Mock

import pytest

from paramshape.core.outline import KAPPA, emit_outline
from paramshape.domain import (
    CircleParams,
    EllipseParams,
    Point,
    RoundedRectParams,
    Size,
)
from paramshape.exceptions import ShapeKindError


class TestKappa:
    """Tests for the Bezier circle constant."""

    def test_kappa_value(self) -> None:
        """Test the standard approximation constant."""
        assert KAPPA == pytest.approx(0.5522847498)
        assert KAPPA == pytest.approx(4 / 3 * (math.sqrt(2) - 1))


class TestCircleOutline:
    """Tests for circle outlines."""

    def test_single_full_arc(self, ctx) -> None:
        """Test that a circle is one full-turn arc centered on the origin."""
        emit_outline(CircleParams(30.0), ctx)

        assert ctx.names() == ["begin_path", "arc", "close_path"]
        center, radius, start, end, ccw = ctx.args("arc")[0]
        assert center == Point(0, 0)
        assert radius == 30.0
        assert end - start == pytest.approx(2 * math.pi)
        assert ccw is True


class TestEllipseOutline:
    """Tests for ellipse outlines."""

    @pytest.fixture
    def params(self) -> EllipseParams:
        """Create the radii of a 180x60 ellipse."""
        return EllipseParams(Size(90.0, 30.0))

    def test_four_curves(self, ctx, params: EllipseParams) -> None:
        """Test that an ellipse is exactly four cubic curves and no lines."""
        emit_outline(params, ctx)

        assert ctx.count("bezier_curve_to") == 4
        assert ctx.count("line_to") == 0
        assert ctx.count("move_to") == 1
        assert ctx.names()[-1] == "close_path"

    def test_anchor_sequence(self, ctx, params: EllipseParams) -> None:
        """Test the start point and quadrant end points."""
        emit_outline(params, ctx)

        assert ctx.args("move_to")[0] == (Point(-90, 0),)
        ends = [args[2] for args in ctx.args("bezier_curve_to")]
        assert ends == [Point(0, -30), Point(90, 0), Point(0, 30), Point(-90, 0)]

    def test_control_point_offsets(self, ctx, params: EllipseParams) -> None:
        """Test that control points are offset by rx*k and ry*k."""
        emit_outline(params, ctx)

        c1, c2, _ = ctx.args("bezier_curve_to")[0]
        assert c1.x == -90
        assert c1.y == pytest.approx(-30 * KAPPA)
        assert c2.x == pytest.approx(-90 * KAPPA)
        assert c2.y == -30

        offsets_x = {abs(c.x) for args in ctx.args("bezier_curve_to") for c in args[:2]}
        offsets_y = {abs(c.y) for args in ctx.args("bezier_curve_to") for c in args[:2]}
        assert sorted(offsets_x) == pytest.approx([90 * KAPPA, 90])
        assert sorted(offsets_y) == pytest.approx([30 * KAPPA, 30])


class TestRectOutline:
    """Tests for rectangle outlines."""

    def test_square_corners_are_plain_rect(self, ctx) -> None:
        """Test that zero radii produce four lines and no curves."""
        emit_outline(RoundedRectParams(Size(60, 60), Size(0, 0)), ctx)

        assert ctx.count("line_to") == 4
        assert ctx.count("bezier_curve_to") == 0
        assert ctx.count("move_to") == 1
        assert ctx.args("move_to")[0] == (Point(-30, -30),)
        assert ctx.args("line_to")[-1] == (Point(-30, -30),)

    def test_rounded_corners(self, ctx) -> None:
        """Test four lines and four curves in one closed contour."""
        emit_outline(RoundedRectParams(Size(60, 60), Size(10, 10)), ctx)

        assert ctx.count("line_to") == 4
        assert ctx.count("bezier_curve_to") == 4
        assert ctx.count("move_to") == 1
        assert ctx.count("close_path") == 1

        names = ctx.names()
        drawing = names[names.index("move_to") + 1:names.index("close_path")]
        assert drawing == ["bezier_curve_to", "line_to"] * 4

    def test_rounded_contour_returns_to_start(self, ctx) -> None:
        """Test that the last segment ends where the contour began."""
        emit_outline(RoundedRectParams(Size(60, 40), Size(10, 5)), ctx)

        start = ctx.args("move_to")[0][0]
        assert start == Point(-30, -15)
        assert ctx.args("line_to")[-1][0] == start

    def test_rounded_corner_control_points(self, ctx) -> None:
        """Test that corner controls use the inverse kappa from the corner."""
        emit_outline(RoundedRectParams(Size(60, 60), Size(10, 10)), ctx)

        c1, c2, end = ctx.args("bezier_curve_to")[0]
        inverse = 10 * (1 - KAPPA)
        assert c1 == Point(-30, pytest.approx(-30 + inverse))
        assert c2 == Point(pytest.approx(-30 + inverse), -30)
        assert end == Point(-20, -30)


class TestUnknownKind:
    """Tests for contract violations."""

    def test_unknown_params_raise(self) -> None:
        """Test that an unknown shape variant fails fast."""
        with pytest.raises(ShapeKindError, match="triangle"):
            emit_outline("triangle", Mock())  # type: ignore[arg-type]
