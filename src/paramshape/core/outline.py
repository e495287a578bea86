"""Outline generation for parametric shapes.

Shapes are described to a drawing context as path commands in their local
coordinate frame, centered on the origin:
- Circle: a single full-turn arc
- Ellipse: four cubic Bezier curves, one per quadrant
- Rectangle: four straight edges
- Rounded rectangle: four straight edges joined by four cubic corners

Bezier curves use the kappa constant, the control-point distance (as a
fraction of the radius) that makes a cubic curve approximate a quarter
circle. The maximum radial deviation of the result is about 0.027%.
"""

import logging
import math

from paramshape.domain import (
    CircleParams,
    EllipseParams,
    Point,
    RoundedRectParams,
    ShapeParams,
    Size,
)
from paramshape.exceptions import ShapeKindError
from paramshape.render.context import DrawingContext

logger = logging.getLogger(__name__)

KAPPA = 4 * (math.sqrt(2) - 1) / 3
"""Bezier circle approximation constant, 0.5522847498..."""

ORIGIN = Point(0.0, 0.0)


def emit_outline(params: ShapeParams, ctx: DrawingContext) -> None:
    """Describe a shape's boundary to a drawing context.

    Starts a new path and issues the path-construction commands for the
    outline. Never fills or strokes; that decision belongs to the caller.

    Args:
        params: Shape parameters
        ctx: Receiver of the path commands

    Raises:
        ShapeKindError: If params is not a known shape variant
    """
    ctx.begin_path()
    match params:
        case CircleParams(radius=radius):
            ctx.arc(ORIGIN, radius, 0.0, math.tau, True)
            ctx.close_path()
        case EllipseParams(radius=radius):
            emit_ellipse(ctx, radius)
        case RoundedRectParams(size=size, radius=radius) if radius.is_zero():
            emit_rect(ctx, size)
        case RoundedRectParams(size=size, radius=radius):
            emit_rounded_rect(ctx, size, radius)
        case _:
            raise ShapeKindError(params)


def emit_ellipse(ctx: DrawingContext, radius: Size) -> None:
    """Emit an ellipse as four quadrant curves.

    Starts at (-rx, 0) and passes through (0, -ry), (rx, 0) and (0, ry)
    before closing back at the start.
    """
    rx, ry = radius.width, radius.height
    cx = rx * KAPPA
    cy = ry * KAPPA

    ctx.move_to(Point(-rx, 0))
    ctx.bezier_curve_to(Point(-rx, -cy), Point(-cx, -ry), Point(0, -ry))
    ctx.bezier_curve_to(Point(cx, -ry), Point(rx, -cy), Point(rx, 0))
    ctx.bezier_curve_to(Point(rx, cy), Point(cx, ry), Point(0, ry))
    ctx.bezier_curve_to(Point(-cx, ry), Point(-rx, cy), Point(-rx, 0))
    ctx.close_path()


def emit_rect(ctx: DrawingContext, size: Size) -> None:
    """Emit a sharp-cornered rectangle centered on the origin."""
    x = size.width / 2
    y = size.height / 2

    ctx.move_to(Point(-x, -y))
    ctx.line_to(Point(x, -y))
    ctx.line_to(Point(x, y))
    ctx.line_to(Point(-x, y))
    ctx.line_to(Point(-x, -y))
    ctx.close_path()


def emit_rounded_rect(ctx: DrawingContext, size: Size, radius: Size) -> None:
    """Emit a rectangle with rounded corners as one closed contour.

    Control points are placed from the corners inwards, using the inverse
    kappa (1 - kappa) scaled by the corner radius.
    """
    rx, ry = radius.width, radius.height
    x = size.width / 2
    y = size.height / 2
    inverse_kappa = 1 - KAPPA
    cx = rx * inverse_kappa
    cy = ry * inverse_kappa

    if rx > x or ry > y:
        logger.debug(
            "Corner radius exceeds half the side length: size=%s radius=%s",
            size, radius,
        )

    ctx.move_to(Point(-x, -y + ry))
    ctx.bezier_curve_to(Point(-x, -y + cy), Point(-x + cx, -y), Point(-x + rx, -y))
    ctx.line_to(Point(x - rx, -y))
    ctx.bezier_curve_to(Point(x - cx, -y), Point(x, -y + cy), Point(x, -y + ry))
    ctx.line_to(Point(x, y - ry))
    ctx.bezier_curve_to(Point(x, y - cy), Point(x - cx, y), Point(x - rx, y))
    ctx.line_to(Point(-x + rx, y))
    ctx.bezier_curve_to(Point(-x + cx, y), Point(-x, y - cy), Point(-x, y - ry))
    ctx.line_to(Point(-x, -y + ry))
    ctx.close_path()
