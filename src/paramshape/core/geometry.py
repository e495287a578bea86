"""Analytic geometry for parametric shapes.

This module provides the closed-form queries a shape answers without
consulting its approximated outline:
- Bounding rectangles, optionally stroke-expanded and transformed
- Point containment (exact for circles and ellipses)
- Stroke proximity hit tests
- Ellipse radius at a polar angle

All functions are pure and operate in the shape's local coordinate frame,
centered on the origin. Rectangles are treated as sharp-cornered for
containment and hit testing, whatever their corner radii.
"""

import math

from fontTools.misc.transform import Transform

from paramshape.domain import (
    CircleParams,
    EllipseParams,
    Point,
    Rectangle,
    RoundedRectParams,
    ShapeParams,
    Size,
)
from paramshape.exceptions import ShapeKindError


def shape_size(params: ShapeParams) -> Size:
    """Get the full width and height of a shape.

    Raises:
        ShapeKindError: If params is not a known shape variant
    """
    match params:
        case CircleParams() | EllipseParams() | RoundedRectParams():
            return params.size
        case _:
            raise ShapeKindError(params)


def shape_bounds(
    params: ShapeParams,
    stroke_width: float | None = None,
    transform: Transform | None = None,
) -> Rectangle:
    """Calculate the bounding rectangle of a shape.

    Args:
        params: Shape parameters
        stroke_width: If given, the rectangle grows by this amount in total
            width and height (half on each side)
        transform: Optional affine transform applied to the result

    Returns:
        Axis-aligned bounding Rectangle

    Examples:
        >>> shape_bounds(CircleParams(10.0))
        Rectangle(x=-10.0, y=-10.0, width=20.0, height=20.0)
        >>> shape_bounds(CircleParams(10.0), stroke_width=4.0)
        Rectangle(x=-12.0, y=-12.0, width=24.0, height=24.0)
    """
    rect = Rectangle.from_size(shape_size(params))
    if stroke_width is not None:
        rect = rect.expand(stroke_width)
    return rect.transform_bounds(transform) if transform is not None else rect


def contains_point(params: ShapeParams, point: Point) -> bool:
    """Determine if a point lies inside a shape.

    Circles and ellipses are tested exactly: dividing the point by the full
    size maps the ellipse onto a circle of diameter 1. Rectangles fall back
    to rectangle containment, ignoring any corner rounding.

    Args:
        params: Shape parameters
        point: Point in the shape's local frame

    Returns:
        True if point is inside the shape or on its boundary

    Examples:
        >>> contains_point(EllipseParams(Size(90.0, 30.0)), Point(80.0, 0.0))
        True
        >>> contains_point(EllipseParams(Size(90.0, 30.0)), Point(0.0, 40.0))
        False
    """
    match params:
        case RoundedRectParams(size=size):
            return Rectangle.from_size(size).contains_point(point)
        case CircleParams() | EllipseParams():
            size = params.size
            if size.width == 0 or size.height == 0:
                return False
            return (point / size).length <= 0.5
        case _:
            raise ShapeKindError(params)


def ellipse_radius_at(size: Size, angle: float) -> float:
    """Calculate the distance from center to boundary of an ellipse at an angle.

    Uses the polar form of the ellipse equation,
    r = w*h / (2 * sqrt((w*sin(a))^2 + (h*cos(a))^2)),
    where w and h are the full width and height.

    Args:
        size: Full width and height of the ellipse
        angle: Polar angle in radians

    Returns:
        Radius of the ellipse along the given angle, or NaN where a flat
        ellipse (zero width or height) leaves it undefined
    """
    width, height = size.width, size.height
    x = width * math.sin(angle)
    y = height * math.cos(angle)
    denominator = 2 * math.sqrt(x * x + y * y)
    if denominator == 0:
        # Only reachable with a zero dimension, where w*h / 0 is 0 / 0
        return math.nan
    return width * height / denominator


def hit_test_stroke(params: ShapeParams, point: Point, stroke_width: float) -> bool:
    """Determine if a point lies on a shape's stroke.

    The stroke is centered on the outline and ``stroke_width`` wide. For
    rectangles the hit band lies between the outline grown and shrunk by
    the stroke width; for circles and ellipses a point hits when its
    distance to the outline, measured along the ray from the center, is at
    most half the stroke width.

    Args:
        params: Shape parameters
        point: Point in the shape's local frame
        stroke_width: Width of the stroke

    Returns:
        True if the point is on the stroke

    Examples:
        >>> hit_test_stroke(CircleParams(30.0), Point(32.0, 0.0), 4.0)
        True
        >>> hit_test_stroke(CircleParams(30.0), Point(33.0, 0.0), 4.0)
        False
    """
    match params:
        case RoundedRectParams(size=size):
            rect = Rectangle.from_size(size)
            outer = rect.expand(stroke_width)
            inner = rect.expand(-stroke_width)
            return outer.contains_point(point) and not inner.contains_point(point)
        case CircleParams(radius=radius):
            return 2 * abs(point.length - radius) <= stroke_width
        case EllipseParams():
            radius = ellipse_radius_at(params.size, point.angle_in_radians)
            return 2 * abs(point.length - radius) <= stroke_width
        case _:
            raise ShapeKindError(params)
