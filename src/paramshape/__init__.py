"""paramshape - Parametric circle, ellipse and rounded-rectangle geometry.

A shape is defined by its kind and two synchronized parameters, size and
radius. It can describe its outline to a drawing context, compute its
bounds, and answer containment and stroke hit tests without ever storing
the outline.

Example:
    >>> from paramshape import ShapeGeometry
    >>> shape = ShapeGeometry.circle(30)
    >>> shape.size
    LinkedSize(60.0, 60.0)
"""

__version__ = "0.1.0"

from paramshape.core import BoundsVariant, ShapeGeometry
from paramshape.domain import (
    CircleParams,
    EllipseParams,
    HitResult,
    HitType,
    LinkedSize,
    Point,
    Rectangle,
    RoundedRectParams,
    ShapeKind,
    Size,
)
from paramshape.render import PenDrawingContext, to_svg_path

__all__ = [
    "BoundsVariant",
    "CircleParams",
    "EllipseParams",
    "HitResult",
    "HitType",
    "LinkedSize",
    "PenDrawingContext",
    "Point",
    "Rectangle",
    "RoundedRectParams",
    "ShapeGeometry",
    "ShapeKind",
    "Size",
    "__version__",
    "to_svg_path",
]
