"""Core geometry for paramshape.

This module contains:

- Outline generation (path commands for circles, ellipses, rectangles)
- Analytic queries (bounds, containment, stroke hit tests)
- The ShapeGeometry entity that keeps size and radius consistent

The functions are pure and operate on immutable shape parameters; only
ShapeGeometry holds state.

Key functions:
- emit_outline: Describe a shape's boundary to a drawing context
- shape_bounds: Bounding rectangle, optionally stroke-expanded and transformed
- contains_point: Exact point containment for circles and ellipses
- hit_test_stroke: Stroke proximity test
- ellipse_radius_at: Ellipse radius along a polar angle

Key classes:
- ShapeGeometry: Stateful shape with linked size/radius accessors
- BoundsVariant: Plain or stroke-aware bounds request
"""

from paramshape.core.geometry import (
    contains_point,
    ellipse_radius_at,
    hit_test_stroke,
    shape_bounds,
    shape_size,
)
from paramshape.core.outline import (
    KAPPA,
    emit_ellipse,
    emit_outline,
    emit_rect,
    emit_rounded_rect,
)
from paramshape.core.shape import BoundsVariant, ShapeGeometry

__all__ = [
    "KAPPA",
    # Shape classes
    "BoundsVariant",
    "ShapeGeometry",
    # Outline functions
    "emit_ellipse",
    "emit_outline",
    "emit_rect",
    "emit_rounded_rect",
    # Geometry functions
    "contains_point",
    "ellipse_radius_at",
    "hit_test_stroke",
    "shape_bounds",
    "shape_size",
]
