"""Domain models for paramshape.

This module contains the value types and shape parameter models. All
models are designed to be:

- Immutable (frozen dataclasses), except for the linked size views
- Free of rendering and notification concerns

Key classes:
- Point, Size, Rectangle: 2D value types
- LinkedSize: A size view that writes back into its owner
- ShapeKind: Circle, ellipse or rounded rectangle
- CircleParams, EllipseParams, RoundedRectParams: Per-kind parameters
- HitResult: Outcome of a hit test
"""

from paramshape.domain.hit import HitResult, HitType
from paramshape.domain.kinds import (
    CircleParams,
    EllipseParams,
    RoundedRectParams,
    ShapeKind,
    ShapeParams,
)
from paramshape.domain.linked import LinkedSize
from paramshape.domain.primitives import Point, Rectangle, Size, SizeLike

__all__: list[str] = [
    # Enums
    "ShapeKind",
    "HitType",
    # Value types
    "Point",
    "Size",
    "SizeLike",
    "Rectangle",
    "LinkedSize",
    # Shape parameters
    "CircleParams",
    "EllipseParams",
    "RoundedRectParams",
    "ShapeParams",
    "HitResult",
]
