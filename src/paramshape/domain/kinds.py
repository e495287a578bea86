"""Shape kinds and their defining parameters.

Each kind carries only the fields it needs:
- CircleParams: a single scalar radius
- EllipseParams: a radius pair (the size is twice the radii)
- RoundedRectParams: an independent size and corner radius pair

Circle and ellipse sizes are derived from their radii, so the size/radius
consistency rules for those kinds cannot be violated by a stored value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from paramshape.domain.primitives import Size


class ShapeKind(str, Enum):
    """Kind of parametric shape."""

    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    ROUNDED_RECT = "rect"


@dataclass(frozen=True, slots=True)
class CircleParams:
    """Parameters of a circle.

    Attributes:
        radius: Circle radius
    """

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    radius: float

    @property
    def size(self) -> Size:
        diameter = self.radius * 2
        return Size(diameter, diameter)


@dataclass(frozen=True, slots=True)
class EllipseParams:
    """Parameters of an axis-aligned ellipse.

    Attributes:
        radius: Horizontal and vertical semi-axes
    """

    kind: ClassVar[ShapeKind] = ShapeKind.ELLIPSE

    radius: Size

    @property
    def size(self) -> Size:
        return Size(self.radius.width * 2, self.radius.height * 2)


@dataclass(frozen=True, slots=True)
class RoundedRectParams:
    """Parameters of a rectangle with optionally rounded corners.

    Corner radii are not clamped to half the side lengths.

    Attributes:
        size: Rectangle width and height
        radius: Horizontal and vertical corner radii, (0, 0) for square corners
    """

    kind: ClassVar[ShapeKind] = ShapeKind.ROUNDED_RECT

    size: Size
    radius: Size = field(default=Size(0.0, 0.0))

    def is_rounded(self) -> bool:
        return not self.radius.is_zero()


ShapeParams = CircleParams | EllipseParams | RoundedRectParams
