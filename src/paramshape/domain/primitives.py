"""Value types for 2D geometry.

This module defines the small immutable value types every shape operation
is expressed in:
- Point: A 2D point or vector
- Size: A width/height pair
- Rectangle: An axis-aligned rectangle

All three are frozen dataclasses, so handing one out never leaks mutable
state. Affine transforms are fontTools ``Transform`` matrices.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from fontTools.misc.arrayTools import calcBounds
from fontTools.misc.transform import Transform

if TYPE_CHECKING:
    from paramshape.domain.linked import LinkedSize

SizeLike = Union["Size", "LinkedSize", tuple[float, float], float, int]


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @classmethod
    def from_polar(cls, length: float, angle: float) -> "Point":
        """Create a point from a distance to the origin and an angle in radians."""
        return cls(length * math.cos(angle), length * math.sin(angle))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def __truediv__(self, other: Any) -> "Point":
        """Divide by a scalar, or component-wise by a Point or Size."""
        if isinstance(other, Point):
            return Point(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Point(self.x / other, self.y / other)
        size = Size.read(other)
        return Point(self.x / size.width, self.y / size.height)

    @property
    def length(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    @property
    def angle_in_radians(self) -> float:
        """Polar angle in radians, in the range (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Size:
    """A width/height pair.

    Equality is exact, component by component.

    Attributes:
        width: Horizontal extent
        height: Vertical extent
    """

    width: float
    height: float

    @classmethod
    def read(cls, value: SizeLike) -> "Size":
        """Coerce a size-like value into a plain Size.

        Accepts a Size, a linked size view, a (width, height) pair, or a
        single number used for both components.

        Args:
            value: The value to convert

        Returns:
            Detached Size instance

        Raises:
            TypeError: If the value cannot be read as a size
        """
        if isinstance(value, Size):
            return value
        if isinstance(value, (int, float)):
            return cls(float(value), float(value))
        if hasattr(value, "to_size"):
            return value.to_size()
        try:
            width, height = value
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot read a size from {value!r}") from e
        return cls(float(width), float(height))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Size):
            return self.width == other.width and self.height == other.height
        if isinstance(other, tuple) and len(other) == 2:
            return self.width == other[0] and self.height == other[1]
        if hasattr(other, "to_size"):
            return self == other.to_size()
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __iter__(self):
        yield self.width
        yield self.height

    def __mul__(self, factor: float) -> "Size":
        return Size(self.width * factor, self.height * factor)

    def __truediv__(self, divisor: float) -> "Size":
        return Size(self.width / divisor, self.height / divisor)

    def is_zero(self) -> bool:
        """Check if both components are zero."""
        return self.width == 0 and self.height == 0

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (width, height) tuple."""
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: SizeLike, center: Point = Point(0.0, 0.0)) -> "Rectangle":
        """Create a rectangle of the given size centered on a point.

        Args:
            size: Rectangle size
            center: Center of the rectangle (default: origin)

        Returns:
            Centered Rectangle
        """
        size = Size.read(size)
        return cls(
            center.x - size.width / 2,
            center.y - size.height / 2,
            size.width,
            size.height,
        )

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def expand(self, amount: float) -> "Rectangle":
        """Grow the rectangle by ``amount`` in total width and height.

        Each edge moves outward by half the amount. A negative amount
        shrinks the rectangle.
        """
        return Rectangle(
            self.x - amount / 2,
            self.y - amount / 2,
            self.width + amount,
            self.height + amount,
        )

    def contains_point(self, point: Point) -> bool:
        """Check if a point lies inside the rectangle, edges included."""
        return (
            self.x <= point.x <= self.right
            and self.y <= point.y <= self.bottom
        )

    def corners(self) -> list[Point]:
        """Corners in clockwise order (y down), starting at the top left."""
        return [
            Point(self.x, self.y),
            Point(self.right, self.y),
            Point(self.right, self.bottom),
            Point(self.x, self.bottom),
        ]

    def transform_bounds(self, transform: Transform) -> "Rectangle":
        """Axis-aligned bounds of this rectangle under an affine transform.

        Args:
            transform: fontTools affine transform

        Returns:
            Smallest Rectangle containing the four transformed corners
        """
        points = transform.transformPoints([p.to_tuple() for p in self.corners()])
        x_min, y_min, x_max, y_max = calcBounds(points)
        return Rectangle(x_min, y_min, x_max - x_min, y_max - y_min)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x_min, y_min, x_max, y_max), the fontTools bounds layout."""
        return (self.x, self.y, self.right, self.bottom)
