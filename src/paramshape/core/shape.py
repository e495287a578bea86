"""The ShapeGeometry entity.

A ShapeGeometry owns one set of shape parameters (circle, ellipse or
rounded rectangle) and keeps size and radius consistent as either is
changed. Everything else is computed on demand:

- Outline emission to a drawing context
- Bounds, optionally stroke-expanded and transformed
- Point containment and stroke hit tests

Each effective mutation calls the injected change callback exactly once,
synchronously, so an owning scene graph can invalidate its caches. The
entity is not safe for concurrent mutation.
"""

import logging
from collections.abc import Callable
from enum import Enum

from fontTools.misc.transform import Transform

from paramshape.config import StyleConfig
from paramshape.core.geometry import (
    contains_point,
    hit_test_stroke,
    shape_bounds,
    shape_size,
)
from paramshape.core.outline import emit_outline
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
    ShapeParams,
    Size,
    SizeLike,
)
from paramshape.exceptions import ShapeKindError
from paramshape.render.context import DrawingContext, StyleQuery

logger = logging.getLogger(__name__)


class BoundsVariant(str, Enum):
    """Which bounds are requested. Only plain BOUNDS ignore the stroke."""

    BOUNDS = "bounds"
    STROKE_BOUNDS = "stroke_bounds"
    HANDLE_BOUNDS = "handle_bounds"
    ROUGH_BOUNDS = "rough_bounds"


class ShapeGeometry:
    """A circle, ellipse or rounded rectangle in its local coordinate frame.

    The shape has no position of its own; it is always centered on the
    origin, and placement is supplied by an external transform.

    Attributes:
        style: Fill/stroke query object, read on demand
        on_geometry_changed: Called once after each effective mutation
    """

    def __init__(
        self,
        params: ShapeParams,
        style: StyleQuery | None = None,
        on_geometry_changed: Callable[[], None] | None = None,
    ) -> None:
        if not isinstance(params, (CircleParams, EllipseParams, RoundedRectParams)):
            raise ShapeKindError(params)
        self._params = params
        self.style: StyleQuery = style if style is not None else StyleConfig()
        self.on_geometry_changed = on_geometry_changed

    @classmethod
    def circle(cls, radius: float, **kwargs) -> "ShapeGeometry":
        """Create a circle with the given radius."""
        return cls(CircleParams(float(radius)), **kwargs)

    @classmethod
    def ellipse(cls, size: SizeLike, **kwargs) -> "ShapeGeometry":
        """Create an ellipse fitting a rectangle of the given size."""
        size = Size.read(size)
        return cls(EllipseParams(Size(size.width / 2, size.height / 2)), **kwargs)

    @classmethod
    def rectangle(
        cls, size: SizeLike, radius: SizeLike = (0.0, 0.0), **kwargs
    ) -> "ShapeGeometry":
        """Create a rectangle, with rounded corners if radius is non-zero."""
        return cls(RoundedRectParams(Size.read(size), Size.read(radius)), **kwargs)

    @property
    def kind(self) -> ShapeKind:
        return self._params.kind

    @property
    def params(self) -> ShapeParams:
        """The current (immutable) shape parameters."""
        return self._params

    # Size and radius

    @property
    def size(self) -> LinkedSize:
        """Width and height of the shape.

        Returns a linked view: assigning to its width or height calls
        set_size on this shape.
        """
        size = shape_size(self._params)
        return LinkedSize(size.width, size.height, self, "set_size")

    @size.setter
    def size(self, value: SizeLike) -> None:
        self.set_size(value)

    def set_size(self, size: SizeLike) -> None:
        """Change the shape's size.

        Circles take the average of the requested width and height as their
        diameter. Ellipses follow with their radii. Rectangles keep their
        corner radii. Setting the current size is a no-op.

        Args:
            size: New size
        """
        size = Size.read(size)
        params = self._params
        if shape_size(params) == size:
            logger.debug("Ignoring unchanged size %s for %s", size, params.kind.value)
            return

        match params:
            case CircleParams():
                diameter = (size.width + size.height) / 2
                params = CircleParams(diameter / 2)
            case EllipseParams():
                params = EllipseParams(Size(size.width / 2, size.height / 2))
            case RoundedRectParams(radius=radius):
                params = RoundedRectParams(size, radius)
            case _:
                raise ShapeKindError(params)

        self._update(params)

    @property
    def radius(self) -> float | LinkedSize:
        """Radius of the shape.

        A plain number for circles. For ellipses and rectangles, a linked
        view of the radius pair that calls set_radius when assigned to.
        """
        match self._params:
            case CircleParams(radius=radius):
                return radius
            case EllipseParams(radius=radius) | RoundedRectParams(radius=radius):
                return LinkedSize(radius.width, radius.height, self, "set_radius")
            case _:
                raise ShapeKindError(self._params)

    @radius.setter
    def radius(self, value: float | SizeLike) -> None:
        self.set_radius(value)

    def set_radius(self, radius: float | SizeLike) -> None:
        """Change the shape's radius.

        Circles take a number and resize to twice the radius. Ellipses take
        a radius pair and resize to twice each component. Rectangles change
        their corner radii only. Setting the current radius is a no-op.

        Args:
            radius: New radius
        """
        params = self._params
        match params:
            case CircleParams():
                if radius == params.radius:
                    logger.debug("Ignoring unchanged circle radius %s", radius)
                    return
                params = CircleParams(float(radius))
            case EllipseParams() | RoundedRectParams():
                radius = Size.read(radius)
                if radius == params.radius:
                    logger.debug(
                        "Ignoring unchanged radius %s for %s", radius, params.kind.value
                    )
                    return
                if isinstance(params, EllipseParams):
                    params = EllipseParams(radius)
                else:
                    params = RoundedRectParams(params.size, radius)
            case _:
                raise ShapeKindError(params)

        self._update(params)

    def _update(self, params: ShapeParams) -> None:
        self._params = params
        logger.debug(
            "Geometry changed: kind=%s size=%s radius=%s",
            params.kind.value, shape_size(params), params.radius,
        )
        if self.on_geometry_changed is not None:
            self.on_geometry_changed()

    def is_empty(self) -> bool:
        """A parametric shape always has a definition, even at zero size.

        Returns:
            Always False
        """
        return False

    # Style

    def has_fill(self) -> bool:
        return self.style.has_fill()

    def has_stroke(self) -> bool:
        return self.style.has_stroke()

    def get_stroke_width(self) -> float:
        return self.style.get_stroke_width()

    def can_composite(self) -> bool:
        """Check if the shape can be blended directly.

        A shape with only a fill or only a stroke can; one with both must
        be drawn to a separate surface first.
        """
        return not (self.has_fill() and self.has_stroke())

    # Drawing

    def emit_outline(self, ctx: DrawingContext) -> None:
        """Describe the outline to a drawing context, without painting it."""
        emit_outline(self._params, ctx)

    def draw(self, ctx: DrawingContext, clip: bool = False) -> None:
        """Emit the outline and paint it according to the style.

        Nothing is emitted for a shape with neither fill nor stroke, unless
        it is being used as a clip mask. Clip masks are never painted.

        Args:
            ctx: Drawing context to draw into
            clip: True if the outline is used as a clip mask
        """
        has_fill = self.has_fill()
        has_stroke = self.has_stroke()
        if has_fill or has_stroke or clip:
            self.emit_outline(ctx)
        if not clip:
            if has_fill:
                ctx.fill()
            if has_stroke:
                ctx.stroke()

    # Queries

    def compute_bounds(
        self,
        variant: BoundsVariant | str = BoundsVariant.BOUNDS,
        transform: Transform | None = None,
    ) -> Rectangle:
        """Calculate the bounding rectangle of the shape.

        Args:
            variant: Requested bounds, as a BoundsVariant or its string
                value; all but BOUNDS include the stroke
            transform: Optional transform to apply to the rectangle

        Returns:
            Axis-aligned Rectangle

        Raises:
            ValueError: If variant names no known bounds
        """
        stroke_width = None
        if BoundsVariant(variant) is not BoundsVariant.BOUNDS and self.has_stroke():
            stroke_width = self.get_stroke_width()
        return shape_bounds(self._params, stroke_width, transform)

    def contains_point(self, point: Point) -> bool:
        """Check if a local point lies inside the shape."""
        return contains_point(self._params, point)

    def hit_test_stroke(self, point: Point) -> HitResult | None:
        """Test a local point against the shape's stroke.

        Returns:
            A stroke HitResult, or None if unstroked or not hit
        """
        if not self.has_stroke():
            return None
        if hit_test_stroke(self._params, point, self.get_stroke_width()):
            return HitResult(HitType.STROKE, self)
        return None

    def hit_test(self, point: Point) -> HitResult | None:
        """Test a local point against the stroke, then the fill.

        Returns:
            HitResult for the stroke or fill, or None if nothing was hit
        """
        result = self.hit_test_stroke(point)
        if result is None and self.has_fill() and self.contains_point(point):
            result = HitResult(HitType.FILL, self)
        return result

    def __repr__(self) -> str:
        return f"ShapeGeometry({self._params!r})"
