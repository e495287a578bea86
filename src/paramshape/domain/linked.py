"""Live size views that write back into their owner.

A LinkedSize is what a shape hands out for its size and radius. It holds
its own copy of the two components, so callers never alias the shape's
internal state, but assigning to it forwards the new value to the named
setter on the owning object.
"""

from typing import Any

from paramshape.domain.primitives import Size


class LinkedSize:
    """A width/height pair linked to a setter on its owner.

    Example:
        >>> shape = ShapeGeometry.rectangle((60, 60))
        >>> view = shape.size
        >>> view.width = 100  # calls shape.set_size(Size(100, 60))
    """

    __slots__ = ("_width", "_height", "_owner", "_setter")

    def __init__(self, width: float, height: float, owner: Any, setter: str) -> None:
        self._width = width
        self._height = height
        self._owner = owner
        self._setter = setter

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value
        self._forward()

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = value
        self._forward()

    def set(self, width: float, height: float) -> None:
        """Set both components and forward them to the owner in one call."""
        self._width = width
        self._height = height
        self._forward()

    def _forward(self) -> None:
        getattr(self._owner, self._setter)(self.to_size())

    def to_size(self) -> Size:
        """Return a detached plain Size with the current components."""
        return Size(self._width, self._height)

    def to_tuple(self) -> tuple[float, float]:
        return (self._width, self._height)

    def __iter__(self):
        yield self._width
        yield self._height

    def __eq__(self, other: object) -> bool:
        if isinstance(other, tuple) and len(other) != 2:
            return False
        if isinstance(other, (Size, LinkedSize, tuple)):
            try:
                return Size.read(other) == self.to_size()
            except (TypeError, ValueError):
                return False
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedSize({self._width!r}, {self._height!r})"
