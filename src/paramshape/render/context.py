"""Drawing-context and style-query interfaces.

Shapes never render themselves. They describe their outline to a
DrawingContext, and read fill/stroke presence from a StyleQuery, both
passed in explicitly by the caller.
"""

from typing import Protocol, runtime_checkable

from paramshape.domain import Point


@runtime_checkable
class DrawingContext(Protocol):
    """Receiver of primitive path commands, in the style of a 2D canvas."""

    def begin_path(self) -> None: ...

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def bezier_curve_to(self, c1: Point, c2: Point, end: Point) -> None: ...

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...


@runtime_checkable
class StyleQuery(Protocol):
    """Read-only view of the fill and stroke a shape is painted with."""

    def has_fill(self) -> bool: ...

    def has_stroke(self) -> bool: ...

    def get_stroke_width(self) -> float: ...
