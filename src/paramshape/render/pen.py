"""Drawing context that forwards to a fontTools pen.

fontTools pens speak moveTo/lineTo/curveTo/closePath. This adapter lets a
shape draw into any of them (RecordingPen, BoundsPen, SVGPathPen, ...),
converting canvas-style arcs into cubic Bezier segments on the way.
"""

import math
from typing import Any

from paramshape.domain import Point

QUARTER_TURN = math.pi / 2


def arc_sweep(start_angle: float, end_angle: float, counter_clockwise: bool) -> float:
    """Calculate the signed sweep of a canvas-style arc.

    A span of a full turn or more is drawn as exactly one full turn. Shorter
    spans are wrapped so the sweep runs in the requested direction:
    positive angles for clockwise, negative for counter-clockwise.

    Examples:
        >>> arc_sweep(0.0, math.pi, False)
        3.141592653589793
        >>> arc_sweep(0.0, math.pi / 2, True)
        -4.71238898038469
    """
    sweep = end_angle - start_angle
    if abs(sweep) >= math.tau:
        return -math.tau if counter_clockwise else math.tau
    if counter_clockwise and sweep > 0:
        sweep -= math.tau
    elif not counter_clockwise and sweep < 0:
        sweep += math.tau
    return sweep


def arc_to_cubics(
    center: Point, radius: float, start_angle: float, sweep: float
) -> list[tuple[Point, Point, Point]]:
    """Approximate a circular arc with cubic Bezier segments.

    The arc is split into segments of at most a quarter turn. Each segment
    of angle d has control points at distance 4/3 * tan(d/4) * radius from
    its end points, along the tangents.

    Args:
        center: Arc center
        radius: Arc radius
        start_angle: Start angle in radians
        sweep: Signed sweep in radians

    Returns:
        List of (control1, control2, end) tuples
    """
    count = max(1, math.ceil(abs(sweep) / QUARTER_TURN - 1e-9))
    step = sweep / count
    handle = 4 / 3 * math.tan(step / 4) * radius

    segments = []
    angle = start_angle
    for _ in range(count):
        next_angle = angle + step
        cos0, sin0 = math.cos(angle), math.sin(angle)
        cos1, sin1 = math.cos(next_angle), math.sin(next_angle)
        start = Point(center.x + radius * cos0, center.y + radius * sin0)
        end = Point(center.x + radius * cos1, center.y + radius * sin1)
        segments.append(
            (
                Point(start.x - handle * sin0, start.y + handle * cos0),
                Point(end.x + handle * sin1, end.y - handle * cos1),
                end,
            )
        )
        angle = next_angle
    return segments


class PenDrawingContext:
    """Adapts a fontTools pen to the DrawingContext interface.

    Painting commands have no pen equivalent; they are recorded in
    ``operations`` so callers can see what a draw call requested.

    Attributes:
        pen: The wrapped fontTools pen
        operations: Painting commands received ("fill", "stroke")
    """

    def __init__(self, pen: Any) -> None:
        self.pen = pen
        self.operations: list[str] = []
        self._current: Point | None = None
        self._open = False

    def begin_path(self) -> None:
        """Start a new path, ending any contour left open."""
        if self._open:
            self.pen.endPath()
        self._open = False
        self._current = None

    def move_to(self, point: Point) -> None:
        if self._open:
            self.pen.endPath()
        self.pen.moveTo(point.to_tuple())
        self._open = True
        self._current = point

    def line_to(self, point: Point) -> None:
        if not self._open:
            self.move_to(point)
            return
        self.pen.lineTo(point.to_tuple())
        self._current = point

    def bezier_curve_to(self, c1: Point, c2: Point, end: Point) -> None:
        if not self._open:
            self.move_to(c1)
        self.pen.curveTo(c1.to_tuple(), c2.to_tuple(), end.to_tuple())
        self._current = end

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        """Append a circular arc, connected to the current point by a line."""
        start = center + Point.from_polar(radius, start_angle)
        if not self._open:
            self.move_to(start)
        elif self._current != start:
            self.line_to(start)

        sweep = arc_sweep(start_angle, end_angle, counter_clockwise)
        if sweep == 0:
            return
        for c1, c2, end in arc_to_cubics(center, radius, start_angle, sweep):
            self.bezier_curve_to(c1, c2, end)

    def close_path(self) -> None:
        if self._open:
            self.pen.closePath()
        self._open = False
        self._current = None

    def fill(self) -> None:
        self.operations.append("fill")

    def stroke(self) -> None:
        self.operations.append("stroke")
