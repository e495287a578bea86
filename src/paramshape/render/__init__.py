"""Rendering interfaces and adapters for paramshape.

This module connects shapes to the outside world without owning any
rendering backend:

- DrawingContext: Canvas-style path command receiver
- StyleQuery: Fill/stroke presence and stroke width
- PenDrawingContext: Adapter that draws into any fontTools pen
- to_svg_path: SVG path data through fontTools' SVGPathPen
"""

from paramshape.render.context import DrawingContext, StyleQuery
from paramshape.render.pen import PenDrawingContext, arc_sweep, arc_to_cubics
from paramshape.render.svg import format_number, to_svg_path

__all__ = [
    "DrawingContext",
    "PenDrawingContext",
    "StyleQuery",
    "arc_sweep",
    "arc_to_cubics",
    "format_number",
    "to_svg_path",
]
