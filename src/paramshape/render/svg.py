"""SVG path data export.

Turns a shape's outline into an SVG ``d`` attribute string by drawing it
through fontTools' SVGPathPen.
"""

from typing import TYPE_CHECKING

from fontTools.pens.svgPathPen import SVGPathPen

from paramshape.render.pen import PenDrawingContext

if TYPE_CHECKING:
    from paramshape.core.shape import ShapeGeometry


def format_number(value: float, precision: int = 4) -> str:
    """Format a coordinate compactly, without trailing zeros.

    Examples:
        >>> format_number(30.0)
        '30'
        >>> format_number(-16.568542)
        '-16.5685'
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_svg_path(shape: "ShapeGeometry", precision: int = 4) -> str:
    """Render a shape's outline as SVG path data.

    Args:
        shape: Shape to export
        precision: Maximum number of decimal places per coordinate

    Returns:
        Path data in the shape's local coordinate frame
    """
    pen = SVGPathPen(None, ntos=lambda value: format_number(value, precision))
    shape.emit_outline(PenDrawingContext(pen))
    return pen.getCommands()
