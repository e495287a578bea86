"""CLI application entry point for paramshape.

This module provides a small Typer interface for inspecting shapes:
printing outlines as SVG path data, computing bounds and running hit
tests from the terminal.
"""

import math
from pathlib import Path
from typing import Annotated

import typer
from fontTools.misc.transform import Transform
from pydantic import ValidationError

from paramshape import __version__
from paramshape.cli.output import (
    console,
    print_bounds,
    print_error,
    print_header,
    print_hit,
    print_path_data,
    print_shape_info,
)
from paramshape.config import (
    LoggingConfig,
    ParamShapeSettings,
    StyleConfig,
    get_default_settings,
)
from paramshape.core import BoundsVariant, ShapeGeometry
from paramshape.domain import Point, ShapeKind
from paramshape.exceptions import ParamShapeError, StyleError
from paramshape.render import to_svg_path
from paramshape.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="paramshape",
    help="Inspect parametric circles, ellipses and rounded rectangles.",
    add_completion=False,
    no_args_is_help=True,
)

KindArgument = Annotated[
    ShapeKind,
    typer.Argument(help="Shape kind (circle|ellipse|rect)", show_default=False),
]
RadiusOption = Annotated[
    float | None,
    typer.Option("--radius", "-r", help="Circle radius (default: half the width)"),
]
WidthOption = Annotated[
    float,
    typer.Option("--width", "-w", help="Shape width", min=0.0),
]
HeightOption = Annotated[
    float,
    typer.Option("--height", "-h", help="Shape height", min=0.0),
]
CornerRadiusOption = Annotated[
    float,
    typer.Option("--corner-radius", "-c", help="Rectangle corner radius", min=0.0),
]
StrokeWidthOption = Annotated[
    float,
    typer.Option("--stroke-width", "-s", help="Stroke width (0 = no stroke)"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]paramshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect parametric circles, ellipses and rounded rectangles."""
    # Create settings from CLI arguments
    settings = ParamShapeSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )


def _build_style(stroke_width: float, fill: bool) -> StyleConfig:
    """Build a style from CLI options.

    Raises:
        StyleError: If the options do not form a valid style
    """
    try:
        return StyleConfig(
            fill_color="black" if fill else None,
            stroke_color="black" if stroke_width > 0 else None,
            stroke_width=stroke_width,
        )
    except ValidationError as e:
        raise StyleError(str(e.errors()[0]["msg"])) from e


def _build_shape(
    kind: ShapeKind,
    radius: float | None,
    width: float,
    height: float,
    corner_radius: float,
    style: StyleConfig | None = None,
) -> ShapeGeometry:
    match kind:
        case ShapeKind.CIRCLE:
            return ShapeGeometry.circle(
                radius if radius is not None else width / 2, style=style
            )
        case ShapeKind.ELLIPSE:
            return ShapeGeometry.ellipse((width, height), style=style)
        case ShapeKind.ROUNDED_RECT:
            return ShapeGeometry.rectangle(
                (width, height), (corner_radius, corner_radius), style=style
            )
    raise typer.BadParameter(f"Unknown shape kind: {kind}")


def _describe(shape: ShapeGeometry) -> None:
    radius = shape.radius
    print_shape_info(
        shape.kind.value,
        shape.size.to_tuple(),
        radius if isinstance(radius, float) else radius.to_tuple(),
    )


@app.command()
def outline(
    kind: KindArgument,
    radius: RadiusOption = None,
    width: WidthOption = 100.0,
    height: HeightOption = 100.0,
    corner_radius: CornerRadiusOption = 0.0,
    precision: Annotated[
        int,
        typer.Option("--precision", help="Decimal places per coordinate", min=0, max=10),
    ] = 4,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print only the path data"),
    ] = False,
) -> None:
    """Print a shape's outline as SVG path data.

    Example:
        paramshape outline ellipse -w 180 -h 60
    """
    shape = _build_shape(
        kind, radius, width, height, corner_radius, get_default_settings().style
    )
    if not quiet:
        print_header(__version__)
        _describe(shape)
    print_path_data(to_svg_path(shape, precision=precision))


@app.command()
def bounds(
    kind: KindArgument,
    radius: RadiusOption = None,
    width: WidthOption = 100.0,
    height: HeightOption = 100.0,
    corner_radius: CornerRadiusOption = 0.0,
    stroke_width: StrokeWidthOption = 0.0,
    variant: Annotated[
        BoundsVariant,
        typer.Option("--variant", help="Bounds variant; all but 'bounds' include the stroke"),
    ] = BoundsVariant.STROKE_BOUNDS,
    rotate: Annotated[
        float,
        typer.Option("--rotate", help="Rotation in degrees applied before measuring"),
    ] = 0.0,
    scale: Annotated[
        float,
        typer.Option("--scale", help="Uniform scale applied before measuring"),
    ] = 1.0,
) -> None:
    """Print the bounding rectangle of a shape."""
    try:
        style = _build_style(stroke_width, fill=False)
        shape = _build_shape(kind, radius, width, height, corner_radius, style)
        transform = None
        if rotate or scale != 1.0:
            transform = Transform().rotate(math.radians(rotate)).scale(scale)
        print_bounds(shape.compute_bounds(variant, transform))
    except ParamShapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def hit(
    kind: KindArgument,
    x: Annotated[float, typer.Argument(help="X coordinate in the shape's local frame")],
    y: Annotated[float, typer.Argument(help="Y coordinate in the shape's local frame")],
    radius: RadiusOption = None,
    width: WidthOption = 100.0,
    height: HeightOption = 100.0,
    corner_radius: CornerRadiusOption = 0.0,
    stroke_width: StrokeWidthOption = 0.0,
    fill: Annotated[
        bool,
        typer.Option("--fill/--no-fill", help="Treat the shape as filled"),
    ] = False,
) -> None:
    """Hit-test a point against a shape's stroke and fill.

    Example:
        paramshape hit circle 32 0 -r 30 -s 4
    """
    try:
        style = _build_style(stroke_width, fill=fill)
        shape = _build_shape(kind, radius, width, height, corner_radius, style)
        result = shape.hit_test(Point(x, y))
    except ParamShapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_hit(x, y, result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
