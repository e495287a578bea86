"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from paramshape.domain import HitResult, Rectangle

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _fmt(value: float) -> str:
    return f"{value:g}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]paramshape[/bold] v{version}")
    console.print("─" * 44)


def print_shape_info(kind: str, size: tuple[float, float], radius: object) -> None:
    """Print the kind and parameters of a shape.

    Args:
        kind: Shape kind name
        size: Width and height
        radius: Scalar radius or (width, height) radius pair
    """
    if isinstance(radius, (int, float)):
        radius_str = _fmt(radius)
    else:
        rx, ry = radius
        radius_str = f"{_fmt(rx)} × {_fmt(ry)}"
    console.print(
        f"{SYM_STEP} [bold]{kind}[/bold] {SYM_DOT} size {_fmt(size[0])} × {_fmt(size[1])} "
        f"{SYM_DOT} radius {radius_str}"
    )


def print_path_data(path_data: str) -> None:
    """Print SVG path data on one unwrapped line."""
    console.print(Text(path_data), soft_wrap=True)


def print_bounds(rect: Rectangle) -> None:
    """Print a bounding rectangle as a table.

    Args:
        rect: Rectangle to print
    """
    table = Table(show_header=True, header_style="bold")
    for column in ("x", "y", "width", "height"):
        table.add_column(column, justify="right")
    table.add_row(_fmt(rect.x), _fmt(rect.y), _fmt(rect.width), _fmt(rect.height))
    console.print(table)


def print_hit(x: float, y: float, result: HitResult | None) -> None:
    """Print a hit-test outcome.

    Args:
        x: X coordinate of the tested point
        y: Y coordinate of the tested point
        result: Hit result, or None for a miss
    """
    point = f"({_fmt(x)}, {_fmt(y)})"
    if result is None:
        console.print(f"[yellow]{SYM_DOT} miss[/yellow] at {point}")
    else:
        console.print(f"[bold green]{SYM_OK} {result.type.value}[/bold green] hit at {point}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
