"""Command-line interface for paramshape.

This module provides the CLI using Typer with rich output for
inspecting shapes from a terminal.

Key features:
- SVG path data for any shape outline
- Plain, stroke-aware and transformed bounds
- Stroke and fill hit tests
"""

from paramshape.cli.app import cli, main

__all__ = ["cli", "main"]
