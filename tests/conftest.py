"""Shared fixtures for paramshape tests."""

import logging

import pytest

from paramshape.domain import Point
from paramshape.utils.logging import HANDLER_MARK


class RecordingContext:
    """Drawing context that records every command it receives."""

    def __init__(self) -> None:
        self.commands: list[tuple[str, tuple]] = []

    def names(self) -> list[str]:
        return [name for name, _ in self.commands]

    def count(self, name: str) -> int:
        return self.names().count(name)

    def args(self, name: str) -> list[tuple]:
        return [args for cmd, args in self.commands if cmd == name]

    def begin_path(self) -> None:
        self.commands.append(("begin_path", ()))

    def move_to(self, point: Point) -> None:
        self.commands.append(("move_to", (point,)))

    def line_to(self, point: Point) -> None:
        self.commands.append(("line_to", (point,)))

    def bezier_curve_to(self, c1: Point, c2: Point, end: Point) -> None:
        self.commands.append(("bezier_curve_to", (c1, c2, end)))

    def arc(self, center, radius, start_angle, end_angle, counter_clockwise=False) -> None:
        self.commands.append(
            ("arc", (center, radius, start_angle, end_angle, counter_clockwise))
        )

    def close_path(self) -> None:
        self.commands.append(("close_path", ()))

    def fill(self) -> None:
        self.commands.append(("fill", ()))

    def stroke(self) -> None:
        self.commands.append(("stroke", ()))


@pytest.fixture
def ctx() -> RecordingContext:
    """Create a recording drawing context."""
    return RecordingContext()


@pytest.fixture
def restore_logging():
    """Remove handlers installed by configure_logging after a test."""
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, HANDLER_MARK, False)]:
        root.removeHandler(handler)
        handler.close()
