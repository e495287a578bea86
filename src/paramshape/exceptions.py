"""Exception hierarchy for paramshape."""


class ParamShapeError(Exception):
    """Base exception for all paramshape errors."""

    pass


class GeometryError(ParamShapeError):
    """Errors in geometric calculations."""

    pass


class ShapeKindError(GeometryError):
    """A shape kind outside the known set reached a dispatch point.

    Shape kinds are fixed at construction and exhaustively enumerated, so
    this is a programming error rather than a recoverable condition.
    """

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown shape kind: {kind!r}")


class StyleError(ParamShapeError):
    """Invalid style options."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid style: {reason}")
