"""Hit-test results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class HitType(str, Enum):
    """Part of a shape that was hit."""

    STROKE = "stroke"
    FILL = "fill"


@dataclass(frozen=True)
class HitResult:
    """Outcome of a successful hit test.

    Attributes:
        type: Which part of the shape was hit
        item: The shape that was hit
    """

    type: HitType
    item: Any

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the hit type and the kind of shape hit
        """
        return {
            "type": self.type.value,
            "kind": getattr(getattr(self.item, "kind", None), "value", None),
        }
