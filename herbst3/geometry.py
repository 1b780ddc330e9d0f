"""
Geometry

Rectangle model for frames, clients and monitors, and the edge tests
used to decide whether a window still has room to move.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List

from .errors import MalformedGeometry
from .model import Direction

_FIELD = re.compile(r"[0-9]+")


def _parse_fields(text: str, separators: str) -> List[int]:
    fields = re.split(separators, text.strip())
    numbers = []
    for value in fields:
        if not _FIELD.fullmatch(value):
            raise MalformedGeometry(text, f"{value!r} is not a non-negative integer")
        numbers.append(int(value))
    if len(numbers) < 4:
        raise MalformedGeometry(text, f"expected 4 fields, got {len(numbers)}")
    return numbers


@dataclass(frozen=True)
class Geometry:
    """Rectangle in screen coordinates."""

    width: int
    height: int
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> "Geometry":
        """Parse a herbstluftwm geometry string such as "800x600+0+0".

        Raises:
            MalformedGeometry: if fewer than four integer fields are present
        """
        width, height, x, y = _parse_fields(text, r"[x+]")[:4]
        return cls(width=width, height=height, x=x, y=y)

    @classmethod
    def from_rect(cls, text: str) -> "Geometry":
        """Parse `monitor_rect` output, which is "X Y W H"."""
        x, y, width, height = _parse_fields(text, r"\s+")[:4]
        return cls(width=width, height=height, x=x, y=y)

    @property
    def right_edge(self) -> int:
        return self.x + self.width

    @property
    def left_edge(self) -> int:
        return self.x

    @property
    def top_edge(self) -> int:
        return self.y

    @property
    def bottom_edge(self) -> int:
        return self.y + self.height

    def child_can_move(self, child: "Geometry", direction: Direction) -> bool:
        """Check whether `child` is not yet flush with this rectangle's edge.

        Args:
            child: Rectangle contained in this one
            direction: Direction the child wants to move in

        Returns:
            True if the child has room left in `direction`
        """
        if direction is Direction.RIGHT:
            return self.right_edge > child.right_edge
        elif direction is Direction.LEFT:
            return self.left_edge < child.left_edge
        elif direction is Direction.UP:
            return self.top_edge < child.top_edge
        elif direction is Direction.DOWN:
            return self.bottom_edge > child.bottom_edge
        raise ValueError(f"Unknown direction: {direction!r}")

    def lies_beyond(self, other: "Geometry", direction: Direction) -> bool:
        """Check whether `other` lies entirely on the `direction` side of self."""
        if direction is Direction.RIGHT:
            return other.left_edge >= self.right_edge
        elif direction is Direction.LEFT:
            return other.right_edge <= self.left_edge
        elif direction is Direction.UP:
            return other.bottom_edge <= self.top_edge
        elif direction is Direction.DOWN:
            return other.top_edge >= self.bottom_edge
        raise ValueError(f"Unknown direction: {direction!r}")

    def __str__(self) -> str:
        return f"{self.width}x{self.height}+{self.x}+{self.y}"


def child_can_move(parent: Geometry, child: Geometry, direction: Direction) -> bool:
    """Module-level form of Geometry.child_can_move."""
    return parent.child_can_move(child, direction)
