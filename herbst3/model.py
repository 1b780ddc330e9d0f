"""
Core Types

Directions, frame layout types and the actions the decision engine can
choose.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import MalformedLayoutDump

FrameIndex = Tuple[int, ...]


class Direction(Enum):
    """Compass direction of a shift, named as herbstluftwm names them."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid direction: {text!r}. Use one of: right, left, up, down"
            ) from None

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def split_alignment(self) -> str:
        """Alignment for `split` that opens the new frame on this side."""
        if self is Direction.RIGHT:
            return "right"
        elif self is Direction.LEFT:
            return "left"
        elif self is Direction.UP:
            return "top"
        elif self is Direction.DOWN:
            return "bottom"
        raise ValueError(f"Unknown direction: {self!r}")

    def __str__(self) -> str:
        return self.value


_OPPOSITES = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class LayoutType(Enum):
    """Split orientation or client algorithm of a frame."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    MAX = "max"
    GRID = "grid"

    @classmethod
    def parse(cls, text: str) -> "LayoutType":
        try:
            return cls(text.strip())
        except ValueError:
            raise MalformedLayoutDump(f"unknown layout type {text!r}") from None

    def __str__(self) -> str:
        return self.value


class SplitAction:
    """Base class of the decisions returned by find_split."""


@dataclass(frozen=True)
class Split(SplitAction):
    """Split the frame at `prefix` before shifting."""

    prefix: FrameIndex = ()


@dataclass(frozen=True)
class MoveWithinFrame(SplitAction):
    """An ancestor split already has room on the far side."""


@dataclass(frozen=True)
class MoveAcrossMonitor(SplitAction):
    """The window has to leave the current monitor."""


def format_index(index: FrameIndex) -> str:
    """Render a frame index the way herbstluftwm prints it ("" for root)."""
    return "".join(str(bit) for bit in index)
