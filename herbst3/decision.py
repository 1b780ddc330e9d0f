"""
Shift Decision Engine

Decides how the focused window reaches its neighbour in a direction:
move within the frame, split an ancestor first, or leave the monitor.
"""

from __future__ import annotations
from typing import Optional, Sequence

from .geometry import Geometry
from .model import (
    Direction,
    LayoutType,
    MoveAcrossMonitor,
    MoveWithinFrame,
    Split,
    SplitAction,
)


def movable_index(direction: Direction) -> int:
    """Child slot a frame must occupy to have a sibling in `direction`."""
    if direction in (Direction.RIGHT, Direction.DOWN):
        return 0
    elif direction in (Direction.LEFT, Direction.UP):
        return 1
    raise ValueError(f"Unknown direction: {direction!r}")


def target_layout(direction: Direction) -> LayoutType:
    """Split orientation that lays frames out along `direction`."""
    if direction in (Direction.RIGHT, Direction.LEFT):
        return LayoutType.HORIZONTAL
    elif direction in (Direction.UP, Direction.DOWN):
        return LayoutType.VERTICAL
    raise ValueError(f"Unknown direction: {direction!r}")


def can_move_within_frame(
    direction: Direction,
    client_count: int,
    client_index: int,
    frame_algorithm: LayoutType,
    frame_geometry: Optional[Geometry],
    client_geometry: Optional[Geometry],
) -> bool:
    """Check whether the focused client can move without leaving its frame.

    Args:
        direction: Direction of the shift
        client_count: Number of clients in the focused frame
        client_index: Index of the focused client within the frame
        frame_algorithm: Client algorithm of the focused frame
        frame_geometry: Geometry of the focused frame (unused for max frames)
        client_geometry: Geometry of the focused client

    Returns:
        True if a plain shift keeps the client inside the frame
    """
    if frame_algorithm is LayoutType.MAX:
        if direction is Direction.RIGHT:
            return client_index < client_count - 1
        elif direction is Direction.LEFT:
            return client_index > 0
        # a max frame has no vertical neighbours
        return False

    return frame_geometry.child_can_move(client_geometry, direction)


def find_split(
    direction: Direction,
    client_count: int,
    path: Sequence[int],
    layout_stack: Sequence[LayoutType],
) -> SplitAction:
    """Choose where, if anywhere, to split before shifting.

    Args:
        direction: Direction of the shift
        client_count: Number of clients in the focused frame
        path: Frame index of the focused frame, root first
        layout_stack: Layout type of every frame along `path`

    Returns:
        Split(prefix) to split the frame at `prefix` first, MoveWithinFrame
        if an ancestor split already has room in `direction`, or
        MoveAcrossMonitor if the window has to leave the monitor
    """
    if len(path) != len(layout_stack):
        raise ValueError(
            f"Frame index has {len(path)} levels but layout stack has "
            f"{len(layout_stack)}"
        )

    index = movable_index(direction)
    target = target_layout(direction)
    path = tuple(path)

    # the focused frame holds other clients, split the frame itself
    if client_count > 1:
        return Split(path)

    for e in reversed(range(len(path))):
        if path[e] == index and layout_stack[e] is target:
            return MoveWithinFrame()
        if layout_stack[e] is not target:
            return Split(path[:e])

    return MoveAcrossMonitor()
