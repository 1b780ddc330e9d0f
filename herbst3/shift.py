"""
Shift

Moves the focused window one step in a direction, splitting frames or
crossing monitors where needed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from pubsub import pub

from . import topics
from .config import Herbst3Config
from .decision import can_move_within_frame, find_split
from .errors import EmptyFrame, NoMonitorInDirection, TransportError
from .geometry import Geometry
from .layout import parse_layout, resolve_layout_stack
from .model import (
    Direction,
    LayoutType,
    MoveAcrossMonitor,
    MoveWithinFrame,
    Split,
    SplitAction,
)
from .transport import Transport


@dataclass
class ShiftOutcome:
    """What a shift did."""

    direction: Direction
    frame_only: bool
    # True if the window only moved inside its frame
    local: bool = False
    action: Optional[SplitAction] = None
    removed_frame: bool = False


class Shifter:
    """Runs one shift against a window manager transport.

    Every query and command goes through the transport in a fixed order;
    nothing is kept between calls to shift().
    """

    def __init__(self, transport: Transport, config: Optional[Herbst3Config] = None):
        """Initialize the shifter.

        Args:
            transport: Window manager transport
            config: Configuration (split ratio)
        """
        self.transport = transport
        self.config = config or Herbst3Config()

    def _frame_algorithm(self) -> LayoutType:
        value = self.transport.focused_frame_algorithm()
        try:
            return LayoutType.parse(value)
        except ValueError:
            raise TransportError(f"Unknown frame algorithm: {value!r}") from None

    def can_move_locally(
        self, direction: Direction, client_count: int, client_index: int
    ) -> bool:
        """Check whether the focused window can move inside its frame."""
        algorithm = self._frame_algorithm()
        if algorithm is LayoutType.MAX:
            # geometry is irrelevant for max frames
            return can_move_within_frame(
                direction, client_count, client_index, algorithm, None, None
            )

        frame = Geometry.parse(self.transport.focused_frame_geometry())
        client = Geometry.parse(self.transport.focused_client_geometry())
        return can_move_within_frame(
            direction, client_count, client_index, algorithm, frame, client
        )

    def decide(self, direction: Direction, client_count: int) -> SplitAction:
        """Query the frame tree and choose the split action."""
        index = self.transport.focused_frame_index()
        tree = parse_layout(self.transport.layout_dump())
        stack = resolve_layout_stack(tree, index)
        pub.sendMessage(topics.LAYOUT_STACK_RESOLVED, index=index, stack=stack)

        action = find_split(direction, client_count, index, stack)
        pub.sendMessage(topics.SHIFT_DECIDED, action=action)
        return action

    def shift(self, direction: Direction, frame_only: bool = False) -> ShiftOutcome:
        """Shift the focused window one step in `direction`.

        Args:
            direction: Direction to shift in
            frame_only: Move between frames only, never inside the frame

        Returns:
            ShiftOutcome describing the decision taken

        Raises:
            EmptyFrame: if the focused frame holds no client
            NoMonitorInDirection: if the window has to leave the monitor but
                there is no monitor in `direction`
            TransportError: if a query or command fails
            MalformedGeometry, MalformedLayoutDump: on unparsable answers
        """
        pub.sendMessage(topics.SHIFT_REQUESTED, direction=direction, frame_only=frame_only)
        outcome = ShiftOutcome(direction=direction, frame_only=frame_only)

        client_count = self.transport.focused_frame_client_count()
        if client_count == 0:
            raise EmptyFrame()

        client_index = self.transport.focused_client_index()

        if not frame_only and self.can_move_locally(direction, client_count, client_index):
            pub.sendMessage(topics.SHIFT_LOCAL, direction=direction)
            self.transport.shift_focused_window(direction, False)
            outcome.local = True
            return outcome

        action = self.decide(direction, client_count)
        outcome.action = action

        if isinstance(action, Split):
            self.transport.create_split(action.prefix, direction, self.config.split_ratio)
            pub.sendMessage(
                topics.SPLIT_CREATED,
                index=action.prefix,
                alignment=direction.split_alignment,
                ratio=self.config.split_ratio,
            )
        elif isinstance(action, MoveWithinFrame):
            pass
        elif isinstance(action, MoveAcrossMonitor):
            if not self.transport.monitor_exists(direction):
                raise NoMonitorInDirection(direction)
        else:
            raise ValueError(f"Unknown split action: {action!r}")

        if client_count <= 1:
            self.transport.shift_focused_window_remove_frame(direction, frame_only)
            outcome.removed_frame = True
        else:
            self.transport.shift_focused_window(direction, frame_only)

        pub.sendMessage(
            topics.SHIFT_COMPLETED,
            direction=direction,
            frame_only=frame_only,
            remove_frame=outcome.removed_frame,
        )
        return outcome
