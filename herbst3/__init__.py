"""
herbst3

Shift windows across frames, splits and monitors in herbstluftwm.

herbstluftwm's own `shift` command stops at frame borders it cannot cross.
herbst3 reads the frame tree from `herbstclient dump`, decides whether the
focused window can move inside its frame, needs a new split first, or has
to leave the monitor, and then issues the matching commands.

Example usage:
    from herbst3 import Direction, HerbstclientTransport, Shifter

    Shifter(HerbstclientTransport()).shift(Direction.RIGHT)

Or from the command line:
    herbst3 shift right
"""

__version__ = "0.1.0"
__author__ = "herbst3 developers"

from .errors import (
    Herbst3Error,
    MalformedGeometry,
    MalformedLayoutDump,
    EmptyFrame,
    NoMonitorInDirection,
    TransportError,
)

from .model import (
    Direction,
    LayoutType,
    SplitAction,
    Split,
    MoveWithinFrame,
    MoveAcrossMonitor,
)

from .geometry import Geometry, child_can_move

from .layout import LayoutNode, parse_layout, resolve_layout_stack

from .decision import can_move_within_frame, find_split

from .config import Herbst3Config

from .transport import Transport, HerbstclientTransport

from .shift import Shifter, ShiftOutcome

from . import topics

__all__ = [
    # Version
    "__version__",
    # Errors
    "Herbst3Error",
    "MalformedGeometry",
    "MalformedLayoutDump",
    "EmptyFrame",
    "NoMonitorInDirection",
    "TransportError",
    # Types
    "Direction",
    "LayoutType",
    "SplitAction",
    "Split",
    "MoveWithinFrame",
    "MoveAcrossMonitor",
    # Geometry
    "Geometry",
    "child_can_move",
    # Layout
    "LayoutNode",
    "parse_layout",
    "resolve_layout_stack",
    # Decision
    "can_move_within_frame",
    "find_split",
    # Configuration
    "Herbst3Config",
    # Transport
    "Transport",
    "HerbstclientTransport",
    # Shift
    "Shifter",
    "ShiftOutcome",
    # Event topics
    "topics",
]
