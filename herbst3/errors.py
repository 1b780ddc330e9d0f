"""
Error Types

Every failure herbst3 raises on purpose derives from Herbst3Error, so the
CLI can report it and exit non-zero.
"""

from __future__ import annotations
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Direction


class Herbst3Error(Exception):
    """Base class for herbst3 errors."""


class MalformedGeometry(Herbst3Error, ValueError):
    """A rectangle string does not match the WxH+X+Y format."""

    def __init__(self, text: str, reason: str = "expected WxH+X+Y"):
        self.text = text
        super().__init__(f"Malformed geometry {text!r}: {reason}")


class MalformedLayoutDump(Herbst3Error, ValueError):
    """The layout dump does not match the grammar or the requested path."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(f"Malformed layout dump: {message}")


class EmptyFrame(Herbst3Error):
    """The focused frame has no clients, there is nothing to shift."""

    def __init__(self):
        super().__init__("Focused frame is empty")


class NoMonitorInDirection(Herbst3Error):
    """A cross-monitor move is required but no monitor lies that way."""

    def __init__(self, direction: "Direction"):
        self.direction = direction
        super().__init__(f"No monitor in {direction.value} direction")


class TransportError(Herbst3Error):
    """A query or command sent to the window manager failed."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = list(command) if command is not None else None
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
