"""
Window Manager Transport

The Transport interface lists every query and command the shift logic
needs. HerbstclientTransport implements it by running `herbstclient`.
"""

from __future__ import annotations
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from pubsub import pub

from . import topics
from .config import Herbst3Config
from .errors import TransportError
from .geometry import Geometry
from .model import Direction, FrameIndex, format_index


class Transport(ABC):
    """Capability to query and command the window manager."""

    @abstractmethod
    def focused_frame_client_count(self) -> int:
        """Number of clients in the focused frame."""
        pass

    @abstractmethod
    def focused_client_index(self) -> int:
        """Index of the focused client within its frame."""
        pass

    @abstractmethod
    def focused_frame_index(self) -> FrameIndex:
        """Frame index bits of the focused frame, root first."""
        pass

    @abstractmethod
    def layout_dump(self) -> str:
        """Textual dump of the frame tree of the focused tag."""
        pass

    @abstractmethod
    def focused_frame_geometry(self) -> str:
        pass

    @abstractmethod
    def focused_client_geometry(self) -> str:
        pass

    @abstractmethod
    def focused_frame_algorithm(self) -> str:
        pass

    @abstractmethod
    def monitor_exists(self, direction: Direction) -> bool:
        """Whether another monitor lies in `direction` of the focused one."""
        pass

    @abstractmethod
    def create_split(self, index: FrameIndex, direction: Direction, ratio: float):
        """Split the frame at `index`, opening the new frame on `direction`."""
        pass

    @abstractmethod
    def shift_focused_window(self, direction: Direction, frame_only: bool):
        pass

    @abstractmethod
    def shift_focused_window_remove_frame(self, direction: Direction, frame_only: bool):
        """Shift the focused window and remove the frame it leaves behind."""
        pass


class HerbstclientTransport(Transport):
    """Transport that runs the herbstclient binary for every call."""

    def __init__(self, config: Optional[Herbst3Config] = None):
        """Initialize the transport.

        Args:
            config: Configuration with the binary path, timeout and
                attribute paths
        """
        self.config = config or Herbst3Config()

    def _run(self, args: List[str]) -> str:
        """Run herbstclient and return its decoded stdout.

        Raises:
            TransportError: if the binary cannot be run, times out, exits
                non-zero or prints something that is not UTF-8
        """
        command = [self.config.herbstclient] + args
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.config.timeout,
            )
        except subprocess.TimeoutExpired:
            raise TransportError(
                f"herbstclient timed out after {self.config.timeout}s", command
            ) from None
        except OSError as e:
            raise TransportError(f"Failed to run herbstclient: {e}", command) from e

        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        if result.returncode != 0:
            detail = f": {stderr}" if stderr else ""
            raise TransportError(
                f"herbstclient {' '.join(args)} failed with exit code "
                f"{result.returncode}{detail}",
                command,
                result.returncode,
                stderr,
            )

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransportError(
                f"herbstclient {' '.join(args)} returned invalid UTF-8: {e}", command
            ) from e

    def query(self, *args: str) -> str:
        """Run a query and return its output without the trailing newline."""
        output = self._run(list(args)).rstrip("\n")
        pub.sendMessage(topics.HC_QUERY, args=list(args), output=output)
        return output

    def command(self, *args: str):
        """Run a command, discarding its output."""
        pub.sendMessage(topics.HC_COMMAND, args=list(args))
        self._run(list(args))

    def get_attr(self, path: str) -> str:
        return self.query("get_attr", path)

    def _get_int(self, path: str) -> int:
        value = self.get_attr(path)
        try:
            return int(value)
        except ValueError:
            raise TransportError(
                f"Attribute {path} is not an integer: {value!r}"
            ) from None

    def focused_frame_client_count(self) -> int:
        return self._get_int(self.config.frame_client_count_attr)

    def focused_client_index(self) -> int:
        return self._get_int(self.config.frame_selection_attr)

    def focused_frame_index(self) -> FrameIndex:
        value = self.get_attr(self.config.frame_index_attr).strip()
        if any(bit not in "01" for bit in value):
            raise TransportError(f"Invalid frame index: {value!r}")
        return tuple(int(bit) for bit in value)

    def layout_dump(self) -> str:
        return self.query("dump")

    def focused_frame_geometry(self) -> str:
        return self.get_attr(self.config.frame_geometry_attr)

    def focused_client_geometry(self) -> str:
        return self.get_attr(self.config.client_geometry_attr)

    def focused_frame_algorithm(self) -> str:
        return self.get_attr(self.config.frame_algorithm_attr)

    def monitor_exists(self, direction: Direction) -> bool:
        count = self._get_int(self.config.monitor_count_attr)
        focus = self._get_int(self.config.monitor_focus_attr)
        rects = [
            Geometry.from_rect(self.query("monitor_rect", str(i))) for i in range(count)
        ]
        if not 0 <= focus < len(rects):
            raise TransportError(f"Focused monitor {focus} out of range ({count})")

        focused = rects[focus]
        return any(
            focused.lies_beyond(rect, direction)
            for i, rect in enumerate(rects)
            if i != focus
        )

    def create_split(self, index: FrameIndex, direction: Direction, ratio: float):
        self.command("split", direction.split_alignment, str(ratio), format_index(index))

    def _shift_args(self, direction: Direction, frame_only: bool) -> List[str]:
        args = ["shift"]
        if frame_only:
            args.append("-e")
        args.append(direction.value)
        return args

    def shift_focused_window(self, direction: Direction, frame_only: bool):
        self.command(*self._shift_args(direction, frame_only))

    def shift_focused_window_remove_frame(self, direction: Direction, frame_only: bool):
        winid = self.get_attr(self.config.client_winid_attr).strip()
        # `and` stops at the first failing command, so nothing is removed
        # unless the shift succeeded
        self.command(
            "and",
            ",", *self._shift_args(direction, frame_only),
            ",", "focus", "-e", direction.opposite.value,
            ",", "remove",
            ",", "jumpto", winid,
        )
