"""
herbst3 Configuration

Settings for talking to herbstluftwm. Defaults can be overridden from the
environment or from the command line.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() not in ("", "0", "false", "no", "off")


@dataclass
class Herbst3Config:
    """herbst3 configuration."""

    # Client binary used to reach the window manager
    herbstclient: str = field(
        default_factory=lambda: os.getenv("HERBSTCLIENT", "herbstclient")
    )

    # Seconds to wait for a single herbstclient call
    timeout: float = 2.0

    # Fraction used when a new split is created
    split_ratio: float = 0.5

    # Print every bus event to stderr
    debug: bool = field(default_factory=lambda: _env_flag("HERBST3_DEBUG"))

    # Attribute paths of the focused frame and client
    frame_client_count_attr: str = "tags.focus.tiling.focused_frame.client_count"
    frame_selection_attr: str = "tags.focus.tiling.focused_frame.selection"
    frame_index_attr: str = "tags.focus.tiling.focused_frame.index"
    frame_algorithm_attr: str = "tags.focus.tiling.focused_frame.algorithm"
    frame_geometry_attr: str = "tags.focus.tiling.focused_frame.content_geometry"
    client_geometry_attr: str = "clients.focus.content_geometry"
    client_winid_attr: str = "clients.focus.winid"
    monitor_count_attr: str = "monitors.count"
    monitor_focus_attr: str = "monitors.focus.index"

    def __post_init__(self):
        """Validate numeric settings."""
        if not 0 < self.split_ratio < 1:
            raise ValueError(
                f"Invalid split ratio: {self.split_ratio}. Use a value between 0 and 1"
            )
        if self.timeout <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout}. Use a positive value")
