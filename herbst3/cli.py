"""
Command Line Interface

    herbst3 shift {right,left,up,down} [--frame]
"""

from __future__ import annotations
import argparse
import sys
import time
from typing import List, Optional

from pubsub import pub

from . import __version__
from .config import Herbst3Config
from .errors import Herbst3Error
from .model import Direction
from .shift import ShiftOutcome, Shifter
from .transport import HerbstclientTransport, Transport


class Herbst3:
    """
    herbst3 application

    Wires configuration, transport and debug output together and runs
    one shift per invocation.
    """

    def __init__(
        self,
        config: Optional[Herbst3Config] = None,
        transport: Optional[Transport] = None,
    ):
        self.config = config or Herbst3Config()
        self.transport = transport or HerbstclientTransport(self.config)
        self.shifter = Shifter(self.transport, self.config)

        # Setup debug event logging if enabled
        if self.config.debug:
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}", file=sys.stderr)

    def shift(self, direction: Direction, frame_only: bool = False) -> ShiftOutcome:
        return self.shifter.shift(direction, frame_only)

    def close(self):
        """Stop logging bus events."""
        if pub.isSubscribed(self.debug_event_logger, pub.ALL_TOPICS):
            pub.unsubscribe(self.debug_event_logger, pub.ALL_TOPICS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="herbst3",
        description="Move windows across frames and monitors in herbstluftwm",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="print every event to stderr (also enabled by HERBST3_DEBUG)",
    )
    parser.add_argument(
        "--herbstclient",
        metavar="PATH",
        help="herbstclient binary to use (default: $HERBSTCLIENT or herbstclient)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    shift = subparsers.add_parser("shift", help="Shift focused window")
    shift.add_argument(
        "direction",
        choices=[direction.value for direction in Direction],
        help="direction to shift the focused window in",
    )
    shift.add_argument(
        "-f",
        "--frame",
        action="store_true",
        help="only move between frames, never within the focused frame",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    config = Herbst3Config()
    if args.debug is not None:
        config.debug = args.debug
    if args.herbstclient:
        config.herbstclient = args.herbstclient

    app = Herbst3(config)
    try:
        if args.command == "shift":
            app.shift(Direction.parse(args.direction), args.frame)
    except Herbst3Error as e:
        print(f"herbst3: error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        app.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
