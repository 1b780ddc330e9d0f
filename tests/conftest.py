"""
Shared pytest fixtures for herbst3 tests.
"""

import pytest
from pubsub import pub

from herbst3.transport import Transport


@pytest.fixture
def fake_transport():
    """Factory fixture for in-memory transports that record their calls."""

    class FakeTransport(Transport):
        def __init__(
            self,
            client_count=1,
            client_index=0,
            index=(),
            dump="(clients vertical:0 0x1)",
            frame_geometry="800x600+0+0",
            client_geometry="800x600+0+0",
            algorithm="vertical",
            monitors=(),
        ):
            self.client_count = client_count
            self.client_index = client_index
            self.index = tuple(index)
            self.dump = dump
            self.frame_geometry = frame_geometry
            self.client_geometry = client_geometry
            self.algorithm = algorithm
            # directions in which another monitor exists
            self.monitors = set(monitors)
            self.calls = []

        def focused_frame_client_count(self):
            self.calls.append(("client_count",))
            return self.client_count

        def focused_client_index(self):
            self.calls.append(("client_index",))
            return self.client_index

        def focused_frame_index(self):
            self.calls.append(("frame_index",))
            return self.index

        def layout_dump(self):
            self.calls.append(("dump",))
            return self.dump

        def focused_frame_geometry(self):
            self.calls.append(("frame_geometry",))
            return self.frame_geometry

        def focused_client_geometry(self):
            self.calls.append(("client_geometry",))
            return self.client_geometry

        def focused_frame_algorithm(self):
            self.calls.append(("algorithm",))
            return self.algorithm

        def monitor_exists(self, direction):
            self.calls.append(("monitor_exists", direction))
            return direction in self.monitors

        def create_split(self, index, direction, ratio):
            self.calls.append(("create_split", tuple(index), direction, ratio))

        def shift_focused_window(self, direction, frame_only):
            self.calls.append(("shift", direction, frame_only))

        def shift_focused_window_remove_frame(self, direction, frame_only):
            self.calls.append(("shift_remove_frame", direction, frame_only))

        def commands(self):
            """Calls that change the window manager state."""
            return [
                call
                for call in self.calls
                if call[0] in ("create_split", "shift", "shift_remove_frame")
            ]

    return FakeTransport


@pytest.fixture
def event_recorder():
    """Record every event published on the bus during a test."""

    class EventRecorder:
        def __init__(self):
            self.events = []

        def record(self, topic=pub.AUTO_TOPIC, **kwargs):
            self.events.append((topic.getName(), kwargs))

        def topics(self):
            return [name for name, _ in self.events]

        def last(self, name):
            for topic_name, data in reversed(self.events):
                if topic_name == name:
                    return data
            return None

    recorder = EventRecorder()
    pub.subscribe(recorder.record, pub.ALL_TOPICS)
    yield recorder
    pub.unsubscribe(recorder.record, pub.ALL_TOPICS)


@pytest.fixture
def two_column_dump():
    """Horizontal split with one client on each side, right frame focused."""
    return (
        "(split horizontal:0.500000:1 "
        "(clients vertical:0 0x1400004) "
        "(clients vertical:0 0x1600004))"
    )
