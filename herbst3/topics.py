"""
Event Topics for herbst3

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Each topic's message data is fixed by a prototype listener when this
module is imported, so every publisher must send exactly those arguments.
"""

from pubsub import pub

# Shift lifecycle events
SHIFT_REQUESTED = "shift.requested"
"""Published when a shift starts. Params: direction, frame_only"""

SHIFT_LOCAL = "shift.local"
"""Published when the window can move inside its frame. Params: direction"""

SHIFT_DECIDED = "shift.decided"
"""Published once the split decision is made. Params: action"""

SPLIT_CREATED = "shift.split_created"
"""Published after a frame was split. Params: index, alignment, ratio"""

SHIFT_COMPLETED = "shift.completed"
"""Published after the final shift command. Params: direction, frame_only, remove_frame"""

# Layout events
LAYOUT_STACK_RESOLVED = "layout.stack_resolved"
"""Published when the layout stack above the focused frame is known. Params: index, stack"""

# Window manager traffic
HC_QUERY = "herbstclient.query"
"""Published for every answered query. Params: args, output"""

HC_COMMAND = "herbstclient.command"
"""Published for every command sent. Params: args"""


def _shift_requested(direction, frame_only):
    pass


def _shift_local(direction):
    pass


def _shift_decided(action):
    pass


def _split_created(index, alignment, ratio):
    pass


def _shift_completed(direction, frame_only, remove_frame):
    pass


def _layout_stack_resolved(index, stack):
    pass


def _hc_query(args, output):
    pass


def _hc_command(args):
    pass


def _define_topics():
    topic_mgr = pub.getDefaultTopicMgr()
    for name, prototype in [
        (SHIFT_REQUESTED, _shift_requested),
        (SHIFT_LOCAL, _shift_local),
        (SHIFT_DECIDED, _shift_decided),
        (SPLIT_CREATED, _split_created),
        (SHIFT_COMPLETED, _shift_completed),
        (LAYOUT_STACK_RESOLVED, _layout_stack_resolved),
        (HC_QUERY, _hc_query),
        (HC_COMMAND, _hc_command),
    ]:
        topic_mgr.getOrCreateTopic(name, prototype)


_define_topics()
