"""
Layout Tree

In-memory form of a herbstluftwm layout dump. A node is either a split
with two child frames or a "clients" container holding window ids.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..model import LayoutType


class NodeKind(Enum):
    """Type tag of a frame in the dump."""

    SPLIT = "split"
    CLIENTS = "clients"


@dataclass(frozen=True)
class LayoutClause:
    """The `<type>:<size>:...` clause of a frame.

    For splits the sizes are fraction and selection, for client containers
    just the selection. Sizes are kept verbatim so a tree dumps back to the
    text it was parsed from.
    """

    layout_type: LayoutType
    sizes: Tuple[str, ...] = ()

    def dump(self) -> str:
        return ":".join((self.layout_type.value,) + self.sizes)


@dataclass(frozen=True)
class LayoutNode:
    """One frame of the layout tree."""

    kind: Optional[NodeKind] = None
    layout: Optional[LayoutClause] = None
    window_ids: Tuple[str, ...] = ()
    children: Tuple["LayoutNode", ...] = field(default_factory=tuple)

    @property
    def layout_type(self) -> Optional[LayoutType]:
        return self.layout.layout_type if self.layout else None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def client_count(self) -> int:
        return len(self.window_ids)

    def child(self, bit: int) -> Optional["LayoutNode"]:
        """Child frame addressed by an index bit, or None if absent."""
        if bit not in (0, 1) or bit >= len(self.children):
            return None
        return self.children[bit]

    def dump(self) -> str:
        """Serialize in the format of herbstclient's `dump` command."""
        parts = []
        if self.kind is not None:
            parts.append(self.kind.value)
        if self.layout is not None:
            parts.append(self.layout.dump())
        parts.extend(self.window_ids)
        parts.extend(child.dump() for child in self.children)
        return "(" + " ".join(parts) + ")"

    def __str__(self) -> str:
        return self.dump()


def split_node(
    layout_type: LayoutType,
    first: LayoutNode,
    second: LayoutNode,
    fraction: str = "0.5",
    selection: int = 0,
) -> LayoutNode:
    """Build a split frame."""
    return LayoutNode(
        kind=NodeKind.SPLIT,
        layout=LayoutClause(layout_type, (fraction, str(selection))),
        children=(first, second),
    )


def clients_node(
    algorithm: LayoutType = LayoutType.VERTICAL,
    window_ids: Tuple[str, ...] = (),
    selection: int = 0,
) -> LayoutNode:
    """Build a client container frame."""
    return LayoutNode(
        kind=NodeKind.CLIENTS,
        layout=LayoutClause(algorithm, (str(selection),)),
        window_ids=tuple(window_ids),
    )
