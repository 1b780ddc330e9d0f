"""
Layout Stack Resolution

Walks a parsed layout tree along a frame index and collects the layout
type of every frame passed on the way down.
"""

from __future__ import annotations
from typing import List, Sequence

from ..errors import MalformedLayoutDump
from ..model import LayoutType, format_index
from .tree import LayoutNode


def descend(node: LayoutNode, bit: int, depth: int = 0) -> LayoutNode:
    """Return the child frame of `node` addressed by `bit`."""
    if bit not in (0, 1):
        raise MalformedLayoutDump(f"invalid index bit {bit!r} at depth {depth}")
    child = node.child(bit)
    if child is None:
        raise MalformedLayoutDump(
            f"frame at depth {depth} has no child {bit} "
            f"({len(node.children)} children)"
        )
    return child


def resolve_layout_stack(tree: LayoutNode, path: Sequence[int]) -> List[LayoutType]:
    """Collect the layout types of the frames along `path`.

    Args:
        tree: Root of the parsed layout dump
        path: Frame index bits, root first

    Returns:
        One layout type per index bit, root first

    Raises:
        MalformedLayoutDump: if a frame on the path has no layout clause or
            the path asks for a child that does not exist
    """
    stack: List[LayoutType] = []
    node = tree
    for depth, bit in enumerate(path):
        if node.layout_type is None:
            raise MalformedLayoutDump(
                f"missing layout info for frame {format_index(tuple(path[:depth]))!r}"
            )
        stack.append(node.layout_type)
        node = descend(node, bit, depth)
    return stack
