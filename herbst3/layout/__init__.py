"""
Layout Tree

Parsing of herbstluftwm layout dumps and resolution of frame index paths.
"""

from .tree import LayoutClause, LayoutNode, NodeKind, split_node, clients_node
from .parser import LayoutParser, parse_layout
from .resolver import descend, resolve_layout_stack

__all__ = [
    # Tree model
    "LayoutClause",
    "LayoutNode",
    "NodeKind",
    "split_node",
    "clients_node",
    # Parsing
    "LayoutParser",
    "parse_layout",
    # Resolution
    "descend",
    "resolve_layout_stack",
]
