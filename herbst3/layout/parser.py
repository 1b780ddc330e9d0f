"""
Layout Dump Parser

Recursive-descent parser for the output of `herbstclient dump`:

    node        := "(" (type | id | layout | node)+ ")"
    type        := "split" | "clients"
    layout      := layout_type ":" (layout_size ":"*)+
    layout_type := "vertical" | "horizontal" | "max" | "grid"
    layout_size := (digit | ".")+
    id          := "0x" hex_digit+

Alternatives are tried in this order. Whitespace between elements is
insignificant.
"""

from __future__ import annotations
import re
from typing import List, Optional

from ..errors import MalformedLayoutDump
from ..model import LayoutType
from .tree import LayoutClause, LayoutNode, NodeKind

_WHITESPACE = re.compile(r"\s*")
_TYPE = re.compile(r"split|clients")
_ID = re.compile(r"0x[0-9A-Fa-f]+")
_LAYOUT = re.compile(r"(vertical|horizontal|max|grid):([0-9.]+(?::+[0-9.]+)*:*)")


class LayoutParser:
    """Parser over one dump string, tracking the current offset."""

    def __init__(self, text: str):
        self.text = text
        self.offset = 0

    def parse(self) -> LayoutNode:
        """Parse the whole text as exactly one root node."""
        self._skip_whitespace()
        if self.offset >= len(self.text):
            raise MalformedLayoutDump("no root node", self.offset)
        root = self.node()
        self._skip_whitespace()
        if self.offset != len(self.text):
            raise MalformedLayoutDump("unexpected text after root node", self.offset)
        return root

    def node(self) -> LayoutNode:
        start = self.offset
        self._expect("(")

        kind: Optional[NodeKind] = None
        layout: Optional[LayoutClause] = None
        window_ids: List[str] = []
        children: List[LayoutNode] = []
        elements = 0

        while True:
            self._skip_whitespace()
            if self.offset >= len(self.text):
                raise MalformedLayoutDump("unterminated node", start)
            if self.text[self.offset] == ")":
                break

            position = self.offset
            match = _TYPE.match(self.text, self.offset)
            if match:
                if kind is not None:
                    raise MalformedLayoutDump("duplicate type tag", position)
                kind = NodeKind(match.group())
                self.offset = match.end()
            elif _ID.match(self.text, self.offset):
                window_ids.append(self.window_id())
            elif _LAYOUT.match(self.text, self.offset):
                if layout is not None:
                    raise MalformedLayoutDump("duplicate layout clause", position)
                layout = self.layout()
            elif self.text[self.offset] == "(":
                children.append(self.node())
            else:
                raise MalformedLayoutDump(
                    f"unexpected {self.text[self.offset]!r}", position
                )
            elements += 1

        if elements == 0:
            raise MalformedLayoutDump("empty node", start)
        self.offset += 1

        return LayoutNode(
            kind=kind,
            layout=layout,
            window_ids=tuple(window_ids),
            children=tuple(children),
        )

    def layout(self) -> LayoutClause:
        match = _LAYOUT.match(self.text, self.offset)
        if not match:
            raise MalformedLayoutDump("expected layout clause", self.offset)
        self.offset = match.end()
        return LayoutClause(
            layout_type=LayoutType.parse(match.group(1)),
            sizes=tuple(match.group(2).split(":")),
        )

    def window_id(self) -> str:
        match = _ID.match(self.text, self.offset)
        if not match:
            raise MalformedLayoutDump("expected window id", self.offset)
        self.offset = match.end()
        return match.group()

    def _expect(self, char: str):
        if self.offset >= len(self.text) or self.text[self.offset] != char:
            raise MalformedLayoutDump(f"expected {char!r}", self.offset)
        self.offset += 1

    def _skip_whitespace(self):
        self.offset = _WHITESPACE.match(self.text, self.offset).end()


def parse_layout(text: str) -> LayoutNode:
    """Parse a layout dump into a LayoutNode tree.

    Raises:
        MalformedLayoutDump: on any grammar mismatch or truncated input
    """
    return LayoutParser(text).parse()
