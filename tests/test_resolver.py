"""
Unit tests for layout stack resolution.
"""

import pytest
from herbst3.errors import MalformedLayoutDump
from herbst3.layout import parse_layout, resolve_layout_stack
from herbst3.model import LayoutType

NESTED = (
    "(split horizontal:0.5:1 "
    "(clients vertical:0 0x1) "
    "(split vertical:0.5:0 "
    "(clients max:0 0x2 0x3) "
    "(clients grid:0 0x4)))"
)


@pytest.mark.unit
class TestResolveLayoutStack:
    """Test walking the tree along a frame index."""

    def test_empty_path(self, two_column_dump):
        """The root frame has no ancestors."""
        assert resolve_layout_stack(parse_layout(two_column_dump), []) == []

    def test_empty_path_on_single_frame(self):
        """An empty path never looks at the root's layout."""
        assert resolve_layout_stack(parse_layout("(clients 0x1)"), ()) == []

    def test_first_level(self, two_column_dump):
        """One bit records the root split's orientation."""
        tree = parse_layout(two_column_dump)

        assert resolve_layout_stack(tree, [0]) == [LayoutType.HORIZONTAL]
        assert resolve_layout_stack(tree, [1]) == [LayoutType.HORIZONTAL]

    def test_second_level(self):
        """Each bit records the layout of the frame it leaves."""
        tree = parse_layout(NESTED)

        assert resolve_layout_stack(tree, (1, 0)) == [
            LayoutType.HORIZONTAL,
            LayoutType.VERTICAL,
        ]
        assert resolve_layout_stack(tree, (1, 1)) == [
            LayoutType.HORIZONTAL,
            LayoutType.VERTICAL,
        ]

    def test_stack_length_matches_path(self):
        """Output always has one entry per bit."""
        tree = parse_layout(NESTED)
        for path in [(), (0,), (1,), (1, 0), (1, 1)]:
            assert len(resolve_layout_stack(tree, path)) == len(path)

    def test_path_too_deep(self):
        """Descending below a leaf is an error."""
        tree = parse_layout(NESTED)

        with pytest.raises(MalformedLayoutDump):
            resolve_layout_stack(tree, (0, 0))

    def test_path_too_deep_from_leaf_root(self):
        """A single frame has no children to descend into."""
        with pytest.raises(MalformedLayoutDump):
            resolve_layout_stack(parse_layout("(clients vertical:0 0x1)"), [1])

    def test_missing_second_child(self):
        """Bit 1 needs a second child frame."""
        tree = parse_layout("(split horizontal:0.5:0 (clients vertical:0))")

        assert resolve_layout_stack(tree, [0]) == [LayoutType.HORIZONTAL]
        with pytest.raises(MalformedLayoutDump):
            resolve_layout_stack(tree, [1])

    def test_missing_layout_info(self):
        """Every frame passed on the path needs a layout clause."""
        tree = parse_layout("(split (clients vertical:0) (clients vertical:0))")

        with pytest.raises(MalformedLayoutDump, match="missing layout info"):
            resolve_layout_stack(tree, [0])

    def test_invalid_bit(self, two_column_dump):
        """Index bits are 0 or 1."""
        with pytest.raises(MalformedLayoutDump):
            resolve_layout_stack(parse_layout(two_column_dump), [2])

    def test_window_ids_are_not_children(self):
        """Only nested frames count as children, not ids or tags."""
        tree = parse_layout(
            "(split 0xff horizontal:0.5:0 (clients max:0) (clients grid:0))"
        )

        assert resolve_layout_stack(tree, [1]) == [LayoutType.HORIZONTAL]
        assert tree.children[1].layout_type == LayoutType.GRID
