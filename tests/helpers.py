"""Shared test utility functions for layout scheme tests."""

import sys
from pathlib import Path
from typing import Iterator

sys.path.insert(0, str(Path(__file__).parent.parent))

from sxp_layout import parse, parse_with_diagnostics, bind, resolve
from sxp_layout.ast_nodes import *


def parse_one(text: str) -> LayoutNode:
    """Parse text, assert it produced a root node, return it."""
    tree = parse(text)
    assert tree is not None, f"Expected a node from {text!r}, got None"
    return tree


def assert_node_type(node, expected_type, **field_checks):
    """Assert node type and optionally check field values."""
    assert isinstance(node, expected_type), \
        f"Expected {expected_type.__name__}, got {type(node).__name__}"
    for field, expected in field_checks.items():
        actual = getattr(node, field, None)
        assert actual == expected, \
            f"{field}: expected {expected!r}, got {actual!r}"


def assert_kinds(nodes, *expected_types):
    """Assert a node list has exactly the given types, in order."""
    actual = [type(n).__name__ for n in nodes]
    expected = [t.__name__ for t in expected_types]
    assert actual == expected, f"Expected {expected}, got {actual}"


def walk_tree(node) -> Iterator:
    """Depth-first traversal of all layout nodes."""
    if node is None:
        return
    yield node
    if isinstance(node, Container):
        for child in node.children:
            yield from walk_tree(child)


def bound_items(node) -> list:
    """Items of a bound tree in tree order."""
    return [n.item for n in walk_tree(node) if isinstance(n, ClientSlot)]


def collect_warnings(text: str) -> list:
    """Parse text and return only the warnings list."""
    _, warnings = parse_with_diagnostics(text)
    return warnings


def place(text, items, frame):
    """Parse, bind and resolve; return {item: (x, y, w, h)}."""
    placements = resolve(bind(parse(text), items), frame)
    return {item: tuple(rect) for item, rect in placements}


def tree_equal(a, b) -> bool:
    """Recursively compare two layout trees for structural equality.

    Ignores line/col position info.
    """
    if type(a) != type(b):
        return False
    if a is None:
        return True
    for cls in type(a).__mro__:
        for slot in getattr(cls, '__slots__', ()):
            if slot in ('line', 'col'):
                continue
            va = getattr(a, slot, None)
            vb = getattr(b, slot, None)
            if slot == 'children':
                if len(va) != len(vb):
                    return False
                if not all(tree_equal(x, y) for x, y in zip(va, vb)):
                    return False
            elif va != vb:
                return False
    return True


class FakeHost:
    """Stand-in for a window manager: live items, a workspace and a log of moves."""

    def __init__(self, items=(), frame=(0, 0, 1000, 600)):
        self.items = list(items)
        self.frame = frame
        self.calls = []

    def get_items(self):
        return self.items

    def get_frame(self):
        return self.frame

    def apply(self, item, x, y, w, h, flag):
        self.calls.append((item, x, y, w, h, flag))

    def geometry(self):
        return {item: (x, y, w, h) for item, x, y, w, h, _ in self.calls}
