"""Resolve a bound tree into one rectangle per item.

Frames are split in integer pixels along the container axis.  A child's
share is ``trunc(weight * unit / average_weight)`` with
``unit = trunc(extent / tiled_children)``, which equals
``weight / total_weight * extent`` up to truncation.  Pixels lost to
truncation stay unused at the far edge of the frame.  Weights too large to
multiply by the unit are rescaled against the largest sibling first.
"""

import math
from collections import namedtuple

from .ast_nodes import Rect
from .visitor import LayoutVisitor


Placement = namedtuple('Placement', ('item', 'rect'))


class GeometryResolver(LayoutVisitor):
    """Walk a bound tree frame-down and collect a ``Placement`` per slot."""

    def __init__(self):
        self.placements = []
        self.frame = None

    def resolve(self, node, frame):
        """Resolve *node* inside *frame*, honouring its floating override."""
        if node.floating is not None:
            frame = Rect(*node.floating)
        saved = self.frame
        self.frame = Rect(*frame)
        try:
            node.accept(self)
        finally:
            self.frame = saved

    # -- Containers --
    def visit_HorizontalForward(self, node):
        self._split(node, 'x')

    def visit_HorizontalReverse(self, node):
        self._split(node, 'x')

    def visit_VerticalForward(self, node):
        self._split(node, 'y')

    def visit_VerticalReverse(self, node):
        self._split(node, 'y')

    def visit_Monocle(self, node):
        frame = self.frame
        for child in node.children:
            self.resolve(child, frame)

    def _split(self, node, axis):
        frame = self.frame
        weights = [c.effective_weight for c in node.children if c.floating is None]
        if weights:
            extent = frame.w if axis == 'x' else frame.h
            unit = int(extent / len(weights))
            weights = _scaled(weights, unit)
            average = sum(weights) / len(weights)
        weights = iter(weights)
        cursor = frame.x if axis == 'x' else frame.y

        for child in node.children:
            if child.floating is not None:
                self.resolve(child, frame)
                continue
            share = int(next(weights) * unit / average)
            if axis == 'x':
                child_frame = frame._replace(x=cursor, w=share)
            else:
                child_frame = frame._replace(y=cursor, h=share)
            self.resolve(child, child_frame)
            cursor += share

    # -- Leaves --
    def visit_ClientSlot(self, node):
        self.placements.append(Placement(node.item, self.frame))

    def generic_visit(self, node):
        # Unbound leaves (max, nth, ...) carry no item and place nothing.
        pass


def _scaled(weights, unit):
    """Rescale *weights* to at most 1.0 when their sum times *unit* overflows."""
    if math.isfinite(sum(weights) * unit):
        return weights
    top = max(weights)
    return [w / top for w in weights]


def resolve(bound, frame):
    """Return the placements for a bound tree inside *frame*, in tree order."""
    resolver = GeometryResolver()
    if bound is not None:
        resolver.resolve(bound, frame)
    return resolver.placements
