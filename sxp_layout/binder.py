"""Bind an ordered item queue onto the leaf slots of a scheme.

The binder never touches the scheme: every node it returns is a fresh copy,
and every leaf in the result is a ``ClientSlot`` carrying one item.
"""

from collections import deque

from . import ast_nodes as ast
from .visitor import LayoutVisitor


class Binder(LayoutVisitor):
    """Depth-first, left-to-right binder.

    Every ``visit_*`` method returns a list of bound nodes: leaves can
    expand to several slots (``max``, ``...``) or vanish when the queue
    runs dry.  ``queue`` holds whatever was not consumed.
    """

    def __init__(self, items=()):
        self.queue = deque(items)

    def bind(self, scheme):
        """Return the bound tree for *scheme*, or ``None`` if nothing bound."""
        if scheme is None:
            return None
        bound = scheme.accept(self)
        if not bound:
            return None
        if len(bound) == 1:
            return bound[0]
        # A bare multi-slot leaf at the root stacks its items.
        return ast.Monocle(children=bound, line=scheme.line, col=scheme.col)

    # -- Containers --
    def generic_visit(self, node):
        bound = node.clone()
        children = reversed(node.children) if node.reverse else node.children
        produced = []
        for child in children:
            if not self.queue:
                break
            produced.extend(child.accept(self))
        if node.reverse:
            produced.reverse()
        bound.children = produced
        return [bound]

    # -- Leaves --
    def visit_ClientSlot(self, node):
        if not self.queue:
            return []
        return [_slot(node, self.queue.popleft())]

    def visit_ClientCount(self, node):
        count = min(max(node.n, 0), len(self.queue))
        return [_slot(node, self.queue.popleft()) for _ in range(count)]

    def visit_ClientNth(self, node):
        if not 0 <= node.n < len(self.queue):
            return []
        item = self.queue[node.n]
        del self.queue[node.n]
        return [_slot(node, item)]

    def visit_Rest(self, node):
        slots = [_slot(node, item) for item in self.queue]
        self.queue.clear()
        return slots


def _slot(node, item):
    return ast.ClientSlot(item=item, weight=node.weight, floating=node.floating,
                          line=node.line, col=node.col)


def bind(scheme, items):
    """Bind a snapshot of *items* onto *scheme* and return the bound tree."""
    return Binder(items).bind(scheme)
