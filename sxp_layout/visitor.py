"""Visitor pattern for layout scheme nodes.

Provides ``LayoutVisitor`` with a ``visit_<NodeType>`` method for every node
class.  The default implementation of each method calls ``generic_visit``,
which recurses into a container's children.
"""

from . import ast_nodes as ast


class LayoutVisitor:
    """Base visitor with double-dispatch via ``LayoutNode.accept(visitor)``.

    Subclass and override ``visit_XXX`` methods for the node types you
    care about.  Unhandled nodes fall through to ``generic_visit``.
    """

    def generic_visit(self, node):
        """Default handler: recurse into child nodes."""
        if isinstance(node, ast.Container):
            for child in node.children:
                child.accept(self)

    # -- Containers --
    def visit_HorizontalForward(self, node):
        return self.generic_visit(node)

    def visit_HorizontalReverse(self, node):
        return self.generic_visit(node)

    def visit_VerticalForward(self, node):
        return self.generic_visit(node)

    def visit_VerticalReverse(self, node):
        return self.generic_visit(node)

    def visit_Monocle(self, node):
        return self.generic_visit(node)

    # -- Leaves --
    def visit_ClientSlot(self, node):
        return self.generic_visit(node)

    def visit_ClientCount(self, node):
        return self.generic_visit(node)

    def visit_ClientNth(self, node):
        return self.generic_visit(node)

    def visit_Rest(self, node):
        return self.generic_visit(node)


class WalkVisitor(LayoutVisitor):
    """Visitor that collects all visited nodes into a flat list, depth first."""

    def __init__(self):
        self.nodes = []

    def generic_visit(self, node):
        self.nodes.append(node)
        super().generic_visit(node)


def walk(node):
    """Return every node of the tree rooted at *node* in depth-first order."""
    if node is None:
        return []
    walker = WalkVisitor()
    node.accept(walker)
    return walker.nodes
