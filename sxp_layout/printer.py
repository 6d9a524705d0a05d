"""Scheme pretty-printer: converts layout nodes back to scheme text.

Used for round-trip testing: parse -> print -> re-parse -> compare.
The root is printed without parentheses since the top level is an implicit
group; every other node gets its own group.
"""

from . import ast_nodes as ast
from .keywords import _HEAD_FOR_KIND


class SchemePrinter:
    """Emit scheme text from layout nodes."""

    def emit(self, node):
        if node is None:
            return ''
        return self._emit_node(node)

    def _emit_node(self, node):
        parts = [_HEAD_FOR_KIND[type(node)]]
        if isinstance(node, (ast.ClientCount, ast.ClientNth)):
            parts.append(str(node.n))
        parts.extend(self._emit_params(node))
        if isinstance(node, ast.Container):
            parts.extend(f"({self._emit_node(child)})" for child in node.children)
        return ' '.join(parts)

    def _emit_params(self, node):
        if node.weight:
            yield 'w:'
            yield _fmt_number(node.weight)
        if node.floating is not None:
            yield 'f:'
            yield from (_fmt_number(v) for v in node.floating)


def _fmt_number(value):
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)
