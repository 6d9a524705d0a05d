"""sxp_layout - S-expression tiling layouts: parse a scheme, bind items, resolve geometry."""

from .lexer import Lexer, tokenize, DEFAULT_MAX_WORD_LENGTH
from .parser import Parser, parse_with_diagnostics
from .binder import Binder, bind
from .geometry import GeometryResolver, Placement, resolve
from .printer import SchemePrinter
from .engine import LayoutEngine, LayoutError, layout_pass
from .ast_nodes import Rect
from . import ast_nodes as ast


def parse(text, max_word_length=DEFAULT_MAX_WORD_LENGTH):
    """Parse scheme text and return the root node, or ``None`` if empty."""
    tree, _ = parse_with_diagnostics(text, max_word_length=max_word_length)
    return tree


def format_scheme(node):
    """Return the canonical scheme text for *node*."""
    return SchemePrinter().emit(node)


__all__ = [
    'Lexer', 'Parser', 'Binder', 'GeometryResolver', 'SchemePrinter',
    'LayoutEngine', 'LayoutError', 'Placement', 'Rect', 'ast',
    'DEFAULT_MAX_WORD_LENGTH',
    'tokenize', 'parse', 'parse_with_diagnostics', 'format_scheme',
    'bind', 'resolve', 'layout_pass',
]
