"""Recursive descent parser for layout scheme S-expressions.

Grammar (informal)::

    level     := element* [')']
    element   := '(' level | head | parameter | leaf
    head      := 'h' | 'hr' | 'v' | 'vr' | 'm'          container
               | 'c' | '...'                          leaf
               | 'nth' NUMBER | 'max' NUMBER          indexed leaf
    parameter := 'w:' NUMBER | 'f:' NUMBER{0,4}

The first head at a level fixes the node kind for that level.  Later
elements become the node's children (containers) or are dropped (leaves).
The top level is an implicit group, so ``h c (v ...)`` needs no outer
parentheses.  Nothing here raises: problems are recorded in ``warnings``
and the parser keeps going.
"""

from .tokens import TokenType
from .lexer import Lexer, DEFAULT_MAX_WORD_LENGTH
from .parser_base import ParserBase
from .ast_nodes import Rect
from .keywords import (
    _CONTAINER_HEADS, _LEAF_HEADS, _INDEXED_HEADS, _PARAMETERS, _PARAMETER_ARITY,
)

TT = TokenType


class Parser(ParserBase):
    """Layout scheme parser using recursive descent."""

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------
    def parse(self):
        """Return the root node of the scheme, or ``None`` for an empty one."""
        return self._parse_level(top_level=True)

    def _parse_level(self, top_level=False, opened_by=None):
        """Parse one nesting level up to its closing paren or end of input."""
        head = None
        children = []

        while True:
            t = self._cur()

            if t.type == TT.EOF:
                if opened_by is not None:
                    self._warn(opened_by, "Unclosed '(' at end of input")
                break

            if t.type == TT.RPAREN:
                self._advance()
                if top_level:
                    self._warn(t, "Stray ')' at top level")
                    if not self._at(TT.EOF):
                        self._warn(self._cur(), "Ignoring input after stray ')'")
                break

            if t.type == TT.LPAREN:
                self._advance()
                node = self._parse_level(opened_by=t)
                if node is None:
                    continue
                if head is None:
                    head = node
                else:
                    children.append(node)
                continue

            node = self._parse_word(head)
            if node is not None:
                if head is None:
                    head = node
                else:
                    children.append(node)

        return self._finish_level(head, children)

    def _finish_level(self, head, children):
        if head is None:
            return None
        if head.is_container:
            head.children.extend(children)
        elif children:
            self._warn_at_node(
                head,
                f"{type(head).__name__} cannot own children; "
                f"dropped {len(children)}")
        return head

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------
    def _parse_word(self, head):
        """Handle one word token.

        Returns a new node to place at this level, or ``None`` when the word
        was a parameter, redundant, or unknown.
        """
        t = self._advance()
        word = t.value
        loc = self._loc(t)

        if word in _PARAMETERS:
            if head is None:
                self._warn(t, f"Parameter {word!r} before any node, ignored")
                return None
            self._parse_parameter(head, word, _PARAMETERS[word])
            return None

        if word in _CONTAINER_HEADS:
            if head is not None:
                self._warn(t, f"Container head {word!r} after "
                              f"{type(head).__name__}, ignored")
                return None
            return _CONTAINER_HEADS[word](**loc)

        if word in _LEAF_HEADS:
            return _LEAF_HEADS[word](**loc)

        if word in _INDEXED_HEADS:
            if head is not None:
                self._warn(t, f"{word!r} must open its own group, ignored")
                return None
            n = self._number_arg(word, int)
            return _INDEXED_HEADS[word](n=n, **loc)

        self._warn(t, f"Skipped unknown token {word!r}")
        return None

    def _parse_parameter(self, node, word, target):
        if target == 'weight':
            weight = self._number_arg(word, float)
            if weight < 0:
                self._warn_at_node(node, f"Negative weight {weight} clamped to 0")
                weight = 0.0
            node.weight = weight
        elif target == 'floating':
            node.floating = Rect(*self._number_args(word, _PARAMETER_ARITY[target], int))

    def _warn_at_node(self, node, msg):
        self.warnings.append(f"L{node.line}:{node.col}: {msg}")


def parse_with_diagnostics(text, max_word_length=DEFAULT_MAX_WORD_LENGTH):
    """Parse scheme text and return ``(root, warnings)``.

    ``warnings`` lists what the lexer truncated and what the parser skipped
    or defaulted.  Parsing itself never fails.
    """
    lexer = Lexer(text, max_word_length=max_word_length)
    parser = Parser(lexer.tokens())
    tree = parser.parse()
    return tree, lexer.warnings + parser.warnings
