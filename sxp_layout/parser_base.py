"""Base class for the layout scheme parser: token stream helpers and numbers."""

import math
import re

from .tokens import TokenType, Token

TT = TokenType

# Leading numeric literal of a word, as read by atoi/atof.
_NUMBER_PREFIX = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def is_numeric(text):
    """True if *text* starts with a numeric literal."""
    return bool(_NUMBER_PREFIX.match(text))


def to_number(text, cast=float):
    """Convert the numeric prefix of *text* with *cast*, 0 when there is none.

    Returns ``(value, ok)``; ``ok`` is False when the prefix is missing or
    does not fit a finite number.
    """
    m = _NUMBER_PREFIX.match(text)
    if m is None:
        return cast(0), False
    value = float(m.group(0))
    if not math.isfinite(value):
        return cast(0), False
    return cast(value), True


class ParserBase:
    """Token stream management and shared utilities for the scheme parser."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.length = len(tokens)
        self.warnings = []

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------
    def _cur(self):
        if self.pos < self.length:
            return self.tokens[self.pos]
        return Token(TT.EOF, '', 0, 0)

    def _advance(self):
        tok = self._cur()
        if self.pos < self.length:
            self.pos += 1
        return tok

    def _at(self, tt):
        return self._cur().type == tt

    def _at_number(self):
        t = self._cur()
        return t.type == TT.WORD and is_numeric(t.value)

    def _loc(self, tok=None):
        t = tok or self._cur()
        return {'line': t.line, 'col': t.col}

    def _warn(self, tok, msg):
        self.warnings.append(f"L{tok.line}:{tok.col}: {msg}")

    # ------------------------------------------------------------------
    # Numeric arguments
    # ------------------------------------------------------------------
    def _number_arg(self, word, cast):
        """Consume one numeric word if present, else default to 0."""
        if not self._at_number():
            self._warn(self._cur(), f"Missing numeric argument for {word!r}, using 0")
            return cast(0)
        tok = self._advance()
        value, ok = to_number(tok.value, cast)
        if not ok:
            self._warn(tok, f"Invalid number {tok.value!r} for {word!r}, using 0")
        return value

    def _number_args(self, word, count, cast):
        """Consume up to *count* numeric words, padding missing ones with 0."""
        values = []
        while len(values) < count and self._at_number():
            tok = self._advance()
            value, ok = to_number(tok.value, cast)
            if not ok:
                self._warn(tok, f"Invalid number {tok.value!r} for {word!r}, using 0")
            values.append(value)
        if len(values) < count:
            self._warn(self._cur(),
                       f"{word!r} expects {count} numbers, got {len(values)}; "
                       f"padding with 0")
            values.extend([cast(0)] * (count - len(values)))
        return values
