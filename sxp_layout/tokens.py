"""Token types and Token class for the layout scheme lexer."""

from enum import Enum, auto


class TokenType(Enum):
    WORD = auto()

    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )

    # Special
    EOF = auto()


class Token:
    __slots__ = ('type', 'value', 'line', 'col')

    def __init__(self, type: TokenType, value, line: int, col: int):
        self.type = type
        self.value = value
        self.line = line
        self.col = col

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, L{self.line}:{self.col})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))
