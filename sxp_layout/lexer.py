"""Lexer for layout scheme text. Converts raw text into a token stream."""

from .tokens import TokenType, Token

TT = TokenType

# Longest word kept verbatim; longer words are truncated.
DEFAULT_MAX_WORD_LENGTH = 32

_SPACE = (' ', '\t', '\n', '\r')
_PARENS = ('(', ')')


class Lexer:
    """Tokenizer for layout scheme text.

    Whitespace separates words and is dropped. ``(`` and ``)`` are always
    single-character tokens and split any word they touch. A NUL character
    ends the input, so C-style terminated buffers tokenize the same way.
    """

    def __init__(self, text: str, max_word_length=DEFAULT_MAX_WORD_LENGTH):
        self.text = text or ''
        self.max_word_length = max_word_length
        self.pos = 0
        self.line = 1
        self.col = 1
        self.length = len(self.text)
        self.warnings = []
        self._tokens = []
        self._tokenize()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def tokens(self):
        return self._tokens

    # ------------------------------------------------------------------
    # Core scanning helpers
    # ------------------------------------------------------------------
    def _ch(self):
        if self.pos < self.length:
            return self.text[self.pos]
        return '\0'

    def _advance(self):
        ch = self.text[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _emit(self, tt, value):
        self._tokens.append(Token(tt, value, self._tok_line, self._tok_col))

    def _mark(self):
        self._tok_line = self.line
        self._tok_col = self.col

    # ------------------------------------------------------------------
    # Main tokenize loop
    # ------------------------------------------------------------------
    def _tokenize(self):
        while True:
            self._mark()
            ch = self._ch()

            if ch == '\0':
                break

            if ch in _SPACE:
                self._advance()
                continue

            if ch == '(':
                self._advance()
                self._emit(TT.LPAREN, '(')
                continue

            if ch == ')':
                self._advance()
                self._emit(TT.RPAREN, ')')
                continue

            self._scan_word()

        self._mark()
        self._emit(TT.EOF, '')

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------
    def _scan_word(self):
        start = self.pos
        while True:
            ch = self._ch()
            if ch == '\0' or ch in _SPACE or ch in _PARENS:
                break
            self._advance()
        text = self.text[start:self.pos]

        limit = self.max_word_length
        if limit is not None and len(text) > limit:
            self.warnings.append(
                f"L{self._tok_line}:{self._tok_col}: Word {text!r} truncated "
                f"to {limit} characters"
            )
            text = text[:limit]
        self._emit(TT.WORD, text)


def tokenize(text, max_word_length=DEFAULT_MAX_WORD_LENGTH):
    """Return the token list for *text*, terminated by an EOF token."""
    return Lexer(text, max_word_length=max_word_length).tokens()
