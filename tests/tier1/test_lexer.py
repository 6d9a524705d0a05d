"""Tier 1 unit tests: Tokenizer."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from sxp_layout import Lexer, tokenize
from sxp_layout.tokens import TokenType

TT = TokenType


def kinds(text, **kw):
    return [(t.type, t.value) for t in tokenize(text, **kw)]


class TestWords:
    def test_single_word(self):
        assert kinds("c") == [(TT.WORD, 'c'), (TT.EOF, '')]

    def test_whitespace_separates(self):
        assert kinds(" h\tc\nc  ") == [
            (TT.WORD, 'h'), (TT.WORD, 'c'), (TT.WORD, 'c'), (TT.EOF, ''),
        ]

    def test_parameter_words_keep_colon(self):
        assert kinds("w: 1.5 f:") == [
            (TT.WORD, 'w:'), (TT.WORD, '1.5'), (TT.WORD, 'f:'), (TT.EOF, ''),
        ]

    def test_rest_word(self):
        assert kinds("...") == [(TT.WORD, '...'), (TT.EOF, '')]

    def test_empty_input(self):
        assert kinds("") == [(TT.EOF, '')]
        assert kinds(None) == [(TT.EOF, '')]


class TestParens:
    def test_nested_groups(self):
        assert [t.type for t in tokenize("h c (v c c)")] == [
            TT.WORD, TT.WORD, TT.LPAREN, TT.WORD, TT.WORD, TT.WORD,
            TT.RPAREN, TT.EOF,
        ]

    def test_parens_split_words(self):
        assert kinds("h(c)c") == [
            (TT.WORD, 'h'), (TT.LPAREN, '('), (TT.WORD, 'c'),
            (TT.RPAREN, ')'), (TT.WORD, 'c'), (TT.EOF, ''),
        ]

    def test_adjacent_parens(self):
        assert [t.type for t in tokenize("(())")] == [
            TT.LPAREN, TT.LPAREN, TT.RPAREN, TT.RPAREN, TT.EOF,
        ]


class TestTermination:
    def test_nul_ends_input(self):
        assert kinds("c\0 ignored words") == [(TT.WORD, 'c'), (TT.EOF, '')]

    def test_word_flushed_at_end(self):
        assert kinds("h c")[-2] == (TT.WORD, 'c')


class TestTruncation:
    def test_long_word_truncated(self):
        lexer = Lexer("123456789", max_word_length=7)
        assert lexer.tokens()[0].value == '1234567'
        assert len(lexer.warnings) == 1
        assert 'truncated' in lexer.warnings[0]

    def test_default_bound_keeps_coordinates(self):
        lexer = Lexer("f: 1920 1080 3840 2160")
        assert [t.value for t in lexer.tokens()[1:5]] == ['1920', '1080', '3840', '2160']
        assert lexer.warnings == []

    def test_unbounded(self):
        word = 'x' * 100
        assert kinds(word, max_word_length=None)[0] == (TT.WORD, word)


class TestPositions:
    def test_line_and_col(self):
        toks = tokenize("h\n  (c)")
        assert (toks[0].line, toks[0].col) == (1, 1)
        assert (toks[1].line, toks[1].col) == (2, 3)
        assert (toks[2].line, toks[2].col) == (2, 4)

    def test_token_equality_ignores_position(self):
        assert tokenize("c")[0] == tokenize("   c")[0]
