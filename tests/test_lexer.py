"""
Tests for the lexer: text -> tokens.
"""
import pytest

from config.config import LEXER_CONFIG
from ibex import Token, TokenKind, tokenize


def kinds(text, **kwargs):
    return [t.kind for t in tokenize(text, **kwargs)]


class TestLiterals:

    def test_simple_sum(self, num, op):
        assert tokenize("1 + 2") == [num("1"), op("+"), num("2")]

    def test_int_and_float(self):
        tokens = tokenize("42 3.25")
        assert tokens == [Token(TokenKind.INT, "42"), Token(TokenKind.FLOAT, "3.25")]

    def test_trailing_dot_is_float(self):
        assert tokenize("1.") == [Token(TokenKind.FLOAT, "1.")]

    def test_empty_and_whitespace(self):
        assert tokenize("") == []
        assert tokenize("  \t\n ") == []

    def test_identifiers(self):
        tokens = tokenize("_x1 foo_bar pi")
        assert [t.text for t in tokens] == ["_x1", "foo_bar", "pi"]
        assert all(t.kind == TokenKind.IDENTIFIER for t in tokens)

    def test_tokens_have_zero_arg_count(self):
        assert all(t.arg_count == 0 for t in tokenize("max(1, 2) + x"))


class TestScientificNotation:

    @pytest.mark.parametrize("text", ["1e3", "2.5E-4", "7e+2"])
    def test_exponent_is_single_float(self, text):
        assert tokenize(text) == [Token(TokenKind.FLOAT, text)]

    def test_bare_e_is_not_consumed(self):
        assert tokenize("2e") == [Token(TokenKind.INT, "2"), Token(TokenKind.IDENTIFIER, "e")]

    def test_e_followed_by_letters(self):
        assert kinds("2ex") == [TokenKind.INT, TokenKind.IDENTIFIER]

    def test_sign_without_digits(self):
        assert kinds("2e-x") == [TokenKind.INT, TokenKind.IDENTIFIER, TokenKind.MINUS, TokenKind.IDENTIFIER]

    def test_disabled_by_argument(self):
        assert tokenize("1e3", scientific_notation=False) == [
            Token(TokenKind.INT, "1"), Token(TokenKind.IDENTIFIER, "e3")
        ]

    def test_disabled_by_config(self, monkeypatch):
        monkeypatch.setitem(LEXER_CONFIG, "scientific_notation", False)
        assert kinds("1e3") == [TokenKind.INT, TokenKind.IDENTIFIER]


class TestUnaryDisambiguation:

    def test_leading_minus_is_unary(self):
        assert kinds("-12.5") == [TokenKind.UNARY_MINUS, TokenKind.FLOAT]

    def test_chained_unary(self):
        assert kinds("--13.5") == [TokenKind.UNARY_MINUS, TokenKind.UNARY_MINUS, TokenKind.FLOAT]

    def test_leading_plus_is_unary(self):
        assert kinds("+1") == [TokenKind.UNARY_PLUS, TokenKind.INT]

    def test_binary_after_operand(self):
        assert kinds("3-2") == [TokenKind.INT, TokenKind.MINUS, TokenKind.INT]
        assert kinds("x+1") == [TokenKind.IDENTIFIER, TokenKind.PLUS, TokenKind.INT]

    def test_binary_after_right_paren(self):
        assert kinds("(1)-2")[3] == TokenKind.MINUS

    def test_unary_after_left_paren_and_comma(self):
        assert kinds("f(-1,+2)") == [
            TokenKind.IDENTIFIER, TokenKind.LPAREN, TokenKind.UNARY_MINUS, TokenKind.INT,
            TokenKind.COMMA, TokenKind.UNARY_PLUS, TokenKind.INT, TokenKind.RPAREN,
        ]

    def test_unary_after_binary_operator(self):
        assert kinds("2*-3") == [TokenKind.INT, TokenKind.TIMES, TokenKind.UNARY_MINUS, TokenKind.INT]
        assert kinds("1<=-1")[2] == TokenKind.UNARY_MINUS

    def test_unary_after_not(self):
        assert kinds("!-1") == [TokenKind.NOT, TokenKind.UNARY_MINUS, TokenKind.INT]


class TestOperators:

    @pytest.mark.parametrize("text, kind", [
        ("!=", TokenKind.NEQ), ("<=", TokenKind.LEQ), (">=", TokenKind.GEQ),
        ("==", TokenKind.EQ), ("||", TokenKind.OR), ("&&", TokenKind.AND),
        ("<", TokenKind.LT), (">", TokenKind.GT),
        ("*", TokenKind.TIMES), ("/", TokenKind.DIV), ("^", TokenKind.POW),
    ])
    def test_binary_operator_between_operands(self, text, kind):
        tokens = tokenize(f"a{text}b")
        assert tokens[1] == Token(kind, text)
        assert len(tokens) == 3

    def test_not(self):
        assert tokenize("!a")[0] == Token(TokenKind.NOT, "!")

    def test_punctuation(self):
        assert kinds("(,)") == [TokenKind.LPAREN, TokenKind.COMMA, TokenKind.RPAREN]

    @pytest.mark.parametrize("text, bad", [("a=b", "="), ("a|b", "|"), ("a&b", "&"), ("1 # 2", "#"), ("1 $", "$")])
    def test_unknown_single_characters(self, text, bad):
        unknown = [t for t in tokenize(text) if t.kind == TokenKind.UNKNOWN]
        assert unknown == [Token(TokenKind.UNKNOWN, bad)]

    def test_non_ascii_digit_is_unknown(self):
        assert tokenize("²") == [Token(TokenKind.UNKNOWN, "²")]
