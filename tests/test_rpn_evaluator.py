"""
Tests for the postfix stack machine.
"""
import math

import pytest

from ibex import (
    MalformedPostfix, RPNEvaluator, StackUnderflow, Token, TokenKind, UnknownSymbol,
    default_environment, evaluate, generate_postfix, tokenize
)


def run(text, variables=None, functions=None):
    return evaluate(generate_postfix(tokenize(text)), variables or {}, functions or {})


class TestArithmetic:

    def test_literals(self, num):
        assert evaluate([num("42")], {}, {}) == 42.0
        assert evaluate([num("2.5e-1")], {}, {}) == 0.25

    def test_binary_operand_order(self):
        assert run("10 - 4") == 6.0
        assert run("10 / 4") == 2.5
        assert run("2 ^ 10") == 1024.0

    def test_unary(self):
        assert run("-3") == -3.0
        assert run("+3") == 3.0
        assert run("--3") == 3.0

    def test_division_by_zero_follows_ieee(self):
        assert run("1/0") == math.inf
        assert run("-1/0") == -math.inf
        assert math.isnan(run("0/0"))

    def test_power_never_raises(self):
        assert run("10^400") == math.inf
        assert math.isnan(run("(0-8)^0.5"))

    def test_result_is_float(self):
        assert isinstance(run("1+1"), float)


class TestLogic:

    @pytest.mark.parametrize("text, expected", [
        ("5==5", 1.0), ("5!=5", 0.0), ("1<2", 1.0), ("2<=1", 0.0),
        ("3>2", 1.0), ("2>=3", 0.0),
        ("2 && 3", 1.0), ("2 && 0", 0.0), ("0 || 0.5", 1.0), ("0 || 0", 0.0),
        ("!0", 1.0), ("!7", 0.0), ("!!7", 1.0),
    ])
    def test_truth_values(self, text, expected):
        assert run(text) == expected

    def test_no_short_circuit(self):
        calls = []

        def probe(args):
            calls.append(args)
            return 1.0

        assert run("0 && probe()", functions={'probe': probe}) == 0.0
        assert calls == [[]]


class TestEnvironment:

    def test_variables(self):
        assert run("x * 2 + y", variables={'x': 3, 'y': 0.5}) == 6.5

    def test_variable_values_are_coerced(self):
        assert run("flag + 1", variables={'flag': True}) == 2.0

    def test_function_arguments_keep_source_order(self):
        functions = {'first': lambda args: args[0], 'sub': lambda args: args[0] - args[1]}
        assert run("sub(10, 3)", functions=functions) == 7.0
        assert run("first(1, 2, 3)", functions=functions) == 1.0

    def test_function_receives_list(self):
        seen = []
        run("f(1, 2)", functions={'f': lambda args: seen.append(args) or 0.0})
        assert seen == [[1.0, 2.0]]

    def test_variable_takes_precedence_over_function(self):
        _, functions = default_environment()
        assert run("sin", variables={'sin': 2.0}, functions=functions) == 2.0

    def test_environment_is_not_modified(self):
        variables, functions = default_environment()
        before = (dict(variables), dict(functions))
        run("max(pi, e) + 1", variables, functions)
        assert (variables, functions) == before

    def test_unknown_symbol(self):
        with pytest.raises(UnknownSymbol) as exc_info:
            run("foo(1)")
        assert exc_info.value.name == "foo"

    def test_unknown_variable(self):
        with pytest.raises(UnknownSymbol):
            run("x + 1")


class TestMalformedPostfix:

    def test_binary_underflow(self, num, op):
        with pytest.raises(StackUnderflow):
            evaluate([num("1"), op("+")], {}, {})

    def test_unary_underflow(self, op):
        with pytest.raises(StackUnderflow):
            evaluate([op("u-")], {}, {})

    def test_function_underflow(self):
        with pytest.raises(StackUnderflow):
            evaluate([Token(TokenKind.IDENTIFIER, "f", 2)], {}, {'f': lambda args: 0.0})

    def test_leftover_operands(self, num):
        with pytest.raises(MalformedPostfix):
            evaluate([num("1"), num("2")], {}, {})

    def test_empty_sequence(self):
        with pytest.raises(MalformedPostfix):
            evaluate([], {}, {})

    @pytest.mark.parametrize("kind, text", [
        (TokenKind.LPAREN, "("), (TokenKind.COMMA, ","), (TokenKind.UNKNOWN, "#"),
    ])
    def test_invalid_token_kind(self, num, kind, text):
        with pytest.raises(MalformedPostfix):
            evaluate([num("1"), Token(kind, text)], {}, {})

    def test_static_method_matches_function(self, num, op):
        postfix = [num("1"), num("2"), op("+")]
        assert RPNEvaluator.evaluate(postfix, {}, {}) == evaluate(postfix, {}, {}) == 3.0
