"""Tests for the stack evaluator and the operator table."""
import math
import random

import pytest

from core.token_system import TokenType, tokenize, number_token, classify
from core.operators import Operators, BINARY_OPERATORS, get_binary_operator
from core.rpn_evaluator import RPNEvaluator
from core.errors import (
    ErrorKind, CalculatorError, InvalidTokenError,
    InsufficientOperandsError, MalformedExpressionError,
)


def evaluate(line):
    return RPNEvaluator.evaluate(tokenize(line))


class TestOperators:

    def test_every_operator_registered(self):
        operator_types = {t for t in TokenType if t not in (TokenType.NUMBER, TokenType.INVALID)}
        assert set(BINARY_OPERATORS) == operator_types

    def test_missing_operator_is_programming_error(self):
        with pytest.raises(TypeError):
            get_binary_operator(TokenType.NUMBER)

    def test_division_by_zero_follows_ieee(self):
        assert Operators.div(1.0, 0.0) == math.inf
        assert Operators.div(-1.0, 0.0) == -math.inf
        assert math.isnan(Operators.div(0.0, 0.0))

    def test_mod_takes_sign_of_dividend(self):
        assert Operators.mod(-7.0, 3.0) == -1.0
        assert Operators.mod(7.0, -3.0) == 1.0
        assert Operators.mod(5.5, 2.0) == 1.5
        assert math.isnan(Operators.mod(1.0, 0.0))

    def test_pow_edge_cases(self):
        assert Operators.pow(2.0, -1.0) == 0.5
        assert Operators.pow(0.0, -1.0) == math.inf
        assert math.isnan(Operators.pow(-8.0, 0.5))

    def test_overflow_gives_inf(self):
        assert Operators.mul(1e308, 10.0) == math.inf
        assert Operators.pow(10.0, 400.0) == math.inf


class TestEvaluate:

    @pytest.mark.parametrize("line, expected", [
        ("3 4 +", 7.0),
        ("10 2 /", 5.0),
        ("2 3 ^", 8.0),
        ("5 3 %", 2.0),
        ("10 2 -", 8.0),
        ("2 10 -", -8.0),
        ("6 3 *", 18.0),
        ("42", 42.0),
        ("1 2 + 3 4 + *", 21.0),
        ("5 1 2 + 4 * + 3 -", 14.0),
        ("2 3 2 ^ ^", 512.0),
        ("1.5 -0.5 +", 1.0),
    ])
    def test_valid_expressions(self, line, expected):
        assert evaluate(line) == expected

    def test_result_is_plain_float(self):
        assert type(evaluate("3 4 +")) is float

    def test_division_by_zero_is_not_an_error(self):
        assert evaluate("1 0 /") == math.inf
        assert math.isnan(evaluate("0 0 /"))

    def test_invalid_token(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            evaluate("foo")
        assert exc_info.value.kind == ErrorKind.INVALID_TOKEN
        assert exc_info.value.text == "foo"
        assert exc_info.value.position == 0
        assert "foo" in str(exc_info.value)

    def test_insufficient_operands(self):
        with pytest.raises(InsufficientOperandsError) as exc_info:
            evaluate("+")
        assert exc_info.value.kind == ErrorKind.INSUFFICIENT_OPERANDS
        assert exc_info.value.stack_size == 0
        assert exc_info.value.symbol == "+"

    def test_insufficient_operands_with_one_value(self):
        with pytest.raises(InsufficientOperandsError) as exc_info:
            evaluate("3 -")
        assert exc_info.value.stack_size == 1
        assert exc_info.value.position == 1

    def test_malformed_leftover_operands(self):
        with pytest.raises(MalformedExpressionError) as exc_info:
            evaluate("1 2")
        assert exc_info.value.kind == ErrorKind.MALFORMED_EXPRESSION
        assert exc_info.value.stack_size == 2

    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_empty_input_is_malformed(self, line):
        with pytest.raises(MalformedExpressionError) as exc_info:
            evaluate(line)
        assert exc_info.value.stack_size == 0

    def test_aborts_on_first_error(self):
        # 中缀写法在 "+" 处就失败，后面的 "2" 不会被消费
        with pytest.raises(InsufficientOperandsError) as exc_info:
            evaluate("1 + 2")
        assert exc_info.value.position == 1

    def test_invalid_token_reported_before_later_errors(self):
        with pytest.raises(InvalidTokenError):
            evaluate("1 foo +")

    def test_errors_share_a_base_class(self):
        for line in ("foo", "+", "1 2"):
            with pytest.raises(CalculatorError):
                evaluate(line)

    def test_accepts_prebuilt_tokens(self):
        tokens = [number_token(9), number_token(4), classify("-")]
        assert RPNEvaluator.evaluate(tokens) == 5.0


def test_balanced_expressions_always_yield_one_result():
    rng = random.Random(1234)
    symbols = ["+", "-", "*", "/", "^", "%"]
    for _ in range(200):
        n = rng.randint(1, 8)
        parts = [str(rng.randint(1, 9))]
        pending = n - 1
        depth = 1
        # 随机插入数值与操作符，保持栈平衡
        while pending or depth > 1:
            if pending and (depth < 2 or rng.random() < 0.5):
                parts.append(str(rng.randint(1, 9)))
                depth += 1
                pending -= 1
            else:
                parts.append(rng.choice(symbols))
                depth -= 1
        result = evaluate(" ".join(parts))
        assert isinstance(result, float)
