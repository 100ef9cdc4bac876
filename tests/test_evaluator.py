"""Test class PostfixEvaluator."""
import math

import pytest

from arithmetic_calculator.common.errors import (
    DivisionByZeroError,
    EvalError,
    MalformedExpressionError,
    MissingOperandError,
    UnexpectedTokenError,
)
from arithmetic_calculator.common.tokens import LeftParenToken, NumberToken, OperatorToken
from arithmetic_calculator.engine.evaluator import PostfixEvaluator


def n(value: float) -> NumberToken:
    return NumberToken(value=value)


def op(symbol: str) -> OperatorToken:
    return OperatorToken(symbol=symbol)


@pytest.mark.parametrize("postfix,expected", [
    ([n(3), n(4), op("+")], 7.0),
    ([n(10), n(4), op("-")], 6.0),
    ([n(3), n(4), op("*")], 12.0),
    ([n(8), n(2), op("/")], 4.0),
    ([n(2), n(10), op("^")], 1024.0),
    ([n(5), op("u-")], -5.0),
    ([n(5), op("u+")], 5.0),
    ([n(50), op("%")], 0.5),
    ([n(3), n(4), n(2), op("*"), op("+")], 11.0),
])
def test_evaluate_valid(postfix, expected):
    """Evaluate returns correct result for valid postfix sequences."""
    assert PostfixEvaluator.evaluate(postfix) == expected


def test_evaluate_operand_order():
    """The first pushed operand is the left-hand side."""
    assert PostfixEvaluator.evaluate([n(1), n(4), op("/")]) == 0.25
    assert PostfixEvaluator.evaluate([n(2), n(3), op("^")]) == 8.0


def test_evaluate_division_by_zero():
    """Dividing by exactly zero raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError):
        PostfixEvaluator.evaluate([n(5), n(0), op("/")])


@pytest.mark.parametrize("postfix", [
    [op("+")],
    [n(1), op("+")],
    [n(1), op("^")],
    [op("u-")],
    [op("%")],
])
def test_evaluate_missing_operand(postfix):
    """Operators without enough operands raise MissingOperandError."""
    with pytest.raises(MissingOperandError):
        PostfixEvaluator.evaluate(postfix)


@pytest.mark.parametrize("postfix,size", [
    ([], 0),
    ([n(1), n(2)], 2),
    ([n(1), n(2), n(3), op("+")], 2),
])
def test_evaluate_malformed_expression(postfix, size):
    """Anything but exactly one value left on the stack raises MalformedExpressionError."""
    with pytest.raises(MalformedExpressionError) as exc_info:
        PostfixEvaluator.evaluate(postfix)
    assert exc_info.value.size == size


def test_evaluate_rejects_unknown_tokens():
    """Parentheses and unknown symbols are not valid postfix input."""
    with pytest.raises(UnexpectedTokenError) as exc_info:
        PostfixEvaluator.evaluate([n(1), LeftParenToken()])
    assert exc_info.value.token == "("
    with pytest.raises(UnexpectedTokenError) as exc_info:
        PostfixEvaluator.evaluate([n(1), n(2), op("!")])
    assert exc_info.value.token == "!"
    assert isinstance(exc_info.value, EvalError)


def test_evaluate_power_domain_errors_return_raw_floats():
    """Power follows real-number rules: NaN and Infinity are returned, not raised."""
    assert math.isnan(PostfixEvaluator.evaluate([n(-8), n(0.5), op("^")]))
    assert PostfixEvaluator.evaluate([n(0), n(-1), op("^")]) == math.inf
    assert PostfixEvaluator.evaluate([n(10), n(400), op("^")]) == math.inf
    assert PostfixEvaluator.evaluate([n(-10), n(401), op("^")]) == -math.inf
    assert PostfixEvaluator.evaluate([n(4), n(-0.5), op("^")]) == 0.5


def test_evaluate_power_negative_base_fractional_exponent_overflow_is_nan():
    """A negative base with a fractional exponent is NaN even when the magnitude overflows."""
    assert math.isnan(PostfixEvaluator.evaluate([n(-10), n(400.5), op("^")]))
