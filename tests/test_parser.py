"""Test class ExpressionParser."""
import pytest

from arithmetic_calculator.common.errors import UnbalancedParensError, UnknownOperatorError
from arithmetic_calculator.common.tokens import (
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    render,
)
from arithmetic_calculator.engine.parser import ExpressionParser
from arithmetic_calculator.engine.tokenizer import Tokenizer


def postfix(expr: str) -> str:
    """Convert an expression and render its postfix form."""
    return render(ExpressionParser.to_postfix(Tokenizer.tokenize(expr)))


def test_to_postfix_basic():
    """to_postfix converts tokens to correct Reverse Polish Notation."""
    tokens = [
        NumberToken(value=3),
        OperatorToken(symbol="+"),
        NumberToken(value=4),
        OperatorToken(symbol="*"),
        NumberToken(value=2),
    ]
    rpn = ExpressionParser.to_postfix(tokens)
    # Numbers in order, operators according to precedence
    assert rpn == [
        NumberToken(value=3),
        NumberToken(value=4),
        NumberToken(value=2),
        OperatorToken(symbol="*"),
        OperatorToken(symbol="+"),
    ]


@pytest.mark.parametrize("expr,expected", [
    ("3+4", "3.0 4.0 +"),
    ("10/2-1", "10.0 2.0 / 1.0 -"),
    ("8-3-2", "8.0 3.0 - 2.0 -"),
    ("2^3^2", "2.0 3.0 2.0 ^ ^"),
    ("(2+3)*4", "2.0 3.0 + 4.0 *"),
    ("-2^2", "2.0 u- 2.0 ^"),
    ("2^-2", "2.0 2.0 u- ^"),
    ("--1", "1.0 u- u-"),
    ("200+10%", "200.0 10.0 % +"),
    ("50%%", "50.0 % %"),
    ("-50%", "50.0 % u-"),
])
def test_to_postfix_various(expr, expected):
    """to_postfix honours precedence, associativity and unary operators."""
    assert postfix(expr) == expected


def test_to_postfix_drops_parentheses():
    """Parentheses never reach the postfix output."""
    rpn = ExpressionParser.to_postfix(Tokenizer.tokenize("((1+2))*(3)"))
    assert not any(isinstance(t, (LeftParenToken, RightParenToken)) for t in rpn)


@pytest.mark.parametrize("expr", ["(1+2", "1+2)", ")(", "((1)", "(", ")"])
def test_to_postfix_unbalanced_parentheses(expr):
    """Unmatched '(' or ')' raise UnbalancedParensError."""
    with pytest.raises(UnbalancedParensError):
        ExpressionParser.to_postfix(Tokenizer.tokenize(expr))


def test_to_postfix_unknown_operator():
    """An operator symbol missing from the operator table raises UnknownOperatorError."""
    tokens = [NumberToken(value=1), OperatorToken(symbol="!"), NumberToken(value=2)]
    with pytest.raises(UnknownOperatorError) as exc_info:
        ExpressionParser.to_postfix(tokens)
    assert exc_info.value.symbol == "!"


def test_to_postfix_does_not_check_arity():
    """Operand counting is left to the evaluator."""
    assert postfix("1+") == "1.0 +"
