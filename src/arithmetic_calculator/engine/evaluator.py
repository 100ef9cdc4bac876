"""Reduce a postfix token sequence to a single number."""
from typing import List

from arithmetic_calculator.common.errors import (
    MalformedExpressionError,
    MissingOperandError,
    UnexpectedTokenError,
)
from arithmetic_calculator.common.operators import OPERATORS
from arithmetic_calculator.common.tokens import NumberToken, OperatorToken, Token, render


class PostfixEvaluator:
    """Stack machine evaluating Reverse Polish Notation."""

    @staticmethod
    def evaluate(postfix: List[Token]) -> float:
        """
        Evaluate tokens in postfix order.

        NaN and infinite results are returned as is; deciding whether they are
        errors is up to the caller.

        :param List[Token] postfix: Tokens produced by ``ExpressionParser.to_postfix``

        :return: Computed result as float
        :rtype: float
        :raises EvalError: On missing operands, division by zero or a malformed stack
        :raises UnexpectedTokenError: If the sequence holds parentheses or an unknown symbol
        """
        stack: List[float] = []

        for token in postfix:
            if isinstance(token, NumberToken):
                stack.append(token.value)
                continue

            if not isinstance(token, OperatorToken):
                raise UnexpectedTokenError(render([token]))
            spec = OPERATORS.get(token.symbol)
            if spec is None:
                raise UnexpectedTokenError(token.symbol)

            if len(stack) < spec.arity:
                raise MissingOperandError(token.symbol)

            if spec.arity == 2:
                b: float = stack.pop()
                a: float = stack.pop()
                stack.append(spec.function(a, b))
            else:
                stack.append(spec.function(stack.pop()))

        if len(stack) != 1:
            raise MalformedExpressionError(len(stack))

        return stack[0]
