"""Convert infix token sequences to postfix (Reverse Polish Notation)."""
from typing import List, Union

from arithmetic_calculator.common.errors import UnbalancedParensError, UnknownOperatorError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operators import OPERATORS, OperatorSpec
from arithmetic_calculator.common.tokens import (
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    Token,
    render,
)

# Entries of the operator stack: pending operators and "(" markers
StackEntry = Union[OperatorToken, LeftParenToken]


class ExpressionParser:
    """
    Infix to postfix converter based on the Shunting-yard algorithm.

    The Shunting-yard algorithm converts an infix expression into Reverse Polish Notation (RPN), allowing safe, stack-based evaluation without parentheses.
    Operators wait on a stack until an operator that binds more loosely (or a closing parenthesis) forces them to the output.

    Examples:
        - Infix expression: 3 + 4 * 2
        - Postfix expression: 3 4 2 * +
        - Infix expression: 2 ^ 3 ^ 2 (right-associative)
        - Postfix expression: 2 3 2 ^ ^

    Unary signs (precedence 5) bind tighter than "^" (precedence 4), so "-2^2" is (-2)^2 = 4.
    """

    @staticmethod
    def _spec(symbol: str) -> OperatorSpec:
        """
        Look up the metadata of an operator symbol.

        :param str symbol: Operator symbol

        :return: Operator metadata
        :rtype: OperatorSpec
        :raises UnknownOperatorError: If the symbol is not in the operator table
        """
        try:
            return OPERATORS[symbol]
        except KeyError as exc:
            raise UnknownOperatorError(symbol) from exc

    @staticmethod
    def _should_pop(top: StackEntry, incoming: OperatorSpec) -> bool:
        """
        Decide whether the operator on top of the stack goes to the output before pushing a new one.

        :param StackEntry top: Top of the operator stack
        :param OperatorSpec incoming: Metadata of the operator being pushed

        :return: True if ``top`` must be popped first
        :rtype: bool
        """
        if isinstance(top, LeftParenToken):
            return False
        top_prec = ExpressionParser._spec(top.symbol).precedence
        if top_prec > incoming.precedence:
            return True
        return top_prec == incoming.precedence and not incoming.right_assoc

    @staticmethod
    def to_postfix(tokens: List[Token]) -> List[Token]:
        """
        Convert a list of infix tokens into postfix order.

        :param List[Token] tokens: Tokens produced by the tokenizer

        :return: Tokens in postfix order, without parentheses
        :rtype: List[Token]
        :raises ParseError: On unbalanced parentheses or an unknown operator
        """
        output: List[Token] = []
        stack: List[StackEntry] = []

        for token in tokens:
            if isinstance(token, NumberToken):
                output.append(token)

            elif isinstance(token, OperatorToken):
                spec = ExpressionParser._spec(token.symbol)
                while stack and ExpressionParser._should_pop(stack[-1], spec):
                    output.append(stack.pop())
                stack.append(token)

            elif isinstance(token, LeftParenToken):
                stack.append(token)

            elif isinstance(token, RightParenToken):
                while stack and not isinstance(stack[-1], LeftParenToken):
                    output.append(stack.pop())
                if not stack:
                    raise UnbalancedParensError()
                # Discard the matching "("
                stack.pop()

        while stack:
            entry = stack.pop()
            if isinstance(entry, LeftParenToken):
                raise UnbalancedParensError()
            output.append(entry)

        logger.debug(f"🔁 Postfix form: {render(output)}")
        return output
