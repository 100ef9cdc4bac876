"""Tokenize, convert and evaluate an arithmetic expression in one call."""
from decimal import Decimal
import re
from typing import List

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.tokens import Token
from arithmetic_calculator.engine.evaluator import PostfixEvaluator
from arithmetic_calculator.engine.parser import ExpressionParser
from arithmetic_calculator.engine.tokenizer import Tokenizer


class ExpressionCalculator:
    """
    Evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Stateless: nothing is kept between calls

    Algorithm:
        1. Tokenize the raw text (numbers, operators, parentheses)
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    Supported syntax: + - * / ^ ( ), unary + and -, postfix % (divide by 100).
    """

    @staticmethod
    def to_postfix(expr: str) -> List[Token]:
        """
        Tokenize an expression and convert it to postfix order.

        :param str expr: Arithmetic expression string

        :return: Tokens in postfix order
        :rtype: List[Token]
        :raises CalculatorError: If the expression cannot be tokenized or parsed
        """
        return ExpressionParser.to_postfix(Tokenizer.tokenize(expr))

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result as float (may be NaN or infinite)
        :rtype: float
        :raises CalculatorError: If the expression is invalid or cannot be computed
        """
        result = PostfixEvaluator.evaluate(ExpressionCalculator.to_postfix(expr))
        logger.debug(f"🧮 {expr!r} = {result}")
        return result

    @staticmethod
    def substitute(expr: str, previous: float, name: str = "ans") -> str:
        """
        Replace every whole-word, case-insensitive reference to the previous result with its literal value.

        :param str expr: Raw user input
        :param float previous: Value of the previous result
        :param str name: Name of the previous-result variable

        :return: Expression ready to be evaluated
        :rtype: str
        """
        pattern = re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE)
        # Positional notation only: the tokenizer has no exponent syntax (1e+20)
        literal = format(Decimal(repr(previous)), "f")
        return pattern.sub(lambda _: literal, expr)
