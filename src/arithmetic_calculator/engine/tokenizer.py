"""Split raw arithmetic text into typed tokens."""
import re
from typing import List

from arithmetic_calculator.common.errors import MalformedNumberError, UnexpectedCharError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.tokens import (
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    Token,
)

NUMBER_CHARS = frozenset("0123456789.")
SIGN_CHARS = frozenset("+-")
BINARY_CHARS = frozenset("*/^")
# ASCII whitespace only: other Unicode spaces are unexpected characters
WHITESPACE = re.compile(r"[ \t\r\n\f\v]+")


class Tokenizer:
    """
    Character-level scanner for infix arithmetic expressions.

    Rules:
        - Whitespace is dropped before scanning and never separates tokens.
        - A number is a maximal run of digits and at most one decimal point.
        - "+" and "-" are unary when they open the stream, follow another
          operator or follow "("; they are binary otherwise.
        - "%" is a postfix operator dividing its operand by 100.
    """

    @staticmethod
    def _is_sign_unary(tokens: List[Token]) -> bool:
        """
        Tell whether a "+" or "-" at the current position is a unary sign.

        :param List[Token] tokens: Tokens emitted so far

        :return: True if the sign is unary
        :rtype: bool
        """
        if not tokens:
            return True
        return isinstance(tokens[-1], (OperatorToken, LeftParenToken))

    @staticmethod
    def _read_number(text: str, start: int) -> tuple[NumberToken, int]:
        """
        Read a numeric literal starting at ``start``.

        :param str text: Whitespace-free expression
        :param int start: Index of the first digit or dot

        :return: The number token and the index right after the literal
        :rtype: tuple[NumberToken, int]
        :raises MalformedNumberError: On a second dot or an unparsable run
        """
        end = start
        dots = 0
        while end < len(text) and text[end] in NUMBER_CHARS:
            if text[end] == ".":
                dots += 1
                if dots > 1:
                    raise MalformedNumberError(text[start:end + 1])
            end += 1

        literal = text[start:end]
        try:
            value = float(literal)
        except ValueError as exc:
            raise MalformedNumberError(literal) from exc
        return NumberToken(value=value), end

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Convert an expression string into a list of tokens.

        :param str expr: Arithmetic expression, e.g. "-(2 + 3) * 10%"

        :return: List of tokens in source order
        :rtype: List[Token]
        :raises LexError: If a number is malformed or a character is not supported
        """
        text = WHITESPACE.sub("", expr)
        tokens: List[Token] = []
        i = 0

        while i < len(text):
            char = text[i]

            if char in NUMBER_CHARS:
                number, i = Tokenizer._read_number(text, i)
                tokens.append(number)
                continue

            if char == "(":
                tokens.append(LeftParenToken())
            elif char == ")":
                tokens.append(RightParenToken())
            elif char in SIGN_CHARS:
                symbol = f"u{char}" if Tokenizer._is_sign_unary(tokens) else char
                tokens.append(OperatorToken(symbol=symbol))
            elif char in BINARY_CHARS or char == "%":
                tokens.append(OperatorToken(symbol=char))
            else:
                raise UnexpectedCharError(char)
            i += 1

        logger.debug(f"🔤 Tokenized {expr!r} into {len(tokens)} tokens")
        return tokens
