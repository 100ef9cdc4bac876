"""Exceptions raised while tokenizing, parsing and evaluating expressions."""


class CalculatorError(ValueError):
    """Base class for every failure of the calculation pipeline."""


class LexError(CalculatorError):
    """The raw text cannot be split into tokens."""


class MalformedNumberError(LexError):
    """A numeric literal has several decimal points or cannot be parsed."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Malformed number: {text!r}")


class UnexpectedCharError(LexError):
    """A character outside the supported alphabet was found."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Unexpected character: {char!r}")


class ParseError(CalculatorError):
    """The token stream cannot be converted to postfix form."""


class UnbalancedParensError(ParseError):
    def __init__(self) -> None:
        super().__init__("Unbalanced parentheses")


class UnknownOperatorError(ParseError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol!r}")


class EvalError(CalculatorError):
    """The postfix sequence cannot be reduced to a single value."""


class MissingOperandError(EvalError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Not enough operands for {symbol!r}")


class DivisionByZeroError(EvalError):
    def __init__(self) -> None:
        super().__init__("Division by zero")


class UnexpectedTokenError(EvalError):
    """A parenthesis or an unknown operator reached the evaluator."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unexpected token in postfix expression: {token!r}")


class MalformedExpressionError(EvalError):
    def __init__(self, size: int) -> None:
        # Number of values left on the operand stack
        self.size = size
        super().__init__(f"Malformed expression ({size} values left on the stack)")
