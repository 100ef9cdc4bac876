"""Operator precedence, associativity and arithmetic for every supported symbol."""
import math
import operator
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.common.errors import DivisionByZeroError


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _power(a: float, b: float) -> float:
    """
    Raise a to the power b with IEEE-754 semantics.

    Python's float power raises on overflow and on zero to a negative power,
    and returns a complex number for a negative base with a fractional
    exponent; those cases map to Infinity and NaN instead.
    """
    try:
        result = a ** b
    except (OverflowError, ZeroDivisionError):
        if a < 0 and not float(b).is_integer():
            return math.nan
        odd_exponent = float(b).is_integer() and int(b) % 2 == 1
        return math.copysign(math.inf, a) if odd_exponent else math.inf
    if isinstance(result, complex):
        return math.nan
    return result


def _identity(a: float) -> float:
    return +a


def _percent(a: float) -> float:
    return a / 100


class OperatorSpec(BaseModel):
    """Static description of one operator."""

    model_config = ConfigDict(frozen=True)

    precedence: int = Field(..., description="Binding strength, higher binds tighter")
    arity: int = Field(..., ge=1, le=2, description="Number of operands consumed")
    right_assoc: bool = Field(..., description="Group right to left on equal precedence")
    function: Callable[..., float] = Field(..., description="Arithmetic applied to the operands")


OPERATORS: dict[str, OperatorSpec] = {
    "u+": OperatorSpec(precedence=5, arity=1, right_assoc=True, function=_identity),
    "u-": OperatorSpec(precedence=5, arity=1, right_assoc=True, function=operator.neg),
    "%": OperatorSpec(precedence=6, arity=1, right_assoc=True, function=_percent),
    "^": OperatorSpec(precedence=4, arity=2, right_assoc=True, function=_power),
    "*": OperatorSpec(precedence=3, arity=2, right_assoc=False, function=operator.mul),
    "/": OperatorSpec(precedence=3, arity=2, right_assoc=False, function=_divide),
    "+": OperatorSpec(precedence=2, arity=2, right_assoc=False, function=operator.add),
    "-": OperatorSpec(precedence=2, arity=2, right_assoc=False, function=operator.sub),
}
