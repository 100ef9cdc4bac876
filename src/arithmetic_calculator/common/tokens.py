"""Token types produced by the tokenizer and consumed by the parser and evaluator."""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class NumberToken(BaseModel):
    """Numeric literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float = Field(..., description="Value of the decimal literal")


class OperatorToken(BaseModel):
    """
    Operator symbol.

    Unary plus and minus are tagged "u+" and "u-" to tell them apart from
    their binary counterparts; "%" is always the postfix percent operator.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["operator"] = "operator"
    symbol: str = Field(..., min_length=1, description="Operator symbol, e.g. '+', 'u-', '%'")


class LeftParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["lparen"] = "lparen"


class RightParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rparen"] = "rparen"


Token = Annotated[
    Union[NumberToken, OperatorToken, LeftParenToken, RightParenToken],
    Field(discriminator="kind"),
]


def render(tokens: list[Token]) -> str:
    """
    Render a token sequence as a space-separated string (useful for logs and RPN display).

    :param list[Token] tokens: Tokens to render

    :return: Human-readable representation, e.g. "3 4 2 * +"
    :rtype: str
    """
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, NumberToken):
            parts.append(repr(token.value))
        elif isinstance(token, OperatorToken):
            parts.append(token.symbol)
        elif isinstance(token, LeftParenToken):
            parts.append("(")
        else:
            parts.append(")")
    return " ".join(parts)
