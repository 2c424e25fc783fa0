"""Token types produced by the lexer and consumed by the parser and evaluator."""
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class Operator(str, Enum):
    """Closed set of operators understood by the interpreter."""

    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    LPAREN = "("
    RPAREN = ")"
    UNARY_PLUS = "u+"
    UNARY_MINUS = "u-"


class NumberToken(BaseModel):
    """A numeric literal."""

    # Tokens are values: immutable and hashable
    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Numeric value of the literal")

    def __str__(self) -> str:
        return f"{self.value:g}"


class OperatorToken(BaseModel):
    """An operator or a parenthesis."""

    model_config = ConfigDict(frozen=True)

    operator: Operator = Field(..., description="Operator carried by the token")

    def __str__(self) -> str:
        # Unary operators are printed with their sign only
        return self.operator.value[-1]


Token = Union[NumberToken, OperatorToken]
Tokens = List[Token]


def number(value: float) -> NumberToken:
    """Shortcut for building a number token."""
    return NumberToken(value=value)


def op(operator: Operator) -> OperatorToken:
    """Shortcut for building an operator token."""
    return OperatorToken(operator=operator)


def to_text(tokens: Tokens) -> str:
    """
    Render a token sequence as space separated text.

    Examples:
        - [1, 2, +] -> "1 2 +"

    :param Tokens tokens: Token sequence

    :return: Human readable form of the sequence
    :rtype: str
    """
    return " ".join(str(token) for token in tokens)
