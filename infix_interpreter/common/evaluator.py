"""Evaluate expressions in Reverse Polish Notation (RPN) using a stack."""
import math
import operator
from typing import List

from infix_interpreter.common.errors import InsufficientOperandsError, UnsupportedOperatorError
from infix_interpreter.common.tokens import NumberToken, Operator, Tokens


def _divide(left: float, right: float) -> float:
    """Divide with IEEE-754 semantics: a zero divisor gives inf or nan."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        # The sign of a zero divisor counts, as in 1 / -0.0 == -inf
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _binary_function(op: Operator):
    """Return the function applied by a binary operator, or None."""
    if op is Operator.PLUS:
        return operator.add
    if op is Operator.MINUS:
        return operator.sub
    if op is Operator.MUL:
        return operator.mul
    if op is Operator.DIV:
        return _divide
    return None


def _require(stack: List[float], op: Operator, arity: int) -> None:
    if len(stack) < arity:
        raise InsufficientOperandsError(op.value, arity, len(stack))


def evaluate(tokens: Tokens) -> float:
    """
    Evaluate a sequence of tokens in RPN order.

    :param Tokens tokens: Tokens in RPN order, as returned by parse

    :return: Computed result, 0.0 for an empty sequence
    :rtype: float
    :raises InsufficientOperandsError: If an operator lacks operands
    :raises UnsupportedOperatorError: If a token cannot appear in RPN
    """
    stack: List[float] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            stack.append(token.value)
            continue

        op = token.operator
        if op is Operator.UNARY_MINUS:
            _require(stack, op, 1)
            stack.append(-stack.pop())
            continue

        function = _binary_function(op)
        if function is None:
            raise UnsupportedOperatorError(op.value)

        _require(stack, op, 2)
        # Right operand was pushed last
        right: float = stack.pop()
        left: float = stack.pop()
        stack.append(function(left, right))

    if not stack:
        return 0.0
    return stack[-1]
