"""Convert infix token sequences into Reverse Polish Notation (RPN)."""
from typing import List

from infix_interpreter.common.errors import (
    UnmatchedClosingParenthesisError,
    UnmatchedOpeningParenthesisError,
    UnsupportedOperatorError,
)
from infix_interpreter.common.tokens import NumberToken, Operator, OperatorToken, Tokens


def mark_unary_operators(tokens: Tokens) -> Tokens:
    """
    Tag signs that appear where an operand is expected as unary operators.

    A ``+`` or ``-`` is unary at the start of the expression and right after
    any operator other than a closing parenthesis.

    Examples:
        - "1--1" -> [1, -, u-, 1]
        - "-(-1)" -> [u-, (, u-, 1, )]

    :param Tokens tokens: Tokens in infix order

    :return: Tokens of the same length with unary signs tagged
    :rtype: Tokens
    """
    marked: Tokens = []
    next_can_be_unary = True

    for token in tokens:
        if isinstance(token, NumberToken):
            marked.append(token)
            next_can_be_unary = False
            continue

        operator = token.operator
        if next_can_be_unary and operator is Operator.PLUS:
            token = OperatorToken(operator=Operator.UNARY_PLUS)
        elif next_can_be_unary and operator is Operator.MINUS:
            token = OperatorToken(operator=Operator.UNARY_MINUS)
        marked.append(token)
        # A closed parenthesis is a complete operand
        next_can_be_unary = operator is not Operator.RPAREN

    return marked


def precedence_of(operator: Operator) -> int:
    """
    Return the binding strength of an operator, higher binds tighter.

    :param Operator operator: Operator to look up

    :return: Precedence level
    :rtype: int
    :raises UnsupportedOperatorError: For parentheses, which have no precedence
    """
    if operator in (Operator.UNARY_PLUS, Operator.UNARY_MINUS):
        return 2
    if operator in (Operator.MUL, Operator.DIV):
        return 1
    if operator in (Operator.PLUS, Operator.MINUS):
        return 0
    raise UnsupportedOperatorError(operator.value)


def parse(tokens: Tokens) -> Tokens:
    """
    Convert unary-marked infix tokens into RPN using the Shunting-yard algorithm.

    Binary operators are left associative: an operator on the stack with
    equal precedence is output before the incoming one is pushed. Unary plus
    is an identity and does not appear in the output.

    Examples:
        - Infix: 1 + 2 * 3 / (4 - 5)
        - RPN:   1 2 3 * 4 5 - / +

    :param Tokens tokens: Infix tokens, as returned by mark_unary_operators

    :return: Tokens in RPN order
    :rtype: Tokens
    :raises UnmatchedOpeningParenthesisError: If a ")" has no matching "("
    :raises UnmatchedClosingParenthesisError: If a "(" is never closed
    """
    output: Tokens = []
    stack: List[OperatorToken] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            # Numbers are added directly to the output
            output.append(token)
            continue

        operator = token.operator
        if operator is Operator.UNARY_PLUS:
            continue

        if operator in (Operator.UNARY_MINUS, Operator.LPAREN):
            stack.append(token)
        elif operator is Operator.RPAREN:
            while stack and stack[-1].operator is not Operator.LPAREN:
                output.append(stack.pop())
            if not stack:
                raise UnmatchedOpeningParenthesisError()
            stack.pop()
        else:
            # Binary operator: pop operators with higher or equal precedence
            prec = precedence_of(operator)
            while (
                stack
                and stack[-1].operator is not Operator.LPAREN
                and precedence_of(stack[-1].operator) >= prec
            ):
                output.append(stack.pop())
            stack.append(token)

    # Append remaining operators, stack top first
    while stack:
        top = stack.pop()
        if top.operator is Operator.LPAREN:
            raise UnmatchedClosingParenthesisError()
        output.append(top)

    return output
