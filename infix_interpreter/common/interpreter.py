"""Interpret infix arithmetic expressions."""
from infix_interpreter.common.evaluator import evaluate
from infix_interpreter.common.lexer import tokenize
from infix_interpreter.common.logger import logger
from infix_interpreter.common.parser import mark_unary_operators, parse
from infix_interpreter.common.tokens import Tokens, to_text


def interpret(text: str) -> float:
    """
    Evaluate an infix arithmetic expression.

    Algorithm:
        1. Tokenize the text
        2. Tag unary signs
        3. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        4. Evaluate RPN using a stack

    :param str text: Arithmetic expression, e.g. "1 + 2 * (3 - -4)"

    :return: Computed result as float, 0.0 for an empty expression
    :rtype: float
    :raises InterpreterError: If parentheses are unbalanced or operands are missing
    """
    rpn: Tokens = parse(mark_unary_operators(tokenize(text)))
    logger.debug("RPN for %r: %s", text, to_text(rpn))
    return evaluate(rpn)
